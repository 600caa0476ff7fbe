import contextlib
import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from tictactoe import app
except ImportError as exc:  # Qt libraries missing on this machine
    raise unittest.SkipTest(f"PySide6 unavailable: {exc}")

from tictactoe.config import CONFIG_ENV_VAR
from tictactoe.game_board import Mark


class TestEntryPoint(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        patcher = mock.patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop(CONFIG_ENV_VAR, None)

    def write(self, name, data) -> str:
        path = Path(self.temp_dir.name) / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    def run_main(self, argv):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            status = app.main(argv)
        return status, err.getvalue()

    def test_parse_args_collects_overrides(self) -> None:
        args = app.parse_args(["--two-player", "--mark", "O", "--delay", "0"])
        self.assertIs(args.vs_computer, False)
        self.assertEqual(args.human_mark, "O")
        self.assertEqual(args.computer_delay_ms, 0)
        self.assertIsNone(args.computer_starts)
        self.assertIsNone(args.config)

    def test_flags_override_file(self) -> None:
        path = self.write("game.json", {"human_mark": "O", "computer_delay_ms": 900})
        config = app.config_from_args(["--config", path, "--mark", "X", "--computer-starts"])
        self.assertIs(config.human, Mark.X)
        self.assertTrue(config.computer_starts)
        self.assertEqual(config.computer_delay_ms, 900)

    def test_config_flag_beats_env_var(self) -> None:
        os.environ[CONFIG_ENV_VAR] = self.write("env.json", {"human_mark": "X"})
        path = self.write("flag.json", {"human_mark": "O"})
        self.assertIs(app.config_from_args(["--config", path]).human, Mark.O)
        self.assertIs(app.config_from_args([]).human, Mark.X)

    def test_bad_flag_value_exits_with_2(self) -> None:
        status, err = self.run_main(["--delay", "-1"])
        self.assertEqual(status, 2)
        self.assertIn("computer_delay_ms", err)

    def test_log_file_in_missing_folder_exits_with_2(self) -> None:
        log_file = os.path.join(self.temp_dir.name, "missing", "x.log")
        path = self.write("game.json", {"log_file": log_file})
        status, err = self.run_main(["--config", path])
        self.assertEqual(status, 2)
        self.assertIn("log_file", err)
        self.assertFalse(os.path.exists(log_file))

    def test_unopenable_log_file_exits_with_2(self) -> None:
        # the path is a folder, so the file handler can't open it
        path = self.write("game.json", {"log_file": self.temp_dir.name})
        status, err = self.run_main(["--config", path])
        self.assertEqual(status, 2)
        self.assertIn("config error", err)


if __name__ == "__main__":
    unittest.main()
