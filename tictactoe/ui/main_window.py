import logging

from ..ai.strategy import ComputerPlayer
from ..config import GameConfig
from ..game_board import Mark
from ..game_logic import GameLogic
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu,
    QRadioButton, QGroupBox, QButtonGroup, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

logger = logging.getLogger(__name__)

class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, config=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.config = config or GameConfig()
        self.game_logic = GameLogic()
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        # computer answers through a single-shot timer so reset can cancel it
        self.computer_timer = QTimer(self)
        self.computer_timer.setSingleShot(True)
        self.computer_timer.timeout.connect(self._make_computer_move)
        # game state flags
        self.game_mode = "computer" if self.config.vs_computer else "local"
        self.human_mark = self.config.human
        self.computer = ComputerPlayer(self.human_mark.opponent)
        self.who_started_last_round = self._configured_starter()

        self._setup_ui()
        self._begin_round(self.who_started_last_round)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QGroupBox { color: #eee; }
            QRadioButton { color: #eee; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_setup_controls()      # mode + mark choice
        self.main_layout.addWidget(self.setup_controls_group)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        computer_action = QAction("New Game vs Computer", self)
        computer_action.triggered.connect(self.new_computer_game)
        local_action = QAction("New Two-Player Game", self)
        local_action.triggered.connect(self.new_local_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (computer_action, local_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_setup_controls(self):
        '''mode and mark selection group'''
        self.setup_controls_group = QGroupBox("Game Setup")
        layout = QVBoxLayout()
        mode_layout = QHBoxLayout()
        self.computer_radio = QRadioButton("Play vs Computer")
        self.local_radio = QRadioButton("Two Players")
        self.computer_radio.setChecked(self.game_mode == "computer")
        self.local_radio.setChecked(self.game_mode == "local")
        self.computer_radio.toggled.connect(self._update_mark_input_state)
        mode_group = QButtonGroup(self.setup_controls_group)
        for r in (self.computer_radio, self.local_radio):
            mode_group.addButton(r); mode_layout.addWidget(r)
        mode_layout.addStretch()
        layout.addLayout(mode_layout)
        # which mark the human plays
        mark_layout = QHBoxLayout(); mark_layout.addWidget(QLabel("You play:"))
        self.x_radio = QRadioButton("X"); self.o_radio = QRadioButton("O")
        self.x_radio.setChecked(self.human_mark is Mark.X)
        self.o_radio.setChecked(self.human_mark is Mark.O)
        mark_group = QButtonGroup(self.setup_controls_group)
        for r in (self.x_radio, self.o_radio):
            mark_group.addButton(r); mark_layout.addWidget(r)
        mark_layout.addStretch()
        layout.addLayout(mark_layout)
        self.start_button = QPushButton("Start Game")
        self.start_button.clicked.connect(self._start_from_setup)
        layout.addWidget(self.start_button, alignment=Qt.AlignCenter)
        self.setup_controls_group.setLayout(layout)
        self._update_mark_input_state()

    def _update_mark_input_state(self):
        # mark choice only matters against the computer
        vs_computer = self.computer_radio.isChecked()
        self.x_radio.setEnabled(vs_computer); self.o_radio.setEnabled(vs_computer)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)
        self.bottom_layout = hl

    @Slot(str)
    def _update_message(self, text, is_error=False,
                         is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _configured_starter(self):
        if self.game_mode == "computer" and self.config.computer_starts:
            return self.computer.mark
        return Mark.X if self.game_mode == "local" else self.human_mark

    @Slot()
    def _start_from_setup(self):
        # read the setup group and start over
        self.game_mode = "computer" if self.computer_radio.isChecked() else "local"
        self.human_mark = Mark.X if self.x_radio.isChecked() else Mark.O
        self.computer = ComputerPlayer(self.human_mark.opponent)
        self.who_started_last_round = self._configured_starter()
        self._begin_round(self.who_started_last_round)

    @Slot()
    def new_computer_game(self):
        self.computer_radio.setChecked(True)
        self._start_from_setup()

    @Slot()
    def new_local_game(self):
        self.local_radio.setChecked(True)
        self._start_from_setup()

    @Slot()
    def reset_game(self):
        # new round, the other side starts against the computer
        if self.game_mode == "computer":
            self.who_started_last_round = self.who_started_last_round.opponent
        self._begin_round(self.who_started_last_round)

    def _begin_round(self, first_mark):
        # clear board + hand the first move out
        self.computer_timer.stop()
        self.game_logic.reset_game(first_mark)
        self.board_widget.update()
        logger.info("new %s game, %s starts", self.game_mode, first_mark.value)
        if self.game_mode == "computer" and first_mark is self.computer.mark:
            self._schedule_computer_move()
        else:
            self.board_widget.set_accept_clicks(True)
            self._announce_turn()

    def _announce_turn(self):
        mark = self.game_logic.current_mark
        if self.game_mode == "computer":
            self._update_message(f"Your ({mark.value}) turn.", is_turn=True)
        else:
            self._update_message(f"player {mark.value}'s turn", is_turn=True)

    def _schedule_computer_move(self):
        self.board_widget.set_accept_clicks(False)
        self._update_message(f"Computer ({self.computer.mark.value}) is thinking...")
        self.computer_timer.start(self.config.computer_delay_ms)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # ignore clicks after game over
        if self.game_logic.game_over:
            return
        mark = self.game_logic.current_mark
        if self.game_mode == "computer" and mark is not self.human_mark:
            self._update_message("not your turn", is_error=True)
            return
        res = self.game_logic.make_move(r, c, mark)
        if res == "invalid":
            self._update_message("cell taken", is_error=True)
            return
        logger.info("%s plays (%d, %d)", mark.value, r, c)
        self.board_widget.update()
        if self._handle_result(res, mark):
            return
        if self.game_mode == "computer":
            self._schedule_computer_move()
        else:
            self._announce_turn()

    @Slot()
    def _make_computer_move(self):
        # computer's reply
        move = self.computer.choose_move(self.game_logic)
        if move is None:
            logger.info("computer has no move")
            return
        mark = self.computer.mark
        res = self.game_logic.make_move(move.row, move.column, mark)
        logger.info("computer %s plays (%d, %d)", mark.value, move.row, move.column)
        self.board_widget.update()
        if not self._handle_result(res, mark):
            self.board_widget.set_accept_clicks(True)
            self._announce_turn()

    def _handle_result(self, res, mark):
        # true when the game just ended
        if res == "win":
            if self.game_mode == "local":
                self._handle_game_over(f"player {mark.value} wins!", True)
            elif mark is self.human_mark:
                self._handle_game_over(f"You ({mark.value}) win!", True)
            else:
                self._handle_game_over(f"Computer ({mark.value}) wins!", False)
            return True
        if res == "draw":
            self._handle_game_over("it's a draw!", True)
            return True
        return False

    def _handle_game_over(self, msg, ok):
        # end game UI updates
        logger.info("game over: %s", msg)
        self._update_message(msg, is_success=ok, is_error=not ok)
        self.board_widget.set_accept_clicks(False)

    def closeEvent(self, event):
        # no computer move after close
        self.computer_timer.stop()
        event.accept()
