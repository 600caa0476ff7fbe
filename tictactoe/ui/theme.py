from PySide6.QtGui import QColor

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BACKGROUND_COLOR = QColor(51, 51, 51)
BORDER_INNER_COLOR = QColor(85, 85, 85)
BORDER_OUTER_COLOR = QColor(238, 238, 238)
GRID_LINE_COLOR = QColor(85, 85, 85)
PLATFORM_FILL_COLOR = QColor(34, 34, 34)
MARK_X_COLOR = QColor(138, 202, 255)
MARK_O_COLOR = QColor(255, 138, 138)
WINNING_LINE_COLOR = QColor(0, 255, 0)

# -----------------------------------------------------------------------------
# THICKNESS (pixels)
# -----------------------------------------------------------------------------

PLATFORM_BORDER = 6.0   # outer + inner stroke together
PLATFORM_MARGIN = 8.0   # space between widget edge and border
GRID_LINE = 4.0
MARK = 8.0
MARK_MARGIN = 14.0      # mark inset inside its cell
WINNING_LINE = 10.0
