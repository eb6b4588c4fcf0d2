"""Central place for figcomposer default settings."""

# Document default styles (inherited by any node lacking an explicit value)
DEFAULT_FONT_FAMILY: str = "Arial"
DEFAULT_ALT_FONT: str = "sanserif"
DEFAULT_PS_FONT: str = "Helvetica"
DEFAULT_FONT_SIZE: int = 12
DEFAULT_FONT_STYLE: str = "plain"
DEFAULT_FILL_COLOR: str = "#000000"
DEFAULT_STROKE_COLOR: str = "#000000"
DEFAULT_STROKE_WIDTH: tuple[float, str] = (0.01, "in")
DEFAULT_STROKE_CAP: str = "butt"
DEFAULT_STROKE_JOIN: str = "miter"
DEFAULT_STROKE_PATTERN: str = "solid"

# Font size limits, in typographical points
MIN_FONT_SIZE: int = 1
MAX_FONT_SIZE: int = 99

# Widget layout
DESCRIPTION_WIDTH: str = "90px"
FIELD_WIDTH: str = "200px"
SHORT_FIELD_WIDTH: str = "120px"
NUMBER_FIELD_WIDTH: str = "90px"
UNIT_DROPDOWN_WIDTH: str = "60px"
SWATCH_BUTTON_WIDTH: str = "28px"
PANEL_WIDTH: str = "640px"

# Audible alert for rejected edits
ALERT_FREQUENCY_HZ: float = 880.0
ALERT_DURATION_S: float = 0.12
ALERT_SAMPLE_RATE: int = 22050
ALERT_DECAY: float = 25.0

# Stroke pattern combo box keeps this many recent custom entries
STROKE_PATTERN_HISTORY: int = 5

# Figure rescale limits, in percent
MIN_RESCALE: int = 10
MAX_RESCALE: int = 200
