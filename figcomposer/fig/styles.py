"""
Style value types shared by graphic nodes: stroke caps/joins, fonts,
alignment, markers, stroke patterns, background fills and colours.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from matplotlib.colors import is_color_like, to_hex


class _NamedEnum(Enum):
    """Enum whose string form is its lower-case value, as shown in drop-downs."""

    def __str__(self):
        return self.value

    @classmethod
    def coerce(cls, value):
        """Accept a member or its string value; raise ValueError otherwise."""
        if isinstance(value, cls):
            return value
        return cls(str(value))


class StrokeCap(_NamedEnum):
    BUTT = "butt"
    SQUARE = "square"
    ROUND = "round"


class StrokeJoin(_NamedEnum):
    MITER = "miter"
    BEVEL = "bevel"
    ROUND = "round"


class FontStyle(_NamedEnum):
    PLAIN = "plain"
    ITALIC = "italic"
    BOLD = "bold"
    BOLDITALIC = "bolditalic"


class GenericFont(_NamedEnum):
    SERIF = "serif"
    SANSERIF = "sanserif"
    MONOSPACE = "monospace"


class PSFont(_NamedEnum):
    TIMES = "Times-Roman"
    HELVETICA = "Helvetica"
    COURIER = "Courier"
    PALATINO = "Palatino"
    AVANT_GARDE = "AvantGarde"
    BOOKMAN = "Bookman"
    NEW_CENTURY = "NewCenturySchlbk"
    HELVETICA_NARROW = "Helvetica-Narrow"
    ZAPF_CHANCERY = "ZapfChancery"
    SYMBOL = "Symbol"


class TextAlign(_NamedEnum):
    LEFT = "left"
    CENTERED = "centered"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


H_ALIGNMENTS = (TextAlign.LEFT, TextAlign.CENTERED, TextAlign.RIGHT)
V_ALIGNMENTS = (TextAlign.TOP, TextAlign.CENTERED, TextAlign.BOTTOM)


class Marker(_NamedEnum):
    """Marker shapes for symbols, error bar end caps and calibration bar end caps."""
    CIRCLE = "circle"
    BOX = "box"
    DIAMOND = "diamond"
    TEE = "tee"
    XHAIR = "xhair"
    STAR = "star"
    PENTAGRAM = "pentagram"
    HEXAGON = "hexagon"
    UPTRIANGLE = "uptriangle"
    DOWNTRIANGLE = "downtriangle"
    LEFTTRIANGLE = "lefttriangle"
    RIGHTTRIANGLE = "righttriangle"
    UPDART = "updart"
    DOWNDART = "downdart"
    UPARROW = "uparrow"
    DOWNARROW = "downarrow"
    HLINETHRU = "hlinethru"
    LINETHRU = "linethru"
    LINEUP = "lineup"
    LINEDOWN = "linedown"
    BRACKET = "bracket"


# --- Stroke dash-gap patterns -------------------------------------------------

MAX_PATTERN_LENGTH = 6
MIN_DASH_LENGTH = 1
MAX_DASH_LENGTH = 99


@dataclass(frozen=True)
class StrokePattern:
    """
    Dash-gap sequence for stroking lines, each entry in tenths of the stroke
    width. A single entry denotes a solid stroke.
    """
    dash_gap: tuple[int, ...] = (10,)
    synonym: str = field(default="", compare=False)

    def __str__(self):
        return self.synonym or " ".join(str(n) for n in self.dash_gap)

    @property
    def is_solid(self):
        return len(self.dash_gap) == 1

    @classmethod
    def parse(cls, text):
        """
        Parse a pattern from a common-pattern synonym ("dashed") or from a
        whitespace/comma separated list of up to 6 integers in [1..99].

        Raises
        ------
        ValueError
            If the text is not a valid pattern.
        """
        if isinstance(text, StrokePattern):
            return text
        s = str(text).strip().lower()
        for pattern in COMMON_PATTERNS:
            if s == pattern.synonym:
                return pattern
        tokens = [t for t in re.split(r"[\s,]+", s) if t]
        if not tokens or len(tokens) > MAX_PATTERN_LENGTH:
            raise ValueError(f"Invalid stroke pattern: {text!r}")
        try:
            values = tuple(int(t) for t in tokens)
        except ValueError:
            raise ValueError(f"Invalid stroke pattern: {text!r}")
        if any(v < MIN_DASH_LENGTH or v > MAX_DASH_LENGTH for v in values):
            raise ValueError(f"Dash/gap lengths must lie in [{MIN_DASH_LENGTH}..{MAX_DASH_LENGTH}]")
        if len(values) > 1 and len(values) % 2:
            raise ValueError("Dash-gap pattern must have an even number of entries")
        for pattern in COMMON_PATTERNS:
            if pattern.dash_gap == values:
                return pattern
        return cls(values)


SOLID = StrokePattern((10,), "solid")
DOTTED = StrokePattern((10, 30), "dotted")
DASHED = StrokePattern((30, 30), "dashed")
DASHDOT = StrokePattern((30, 30, 10, 30), "dashdot")
DASHDOTDOT = StrokePattern((30, 30, 10, 30, 10, 30), "dashdotdot")
COMMON_PATTERNS = (SOLID, DOTTED, DASHED, DASHDOT, DASHDOTDOT)


# --- Colours ------------------------------------------------------------------

def normalize_color(value):
    """
    Canonical ``#rrggbb`` (or ``#rrggbbaa`` when translucent) form of a colour.
    Returns None for the transparent "none" colour.

    Raises
    ------
    ValueError
        If matplotlib does not recognize the colour.
    """
    if value is None or (isinstance(value, str) and value.strip().lower() == "none"):
        return None
    if not is_color_like(value):
        raise ValueError(f"Not a colour: {value!r}")
    hex_color = to_hex(value, keep_alpha=True)
    return hex_color[:7] if hex_color.endswith("ff") else hex_color


class FillType(_NamedEnum):
    SOLID = "solid"
    AXIAL = "axial"
    RADIAL = "radial"


@dataclass(frozen=True)
class BkgFill:
    """
    Background fill: a solid colour, or an axial/radial gradient between two
    colours. ``orientation`` (degrees) applies to axial gradients; the focus
    (percent of the bounding box) to radial ones.
    """
    fill_type: FillType = FillType.SOLID
    color1: object = None
    color2: object = "#ffffff"
    orientation: int = 0
    focus_x: int = 50
    focus_y: int = 50

    @classmethod
    def solid(cls, color):
        return cls(FillType.SOLID, normalize_color(color))

    @property
    def is_transparent(self):
        return self.fill_type == FillType.SOLID and self.color1 is None

    def is_valid(self):
        try:
            normalize_color(self.color1)
            normalize_color(self.color2)
        except ValueError:
            return False
        if self.fill_type != FillType.SOLID and (self.color1 is None or self.color2 is None):
            return False
        return 0 <= self.orientation < 360 and 0 <= self.focus_x <= 100 and 0 <= self.focus_y <= 100
