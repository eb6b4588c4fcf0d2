"""
Graphic node base class: the mutable model object behind every editor panel.

Attribute access follows the matplotlib ``Artist`` convention: each editable
attribute ``foo`` has a ``get_foo()`` getter and a ``set_foo(value)`` setter.
Setters validate their argument and return False, leaving the node unchanged,
when the value is rejected. They never raise for a bad value.
"""

import math
import re
from enum import Enum, Flag, auto

from .. import defaults
from .measure import (
    LOCATION_CONSTRAINTS,
    SIZE_CONSTRAINTS,
    STROKE_WIDTH_CONSTRAINTS,
    Measure,
    Unit,
)
from .styles import (
    FontStyle,
    GenericFont,
    PSFont,
    StrokeCap,
    StrokeJoin,
    StrokePattern,
    TextAlign,
    normalize_color,
)


class NodeType(Enum):
    FIGURE = "figure"
    TEXTBOX = "textbox"
    LABEL = "label"
    CALIB = "calib"
    IMAGE = "image"
    FUNCTION = "function"
    TRACE = "trace"
    BAR = "bar"
    BOX = "box"
    PIE = "pie"
    AREA = "area"
    SURFACE = "surface"
    SCATTER3D = "scatter3d"
    SYMBOL = "symbol"
    EBAR = "ebar"
    VIOLIN = "violin"


class Capability(Flag):
    """Which groups of style properties a node type possesses."""
    NONE = 0
    FONT = auto()
    FILL_COLOR = auto()
    STROKE = auto()
    STROKE_PATTERN = auto()


# Style properties in the order they are offered by "restore defaults"
STYLE_PROPERTIES = (
    "font_family",
    "alt_font",
    "ps_font",
    "font_size",
    "font_style",
    "fill_color",
    "stroke_color",
    "stroke_width",
    "stroke_cap",
    "stroke_join",
    "stroke_pattern",
)

_STYLE_CAPABILITY = {
    "font_family": Capability.FONT,
    "alt_font": Capability.FONT,
    "ps_font": Capability.FONT,
    "font_size": Capability.FONT,
    "font_style": Capability.FONT,
    "fill_color": Capability.FILL_COLOR,
    "stroke_color": Capability.STROKE,
    "stroke_width": Capability.STROKE,
    "stroke_cap": Capability.STROKE,
    "stroke_join": Capability.STROKE,
    "stroke_pattern": Capability.STROKE_PATTERN,
}

DOCUMENT_STYLES = {
    "font_family": defaults.DEFAULT_FONT_FAMILY,
    "alt_font": GenericFont(defaults.DEFAULT_ALT_FONT),
    "ps_font": PSFont(defaults.DEFAULT_PS_FONT),
    "font_size": defaults.DEFAULT_FONT_SIZE,
    "font_style": FontStyle(defaults.DEFAULT_FONT_STYLE),
    "fill_color": normalize_color(defaults.DEFAULT_FILL_COLOR),
    "stroke_color": normalize_color(defaults.DEFAULT_STROKE_COLOR),
    "stroke_width": Measure(defaults.DEFAULT_STROKE_WIDTH[0], Unit(defaults.DEFAULT_STROKE_WIDTH[1])),
    "stroke_cap": StrokeCap(defaults.DEFAULT_STROKE_CAP),
    "stroke_join": StrokeJoin(defaults.DEFAULT_STROKE_JOIN),
    "stroke_pattern": StrokePattern.parse(defaults.DEFAULT_STROKE_PATTERN),
}

_NODE_ID_PATTERN = re.compile(r"^[A-Za-z0-9$@|.<>_\[\](){}+\-^!=]*$")
MAX_NODE_ID_LENGTH = 40


def is_finite_number(value):
    try:
        return math.isfinite(float(value)) and not isinstance(value, bool)
    except (TypeError, ValueError):
        return False


class GraphicNode:
    """
    Base class for all figure graphic nodes.

    Subclasses declare ``node_type``, their style ``capabilities`` and whether
    they carry a title and an ID. Style properties are inherited: a node
    without an explicit value reports its parent's, and the root falls back
    to :data:`DOCUMENT_STYLES`.
    """

    node_type = None
    capabilities = Capability.FONT | Capability.FILL_COLOR | Capability.STROKE
    has_title = True
    has_id = False
    allow_linefeed_in_title = False

    def __init__(self, title=""):
        self._parent = None
        self._children = []
        self._styles = {}
        self._listeners = []
        self._title = str(title)
        self._id = ""

    def __repr__(self):
        kind = self.node_type.value if self.node_type else type(self).__name__
        return f"<{kind} {self._title!r}>"

    # ===== Tree structure =====
    def get_parent(self):
        return self._parent

    def get_children(self):
        return list(self._children)

    def get_child_count(self):
        return len(self._children)

    def add_child(self, child):
        """Append a child node and return it."""
        if child._parent is not None:
            child._parent._children.remove(child)
        child._parent = self
        self._children.append(child)
        self._changed("children")
        return child

    def get_root(self):
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    def walk(self):
        """Yield this node and all of its descendants, depth first."""
        yield self
        for child in self._children:
            yield from child.walk()

    # ===== Change notification =====
    def add_listener(self, fn):
        """Register ``fn(node, attr)``, called after any change to this node or a descendant."""
        if fn not in self._listeners:
            self._listeners.append(fn)

    def remove_listener(self, fn):
        if fn in self._listeners:
            self._listeners.remove(fn)

    def _changed(self, attr):
        node = self
        while node is not None:
            for fn in list(node._listeners):
                fn(self, attr)
            node = node._parent

    def _assign(self, attr, value):
        """Store ``value`` in ``self._<attr>``, notifying listeners when it changes. Always True."""
        key = "_" + attr
        if getattr(self, key) != value:
            setattr(self, key, value)
            self._changed(attr)
        return True

    # ===== Generic attribute access =====
    def get(self, attr):
        """Value of a named attribute, via its ``get_<attr>`` method."""
        return getattr(self, f"get_{attr}")()

    def set(self, attr, value):
        """Set a named attribute via its ``set_<attr>`` method. Returns the setter's success flag."""
        ok = getattr(self, f"set_{attr}")(value)
        return ok is not False

    # ===== Structural queries =====
    def has_font_properties(self):
        return bool(self.capabilities & Capability.FONT)

    def has_fill_color_property(self):
        return bool(self.capabilities & Capability.FILL_COLOR)

    def has_stroke_properties(self):
        return bool(self.capabilities & Capability.STROKE)

    def has_stroke_pattern_property(self):
        return bool(self.capabilities & Capability.STROKE_PATTERN)

    def has_style(self, name):
        return bool(self.capabilities & _STYLE_CAPABILITY[name])

    # ===== Title and ID =====
    def get_title(self):
        return self._title

    def set_title(self, title):
        if not self.has_title or not isinstance(title, str):
            return False
        if not self.allow_linefeed_in_title and ("\n" in title or "\r" in title):
            return False
        return self._assign("title", title)

    def get_id(self):
        return self._id

    def set_id(self, node_id):
        """
        Set the optional object ID. An empty string clears it; otherwise it
        must be unique among all nodes in the figure.
        """
        if not self.has_id or not isinstance(node_id, str):
            return False
        node_id = node_id.strip()
        if len(node_id) > MAX_NODE_ID_LENGTH or not _NODE_ID_PATTERN.match(node_id):
            return False
        if node_id:
            for other in self.get_root().walk():
                if other is not self and other._id == node_id:
                    return False
        return self._assign("id", node_id)

    # ===== Inheritable styles =====
    def _get_style(self, name):
        node = self
        while node is not None:
            if name in node._styles:
                return node._styles[name]
            node = node._parent
        return DOCUMENT_STYLES[name]

    def _set_style(self, name, value):
        if not self.has_style(name):
            return False
        before = self._get_style(name)
        self._styles[name] = value
        if before != value:
            self._changed(name)
        return True

    def is_style_explicit(self, name):
        return name in self._styles

    def can_restore_default_styles(self):
        return bool(self._styles)

    def restore_default_styles(self, prop=None, include_descendants=False):
        """
        Remove explicitly set style values so they are inherited again.

        Parameters
        ----------
        prop : str, optional
            One of :data:`STYLE_PROPERTIES`; None restores all styles.
        include_descendants : bool
            Also restore the styles of every descendant node.
        """
        nodes = list(self.walk()) if include_descendants else [self]
        changed = False
        for node in nodes:
            names = list(node._styles) if prop is None else [prop]
            for name in names:
                if name in node._styles:
                    del node._styles[name]
                    changed = True
        if changed:
            self._changed("styles")
        return changed

    def get_font_family(self):
        return self._get_style("font_family")

    def set_font_family(self, family):
        if not isinstance(family, str) or not family.strip():
            return False
        return self._set_style("font_family", family.strip())

    def get_alt_font(self):
        return self._get_style("alt_font")

    def set_alt_font(self, font):
        try:
            return self._set_style("alt_font", GenericFont.coerce(font))
        except ValueError:
            return False

    def get_ps_font(self):
        return self._get_style("ps_font")

    def set_ps_font(self, font):
        try:
            return self._set_style("ps_font", PSFont.coerce(font))
        except ValueError:
            return False

    def get_font_size(self):
        """Font size in typographical points."""
        return self._get_style("font_size")

    def set_font_size(self, size):
        if not is_finite_number(size) or int(size) != float(size):
            return False
        size = int(size)
        if size < defaults.MIN_FONT_SIZE or size > defaults.MAX_FONT_SIZE:
            return False
        return self._set_style("font_size", size)

    def get_font_style(self):
        return self._get_style("font_style")

    def set_font_style(self, style):
        try:
            return self._set_style("font_style", FontStyle.coerce(style))
        except ValueError:
            return False

    def get_fill_color(self):
        return self._get_style("fill_color")

    def set_fill_color(self, color):
        try:
            return self._set_style("fill_color", normalize_color(color))
        except ValueError:
            return False

    def get_stroke_color(self):
        return self._get_style("stroke_color")

    def set_stroke_color(self, color):
        try:
            return self._set_style("stroke_color", normalize_color(color))
        except ValueError:
            return False

    def get_stroke_width(self):
        return self._get_style("stroke_width")

    def set_stroke_width(self, width):
        if not STROKE_WIDTH_CONSTRAINTS.is_valid(width):
            return False
        return self._set_style("stroke_width", STROKE_WIDTH_CONSTRAINTS.round(width))

    def get_stroke_cap(self):
        return self._get_style("stroke_cap")

    def set_stroke_cap(self, cap):
        try:
            return self._set_style("stroke_cap", StrokeCap.coerce(cap))
        except ValueError:
            return False

    def get_stroke_join(self):
        return self._get_style("stroke_join")

    def set_stroke_join(self, join):
        try:
            return self._set_style("stroke_join", StrokeJoin.coerce(join))
        except ValueError:
            return False

    def get_stroke_pattern(self):
        return self._get_style("stroke_pattern")

    def set_stroke_pattern(self, pattern):
        try:
            return self._set_style("stroke_pattern", StrokePattern.parse(pattern))
        except ValueError:
            return False

    # ===== Shared validating setters for subclasses =====
    def _set_measure(self, attr, measure, constraints):
        if not constraints.is_valid(measure):
            return False
        return self._assign(attr, constraints.round(measure))

    def _set_number(self, attr, value, lo=-math.inf, hi=math.inf, integer=False):
        if not is_finite_number(value):
            return False
        if integer:
            if int(value) != float(value):
                return False
            value = int(value)
        else:
            value = float(value)
        if value < lo or value > hi:
            return False
        return self._assign(attr, value)

    def _set_choice(self, attr, value, enum_cls, allowed=None):
        try:
            value = enum_cls.coerce(value) if hasattr(enum_cls, "coerce") else enum_cls(value)
        except ValueError:
            return False
        if allowed is not None and value not in allowed:
            return False
        return self._assign(attr, value)


class LocatedMixin:
    """Location (x, y) and rotation, for nodes placed freely within their parent."""

    def _init_location(self, x, y, rotate=0.0):
        self._x = x
        self._y = y
        self._rotate = float(rotate)

    def get_x(self):
        return self._x

    def set_x(self, x):
        return self._set_measure("x", x, LOCATION_CONSTRAINTS)

    def get_y(self):
        return self._y

    def set_y(self, y):
        return self._set_measure("y", y, LOCATION_CONSTRAINTS)

    def get_rotate(self):
        """Rotation in degrees counterclockwise."""
        return self._rotate

    def set_rotate(self, degrees):
        return self._set_number("rotate", degrees, -360.0, 360.0)


class SizedMixin:
    """Bounding box width and height."""

    def _init_size(self, width, height):
        self._width = width
        self._height = height

    def get_width(self):
        return self._width

    def set_width(self, width):
        return self._set_measure("width", width, SIZE_CONSTRAINTS)

    def get_height(self):
        return self._height

    def set_height(self, height):
        return self._set_measure("height", height, SIZE_CONSTRAINTS)


class AlignedMixin:
    """Horizontal and vertical text alignment."""

    def _init_alignment(self, h_align=TextAlign.LEFT, v_align=TextAlign.BOTTOM):
        self._horizontal_alignment = h_align
        self._vertical_alignment = v_align

    def get_horizontal_alignment(self):
        return self._horizontal_alignment

    def set_horizontal_alignment(self, align):
        return self._set_choice(
            "horizontal_alignment", align, TextAlign,
            (TextAlign.LEFT, TextAlign.CENTERED, TextAlign.RIGHT),
        )

    def get_vertical_alignment(self):
        return self._vertical_alignment

    def set_vertical_alignment(self, align):
        return self._set_choice(
            "vertical_alignment", align, TextAlign,
            (TextAlign.TOP, TextAlign.CENTERED, TextAlign.BOTTOM),
        )
