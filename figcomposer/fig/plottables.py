"""
Data presentation nodes: bar plots, box plots, traces, functions, pie charts,
area charts, surfaces and 3-D scatter plots.
"""

from enum import Enum

import numpy as np
from matplotlib import colormaps
from matplotlib.colors import to_hex

from . import expression
from .components import ErrorBarNode, SymbolNode, ViolinStyleNode
from .dataset import DataSet, DataSetFormat, is_valid_id
from .errors import ExpressionError
from .measure import BOX_WIDTH_CONSTRAINTS, SYMBOL_SIZE_CONSTRAINTS, Measure, Unit
from .node import Capability, GraphicNode, NodeType, is_finite_number
from .styles import BkgFill, normalize_color

GROUP_PALETTE = tuple(to_hex(c) for c in colormaps["tab10"].colors)


class PlottableNode(GraphicNode):
    """
    A node that renders a data set. Subclasses list the data formats they
    accept in ``supported_formats``; the first one is used for the empty
    placeholder data set installed at construction.
    """

    supported_formats = ()
    has_data_groups = False

    def __init__(self, title="", data_set=None):
        super().__init__(title)
        self._show_in_legend = True
        if data_set is None:
            data_set = DataSet("src", self.supported_formats[0])
        elif data_set.fmt not in self.supported_formats:
            raise ValueError(f"{type(self).__name__} does not support {data_set.fmt} data")
        self._data_set = data_set
        self._group_colors = []
        self._group_labels = []
        self._sync_data_groups()

    def get_show_in_legend(self):
        return self._show_in_legend

    def set_show_in_legend(self, show):
        return self._assign("show_in_legend", bool(show))

    # ===== Data set =====
    def get_data_set(self):
        return self._data_set

    def set_data_set(self, data_set):
        if not isinstance(data_set, DataSet) or data_set.fmt not in self.supported_formats:
            return False
        self._data_set = data_set
        self._sync_data_groups()
        self._changed("data_set")
        return True

    def get_data_set_id(self):
        return self._data_set.id

    def set_data_set_id(self, data_set_id):
        if not is_valid_id(data_set_id):
            return False
        if data_set_id == self._data_set.id:
            return True
        self._data_set = self._data_set.with_id(data_set_id)
        self._changed("data_set_id")
        return True

    # ===== Data groups =====
    def get_num_data_groups(self):
        return self._data_set.num_data_groups() if self.has_data_groups else 0

    def _sync_data_groups(self):
        n = self.get_num_data_groups()
        while len(self._group_colors) < n:
            i = len(self._group_colors)
            self._group_colors.append(GROUP_PALETTE[i % len(GROUP_PALETTE)])
            self._group_labels.append(f"data {i + 1}")
        del self._group_colors[n:]
        del self._group_labels[n:]

    def _is_group_index(self, i):
        return isinstance(i, (int, np.integer)) and 0 <= i < self.get_num_data_groups()

    def get_data_group_color(self, i):
        return self._group_colors[i] if self._is_group_index(i) else None

    def set_data_group_color(self, i, color):
        if not self._is_group_index(i):
            return False
        try:
            color = normalize_color(color)
        except ValueError:
            return False
        if color is None:
            return False
        if self._group_colors[i] != color:
            self._group_colors[i] = color
            self._changed("data_group_color")
        return True

    def get_data_group_label(self, i):
        return self._group_labels[i] if self._is_group_index(i) else None

    def set_data_group_label(self, i, label):
        if not self._is_group_index(i) or not isinstance(label, str) or "\n" in label:
            return False
        if self._group_labels[i] != label:
            self._group_labels[i] = label
            self._changed("data_group_label")
        return True


class BarMode(Enum):
    VGROUP = "vgroup"
    VSTACK = "vstack"
    HGROUP = "hgroup"
    HSTACK = "hstack"

    def __str__(self):
        return self.value


class BarPlotNode(PlottableNode):
    """Grouped or stacked bar plot; one bar group per data column."""

    node_type = NodeType.BAR
    capabilities = Capability.FONT | Capability.FILL_COLOR | Capability.STROKE | Capability.STROKE_PATTERN
    supported_formats = (DataSetFormat.MSET, DataSetFormat.MSERIES)
    has_data_groups = True

    MIN_BAR_WIDTH = 5
    MAX_BAR_WIDTH = 100

    def __init__(self, title="", data_set=None):
        super().__init__(title, data_set)
        self._mode = BarMode.VGROUP
        self._baseline = 0.0
        self._bar_width = 80
        self._auto_label = False

    def get_mode(self):
        return self._mode

    def set_mode(self, mode):
        return self._set_choice("mode", mode, BarMode)

    def get_baseline(self):
        return self._baseline

    def set_baseline(self, baseline):
        return self._set_number("baseline", baseline)

    def get_bar_width(self):
        """Relative bar width as an integer percentage."""
        return self._bar_width

    def set_bar_width(self, width):
        return self._set_number("bar_width", width, self.MIN_BAR_WIDTH, self.MAX_BAR_WIDTH, integer=True)

    def get_auto_label(self):
        return self._auto_label

    def set_auto_label(self, on):
        return self._assign("auto_label", bool(on))


class BoxMode(Enum):
    VERTICAL = "vertical"
    VERTNOTCH = "vertnotch"
    HORIZONTAL = "horizontal"
    HORIZNOTCH = "horiznotch"

    def __str__(self):
        return self.value


class BoxPlotNode(PlottableNode):
    """Box-and-whisker plot with optional outlier symbols and violin outline."""

    node_type = NodeType.BOX
    capabilities = Capability.FILL_COLOR | Capability.STROKE | Capability.STROKE_PATTERN
    supported_formats = (DataSetFormat.MSET, DataSetFormat.MSERIES, DataSetFormat.PTSET, DataSetFormat.SERIES)

    def __init__(self, title="", data_set=None):
        super().__init__(title, data_set)
        self._mode = BoxMode.VERTICAL
        self._box_width = Measure(0.2, Unit.IN)
        self._offset = 0.0
        self._interval = 1.0
        self._whisker = self.add_child(ErrorBarNode())
        self._symbol = self.add_child(SymbolNode())
        self._violin = self.add_child(ViolinStyleNode())

    def get_mode(self):
        return self._mode

    def set_mode(self, mode):
        return self._set_choice("mode", mode, BoxMode)

    def get_box_width(self):
        return self._box_width

    def set_box_width(self, width):
        return self._set_measure("box_width", width, BOX_WIDTH_CONSTRAINTS)

    def get_offset(self):
        return self._offset

    def set_offset(self, offset):
        return self._set_number("offset", offset)

    def get_interval(self):
        return self._interval

    def set_interval(self, interval):
        if not is_finite_number(interval) or float(interval) <= 0:
            return False
        return self._assign("interval", float(interval))

    def get_whisker_node(self):
        return self._whisker

    def get_symbol_node(self):
        return self._symbol

    def get_violin_style_node(self):
        return self._violin


class TraceMode(Enum):
    POLYLINE = "polyline"
    TRENDLINE = "trendline"
    STAIRCASE = "staircase"
    HISTOGRAM = "histogram"
    ERRORBAND = "errorband"
    MULTITRACE = "multitrace"

    def __str__(self):
        return self.value


class TraceNode(PlottableNode):
    """Data trace: a point set or series rendered as a polyline, histogram, etc."""

    node_type = NodeType.TRACE
    capabilities = Capability.FONT | Capability.FILL_COLOR | Capability.STROKE | Capability.STROKE_PATTERN
    supported_formats = (DataSetFormat.PTSET, DataSetFormat.MSET, DataSetFormat.SERIES, DataSetFormat.MSERIES)

    def __init__(self, title="", data_set=None):
        super().__init__(title, data_set)
        self._mode = TraceMode.POLYLINE
        self._x_offset = 0.0
        self._y_offset = 0.0
        self._skip = 1
        self._sliding_window_length = 1
        self._bar_width = 0.0
        self._baseline = 0.0
        self._show_average = False
        self._symbol = self.add_child(SymbolNode())
        self._error_bar = self.add_child(ErrorBarNode())

    def get_mode(self):
        return self._mode

    def set_mode(self, mode):
        return self._set_choice("mode", mode, TraceMode)

    def get_x_offset(self):
        return self._x_offset

    def set_x_offset(self, offset):
        return self._set_number("x_offset", offset)

    def get_y_offset(self):
        return self._y_offset

    def set_y_offset(self, offset):
        return self._set_number("y_offset", offset)

    def get_skip(self):
        """Plot every Nth data point."""
        return self._skip

    def set_skip(self, n):
        return self._set_number("skip", n, 1, integer=True)

    def get_sliding_window_length(self):
        """Window length of the sliding average in TRENDLINE mode."""
        return self._sliding_window_length

    def set_sliding_window_length(self, n):
        return self._set_number("sliding_window_length", n, 1, integer=True)

    def get_bar_width(self):
        return self._bar_width

    def set_bar_width(self, width):
        return self._set_number("bar_width", width, 0.0)

    def get_baseline(self):
        return self._baseline

    def set_baseline(self, baseline):
        return self._set_number("baseline", baseline)

    def get_show_average(self):
        return self._show_average

    def set_show_average(self, show):
        return self._assign("show_average", bool(show))

    def get_symbol_node(self):
        return self._symbol

    def get_error_bar_node(self):
        return self._error_bar


class FunctionNode(GraphicNode):
    """
    A plotted function y = f(x), sampled over [x0, x1] at intervals dx.
    An invalid expression is kept, flagged, and not rendered.
    """

    node_type = NodeType.FUNCTION
    capabilities = Capability.FONT | Capability.FILL_COLOR | Capability.STROKE | Capability.STROKE_PATTERN

    MAX_SAMPLES = 5000

    def __init__(self, function="x", title=""):
        super().__init__(title)
        self._show_in_legend = True
        self._x0 = 0.0
        self._x1 = 10.0
        self._dx = 0.1
        self._function = ""
        self._tree = None
        self._reason_invalid = ""
        self._symbol = self.add_child(SymbolNode())
        self.set_function_string(function)

    def get_function_string(self):
        return self._function

    def set_function_string(self, text):
        if not isinstance(text, str):
            return False
        try:
            self._tree, self._reason_invalid = expression.parse(text), ""
        except ExpressionError as e:
            self._tree, self._reason_invalid = None, str(e)
        return self._assign("function", text)

    def is_function_valid(self):
        return self._tree is not None

    def get_reason_function_invalid(self):
        return self._reason_invalid

    def get_show_in_legend(self):
        return self._show_in_legend

    def set_show_in_legend(self, show):
        return self._assign("show_in_legend", bool(show))

    def get_x0(self):
        return self._x0

    def set_x0(self, x0):
        if not is_finite_number(x0) or float(x0) >= self._x1:
            return False
        return self._assign("x0", float(x0))

    def get_x1(self):
        return self._x1

    def set_x1(self, x1):
        if not is_finite_number(x1) or float(x1) <= self._x0:
            return False
        return self._assign("x1", float(x1))

    def get_dx(self):
        return self._dx

    def set_dx(self, dx):
        if not is_finite_number(dx) or float(dx) <= 0:
            return False
        return self._assign("dx", float(dx))

    def get_symbol_node(self):
        return self._symbol

    def sample(self):
        """
        Sample the function over its domain.

        Returns
        -------
        tuple of np.ndarray
            (x, y); both empty when the function is invalid.
        """
        if self._tree is None:
            return np.empty(0), np.empty(0)
        # the quotient is inf for a denormal dx
        steps = min(np.floor((self._x1 - self._x0) / self._dx), self.MAX_SAMPLES - 1)
        n = int(steps) + 1
        x = self._x0 + self._dx * np.arange(n)
        return x, expression.evaluate(self._tree, x)


class PieLabelMode(Enum):
    OFF = "off"
    PERCENT = "percent"
    LEGENDLABEL = "legendlabel"
    FULL = "full"

    def __str__(self):
        return self.value


class PieChartNode(PlottableNode):
    """Pie (or donut) chart; one slice per data sample."""

    node_type = NodeType.PIE
    capabilities = Capability.FONT | Capability.FILL_COLOR | Capability.STROKE
    supported_formats = (DataSetFormat.SERIES, DataSetFormat.PTSET)
    has_data_groups = True

    MIN_RADIAL_OFFSET = 1
    MAX_RADIAL_OFFSET = 100

    def __init__(self, title="", data_set=None):
        self._displaced = []
        super().__init__(title, data_set)
        self._inner_radius = 0.0
        self._outer_radius = 1.0
        self._radial_offset = 10
        self._slice_label_mode = PieLabelMode.OFF

    def get_num_data_groups(self):
        return self._data_set.length

    def _sync_data_groups(self):
        super()._sync_data_groups()
        n = self.get_num_data_groups()
        self._displaced.extend([False] * max(n - len(self._displaced), 0))
        del self._displaced[n:]

    def get_inner_radius(self):
        return self._inner_radius

    def set_inner_radius(self, r):
        if not is_finite_number(r) or not 0 <= float(r) < self._outer_radius:
            return False
        return self._assign("inner_radius", float(r))

    def get_outer_radius(self):
        return self._outer_radius

    def set_outer_radius(self, r):
        if not is_finite_number(r) or float(r) <= max(self._inner_radius, 0.0):
            return False
        return self._assign("outer_radius", float(r))

    def get_radial_offset(self):
        """Displacement of a displaced slice, as a percentage of the outer radius."""
        return self._radial_offset

    def set_radial_offset(self, offset):
        return self._set_number(
            "radial_offset", offset, self.MIN_RADIAL_OFFSET, self.MAX_RADIAL_OFFSET, integer=True
        )

    def get_slice_label_mode(self):
        return self._slice_label_mode

    def set_slice_label_mode(self, mode):
        return self._set_choice("slice_label_mode", mode, PieLabelMode)

    def is_slice_displaced(self, i):
        return self._displaced[i] if self._is_group_index(i) else False

    def set_slice_displaced(self, i, displaced):
        if not self._is_group_index(i):
            return False
        if self._displaced[i] != bool(displaced):
            self._displaced[i] = bool(displaced)
            self._changed("slice_displaced")
        return True


class AreaLabelMode(Enum):
    OFF = "off"
    INSIDE = "inside"
    OUTSIDE = "outside"

    def __str__(self):
        return self.value


class AreaChartNode(PlottableNode):
    """Stacked area chart; one band per data column."""

    node_type = NodeType.AREA
    capabilities = Capability.FONT | Capability.FILL_COLOR | Capability.STROKE | Capability.STROKE_PATTERN
    supported_formats = (DataSetFormat.MSET, DataSetFormat.MSERIES)
    has_data_groups = True

    def __init__(self, title="", data_set=None):
        super().__init__(title, data_set)
        self._baseline = 0.0
        self._label_mode = AreaLabelMode.OFF

    def get_baseline(self):
        return self._baseline

    def set_baseline(self, baseline):
        return self._set_number("baseline", baseline)

    def get_label_mode(self):
        return self._label_mode

    def set_label_mode(self, mode):
        return self._set_choice("label_mode", mode, AreaLabelMode)


class SurfaceNode(PlottableNode):
    """3-D surface z(x, y) rendered as a mesh, optionally colour-mapped."""

    node_type = NodeType.SURFACE
    capabilities = Capability.FILL_COLOR | Capability.STROKE
    supported_formats = (DataSetFormat.XYZIMG,)

    MIN_MESH_LIMIT = 25
    MAX_MESH_LIMIT = 500

    def __init__(self, title="", data_set=None):
        super().__init__(title, data_set)
        self._show_in_legend = False
        self._mesh_limit = 100
        self._color_mapped = True

    def get_mesh_limit(self):
        return self._mesh_limit

    def set_mesh_limit(self, limit):
        return self._set_number("mesh_limit", limit, self.MIN_MESH_LIMIT, self.MAX_MESH_LIMIT, integer=True)

    def get_color_mapped(self):
        return self._color_mapped

    def set_color_mapped(self, on):
        return self._assign("color_mapped", bool(on))


class Scatter3DMode(Enum):
    SCATTER = "scatter"
    SIZEBUBBLE = "sizeBubble"
    COLORBUBBLE = "colorBubble"
    COLORSIZEBUBBLE = "colorSizeBubble"
    BARPLOT = "barPlot"
    COLORBARPLOT = "colorBarPlot"

    def __str__(self):
        return self.value


class Side(Enum):
    """Back planes of a 3-D graph onto which scatter points are projected."""
    XY = "xy"
    XZ = "xz"
    YZ = "yz"

    def __str__(self):
        return self.value


class Scatter3DNode(PlottableNode):
    """3-D scatter, bubble or bar plot with optional projections onto the back planes."""

    node_type = NodeType.SCATTER3D
    capabilities = Capability.FILL_COLOR | Capability.STROKE | Capability.STROKE_PATTERN
    supported_formats = (DataSetFormat.XYZSET, DataSetFormat.XYZWSET)

    MIN_BAR_SIZE = 1
    MAX_BAR_SIZE = 20
    MAX_DOT_SIZE = 10

    def __init__(self, title="", data_set=None):
        super().__init__(title, data_set)
        self._mode = Scatter3DMode.SCATTER
        self._stemmed = False
        self._z_base = 0.0
        self._bar_size = 5
        self._background_fill = BkgFill.solid(None)
        self._dot_colors = {side: "#000000" for side in Side}
        self._dot_sizes = {side: 0 for side in Side}
        self._min_symbol_size = Measure(0.0, Unit.IN)
        self._symbol = self.add_child(SymbolNode())

    def get_mode(self):
        return self._mode

    def set_mode(self, mode):
        return self._set_choice("mode", mode, Scatter3DMode)

    def is_bar_plot_mode(self):
        return self._mode in (Scatter3DMode.BARPLOT, Scatter3DMode.COLORBARPLOT)

    def is_bubble_mode(self):
        return self._mode in (Scatter3DMode.SIZEBUBBLE, Scatter3DMode.COLORSIZEBUBBLE)

    def get_stemmed(self):
        return self._stemmed

    def set_stemmed(self, stemmed):
        return self._assign("stemmed", bool(stemmed))

    def get_z_base(self):
        return self._z_base

    def set_z_base(self, z):
        return self._set_number("z_base", z)

    def get_bar_size(self):
        return self._bar_size

    def set_bar_size(self, size):
        return self._set_number("bar_size", size, self.MIN_BAR_SIZE, self.MAX_BAR_SIZE, integer=True)

    def get_background_fill(self):
        return self._background_fill

    def set_background_fill(self, fill):
        if not isinstance(fill, BkgFill) or not fill.is_valid():
            return False
        return self._assign("background_fill", fill)

    def get_projection_dot_color(self, side):
        return self._dot_colors[Side(side)]

    def set_projection_dot_color(self, side, color):
        try:
            color = normalize_color(color)
            side = Side(side)
        except ValueError:
            return False
        if color is None:
            return False
        if self._dot_colors[side] != color:
            self._dot_colors[side] = color
            self._changed("projection_dot_color")
        return True

    def get_projection_dot_size(self, side):
        """Projection dot size in points; 0 disables the projection."""
        return self._dot_sizes[Side(side)]

    def set_projection_dot_size(self, side, size):
        try:
            side = Side(side)
        except ValueError:
            return False
        if not is_finite_number(size) or int(size) != float(size) or not 0 <= int(size) <= self.MAX_DOT_SIZE:
            return False
        if self._dot_sizes[side] != int(size):
            self._dot_sizes[side] = int(size)
            self._changed("projection_dot_size")
        return True

    def get_symbol_node(self):
        return self._symbol

    def get_max_symbol_size(self):
        return self._symbol.get_size()

    def set_max_symbol_size(self, size):
        if not SYMBOL_SIZE_CONSTRAINTS.is_valid(size):
            return False
        if _milli_inches(size) < _milli_inches(self._min_symbol_size):
            return False
        return self._symbol.set_size(size)

    def get_min_symbol_size(self):
        """Smallest bubble size, for the bubble display modes."""
        return self._min_symbol_size

    def set_min_symbol_size(self, size):
        if not SYMBOL_SIZE_CONSTRAINTS.is_valid(size):
            return False
        if _milli_inches(size) >= _milli_inches(self._symbol.get_size()):
            return False
        return self._set_measure("min_symbol_size", size, SYMBOL_SIZE_CONSTRAINTS)


def _milli_inches(measure):
    return measure.to_milli_inches()
