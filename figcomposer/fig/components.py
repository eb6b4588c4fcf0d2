"""
Component nodes owned by plottable nodes: marker symbols, error bars and
violin styles. Each is created by its owner and never re-parented.
"""

from .measure import END_CAP_SIZE_CONSTRAINTS, SYMBOL_SIZE_CONSTRAINTS, Measure, Unit
from .node import Capability, GraphicNode, NodeType
from .styles import Marker


class SymbolNode(GraphicNode):
    """
    Marker symbol drawn at each data point. The title holds an optional
    single character drawn centered inside the marker.
    """

    node_type = NodeType.SYMBOL
    capabilities = Capability.FONT | Capability.FILL_COLOR | Capability.STROKE | Capability.STROKE_PATTERN

    def __init__(self, marker=Marker.CIRCLE, size=Measure(0.05, Unit.IN)):
        super().__init__()
        self._type = marker
        self._size = size

    def get_type(self):
        return self._type

    def set_type(self, marker):
        return self._set_choice("type", marker, Marker)

    def get_size(self):
        return self._size

    def set_size(self, size):
        return self._set_measure("size", size, SYMBOL_SIZE_CONSTRAINTS)

    def get_character(self):
        return self._title

    def set_character(self, ch):
        if not isinstance(ch, str) or len(ch) > 1:
            return False
        return self.set_title(ch)


class ErrorBarNode(GraphicNode):
    """Error bar appearance: end cap marker and size, or hidden entirely."""

    node_type = NodeType.EBAR
    capabilities = Capability.STROKE | Capability.STROKE_PATTERN
    has_title = False

    def __init__(self, end_cap=Marker.BRACKET, end_cap_size=Measure(0.1, Unit.IN)):
        super().__init__()
        self._end_cap = end_cap
        self._end_cap_size = end_cap_size
        self._hide = False

    def get_end_cap(self):
        return self._end_cap

    def set_end_cap(self, marker):
        return self._set_choice("end_cap", marker, Marker)

    def get_end_cap_size(self):
        return self._end_cap_size

    def set_end_cap_size(self, size):
        return self._set_measure("end_cap_size", size, END_CAP_SIZE_CONSTRAINTS)

    def get_hide(self):
        return self._hide

    def set_hide(self, hide):
        return self._assign("hide", bool(hide))


class ViolinStyleNode(GraphicNode):
    """Draw styles and width of the violin (kernel density) outline of a box plot."""

    node_type = NodeType.VIOLIN
    capabilities = Capability.FILL_COLOR | Capability.STROKE | Capability.STROKE_PATTERN
    has_title = False

    def __init__(self, size=Measure(0.0, Unit.IN)):
        super().__init__()
        self._size = size

    def get_size(self):
        """Violin width; zero hides the violin."""
        return self._size

    def set_size(self, size):
        return self._set_measure("size", size, SYMBOL_SIZE_CONSTRAINTS)
