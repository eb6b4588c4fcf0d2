"""
figcomposer.fig: the graphic node model edited by the property panels.
"""

from .components import ErrorBarNode, SymbolNode, ViolinStyleNode
from .dataset import DataSet, DataSetFormat, is_valid_id
from .elements import CalibrationBarNode, FigureNode, ImageNode, LabelNode, TextBoxNode
from .errors import ExpressionError, FigError, ParseError, ValidationError
from .measure import Constraints, Measure, Unit
from .node import DOCUMENT_STYLES, STYLE_PROPERTIES, Capability, GraphicNode, NodeType
from .plottables import (
    AreaChartNode,
    AreaLabelMode,
    BarMode,
    BarPlotNode,
    BoxMode,
    BoxPlotNode,
    FunctionNode,
    PieChartNode,
    PieLabelMode,
    PlottableNode,
    Scatter3DMode,
    Scatter3DNode,
    Side,
    SurfaceNode,
    TraceMode,
    TraceNode,
)
from .styles import (
    BkgFill,
    FillType,
    FontStyle,
    GenericFont,
    Marker,
    PSFont,
    StrokeCap,
    StrokeJoin,
    StrokePattern,
    TextAlign,
    normalize_color,
)

__all__ = [
    "AreaChartNode", "AreaLabelMode", "BarMode", "BarPlotNode", "BkgFill", "BoxMode",
    "BoxPlotNode", "CalibrationBarNode", "Capability", "Constraints", "DataSet",
    "DataSetFormat", "DOCUMENT_STYLES", "ErrorBarNode", "ExpressionError", "FigError",
    "FigureNode", "FillType", "FontStyle", "FunctionNode", "GenericFont", "GraphicNode",
    "ImageNode", "LabelNode", "Marker", "Measure", "NodeType", "ParseError", "PSFont",
    "PieChartNode", "PieLabelMode", "PlottableNode", "Scatter3DMode", "Scatter3DNode",
    "Side", "STYLE_PROPERTIES", "StrokeCap", "StrokeJoin", "StrokePattern", "SurfaceNode",
    "SymbolNode", "TextAlign", "TextBoxNode", "TraceMode", "TraceNode", "Unit",
    "ValidationError", "ViolinStyleNode", "is_valid_id", "normalize_color",
]
