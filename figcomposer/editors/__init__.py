"""
Property editors for each graphic node type
"""

from ..core.host import NodeEditorHost
from .area_chart import AreaChartEditor
from .bar_plot import BarPlotEditor
from .box_plot import BoxPlotEditor
from .calib import CalibrationBarEditor
from .cards import ErrorBarCard, SymbolCard, ViolinCard
from .data import DataGroupPropEditor, DataSetCard
from .draw_style import DrawStyleEditor
from .figure import FigureEditor
from .function import FunctionEditor
from .image import ImageEditor
from .label import LabelEditor
from .pie_chart import PieChartEditor
from .scatter3d import Scatter3DEditor
from .surface import SurfaceEditor
from .text_box import TextBoxEditor
from .text_style import TextStyleEditor
from .trace import TraceEditor

EDITOR_CLASSES = (
    FigureEditor,
    TextBoxEditor,
    LabelEditor,
    CalibrationBarEditor,
    ImageEditor,
    FunctionEditor,
    TraceEditor,
    BarPlotEditor,
    BoxPlotEditor,
    PieChartEditor,
    AreaChartEditor,
    SurfaceEditor,
    Scatter3DEditor,
)


def create_editors(alert=None):
    """One editor instance per supported node type."""
    return [cls(alert) for cls in EDITOR_CLASSES]


def create_host(alert=None, title_popups=None):
    """
    Build a host presenting every node editor.

    Examples
    --------
    >>> import figcomposer as fc
    >>> fig = fc.FigureNode("Results")
    >>> bars = fig.add_child(fc.BarPlotNode("Counts"))
    >>> host = fc.create_host()
    >>> host.select(bars)
    True
    >>> host.widget  # doctest: +SKIP
    """
    return NodeEditorHost(create_editors(alert), alert=alert, title_popups=title_popups)


__all__ = [
    'AreaChartEditor', 'BarPlotEditor', 'BoxPlotEditor', 'CalibrationBarEditor',
    'DataGroupPropEditor', 'DataSetCard', 'DrawStyleEditor', 'ErrorBarCard',
    'FigureEditor', 'FunctionEditor', 'ImageEditor', 'LabelEditor', 'PieChartEditor',
    'Scatter3DEditor', 'SurfaceEditor', 'SymbolCard', 'TextBoxEditor', 'TextStyleEditor',
    'TraceEditor', 'ViolinCard', 'EDITOR_CLASSES', 'create_editors', 'create_host',
]
