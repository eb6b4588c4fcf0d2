"""
figcomposer - Property editors for vector figure graphic nodes
Notebook panels that view and modify the styling, geometry and data bindings
of the nodes in a figure (plots, text boxes, labels, images, the figure itself).
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .core import NodeEditor, NodeEditorHost, TitlePopupFactory
from .editors import create_editors, create_host
from .fig import (
    AreaChartNode,
    BarPlotNode,
    BoxPlotNode,
    CalibrationBarNode,
    DataSet,
    DataSetFormat,
    FigureNode,
    FunctionNode,
    ImageNode,
    LabelNode,
    Measure,
    PieChartNode,
    Scatter3DNode,
    SurfaceNode,
    TextBoxNode,
    TraceNode,
    Unit,
)
from .io import DataLoader

__all__ = [
    'NodeEditor',
    'NodeEditorHost',
    'TitlePopupFactory',
    'create_editors',
    'create_host',
    'AreaChartNode',
    'BarPlotNode',
    'BoxPlotNode',
    'CalibrationBarNode',
    'DataSet',
    'DataSetFormat',
    'FigureNode',
    'FunctionNode',
    'ImageNode',
    'LabelNode',
    'Measure',
    'PieChartNode',
    'Scatter3DNode',
    'SurfaceNode',
    'TextBoxNode',
    'TraceNode',
    'Unit',
    'DataLoader',
]
