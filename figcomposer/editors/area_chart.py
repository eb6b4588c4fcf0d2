"""
Area chart property editor
"""

import ipywidgets as widgets

from ..core.controls import MultiButtonControl, float_field, text_field
from ..core.editor import NodeEditor
from ..fig.node import NodeType
from ..fig.plottables import AreaLabelMode
from ..utils.helpers import enum_options
from .data import DataGroupPropEditor, DataSetCard
from .draw_style import DrawStyleEditor
from .text_style import TextStyleEditor


class AreaChartEditor(NodeEditor):
    node_type = NodeType.AREA
    icon = 'area-chart'
    title = 'Area Chart'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.title_field = self.register_text_field(text_field('Title:'))
        self.show_in_legend = widgets.Checkbox(description='Show in legend', indent=False)
        self.baseline = float_field('Baseline:')
        self.label_mode = MultiButtonControl('Labels:', enum_options(AreaLabelMode))

        self.data_set = self.add_panel(DataSetCard(self.alert))
        self.data_groups = self.add_panel(DataGroupPropEditor(self.alert))
        self.text_style = self.add_panel(TextStyleEditor(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True))

        self.bind(self.title_field, 'title')
        self.bind(self.show_in_legend, 'show_in_legend')
        self.bind(self.baseline, 'baseline')
        self.bind(self.label_mode, 'label_mode')

        tabs = self.make_tabs([
            ('Data', widgets.VBox([self.data_set.widget, self.data_groups.widget])),
            ('Styles', widgets.VBox([self.text_style.widget, self.draw_style.widget])),
        ])
        self.widget.children = [
            widgets.HBox([self.title_field, self.show_in_legend]),
            widgets.HBox([self.baseline, self.label_mode]),
            tabs,
        ]
