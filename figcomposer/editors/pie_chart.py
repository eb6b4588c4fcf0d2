"""
Pie chart property editor
"""

import ipywidgets as widgets

from ..core.controls import MultiButtonControl, float_field, int_field, text_field
from ..core.editor import NodeEditor
from ..fig.node import NodeType
from ..fig.plottables import PieLabelMode
from ..utils.helpers import enum_options
from .data import DataGroupPropEditor, DataSetCard
from .draw_style import DrawStyleEditor
from .text_style import TextStyleEditor


class PieChartEditor(NodeEditor):
    """Radii, slice displacement and slice labels of a pie (or donut) chart."""

    node_type = NodeType.PIE
    icon = 'pie-chart'
    title = 'Pie Chart'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.title_field = self.register_text_field(text_field('Title:'))
        self.show_in_legend = widgets.Checkbox(description='Show in legend', indent=False)
        self.inner_radius = float_field('Inner radius:')
        self.outer_radius = float_field('Outer radius:')
        self.radial_offset = int_field('Offset %:')
        self.label_mode = MultiButtonControl('Slice labels:', enum_options(PieLabelMode))

        self.data_set = self.add_panel(DataSetCard(self.alert))
        self.data_groups = self.add_panel(DataGroupPropEditor(self.alert))
        self.text_style = self.add_panel(TextStyleEditor(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True))

        self.bind(self.title_field, 'title')
        self.bind(self.show_in_legend, 'show_in_legend')
        self.bind(self.inner_radius, 'inner_radius')
        self.bind(self.outer_radius, 'outer_radius')
        self.bind(self.radial_offset, 'radial_offset')
        self.bind(self.label_mode, 'slice_label_mode')

        tabs = self.make_tabs([
            ('Slices', widgets.VBox([self.data_set.widget, self.data_groups.widget])),
            ('Styles', widgets.VBox([self.text_style.widget, self.draw_style.widget])),
        ])
        self.widget.children = [
            widgets.HBox([self.title_field, self.show_in_legend]),
            widgets.HBox([self.inner_radius, self.outer_radius]),
            widgets.HBox([self.radial_offset, self.label_mode]),
            tabs,
        ]
