"""
Bar plot property editor
"""

import ipywidgets as widgets

from ..core.controls import MultiButtonControl, float_field, int_field, text_field
from ..core.editor import NodeEditor
from ..fig.node import NodeType
from ..fig.plottables import BarMode
from ..utils.helpers import enum_options
from .data import DataGroupPropEditor, DataSetCard
from .draw_style import DrawStyleEditor
from .text_style import TextStyleEditor


class BarPlotEditor(NodeEditor):
    """
    Title, legend entry, display mode, baseline, relative bar width and
    auto-labelling of a bar plot, plus its data set, data groups and styles.
    """

    node_type = NodeType.BAR
    icon = 'bar-chart'
    title = 'Bar Plot'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.title_field = self.register_text_field(text_field('Title:'))
        self.show_in_legend = widgets.Checkbox(description='Show in legend', indent=False)
        self.mode = MultiButtonControl('Mode:', enum_options(BarMode))
        self.baseline = float_field('Baseline:')
        self.bar_width = int_field('Bar width %:')
        self.auto_label = widgets.Checkbox(description='Auto-label bar groups', indent=False)

        self.data_set = self.add_panel(DataSetCard(self.alert))
        self.data_groups = self.add_panel(DataGroupPropEditor(self.alert))
        self.text_style = self.add_panel(TextStyleEditor(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True))

        self.bind(self.title_field, 'title')
        self.bind(self.show_in_legend, 'show_in_legend')
        self.bind(self.mode, 'mode')
        self.bind(self.baseline, 'baseline')
        self.bind(self.bar_width, 'bar_width')
        self.bind(self.auto_label, 'auto_label')

        tabs = self.make_tabs([
            ('Data', widgets.VBox([self.data_set.widget, self.data_groups.widget])),
            ('Styles', widgets.VBox([self.text_style.widget, self.draw_style.widget])),
        ])
        self.widget.children = [
            widgets.HBox([self.title_field, self.show_in_legend]),
            widgets.HBox([self.mode, self.baseline]),
            widgets.HBox([self.bar_width, self.auto_label]),
            tabs,
        ]
