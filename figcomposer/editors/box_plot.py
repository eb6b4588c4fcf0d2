"""
Box plot property editor
"""

import ipywidgets as widgets

from ..core.controls import MeasureEditor, MultiButtonControl, float_field, text_field
from ..core.editor import NodeEditor
from ..fig.measure import BOX_WIDTH_CONSTRAINTS
from ..fig.node import NodeType
from ..fig.plottables import BoxMode
from ..utils.helpers import enum_options
from .cards import ErrorBarCard, SymbolCard, ViolinCard
from .data import DataSetCard
from .draw_style import DrawStyleEditor


class BoxPlotEditor(NodeEditor):
    """
    Box plot: display mode, box width, offset and interval, plus cards for
    the whiskers, the outlier symbols and the violin outline.
    """

    node_type = NodeType.BOX
    icon = 'th-large'
    title = 'Box Plot'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.title_field = self.register_text_field(text_field('Title:'))
        self.show_in_legend = widgets.Checkbox(description='Show in legend', indent=False)
        self.mode = MultiButtonControl('Mode:', enum_options(BoxMode))
        self.box_width = MeasureEditor('Box width:', BOX_WIDTH_CONSTRAINTS)
        self.offset = float_field('Offset:')
        self.interval = float_field('Interval:')

        self.data_set = self.add_panel(DataSetCard(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert))
        self.whisker_card = self.add_panel(ErrorBarCard(self.alert), lambda n: n.get_whisker_node())
        self.symbol_card = self.add_panel(SymbolCard(self.alert), lambda n: n.get_symbol_node())
        self.violin_card = self.add_panel(ViolinCard(self.alert), lambda n: n.get_violin_style_node())
        self.register_text_field(self.symbol_card.character)

        self.bind(self.title_field, 'title')
        self.bind(self.show_in_legend, 'show_in_legend')
        self.bind(self.mode, 'mode')
        self.bind(self.box_width, 'box_width')
        self.bind(self.offset, 'offset')
        self.bind(self.interval, 'interval')

        tabs = self.make_tabs([
            ('Box', self.draw_style.widget),
            ('Whiskers', self.whisker_card.widget),
            ('Outliers', self.symbol_card.widget),
            ('Violin', self.violin_card.widget),
        ])
        self.widget.children = [
            widgets.HBox([self.title_field, self.show_in_legend]),
            widgets.HBox([self.mode, self.box_width]),
            widgets.HBox([self.offset, self.interval]),
            self.data_set.widget,
            tabs,
        ]
