"""
Data trace property editor
"""

import ipywidgets as widgets

from ..core.controls import MultiButtonControl, float_field, int_field, text_field
from ..core.editor import NodeEditor
from ..fig.node import NodeType
from ..fig.plottables import TraceMode
from ..utils.helpers import enum_options
from .cards import ErrorBarCard, SymbolCard
from .data import DataSetCard
from .draw_style import DrawStyleEditor
from .text_style import TextStyleEditor


def _error_bar_source(trace):
    # multi-trace mode draws no error bars
    if trace.get_mode() == TraceMode.MULTITRACE:
        return None
    return trace.get_error_bar_node()


class TraceEditor(NodeEditor):
    """
    Display mode, offsets, point skip and mode-specific parameters of a
    data trace, with tabs for its symbol and error bars.

    Mode-specific fields stay visible but are disabled outside their mode:
    the sliding window length applies to TRENDLINE, the show-average flag
    to MULTITRACE, and bar width and baseline to HISTOGRAM.
    """

    node_type = NodeType.TRACE
    icon = 'line-chart'
    title = 'Trace'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.title_field = self.register_text_field(text_field('Title:'))
        self.show_in_legend = widgets.Checkbox(description='Show in legend', indent=False)
        self.mode = MultiButtonControl('Mode:', enum_options(TraceMode))
        self.x_offset = float_field('X offset:')
        self.y_offset = float_field('Y offset:')
        self.skip = int_field('Skip:')
        self.window_length = int_field('Window:')
        self.show_average = widgets.Checkbox(description='Show average', indent=False)
        self.bar_width = float_field('Bar width:')
        self.baseline = float_field('Baseline:')

        self.data_set = self.add_panel(DataSetCard(self.alert))
        self.symbol_card = self.add_panel(SymbolCard(self.alert), lambda n: n.get_symbol_node())
        self.error_bar_card = self.add_panel(ErrorBarCard(self.alert), _error_bar_source)
        self.text_style = self.add_panel(TextStyleEditor(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True))
        self.register_text_field(self.symbol_card.character)

        self.bind(self.title_field, 'title')
        self.bind(self.show_in_legend, 'show_in_legend')
        self.bind(self.mode, 'mode')
        self.bind(self.x_offset, 'x_offset')
        self.bind(self.y_offset, 'y_offset')
        self.bind(self.skip, 'skip')
        self.bind(self.window_length, 'sliding_window_length')
        self.bind(self.show_average, 'show_average')
        self.bind(self.bar_width, 'bar_width')
        self.bind(self.baseline, 'baseline')

        tabs = self.make_tabs([
            ('Styles', widgets.VBox([self.text_style.widget, self.draw_style.widget])),
            ('Symbol', self.symbol_card.widget),
            ('Error bars', self.error_bar_card.widget),
        ])
        self.widget.children = [
            widgets.HBox([self.title_field, self.show_in_legend]),
            widgets.HBox([self.mode, self.skip]),
            widgets.HBox([self.x_offset, self.y_offset]),
            widgets.HBox([self.window_length, self.show_average]),
            widgets.HBox([self.bar_width, self.baseline]),
            self.data_set.widget,
            tabs,
        ]

    def update_enablement(self):
        node = self.node
        mode = node.get_mode()
        self.window_length.disabled = mode != TraceMode.TRENDLINE
        self.show_average.disabled = mode != TraceMode.MULTITRACE
        self.bar_width.disabled = mode != TraceMode.HISTOGRAM
        self.baseline.disabled = mode != TraceMode.HISTOGRAM
        ebar = _error_bar_source(node)
        if self.error_bar_card.node is not ebar:
            self.error_bar_card.load(ebar)
