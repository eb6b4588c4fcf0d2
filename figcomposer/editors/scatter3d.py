"""
3-D scatter plot property editor
"""

import ipywidgets as widgets

from ..core.controls import (
    BkgFillPicker,
    ColorPickerControl,
    MultiButtonControl,
    float_field,
    int_field,
    text_field,
)
from ..core.editor import NodeEditor
from ..fig.node import NodeType
from ..fig.plottables import Scatter3DMode, Side
from ..utils.helpers import enum_options
from .cards import SymbolCard
from .data import DataSetCard
from .draw_style import DrawStyleEditor


class Scatter3DEditor(NodeEditor):
    """
    Display mode, stems, z base, bar size and back-plane fill of a 3-D
    scatter plot, with tabs for the symbol and the projection dots cast
    onto the XY, XZ and YZ back planes.
    """

    node_type = NodeType.SCATTER3D
    icon = 'cube'
    title = '3D Scatter Plot'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.title_field = self.register_text_field(text_field('Title:'))
        self.show_in_legend = widgets.Checkbox(description='Show in legend', indent=False)
        self.mode = MultiButtonControl('Mode:', enum_options(Scatter3DMode))
        self.stemmed = widgets.ToggleButtons(
            options=[('stems', True), ('trace', False)], style={'button_width': '70px'}
        )
        self.z_base = float_field('Z base:')
        self.bar_size = int_field('Bar size:')
        self.background = BkgFillPicker('Back planes:')
        self.dot_colors = {side: ColorPickerControl(f'{side.value.upper()} color:') for side in Side}
        self.dot_sizes = {side: int_field(f'{side.value.upper()} size:') for side in Side}

        self.data_set = self.add_panel(DataSetCard(self.alert))
        self.symbol_card = self.add_panel(SymbolCard(self.alert), lambda n: n.get_symbol_node())
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert))
        self.register_text_field(self.symbol_card.character)

        self.bind(self.title_field, 'title')
        self.bind(self.show_in_legend, 'show_in_legend')
        self.bind(self.mode, 'mode')
        self.bind(self.stemmed, 'stemmed')
        self.bind(self.z_base, 'z_base')
        self.bind(self.bar_size, 'bar_size')
        self.bind(self.background, 'background_fill')
        for side in Side:
            self.bind(self.dot_colors[side], self._dot_getter('color', side), self._dot_setter('color', side))
            self.bind(self.dot_sizes[side], self._dot_getter('size', side), self._dot_setter('size', side))

        projections = widgets.VBox([
            widgets.HBox([self.dot_colors[side], self.dot_sizes[side]]) for side in Side
        ] + [widgets.HTML('<i>dot size 0 hides the projection</i>')])
        tabs = self.make_tabs([
            ('Symbol', self.symbol_card.widget),
            ('Projections', projections),
            ('Styles', self.draw_style.widget),
        ])
        self.widget.children = [
            widgets.HBox([self.title_field, self.show_in_legend]),
            widgets.HBox([self.mode, self.stemmed]),
            widgets.HBox([self.z_base, self.bar_size]),
            self.background,
            self.data_set.widget,
            tabs,
        ]

    @staticmethod
    def _dot_getter(what, side):
        def getter(node):
            return getattr(node, f'get_projection_dot_{what}')(side)
        return getter

    @staticmethod
    def _dot_setter(what, side):
        def setter(node, value):
            return getattr(node, f'set_projection_dot_{what}')(side, value)
        return setter

    def update_enablement(self):
        node = self.node
        bar_mode = node.is_bar_plot_mode()
        self.stemmed.disabled = bar_mode
        self.bar_size.disabled = not bar_mode
        if self.symbol_card.node is not None:
            self.symbol_card.update_enablement()
