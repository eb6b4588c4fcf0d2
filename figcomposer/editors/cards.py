"""
Cards editing the component nodes of a plottable: the marker symbol, the
error bar and the violin style.
"""

import ipywidgets as widgets

from ..core.controls import MeasureEditor, MultiButtonControl, set_visible, text_field
from ..core.editor import PropertyPanel
from ..fig.measure import END_CAP_SIZE_CONSTRAINTS, SYMBOL_SIZE_CONSTRAINTS
from ..fig.plottables import Scatter3DNode
from ..utils.helpers import MARKER_OPTIONS
from .draw_style import DrawStyleEditor


def _scatter_parent(symbol):
    # 3-D scatter plots keep the bubble size range on the plot node
    parent = symbol.get_parent()
    return parent if isinstance(parent, Scatter3DNode) else None


class SymbolCard(PropertyPanel):
    """
    Edits a symbol component: marker type, size, centered character and
    draw styles. Under a 3-D scatter plot the size is the maximum bubble
    size and a minimum size field is shown, enabled only in the bubble modes.
    """

    def __init__(self, alert=None):
        super().__init__(alert)
        self.symbol_type = MultiButtonControl('Marker:', MARKER_OPTIONS)
        self.size = MeasureEditor('Size:', SYMBOL_SIZE_CONSTRAINTS)
        self.min_size = MeasureEditor('Min size:', SYMBOL_SIZE_CONSTRAINTS)
        self.character = text_field('Character:', width='40px')
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert))

        self.bind(self.symbol_type, 'type')
        self.bind(self.size, self._get_size, self._set_size)
        self.bind(
            self.min_size,
            lambda n: _scatter_parent(n).get_min_symbol_size(),
            lambda n, v: _scatter_parent(n).set_min_symbol_size(v),
            applies=lambda n: _scatter_parent(n) is not None,
        )
        self.bind(self.character, 'character')

        self.widget.children = [
            widgets.HBox([self.symbol_type, self.character]),
            widgets.HBox([self.size, self.min_size]),
            self.draw_style.widget,
        ]

    @staticmethod
    def _get_size(symbol):
        return symbol.get_size()

    @staticmethod
    def _set_size(symbol, size):
        scatter = _scatter_parent(symbol)
        if scatter is not None:
            return scatter.set_max_symbol_size(size)
        return symbol.set_size(size)

    def update_enablement(self):
        scatter = _scatter_parent(self.node)
        self.size.number.description = 'Max size:' if scatter is not None else 'Size:'
        set_visible(self.min_size, scatter is not None)
        self.enable(self.min_size, scatter is not None and scatter.is_bubble_mode())


class ErrorBarCard(PropertyPanel):
    """Edits an error bar component: end cap, end cap size, hide flag and stroke styles."""

    def __init__(self, alert=None):
        super().__init__(alert)
        self.end_cap = MultiButtonControl('End cap:', MARKER_OPTIONS)
        self.end_cap_size = MeasureEditor('Cap size:', END_CAP_SIZE_CONSTRAINTS)
        self.hide = widgets.Checkbox(description='Hide', value=False, indent=False)
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True))

        self.bind(self.end_cap, 'end_cap')
        self.bind(self.end_cap_size, 'end_cap_size')
        self.bind(self.hide, 'hide')

        self.widget.children = [
            widgets.HBox([self.end_cap, self.end_cap_size, self.hide]),
            self.draw_style.widget,
        ]


class ViolinCard(PropertyPanel):
    """Edits the violin outline of a box plot: width and draw styles."""

    def __init__(self, alert=None):
        super().__init__(alert)
        self.size = MeasureEditor('Width:', SYMBOL_SIZE_CONSTRAINTS)
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert))

        self.bind(self.size, 'size')

        self.widget.children = [
            widgets.HBox([self.size, widgets.HTML('<i>zero width hides the violin</i>')]),
            self.draw_style.widget,
        ]
