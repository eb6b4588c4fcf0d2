"""
Function property editor
"""

import html

import ipywidgets as widgets

from .. import defaults
from ..core.controls import float_field, text_field
from ..core.editor import NodeEditor
from ..fig.node import NodeType
from .cards import SymbolCard
from .draw_style import DrawStyleEditor
from .text_style import TextStyleEditor


class FunctionEditor(NodeEditor):
    """
    The expression f(x) with a validity indicator, the sampled domain
    [x0, x1] with step dx, the legend entry and the marker symbol.
    """

    node_type = NodeType.FUNCTION
    icon = 'superscript'
    title = 'Function'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.function = self.register_text_field(text_field('f(x) =', width=defaults.FIELD_WIDTH))
        self.validity = widgets.HTML()
        self.title_field = self.register_text_field(text_field('Title:'))
        self.show_in_legend = widgets.Checkbox(description='Show in legend', indent=False)
        self.x0 = float_field('x0:')
        self.x1 = float_field('x1:')
        self.dx = float_field('dx:')

        self.symbol_card = self.add_panel(SymbolCard(self.alert), lambda n: n.get_symbol_node())
        self.text_style = self.add_panel(TextStyleEditor(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True))
        self.register_text_field(self.symbol_card.character)

        self.bind(self.function, 'function_string')
        self.bind(self.title_field, 'title')
        self.bind(self.show_in_legend, 'show_in_legend')
        self.bind(self.x0, 'x0')
        self.bind(self.x1, 'x1')
        self.bind(self.dx, 'dx')

        tabs = self.make_tabs([
            ('Styles', widgets.VBox([self.text_style.widget, self.draw_style.widget])),
            ('Symbol', self.symbol_card.widget),
        ])
        self.widget.children = [
            widgets.HBox([self.function, self.validity]),
            widgets.HBox([self.title_field, self.show_in_legend]),
            widgets.HBox([self.x0, self.x1, self.dx]),
            tabs,
        ]

    def update_enablement(self):
        node = self.node
        if node.is_function_valid():
            n = node.sample()[0].size
            self.validity.value = f"<span style='color:#2E7D32;' title='{n} samples'>✓ OK</span>"
        else:
            reason = html.escape(node.get_reason_function_invalid(), quote=True)
            self.validity.value = f"<span style='color:#B00020;' title='{reason}'>✗ {reason}</span>"
