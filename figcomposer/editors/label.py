"""
Text label property editor
"""

import ipywidgets as widgets

from .. import defaults
from ..core.controls import MeasureEditor, MultiButtonControl, float_field, text_field
from ..core.editor import NodeEditor
from ..fig.measure import LOCATION_CONSTRAINTS
from ..fig.node import NodeType
from ..fig.styles import H_ALIGNMENTS, V_ALIGNMENTS, TextAlign
from ..utils.helpers import enum_options
from .draw_style import DrawStyleEditor
from .text_style import TextStyleEditor


class LabelEditor(NodeEditor):
    node_type = NodeType.LABEL
    icon = 'font'
    title = 'Text Label'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.text = self.register_text_field(text_field('Text:'))
        self.node_id = text_field('ID:', width=defaults.SHORT_FIELD_WIDTH)
        self.x = MeasureEditor('X:', LOCATION_CONSTRAINTS)
        self.y = MeasureEditor('Y:', LOCATION_CONSTRAINTS)
        self.rotate = float_field('Rotate °:')
        self.h_align = MultiButtonControl('H align:', enum_options(TextAlign, H_ALIGNMENTS))
        self.v_align = MultiButtonControl('V align:', enum_options(TextAlign, V_ALIGNMENTS))

        self.text_style = self.add_panel(TextStyleEditor(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True))

        self.bind(self.text, 'title')
        self.bind(self.node_id, 'id')
        self.bind(self.x, 'x')
        self.bind(self.y, 'y')
        self.bind(self.rotate, 'rotate')
        self.bind(self.h_align, 'horizontal_alignment')
        self.bind(self.v_align, 'vertical_alignment')

        self.widget.children = [
            widgets.HBox([self.text, self.node_id]),
            widgets.HBox([self.x, self.y, self.rotate]),
            widgets.HBox([self.h_align, self.v_align]),
            self.text_style.widget,
            self.draw_style.widget,
        ]
