"""
Text box property editor
"""

import ipywidgets as widgets

from .. import defaults
from ..core.controls import (
    BkgFillPicker,
    MeasureEditor,
    MultiButtonControl,
    float_field,
    text_field,
)
from ..core.editor import NodeEditor
from ..fig.measure import LOCATION_CONSTRAINTS, MARGIN_CONSTRAINTS, SIZE_CONSTRAINTS
from ..fig.node import NodeType
from ..fig.styles import H_ALIGNMENTS, V_ALIGNMENTS, TextAlign
from ..utils.helpers import enum_options
from .draw_style import DrawStyleEditor
from .text_style import TextStyleEditor


class TextBoxEditor(NodeEditor):
    """Multi-line content, bounding box, margin, alignment, clipping, line height and background."""

    node_type = NodeType.TEXTBOX
    icon = 'file-text-o'
    title = 'Text Box'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.content = self.register_text_field(widgets.Textarea(
            description='Text:', continuous_update=False, rows=4,
            style={'description_width': defaults.DESCRIPTION_WIDTH},
            layout=widgets.Layout(width=defaults.PANEL_WIDTH)
        ))
        self.node_id = text_field('ID:', width=defaults.SHORT_FIELD_WIDTH)
        self.x = MeasureEditor('X:', LOCATION_CONSTRAINTS)
        self.y = MeasureEditor('Y:', LOCATION_CONSTRAINTS)
        self.width = MeasureEditor('Width:', SIZE_CONSTRAINTS)
        self.height = MeasureEditor('Height:', SIZE_CONSTRAINTS)
        self.margin = MeasureEditor('Margin:', MARGIN_CONSTRAINTS)
        self.rotate = float_field('Rotate °:')
        self.clip = widgets.Checkbox(description='Clip', indent=False)
        self.h_align = MultiButtonControl('H align:', enum_options(TextAlign, H_ALIGNMENTS))
        self.v_align = MultiButtonControl('V align:', enum_options(TextAlign, V_ALIGNMENTS))
        self.line_height = float_field('Line height:', step=0.05)
        self.background = BkgFillPicker('Background:')

        self.text_style = self.add_panel(TextStyleEditor(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True))

        self.bind(self.content, 'title')
        self.bind(self.node_id, 'id')
        self.bind(self.x, 'x')
        self.bind(self.y, 'y')
        self.bind(self.width, 'width')
        self.bind(self.height, 'height')
        self.bind(self.margin, 'margin')
        self.bind(self.rotate, 'rotate')
        self.bind(self.clip, 'clip')
        self.bind(self.h_align, 'horizontal_alignment')
        self.bind(self.v_align, 'vertical_alignment')
        self.bind(self.line_height, 'line_height')
        self.bind(self.background, 'background_fill')

        self.widget.children = [
            self.content,
            widgets.HBox([self.node_id, self.clip]),
            widgets.HBox([self.x, self.y]),
            widgets.HBox([self.width, self.height]),
            widgets.HBox([self.margin, self.rotate]),
            widgets.HBox([self.h_align, self.v_align]),
            widgets.HBox([self.line_height, self.background]),
            self.text_style.widget,
            self.draw_style.widget,
        ]
