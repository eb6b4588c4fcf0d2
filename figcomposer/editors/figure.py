"""
Figure property editor
"""

import ipywidgets as widgets

from .. import defaults
from ..core.controls import BkgFillPicker, MeasureEditor, MultiButtonControl, int_field, text_field
from ..core.editor import NodeEditor
from ..fig.measure import LOCATION_CONSTRAINTS, SIZE_CONSTRAINTS, STROKE_WIDTH_CONSTRAINTS
from ..fig.node import NodeType
from ..fig.styles import H_ALIGNMENTS, V_ALIGNMENTS, TextAlign
from ..utils.helpers import enum_options
from .draw_style import DrawStyleEditor
from .text_style import TextStyleEditor


class FigureEditor(NodeEditor):
    """
    The figure node: title and its placement, note, bounding box, border,
    background, and a rescale tool for the whole figure or only its fonts.
    """

    node_type = NodeType.FIGURE
    icon = 'picture-o'
    title = 'Figure'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.title_field = self.register_text_field(text_field('Title:'))
        self.hide_title = widgets.Checkbox(description='Hide title', indent=False)
        self.title_h_align = MultiButtonControl('Title H:', enum_options(TextAlign, H_ALIGNMENTS))
        self.title_v_align = MultiButtonControl('Title V:', enum_options(TextAlign, V_ALIGNMENTS))
        self.note = self.register_text_field(widgets.Textarea(
            description='Note:', continuous_update=False, rows=3,
            style={'description_width': defaults.DESCRIPTION_WIDTH},
            layout=widgets.Layout(width=defaults.PANEL_WIDTH)
        ))
        self.x = MeasureEditor('X:', LOCATION_CONSTRAINTS)
        self.y = MeasureEditor('Y:', LOCATION_CONSTRAINTS)
        self.width = MeasureEditor('Width:', SIZE_CONSTRAINTS)
        self.height = MeasureEditor('Height:', SIZE_CONSTRAINTS)
        self.border_width = MeasureEditor('Border:', STROKE_WIDTH_CONSTRAINTS)
        self.background = BkgFillPicker('Background:')

        self.scale = int_field('Scale %:', value=100)
        self.rescale_button = widgets.Button(description='Rescale', icon='expand',
                                             tooltip='Rescale the figure and its fonts')
        self.rescale_fonts_button = widgets.Button(description='Rescale fonts', icon='font',
                                                   tooltip='Rescale only the fonts')
        self.scale.observe(lambda change: self.update_enablement(), 'value')
        self.rescale_button.on_click(lambda btn: self.rescale(fonts_only=False))
        self.rescale_fonts_button.on_click(lambda btn: self.rescale(fonts_only=True))

        self.text_style = self.add_panel(TextStyleEditor(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True))

        self.bind(self.title_field, 'title')
        self.bind(self.hide_title, 'hide_title')
        self.bind(self.title_h_align, 'title_horizontal_alignment')
        self.bind(self.title_v_align, 'title_vertical_alignment')
        self.bind(self.note, 'note')
        self.bind(self.x, 'x')
        self.bind(self.y, 'y')
        self.bind(self.width, 'width')
        self.bind(self.height, 'height')
        self.bind(self.border_width, 'border_width')
        self.bind(self.background, 'background_fill')

        tabs = self.make_tabs([
            ('Styles', widgets.VBox([self.text_style.widget, self.draw_style.widget])),
            ('Rescale', widgets.HBox([self.scale, self.rescale_button, self.rescale_fonts_button])),
        ])
        self.widget.children = [
            widgets.HBox([self.title_field, self.hide_title]),
            widgets.HBox([self.title_h_align, self.title_v_align]),
            self.note,
            widgets.HBox([self.x, self.y]),
            widgets.HBox([self.width, self.height]),
            widgets.HBox([self.border_width, self.background]),
            tabs,
        ]

    def update_enablement(self):
        changed = self.node is not None and self.scale.value != 100
        self.rescale_button.disabled = not changed
        self.rescale_fonts_button.disabled = not changed

    def rescale(self, fonts_only=False):
        """Apply the scale field to the loaded figure, then reset the field to 100."""
        node = self.node
        if node is None:
            return False
        ok = node.rescale(self.scale.value, fonts_only)
        if not ok:
            self.alert()
        self.scale.value = 100
        if ok:
            self.reload(False)
        return ok
