"""
Calibration bar property editor
"""

import ipywidgets as widgets

from ..core.controls import MeasureEditor, MultiButtonControl, float_field, text_field
from ..core.editor import NodeEditor
from ..fig.measure import END_CAP_SIZE_CONSTRAINTS
from ..fig.node import NodeType
from ..utils.helpers import MARKER_OPTIONS
from .draw_style import DrawStyleEditor
from .text_style import TextStyleEditor


class CalibrationBarEditor(NodeEditor):
    """Location and length (in axis units), axis, end caps and label of a calibration bar."""

    node_type = NodeType.CALIB
    icon = 'arrows-h'
    title = 'Calibration Bar'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.title_field = self.register_text_field(text_field('Label:'))
        self.auto_label = widgets.Checkbox(description='Auto-label', indent=False)
        self.x = float_field('X:')
        self.y = float_field('Y:')
        self.length = float_field('Length:')
        self.primary = widgets.ToggleButtons(
            options=[('primary axis', True), ('secondary axis', False)],
            style={'button_width': '110px'}
        )
        self.end_cap = MultiButtonControl('End cap:', MARKER_OPTIONS)
        self.end_cap_size = MeasureEditor('Cap size:', END_CAP_SIZE_CONSTRAINTS)

        self.text_style = self.add_panel(TextStyleEditor(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True))

        self.bind(self.title_field, 'title')
        self.bind(self.auto_label, 'auto_label')
        self.bind(self.x, 'x')
        self.bind(self.y, 'y')
        self.bind(self.length, 'length')
        self.bind(self.primary, 'primary')
        self.bind(self.end_cap, 'end_cap')
        self.bind(self.end_cap_size, 'end_cap_size')

        self.widget.children = [
            widgets.HBox([self.title_field, self.auto_label]),
            widgets.HBox([self.x, self.y, self.length]),
            self.primary,
            widgets.HBox([self.end_cap, self.end_cap_size]),
            self.text_style.widget,
            self.draw_style.widget,
        ]
