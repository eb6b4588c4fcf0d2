"""
Draw style panel: stroke width, colour, cap, join and pattern, and
optionally the fill colour.
"""

import ipywidgets as widgets

from ..core.controls import ColorPickerControl, MeasureEditor, MultiButtonControl, StrokePatternCombo, set_visible
from ..core.editor import PropertyPanel
from ..fig.measure import STROKE_WIDTH_CONSTRAINTS
from ..fig.styles import StrokeCap, StrokeJoin, StrokePattern
from ..utils.helpers import enum_options


class DrawStyleEditor(PropertyPanel):
    """
    Edits the stroke styles of a node, plus its fill colour unless the panel
    is built with ``omit_fill`` (the text style panel then edits it as the
    text colour). ``omit_pattern`` drops the stroke pattern field.
    """

    def __init__(self, alert=None, omit_fill=False, omit_pattern=False):
        super().__init__(alert)
        self.fill_color = None if omit_fill else ColorPickerControl('Fill:', allow_none=True)
        self.stroke_color = ColorPickerControl('Stroke:', allow_none=True)
        self.stroke_width = MeasureEditor('Width:', STROKE_WIDTH_CONSTRAINTS)
        self.stroke_cap = MultiButtonControl('Cap:', enum_options(StrokeCap))
        self.stroke_join = MultiButtonControl('Join:', enum_options(StrokeJoin))
        self.stroke_pattern = None if omit_pattern else StrokePatternCombo('Pattern:')

        if self.fill_color is not None:
            self.bind(self.fill_color, 'fill_color', applies=lambda n: n.has_fill_color_property())
        self.bind(self.stroke_color, 'stroke_color')
        self.bind(self.stroke_width, 'stroke_width')
        self.bind(self.stroke_cap, 'stroke_cap')
        self.bind(self.stroke_join, 'stroke_join')
        if self.stroke_pattern is not None:
            self.bind(
                self.stroke_pattern, 'stroke_pattern', self._set_pattern,
                to_control=str, from_control=StrokePattern.parse,
                applies=lambda n: n.has_stroke_pattern_property(),
            )

        first = [self.stroke_color, self.stroke_width]
        if self.fill_color is not None:
            first.insert(0, self.fill_color)
        second = [self.stroke_cap, self.stroke_join]
        if self.stroke_pattern is not None:
            second.append(self.stroke_pattern)
        self.widget.children = [widgets.HBox(first), widgets.HBox(second)]

    def _set_pattern(self, node, pattern):
        if not node.set_stroke_pattern(pattern):
            return False
        self.stroke_pattern.remember(pattern)
        return True

    def load(self, node):
        if node is not None and not node.has_stroke_properties():
            node = None
        return super().load(node)

    def update_enablement(self):
        node = self.node
        if self.fill_color is not None:
            set_visible(self.fill_color, node.has_fill_color_property())
        if self.stroke_pattern is not None:
            set_visible(self.stroke_pattern, node.has_stroke_pattern_property())
