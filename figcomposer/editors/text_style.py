"""
Text style panel: font family, generic and PostScript fonts, size, style and
text colour, plus the "restore style defaults" pop-up.
"""

import ipywidgets as widgets
from traitlets import Bool, observe

from .. import defaults
from ..core.controls import (
    ColorPickerControl,
    DESCRIPTION_STYLE,
    FontFamilyCombo,
    MultiButtonControl,
    PopupMixin,
    int_field,
)
from ..core.editor import PropertyPanel
from ..fig.node import STYLE_PROPERTIES
from ..fig.styles import FontStyle, GenericFont, PSFont
from ..utils.helpers import enum_options

ALL_STYLES = 'all styles'


class RestoreDefaultsPopup(PopupMixin, widgets.VBox):
    """
    Pop-up choosing which style property to restore to its inherited value,
    and whether to apply to the node's descendants as well.
    """

    disabled = Bool(False)

    def __init__(self, on_restore, **kwargs):
        button = widgets.Button(icon='undo', tooltip='Restore style defaults...',
                                layout=widgets.Layout(width='36px'))
        prop = widgets.Dropdown(description='Restore:', style=DESCRIPTION_STYLE,
                                options=[ALL_STYLES] + list(STYLE_PROPERTIES))
        descendants = widgets.Checkbox(description='Include descendants', value=False, indent=False)
        apply_btn = widgets.Button(description='Restore', button_style='warning',
                                   layout=widgets.Layout(width='80px'))
        cancel = widgets.Button(description='Cancel', layout=widgets.Layout(width='80px'))
        popup = self._make_popup([prop, descendants, widgets.HBox([apply_btn, cancel])])
        super().__init__([button, popup], **kwargs)
        self.button = button
        self.popup = popup
        self.prop = prop
        self.descendants = descendants
        self.apply_button = apply_btn
        self._on_restore = on_restore
        button.on_click(self.toggle_popup)
        apply_btn.on_click(lambda btn: self.apply())
        cancel.on_click(lambda btn: self.cancel_popup())

    def set_properties(self, names):
        options = [ALL_STYLES] + list(names)
        if list(self.prop.options) != options:
            self.prop.options = options

    def apply(self):
        prop = None if self.prop.value == ALL_STYLES else self.prop.value
        include = self.descendants.value
        self.cancel_popup()
        self._on_restore(prop, include)

    @observe('disabled')
    def _on_disabled(self, change):
        self.button.disabled = change['new']
        if change['new']:
            self.cancel_popup()


class TextStyleEditor(PropertyPanel):
    """Edits the font-related style properties of a node that has them."""

    def __init__(self, alert=None):
        super().__init__(alert)

        self.font_family = FontFamilyCombo('Font:')
        self.alt_font = widgets.Dropdown(
            options=enum_options(GenericFont), description='Generic:', style=DESCRIPTION_STYLE,
            layout=widgets.Layout(width=f'calc({defaults.DESCRIPTION_WIDTH} + {defaults.SHORT_FIELD_WIDTH})')
        )
        self.ps_font = widgets.Dropdown(
            options=enum_options(PSFont), description='Postscript:', style=DESCRIPTION_STYLE,
            layout=widgets.Layout(width=f'calc({defaults.DESCRIPTION_WIDTH} + {defaults.SHORT_FIELD_WIDTH})')
        )
        self.font_size = int_field('Size (pt):')
        self.font_style = MultiButtonControl('Style:', enum_options(FontStyle))
        self.text_color = ColorPickerControl('Text color:', allow_none=True)
        self.restore = RestoreDefaultsPopup(self.restore_defaults)
        self.add_popup(self.restore)

        self.bind(self.font_family, 'font_family')
        self.bind(self.alt_font, 'alt_font')
        self.bind(self.ps_font, 'ps_font')
        self.bind(self.font_size, 'font_size')
        self.bind(self.font_style, 'font_style')
        self.bind(self.text_color, 'fill_color', applies=lambda n: n.has_fill_color_property())

        self.widget.children = [
            widgets.HBox([self.font_family, self.font_size, self.restore]),
            widgets.HBox([self.alt_font, self.ps_font]),
            widgets.HBox([self.font_style, self.text_color]),
        ]

    def load(self, node):
        if node is not None and not node.has_font_properties():
            node = None
        return super().load(node)

    def update_enablement(self):
        node = self.node
        self.text_color.layout.display = '' if node.has_fill_color_property() else 'none'
        self.restore.set_properties([p for p in STYLE_PROPERTIES if node.has_style(p)])
        self.restore.disabled = not (node.can_restore_default_styles() or node.get_child_count() > 0)

    def restore_defaults(self, prop=None, include_descendants=False):
        """Restore one style property (or all) on the loaded node and optionally its descendants."""
        if self.node is None:
            return False
        changed = self.node.restore_default_styles(prop, include_descendants)
        self.reload(False)
        return changed
