"""
Input controls used by the property panels.

Composite controls expose a single observable ``value`` trait (and a
``disabled`` trait) so they bind like any plain ipywidgets control. Controls
that open a transient pop-up share :class:`PopupMixin`; panels close every
such pop-up through ``cancel_popup()`` before they are hidden or reused.
"""

import ipywidgets as widgets
from traitlets import Any, Bool, Instance, Unicode, observe

from .. import defaults
from ..fig.measure import Measure
from ..fig.styles import COMMON_PATTERNS, BkgFill, FillType
from ..utils.helpers import COLOR_SWATCHES, font_family_options

DESCRIPTION_STYLE = {'description_width': defaults.DESCRIPTION_WIDTH}


def set_visible(widget, visible):
    widget.layout.display = '' if visible else 'none'


def is_visible(widget):
    return widget.layout.display != 'none'


def float_field(description, width=defaults.NUMBER_FIELD_WIDTH, **kwargs):
    """FloatText that commits on Enter or blur."""
    return widgets.FloatText(
        description=description,
        continuous_update=False,
        style=DESCRIPTION_STYLE,
        layout=widgets.Layout(width=_with_description(width)),
        **kwargs
    )


def int_field(description, width=defaults.NUMBER_FIELD_WIDTH, **kwargs):
    """IntText that commits on Enter or blur."""
    return widgets.IntText(
        description=description,
        continuous_update=False,
        style=DESCRIPTION_STYLE,
        layout=widgets.Layout(width=_with_description(width)),
        **kwargs
    )


def text_field(description, width=defaults.FIELD_WIDTH, **kwargs):
    """Text that commits on Enter or blur."""
    return widgets.Text(
        description=description,
        continuous_update=False,
        style=DESCRIPTION_STYLE,
        layout=widgets.Layout(width=_with_description(width)),
        **kwargs
    )


def _with_description(width):
    return f'calc({defaults.DESCRIPTION_WIDTH} + {width})'


class PopupMixin:
    """A control that owns a transient pop-up box, ``self.popup``."""

    def _make_popup(self, children):
        return widgets.VBox(children, layout=widgets.Layout(
            display='none', border='1px solid #bbb', padding='4px', margin='2px 0 2px 0'
        ))

    @property
    def popup_visible(self):
        return is_visible(self.popup)

    def show_popup(self):
        if not self.disabled:
            set_visible(self.popup, True)

    def toggle_popup(self, btn=None):
        if self.popup_visible:
            self.cancel_popup()
        else:
            self.show_popup()

    def cancel_popup(self):
        """Close the pop-up, discarding any choice in progress."""
        set_visible(self.popup, False)


class ColorPickerControl(PopupMixin, widgets.VBox):
    """
    Colour swatch button that opens a palette pop-up.

    ``value`` is a ``#rrggbb`` string, or None for the transparent colour
    when ``allow_none`` is set.
    """

    value = Unicode('#000000', allow_none=True)
    disabled = Bool(False)

    def __init__(self, description='', allow_none=False, value='#000000', **kwargs):
        label = widgets.Label(description, layout=widgets.Layout(width=defaults.DESCRIPTION_WIDTH))
        swatch = widgets.Button(
            tooltip='Choose colour',
            layout=widgets.Layout(width=defaults.SWATCH_BUTTON_WIDTH, height='24px')
        )
        palette = [self._palette_button(name, color) for name, color in COLOR_SWATCHES]
        if allow_none:
            none_btn = widgets.Button(
                description='∅', tooltip='None (transparent)',
                layout=widgets.Layout(width=defaults.SWATCH_BUTTON_WIDTH, height='24px')
            )
            none_btn.on_click(lambda btn: self.choose(None))
            palette.append(none_btn)
        custom = widgets.ColorPicker(concise=True, description='Other:', value='#000000',
                                     style={'description_width': '50px'})
        grid = widgets.GridBox(palette, layout=widgets.Layout(
            grid_template_columns=f'repeat(8, {defaults.SWATCH_BUTTON_WIDTH})'
        ))
        popup = self._make_popup([grid, custom])
        super().__init__([widgets.HBox([label, swatch]), popup], **kwargs)
        self.allow_none = allow_none
        self.swatch = swatch
        self.custom = custom
        self.popup = popup
        self._syncing = False
        swatch.on_click(self.toggle_popup)
        custom.observe(self._on_custom, 'value')
        self.value = value
        self._paint()

    def _palette_button(self, name, color):
        btn = widgets.Button(
            tooltip=name,
            layout=widgets.Layout(width=defaults.SWATCH_BUTTON_WIDTH, height='24px')
        )
        btn.style.button_color = color
        btn.on_click(lambda b: self.choose(color))
        return btn

    def choose(self, color):
        """Pick a colour as the user would, and close the pop-up."""
        if color is None and not self.allow_none:
            return
        self.cancel_popup()
        self.value = color

    def _paint(self):
        self.swatch.style.button_color = self.value or 'transparent'
        self.swatch.description = '∅' if self.value is None else ''

    @observe('value')
    def _on_value(self, change):
        self._paint()
        if change['new'] is not None:
            self._syncing = True
            try:
                self.custom.value = change['new'][:7]
            finally:
                self._syncing = False

    @observe('disabled')
    def _on_disabled(self, change):
        self.swatch.disabled = change['new']
        if change['new']:
            self.cancel_popup()

    def _on_custom(self, change):
        if self._syncing:
            return
        self.choose(change['new'])


class MultiButtonControl(PopupMixin, widgets.VBox):
    """
    Button showing the current choice; clicking it opens a pop-up with one
    button per choice.

    Parameters
    ----------
    options : list of (label, value)
        The choices.
    """

    value = Any()
    disabled = Bool(False)

    def __init__(self, description, options, **kwargs):
        label = widgets.Label(description, layout=widgets.Layout(width=defaults.DESCRIPTION_WIDTH))
        button = widgets.Button(layout=widgets.Layout(width=defaults.SHORT_FIELD_WIDTH))
        choices = []
        for text, value in options:
            btn = widgets.Button(description=text, layout=widgets.Layout(width=defaults.SHORT_FIELD_WIDTH))
            btn.on_click(self._make_choice_callback(value))
            choices.append(btn)
        popup = self._make_popup(choices)
        super().__init__([widgets.HBox([label, button]), popup], **kwargs)
        self.options = list(options)
        self.button = button
        self.choice_buttons = choices
        self.popup = popup
        button.on_click(self.toggle_popup)
        self.value = self.options[0][1]

    def _make_choice_callback(self, value):
        def callback(btn):
            self.choose(value)
        return callback

    def choose(self, value):
        self.cancel_popup()
        self.value = value

    def label_for(self, value):
        for text, v in self.options:
            if v == value:
                return text
        return str(value)

    @observe('value')
    def _on_value(self, change):
        self.button.description = self.label_for(change['new'])

    @observe('disabled')
    def _on_disabled(self, change):
        self.button.disabled = change['new']
        if change['new']:
            self.cancel_popup()


class MeasureEditor(widgets.HBox):
    """
    Numeric field plus unit drop-down editing a :class:`Measure`.

    Switching units converts the current value between physical units
    (rounded per ``constraints``); relative units keep the number.
    """

    value = Instance(Measure, allow_none=True)
    disabled = Bool(False)

    def __init__(self, description, constraints, value=Measure(0.0), **kwargs):
        number = float_field(description)
        units = widgets.Dropdown(
            options=[(str(u), u) for u in constraints.units],
            layout=widgets.Layout(width=defaults.UNIT_DROPDOWN_WIDTH)
        )
        super().__init__([number, units], **kwargs)
        self.constraints = constraints
        self.number = number
        self.units = units
        self._syncing = False
        number.observe(self._on_number, 'value')
        units.observe(self._on_units, 'value')
        self.value = value

    @observe('value')
    def _on_value(self, change):
        m = change['new']
        if m is None:
            return
        self._syncing = True
        try:
            self.units.value = m.units
            self.number.value = m.value
        finally:
            self._syncing = False

    @observe('disabled')
    def _on_disabled(self, change):
        self.number.disabled = change['new']
        self.units.disabled = change['new']

    def _on_number(self, change):
        if not self._syncing:
            self.value = Measure(change['new'], self.units.value)

    def _on_units(self, change):
        if self._syncing or self.value is None:
            return
        converted = self.value.convert(change['new'], self.constraints)
        if converted.units != change['new']:
            converted = Measure(self.value.value, change['new'])
        self.value = converted


class StrokePatternCombo(widgets.Combobox):
    """
    Stroke pattern entry: a common pattern name or dash-gap integers, with
    a short history of recently committed custom patterns.
    """

    def __init__(self, description='Pattern:', **kwargs):
        super().__init__(
            options=[p.synonym for p in COMMON_PATTERNS],
            ensure_option=False,
            continuous_update=False,
            placeholder='e.g. 30 10',
            description=description,
            style=DESCRIPTION_STYLE,
            layout=widgets.Layout(width=_with_description(defaults.SHORT_FIELD_WIDTH)),
            **kwargs
        )
        self.history = []

    def remember(self, pattern):
        """Add a committed custom pattern to the front of the history."""
        if pattern.synonym:
            return
        text = str(pattern)
        if text in self.history:
            self.history.remove(text)
        self.history.insert(0, text)
        del self.history[defaults.STROKE_PATTERN_HISTORY:]
        self.options = [p.synonym for p in COMMON_PATTERNS] + self.history


class FontFamilyCombo(widgets.Combobox):
    """Font family entry offering the families known to matplotlib."""

    def __init__(self, description='Font:', **kwargs):
        super().__init__(
            options=font_family_options(),
            ensure_option=False,
            continuous_update=False,
            description=description,
            style=DESCRIPTION_STYLE,
            layout=widgets.Layout(width=_with_description(defaults.FIELD_WIDTH)),
            **kwargs
        )


class BkgFillPicker(PopupMixin, widgets.VBox):
    """
    Background fill editor: a summary button opening a pop-up to choose a
    solid colour or an axial/radial gradient. The fill is committed with OK.
    """

    value = Instance(BkgFill)
    disabled = Bool(False)

    def __init__(self, description='Background:', **kwargs):
        label = widgets.Label(description, layout=widgets.Layout(width=defaults.DESCRIPTION_WIDTH))
        button = widgets.Button(layout=widgets.Layout(width=defaults.FIELD_WIDTH))
        fill_type = widgets.ToggleButtons(
            options=[(str(t), t) for t in FillType],
            style={'button_width': '70px'}
        )
        color1 = ColorPickerControl('Color 1:', allow_none=True)
        color2 = ColorPickerControl('Color 2:')
        orientation = int_field('Angle:')
        focus_x = int_field('Focus X %:')
        focus_y = int_field('Focus Y %:')
        ok = widgets.Button(description='OK', button_style='primary', layout=widgets.Layout(width='70px'))
        cancel = widgets.Button(description='Cancel', layout=widgets.Layout(width='70px'))
        popup = self._make_popup([
            fill_type, color1, color2, orientation, widgets.HBox([focus_x, focus_y]),
            widgets.HBox([ok, cancel])
        ])
        super().__init__([widgets.HBox([label, button]), popup], **kwargs)
        self.button = button
        self.popup = popup
        self.fill_type = fill_type
        self.color1 = color1
        self.color2 = color2
        self.orientation = orientation
        self.focus_x = focus_x
        self.focus_y = focus_y
        self.ok_button = ok
        button.on_click(self.toggle_popup)
        ok.on_click(self._on_ok)
        cancel.on_click(lambda btn: self.cancel_popup())
        fill_type.observe(lambda change: self._update_fields(), 'value')
        self.value = BkgFill()

    def show_popup(self):
        if self.disabled:
            return
        fill = self.value
        self.fill_type.value = fill.fill_type
        self.color1.value = fill.color1
        self.color2.value = fill.color2 or '#ffffff'
        self.orientation.value = fill.orientation
        self.focus_x.value = fill.focus_x
        self.focus_y.value = fill.focus_y
        self._update_fields()
        super().show_popup()

    def cancel_popup(self):
        self.color1.cancel_popup()
        self.color2.cancel_popup()
        super().cancel_popup()

    def _update_fields(self):
        kind = self.fill_type.value
        self.color2.disabled = kind == FillType.SOLID
        self.orientation.disabled = kind != FillType.AXIAL
        self.focus_x.disabled = kind != FillType.RADIAL
        self.focus_y.disabled = kind != FillType.RADIAL

    def _on_ok(self, btn=None):
        fill = BkgFill(
            self.fill_type.value, self.color1.value, self.color2.value,
            self.orientation.value, self.focus_x.value, self.focus_y.value
        )
        self.cancel_popup()
        self.value = fill

    @observe('value')
    def _on_value(self, change):
        fill = change['new']
        if fill.fill_type == FillType.SOLID:
            self.button.description = fill.color1 or 'none'
        else:
            self.button.description = f'{fill.fill_type}: {fill.color1} → {fill.color2}'

    @observe('disabled')
    def _on_disabled(self, change):
        self.button.disabled = change['new']
        if change['new']:
            self.cancel_popup()
