"""Tests for figcomposer.core.host and the alert helpers."""

import pytest

from figcomposer.core.alerts import alert_tone, beep
from figcomposer.core.controls import is_visible
from figcomposer.core.host import TitlePopupEditor, TitlePopupFactory
from figcomposer.editors import BarPlotEditor, TraceEditor, create_host
from figcomposer.fig import BarPlotNode, DataSet, DataSetFormat, Measure, SymbolNode, TextBoxNode, Unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def host(alert):
    return create_host(alert)


# ---------------------------------------------------------------------------
# NodeEditorHost
# ---------------------------------------------------------------------------

class TestSelect:

    def test_select_shows_matching_editor(self, host, bars):
        assert host.select(bars)
        assert isinstance(host.current, BarPlotEditor)
        assert is_visible(host.current.widget)
        assert 'Bar Plot Properties' in host.header.value
        assert is_visible(host.title_button)

    def test_switching_editors(self, host, bars, trace):
        host.select(bars)
        bar_editor = host.current
        bar_editor.mode.show_popup()
        assert host.select(trace)
        assert isinstance(host.current, TraceEditor)
        assert not is_visible(bar_editor.widget)
        assert bar_editor.node is None
        assert not bar_editor.mode.popup_visible

    def test_same_editor_new_node(self, host, figure, bars):
        other = figure.add_child(BarPlotNode('Other'))
        host.select(bars)
        editor = host.current
        host.select(other)
        assert host.current is editor
        assert editor.title_field.value == 'Other'

    def test_select_none(self, host, bars):
        host.select(bars)
        editor = host.current
        assert not host.select(None)
        assert host.current is None
        assert not is_visible(editor.widget)
        assert not is_visible(host.title_button)

    def test_node_without_editor(self, host, trace):
        assert host.editor_for(trace.get_symbol_node()) is None
        assert not host.select(SymbolNode())
        assert host.current is None


class TestModelChanges:

    def test_external_change_reloads_editor(self, host, bars):
        host.select(bars)
        bars.set_baseline(5.0)
        assert host.current.baseline.value == 5.0

    def test_component_change_reloads_editor(self, host, trace):
        host.select(trace)
        trace.get_symbol_node().set_character('x')
        assert host.current.symbol_card.character.value == 'x'

    def test_listener_removed_on_deselect(self, host, bars, trace):
        host.select(bars)
        bar_editor = host.current
        host.select(trace)
        bars.set_baseline(7.0)
        assert bar_editor.baseline.value == 0.0

    def test_canonical_value_shown_without_model_change(self, host, figure):
        box = figure.add_child(TextBoxNode('note'))
        assert box.set_stroke_width(Measure(0.123, Unit.IN))
        host.select(box)
        width = host.current.draw_style.stroke_width
        width.value = Measure(0.1234, Unit.IN)
        assert box.get_stroke_width() == Measure(0.123, Unit.IN)
        assert width.value == Measure(0.123, Unit.IN)
        host.current.node_id.value = 'abc '
        assert box.get_id() == 'abc'
        assert host.current.node_id.value == 'abc'

    def test_data_groups_follow_new_data(self, host, bars):
        host.select(bars)
        bars.set_data_set(DataSet('wide', DataSetFormat.MSET, [[1, 2, 3, 4, 5]]))
        assert len(host.current.data_groups.rows) == 4


class TestTitleAndCharacters:

    def test_title_popup(self, host, bars):
        host.select(bars)
        assert host.edit_title()
        popup = host.title_popup
        assert popup.is_raised()
        assert popup.text.value == 'Counts'
        popup.text.value = 'Totals'
        popup.ok_button.click()
        assert bars.get_title() == 'Totals'
        assert not popup.is_raised()
        assert host.current.title_field.value == 'Totals'

    def test_rejected_title_keeps_popup(self, host, bars, alert):
        host.select(bars)
        host.edit_title()
        host.title_popup.text.value = 'two\nlines'
        assert not host.title_popup.commit()
        assert host.title_popup.is_raised()
        assert alert.count == 1

    def test_cancel_title(self, host, bars):
        host.select(bars)
        host.edit_title()
        host.title_popup.text.value = 'ignored'
        host.title_popup.cancel_button.click()
        assert bars.get_title() == 'Counts'

    def test_select_closes_title_popup(self, host, bars, trace):
        host.select(bars)
        host.edit_title()
        host.select(trace)
        assert not host.title_popup.is_raised()

    def test_special_character_palette(self, host, bars):
        host.select(bars)
        assert host.insert_special_character('Ω')
        assert bars.get_title() == 'CountsΩ'

    def test_special_character_without_selection(self, host):
        assert not host.insert_special_character('Ω')


class TestTitlePopupFactory:

    def test_single_instance(self, alert):
        factory = TitlePopupFactory(alert)
        assert factory.get() is factory.get()
        assert isinstance(factory.get(), TitlePopupEditor)

    def test_shared_between_hosts(self, alert):
        factory = TitlePopupFactory(alert)
        assert create_host(alert, factory).title_popup is create_host(alert, factory).title_popup

    def test_node_without_title(self, alert, trace):
        popup = TitlePopupEditor(alert)
        assert not popup.raise_for(trace.get_error_bar_node())
        assert not popup.raise_for(None)


# ---------------------------------------------------------------------------
# Alerts
# ---------------------------------------------------------------------------

class TestAlerts:

    def test_tone(self):
        tone = alert_tone()
        assert tone.ndim == 1
        assert abs(tone).max() <= 1.0

    def test_beep_outside_kernel_rings_bell(self, capsys):
        beep()
        assert capsys.readouterr().out == '\a'
