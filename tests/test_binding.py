"""Tests for figcomposer.core.binding: the control/attribute edit protocol."""

import ipywidgets as widgets
import pytest

from figcomposer.core.binding import AttributeBinding, BindingTable, ReloadGuard
from figcomposer.fig import BarPlotNode, DataSetFormat, StrokePattern


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def table(alert):
    return BindingTable(alert)


# ---------------------------------------------------------------------------
# ReloadGuard
# ---------------------------------------------------------------------------

class TestReloadGuard:

    def test_reentrant(self):
        guard = ReloadGuard()
        assert not guard.active
        with guard:
            with guard:
                assert guard.active
            assert guard.active
        assert not guard.active


# ---------------------------------------------------------------------------
# AttributeBinding
# ---------------------------------------------------------------------------

class TestAttributeBinding:

    def test_callable_getter_needs_setter(self):
        with pytest.raises(TypeError):
            AttributeBinding(widgets.IntText(), lambda n: 1)

    def test_converters(self, bars):
        b = AttributeBinding(widgets.Text(), 'stroke_pattern', to_control=str,
                             from_control=StrokePattern.parse)
        assert b.read(bars) == "solid"
        assert b.write(bars, "dashed")
        assert not b.write(bars, "not a pattern")

    def test_applies(self, bars, trace):
        b = AttributeBinding(widgets.IntText(), 'mode', applies=lambda n: isinstance(n, BarPlotNode))
        assert b.applies_to(bars)
        assert not b.applies_to(trace)
        assert AttributeBinding(widgets.IntText(), 'mode').applies_to(trace)


# ---------------------------------------------------------------------------
# BindingTable
# ---------------------------------------------------------------------------

class TestBindingTable:

    def test_load_pulls_values_without_committing(self, table, bars, alert):
        seen = []
        bars.add_listener(lambda node, attr: seen.append(attr))
        field = widgets.IntText()
        table.bind(field, 'bar_width')
        assert table.load(bars)
        assert field.value == 80
        assert seen == []
        assert alert.count == 0

    def test_accepted_edit(self, table, bars):
        field = widgets.IntText()
        table.bind(field, 'bar_width')
        table.load(bars)
        field.value = 40
        assert bars.get_bar_width() == 40
        assert field.value == 40

    def test_accepted_edit_shows_canonical_value(self, table, bars, alert):
        seen = []
        field = widgets.Text()
        table.bind(field, 'font_family')
        table.load(bars)
        bars.add_listener(lambda node, attr: seen.append(attr))
        field.value = '  Helvetica '
        assert bars.get_font_family() == 'Helvetica'
        assert field.value == 'Helvetica'
        assert len(seen) == 1
        assert alert.count == 0

    def test_rejected_edit_reverts_and_alerts(self, table, bars, alert):
        field = widgets.IntText()
        table.bind(field, 'bar_width')
        table.load(bars)
        field.value = 150
        assert field.value == 80
        assert bars.get_bar_width() == 80
        assert alert.count == 1

    def test_conversion_error_is_rejection(self, table, bars, alert):
        field = widgets.Text()
        table.bind(field, 'stroke_pattern', to_control=str, from_control=StrokePattern.parse)
        table.load(bars)
        field.value = "zigzag"
        assert field.value == "solid"
        assert alert.count == 1

    def test_edits_ignored_without_node(self, table, alert):
        field = widgets.IntText()
        table.bind(field, 'bar_width')
        assert not table.load(None)
        field.value = 999
        assert alert.count == 0

    def test_on_commit_called_for_accepted_edits(self, alert, bars):
        committed = []
        table = BindingTable(alert, on_commit=committed.append)
        field = widgets.FloatText()
        binding = table.bind(field, 'baseline')
        table.load(bars)
        field.value = 2.5
        assert committed == [binding]
        table.commit(binding, float('nan'))
        assert committed == [binding]

    def test_non_applicable_binding_is_skipped(self, table, bars):
        field = widgets.IntText(value=7)
        table.bind(field, 'mesh_limit', applies=lambda n: hasattr(n, 'get_mesh_limit'))
        table.load(bars)
        assert field.value == 7

    def test_switching_nodes(self, table, bars):
        other = BarPlotNode("other")
        other.set_bar_width(30)
        field = widgets.IntText()
        table.bind(field, 'bar_width')
        table.load(bars)
        table.load(other)
        assert field.value == 30
        field.value = 60
        assert other.get_bar_width() == 60
        assert bars.get_bar_width() == 80
        assert other.get_data_set().fmt == DataSetFormat.MSET
