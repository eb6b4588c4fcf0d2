"""Tests for the node property editors in figcomposer.editors."""

import numpy as np
import pytest
from matplotlib import image as mpimg

from figcomposer.core.controls import is_visible
from figcomposer.editors import (
    AreaChartEditor,
    BarPlotEditor,
    BoxPlotEditor,
    CalibrationBarEditor,
    FigureEditor,
    FunctionEditor,
    ImageEditor,
    LabelEditor,
    PieChartEditor,
    Scatter3DEditor,
    SurfaceEditor,
    TextBoxEditor,
    TraceEditor,
    create_editors,
)
from figcomposer.fig import (
    AreaChartNode,
    AreaLabelMode,
    BarMode,
    BoxPlotNode,
    CalibrationBarNode,
    DataSet,
    DataSetFormat,
    FunctionNode,
    ImageNode,
    LabelNode,
    Measure,
    PieChartNode,
    Scatter3DMode,
    Scatter3DNode,
    Side,
    SurfaceNode,
    TextAlign,
    TextBoxNode,
    TraceMode,
    Unit,
)


# ---------------------------------------------------------------------------
# Common editor behaviour
# ---------------------------------------------------------------------------

class TestNodeEditor:

    def test_one_editor_per_type(self, alert):
        editors = create_editors(alert)
        types = [e.node_type for e in editors]
        assert len(types) == len(set(types)) == 13

    def test_representation(self, alert):
        editor = BarPlotEditor(alert)
        assert editor.representative_title == 'Bar Plot Properties'
        assert editor.representative_icon == 'bar-chart'

    def test_hidden_until_loaded(self, alert, bars):
        editor = BarPlotEditor(alert)
        assert not is_visible(editor.widget)
        assert editor.load(bars)
        assert is_visible(editor.widget)
        assert not editor.load(None)
        assert not is_visible(editor.widget)
        assert editor.node is None

    def test_wrong_node_type(self, alert, trace):
        editor = BarPlotEditor(alert)
        assert not editor.is_editor_for_node(trace)
        assert not editor.load(trace)
        assert not is_visible(editor.widget)

    def test_cancel_editing_closes_nested_popups(self, alert, bars):
        editor = BarPlotEditor(alert)
        editor.load(bars)
        editor.mode.button.click()
        editor.draw_style.stroke_color.swatch.click()
        assert editor.mode.popup_visible
        editor.cancel_editing()
        assert not editor.mode.popup_visible
        assert not editor.draw_style.stroke_color.popup_visible
        assert bars.get_mode() == BarMode.VGROUP

    def test_tab_change(self, alert, bars):
        editor = BarPlotEditor(alert)
        editor.load(bars)
        selected = []
        editor.on_tab_change(selected.append)
        editor.mode.show_popup()
        editor.selected_tab = 1
        assert editor.selected_tab == 1
        assert selected == [1]
        assert not editor.mode.popup_visible

    def test_lowered_closes_popups(self, alert, bars):
        editor = BarPlotEditor(alert)
        editor.load(bars)
        editor.mode.show_popup()
        editor.on_lowered()
        assert not editor.mode.popup_visible


class TestSpecialCharacters:

    def test_inserted_into_last_edited_field(self, alert, bars):
        editor = BarPlotEditor(alert)
        editor.load(bars)
        editor.title_field.value = 'Size'
        assert editor.on_insert_special_character('µ')
        assert bars.get_title() == 'Sizeµ'

    def test_default_target_is_first_text_field(self, alert, figure):
        label = figure.add_child(LabelNode('T'))
        editor = LabelEditor(alert)
        editor.load(label)
        assert editor.on_insert_special_character('°')
        assert label.get_title() == 'T°'

    def test_focus_text(self, alert, trace):
        editor = TraceEditor(alert)
        editor.load(trace)
        editor.focus_text(editor.symbol_card.character)
        assert editor.on_insert_special_character('α')
        assert trace.get_symbol_node().get_character() == 'α'

    def test_no_node(self, alert):
        assert not BarPlotEditor(alert).on_insert_special_character('µ')


# ---------------------------------------------------------------------------
# Bar plot
# ---------------------------------------------------------------------------

class TestBarPlotEditor:

    def test_loads_current_values(self, alert, bars):
        editor = BarPlotEditor(alert)
        editor.load(bars)
        assert editor.baseline.value == 0.0
        assert editor.bar_width.value == 80
        assert editor.title_field.value == 'Counts'
        assert editor.mode.value == BarMode.VGROUP

    def test_out_of_range_bar_width_reverts(self, alert, bars):
        editor = BarPlotEditor(alert)
        editor.load(bars)
        editor.bar_width.value = 150
        assert editor.bar_width.value == 80
        assert bars.get_bar_width() == 80
        assert bars.get_baseline() == 0.0
        assert editor.baseline.value == 0.0
        assert alert.count == 1

    def test_accepted_edits(self, alert, bars):
        editor = BarPlotEditor(alert)
        editor.load(bars)
        editor.bar_width.value = 50
        editor.baseline.value = -1.5
        editor.mode.choose(BarMode.HSTACK)
        editor.auto_label.value = True
        assert bars.get_bar_width() == 50
        assert bars.get_baseline() == -1.5
        assert bars.get_mode() == BarMode.HSTACK
        assert bars.get_auto_label()
        assert alert.count == 0

    def test_data_groups(self, alert, bars):
        editor = BarPlotEditor(alert)
        editor.load(bars)
        rows = editor.data_groups.rows
        assert len(rows) == 2
        assert rows[1]['label'].value == 'data 2'
        assert not is_visible(rows[0]['displaced'])
        rows[0]['label'].value = 'control'
        rows[1]['color'].choose('#ff0000')
        assert bars.get_data_group_label(0) == 'control'
        assert bars.get_data_group_color(1) == '#ff0000'

    def test_data_set_card(self, alert, bars):
        editor = BarPlotEditor(alert)
        editor.load(bars)
        assert editor.data_set.data_set_id.value == 'counts'
        assert 'mset 3x3' in editor.data_set.info.value
        editor.data_set.data_set_id.value = 'bad id'
        assert editor.data_set.data_set_id.value == 'counts'
        assert alert.count == 1

    def test_load_data_from_file(self, alert, bars, tmp_path):
        path = tmp_path / 'wide.txt'
        path.write_text('1 2 3 4\n5 6 7 8\n')
        editor = BarPlotEditor(alert)
        editor.load(bars)
        assert editor.data_set.load_from_file(str(path))
        assert bars.get_data_set().id == 'counts'
        assert bars.get_num_data_groups() == 3
        editor.reload()
        assert len(editor.data_groups.rows) == 3
        assert 'mset 2x4' in editor.data_set.info.value

    def test_load_data_failure(self, alert, bars, tmp_path):
        editor = BarPlotEditor(alert)
        editor.load(bars)
        assert not editor.data_set.load_from_file(str(tmp_path / 'missing.txt'))
        assert alert.count == 1
        assert bars.get_data_set().length == 3

    def test_export(self, alert, bars, tmp_path):
        path = tmp_path / 'out.txt'
        editor = BarPlotEditor(alert)
        editor.load(bars)
        assert editor.data_set.export_to_file(str(path))
        np.testing.assert_array_equal(np.loadtxt(path), bars.get_data_set().data)


# ---------------------------------------------------------------------------
# Trace
# ---------------------------------------------------------------------------

class TestTraceEditor:

    def test_mode_enablement(self, alert, trace):
        editor = TraceEditor(alert)
        editor.load(trace)
        assert editor.window_length.disabled
        assert editor.show_average.disabled
        assert editor.bar_width.disabled

        editor.mode.choose(TraceMode.TRENDLINE)
        assert not editor.window_length.disabled
        editor.mode.choose(TraceMode.HISTOGRAM)
        assert editor.window_length.disabled
        assert not editor.bar_width.disabled
        assert not editor.baseline.disabled

    def test_disabled_fields_keep_values(self, alert, trace):
        assert trace.set_sliding_window_length(5)
        assert trace.set_baseline(2.0)
        editor = TraceEditor(alert)
        editor.load(trace)
        assert editor.window_length.disabled
        assert editor.window_length.value == 5
        assert editor.baseline.value == 2.0
        editor.mode.choose(TraceMode.TRENDLINE)
        editor.mode.choose(TraceMode.POLYLINE)
        assert editor.window_length.disabled
        assert editor.window_length.value == 5
        assert trace.get_sliding_window_length() == 5
        assert trace.get_baseline() == 2.0

    def test_multitrace_has_no_error_bars(self, alert, trace):
        editor = TraceEditor(alert)
        editor.load(trace)
        assert editor.error_bar_card.node is trace.get_error_bar_node()
        editor.mode.choose(TraceMode.MULTITRACE)
        assert not editor.show_average.disabled
        assert editor.error_bar_card.node is None
        assert not is_visible(editor.error_bar_card.widget)
        editor.mode.choose(TraceMode.POLYLINE)
        assert editor.error_bar_card.node is trace.get_error_bar_node()

    def test_skip(self, alert, trace):
        editor = TraceEditor(alert)
        editor.load(trace)
        editor.skip.value = 0
        assert editor.skip.value == 1
        assert alert.count == 1


# ---------------------------------------------------------------------------
# Other plottables
# ---------------------------------------------------------------------------

class TestBoxPlotEditor:

    def test_cards_edit_components(self, alert, figure):
        box = figure.add_child(BoxPlotNode('B'))
        editor = BoxPlotEditor(alert)
        editor.load(box)
        assert editor.whisker_card.node is box.get_whisker_node()
        assert editor.symbol_card.node is box.get_symbol_node()
        assert editor.violin_card.node is box.get_violin_style_node()
        editor.whisker_card.hide.value = True
        assert box.get_whisker_node().get_hide()

    def test_interval(self, alert):
        box = BoxPlotNode()
        editor = BoxPlotEditor(alert)
        editor.load(box)
        editor.interval.value = 0
        assert editor.interval.value == 1.0
        editor.box_width.value = Measure(40, Unit.PCT)
        assert box.get_box_width() == Measure(40, Unit.PCT)
        assert alert.count == 1


class TestFunctionEditor:

    def test_validity_indicator(self, alert):
        fn = FunctionNode('x^2')
        editor = FunctionEditor(alert)
        editor.load(fn)
        assert '✓' in editor.validity.value
        editor.function.value = 'sin('
        assert fn.get_function_string() == 'sin('
        assert '✗' in editor.validity.value
        assert alert.count == 0

    def test_domain(self, alert):
        fn = FunctionNode('x')
        editor = FunctionEditor(alert)
        editor.load(fn)
        editor.dx.value = -1
        assert editor.dx.value == pytest.approx(0.1)
        editor.x0.value = 20
        assert editor.x0.value == 0.0
        assert alert.count == 2

    def test_negative_integer_power(self, alert):
        fn = FunctionNode('x')
        editor = FunctionEditor(alert)
        editor.load(fn)
        editor.function.value = '2^-1*x'
        assert fn.get_function_string() == '2^-1*x'
        assert '✓' in editor.validity.value
        editor.reload()
        assert editor.function.value == '2^-1*x'
        assert alert.count == 0

    def test_denormal_dx(self, alert):
        fn = FunctionNode('x')
        editor = FunctionEditor(alert)
        editor.load(fn)
        editor.dx.value = 1e-320
        assert fn.get_dx() == 1e-320
        assert '✓' in editor.validity.value
        assert f'{FunctionNode.MAX_SAMPLES} samples' in editor.validity.value
        assert alert.count == 0


class TestPieChartEditor:

    def test_slices(self, alert):
        pie = PieChartNode('P', DataSet('s', DataSetFormat.SERIES, [3, 1, 2]))
        editor = PieChartEditor(alert)
        editor.load(pie)
        rows = editor.data_groups.rows
        assert len(rows) == 3
        assert is_visible(rows[0]['displaced'])
        rows[2]['displaced'].value = True
        assert pie.is_slice_displaced(2)

    def test_radii(self, alert):
        pie = PieChartNode()
        editor = PieChartEditor(alert)
        editor.load(pie)
        editor.inner_radius.value = 2.0
        assert editor.inner_radius.value == 0.0
        editor.radial_offset.value = 50
        assert pie.get_radial_offset() == 50
        assert alert.count == 1


class TestAreaAndSurfaceEditors:

    def test_area_label_mode(self, alert):
        area = AreaChartNode()
        editor = AreaChartEditor(alert)
        editor.load(area)
        editor.label_mode.choose(AreaLabelMode.OUTSIDE)
        assert area.get_label_mode() == AreaLabelMode.OUTSIDE

    def test_surface_mesh_limit(self, alert):
        surface = SurfaceNode()
        editor = SurfaceEditor(alert)
        editor.load(surface)
        editor.mesh_limit.value = 10
        assert editor.mesh_limit.value == 100
        editor.color_mapped.value = False
        assert not surface.get_color_mapped()
        assert alert.count == 1


class TestScatter3DEditor:

    def test_bar_mode_enablement(self, alert):
        scatter = Scatter3DNode()
        editor = Scatter3DEditor(alert)
        editor.load(scatter)
        assert not editor.stemmed.disabled
        assert editor.bar_size.disabled
        editor.mode.choose(Scatter3DMode.BARPLOT)
        assert editor.stemmed.disabled
        assert not editor.bar_size.disabled

    def test_disabled_bar_size_keeps_value(self, alert):
        scatter = Scatter3DNode()
        assert scatter.set_bar_size(12)
        editor = Scatter3DEditor(alert)
        editor.load(scatter)
        assert editor.bar_size.disabled
        assert editor.bar_size.value == 12
        editor.mode.choose(Scatter3DMode.BARPLOT)
        editor.mode.choose(Scatter3DMode.SCATTER)
        assert editor.bar_size.disabled
        assert editor.bar_size.value == 12
        assert scatter.get_bar_size() == 12

    def test_bubble_symbol_sizes(self, alert):
        scatter = Scatter3DNode()
        editor = Scatter3DEditor(alert)
        editor.load(scatter)
        card = editor.symbol_card
        assert card.size.number.description == 'Max size:'
        assert is_visible(card.min_size)
        assert card.min_size.disabled
        assert card.min_size.value == scatter.get_min_symbol_size()
        editor.mode.choose(Scatter3DMode.SIZEBUBBLE)
        assert is_visible(card.min_size)
        assert not card.min_size.disabled
        card.min_size.value = Measure(0.02, Unit.IN)
        assert scatter.get_min_symbol_size() == Measure(0.02, Unit.IN)
        card.min_size.value = Measure(0.1, Unit.IN)
        assert card.min_size.value == Measure(0.02, Unit.IN)
        card.size.value = Measure(0.01, Unit.IN)
        assert scatter.get_max_symbol_size() == Measure(0.05, Unit.IN)
        assert alert.count == 2

    def test_projection_dots(self, alert):
        scatter = Scatter3DNode()
        editor = Scatter3DEditor(alert)
        editor.load(scatter)
        editor.dot_sizes[Side.XY].value = 3
        editor.dot_colors[Side.XZ].choose('#00ff00')
        assert scatter.get_projection_dot_size(Side.XY) == 3
        assert scatter.get_projection_dot_color(Side.XZ) == '#00ff00'
        editor.dot_sizes[Side.YZ].value = 11
        assert editor.dot_sizes[Side.YZ].value == 0


# ---------------------------------------------------------------------------
# Figure and annotations
# ---------------------------------------------------------------------------

class TestFigureEditor:

    def test_rescale(self, alert, figure):
        editor = FigureEditor(alert)
        editor.load(figure)
        assert editor.rescale_button.disabled
        editor.scale.value = 150
        assert not editor.rescale_button.disabled
        editor.rescale_button.click()
        assert figure.get_font_size() == 18
        assert figure.get_width() == Measure(9.0, Unit.IN)
        assert editor.text_style.font_size.value == 18
        assert editor.width.value == Measure(9.0, Unit.IN)
        assert editor.scale.value == 100
        assert editor.rescale_button.disabled

    def test_rescale_fonts_only(self, alert, figure):
        editor = FigureEditor(alert)
        editor.load(figure)
        editor.scale.value = 50
        editor.rescale_fonts_button.click()
        assert figure.get_font_size() == 6
        assert figure.get_width() == Measure(6.0, Unit.IN)

    def test_rescale_out_of_range(self, alert, figure):
        editor = FigureEditor(alert)
        editor.load(figure)
        editor.scale.value = 300
        assert not editor.rescale()
        assert alert.count == 1
        assert editor.scale.value == 100
        assert figure.get_font_size() == 12

    def test_title_alignment_and_note(self, alert, figure):
        editor = FigureEditor(alert)
        editor.load(figure)
        editor.title_v_align.choose(TextAlign.BOTTOM)
        editor.note.value = 'line one\nline two'
        assert figure.get_title_vertical_alignment() == TextAlign.BOTTOM
        assert figure.get_note() == 'line one\nline two'


class TestTextBoxEditor:

    def test_multiline_content(self, alert, figure):
        box = figure.add_child(TextBoxNode('hello'))
        editor = TextBoxEditor(alert)
        editor.load(box)
        editor.content.value = 'two\nlines'
        assert box.get_title() == 'two\nlines'

    def test_line_height_and_id(self, alert, figure):
        first = figure.add_child(TextBoxNode('a'))
        first.set_id('box1')
        box = figure.add_child(TextBoxNode('b'))
        editor = TextBoxEditor(alert)
        editor.load(box)
        editor.line_height.value = 5.0
        assert editor.line_height.value == pytest.approx(1.2)
        editor.node_id.value = 'box1'
        assert editor.node_id.value == ''
        editor.node_id.value = 'box2'
        assert box.get_id() == 'box2'
        assert alert.count == 2

    def test_id_shows_stripped_value(self, alert, figure):
        box = figure.add_child(TextBoxNode('a'))
        editor = TextBoxEditor(alert)
        editor.load(box)
        editor.node_id.value = 'abc '
        assert box.get_id() == 'abc'
        assert editor.node_id.value == 'abc'
        assert alert.count == 0

    def test_stroke_width_shows_rounded_value(self, alert, figure):
        box = figure.add_child(TextBoxNode('a'))
        editor = TextBoxEditor(alert)
        editor.load(box)
        editor.draw_style.stroke_width.value = Measure(0.1234, Unit.IN)
        assert box.get_stroke_width() == Measure(0.123, Unit.IN)
        assert editor.draw_style.stroke_width.value == box.get_stroke_width()
        assert editor.draw_style.stroke_width.number.value == pytest.approx(0.123)

    def test_alignment(self, alert):
        box = TextBoxNode()
        editor = TextBoxEditor(alert)
        editor.load(box)
        editor.h_align.choose(TextAlign.RIGHT)
        assert box.get_horizontal_alignment() == TextAlign.RIGHT


class TestCalibrationBarEditor:

    def test_fields(self, alert):
        calib = CalibrationBarNode('10 ms')
        editor = CalibrationBarEditor(alert)
        editor.load(calib)
        assert editor.primary.value is True
        editor.primary.value = False
        assert not calib.get_primary()
        editor.length.value = 0
        assert editor.length.value == 10.0
        assert alert.count == 1


class TestImageEditor:

    def test_crop_disabled_without_image(self, alert):
        editor = ImageEditor(alert)
        editor.load(ImageNode())
        assert all(field.disabled for field in editor.crop.values())
        assert editor.reset_crop_button.disabled

    def test_crop(self, alert):
        image = ImageNode()
        image.set_image(np.zeros((10, 20, 3)))
        editor = ImageEditor(alert)
        editor.load(image)
        assert [editor.crop[k].value for k in 'xywh'] == [0, 0, 20, 10]
        editor.crop['w'].value = 5
        assert image.get_crop() == (0, 0, 5, 10)
        assert not editor.reset_crop_button.disabled
        editor.crop['w'].value = 50
        assert editor.crop['w'].value == 5
        assert alert.count == 1
        assert editor.reset_crop()
        assert editor.crop['w'].value == 20

    def test_load_image_file(self, alert, tmp_path):
        path = tmp_path / 'pic.png'
        mpimg.imsave(path, np.zeros((8, 12, 3)))
        image = ImageNode()
        editor = ImageEditor(alert)
        editor.load(image)
        assert editor.load_image_file(str(path))
        assert image.get_image_size() == (12, 8)
        assert '12 x 8' in editor.image_info.value
        assert not editor.crop['x'].disabled

    def test_load_image_failure(self, alert, tmp_path):
        editor = ImageEditor(alert)
        editor.load(ImageNode())
        assert not editor.load_image_file(str(tmp_path / 'missing.png'))
        assert alert.count == 1
