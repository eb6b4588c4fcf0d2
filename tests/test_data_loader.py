"""Tests for figcomposer.io: data set files and image loading."""

import numpy as np
import pytest
from matplotlib import image as mpimg

from figcomposer.fig import DataSet, DataSetFormat
from figcomposer.io import DataLoader, export_data_set, load_image


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def whitespace_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2 3\n4\t5 6\n7 8  9\n")
    return path


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("0.5,1.5\n2.5,3.5\n")
    return path


# ---------------------------------------------------------------------------
# DataLoader
# ---------------------------------------------------------------------------

class TestLoad:

    def test_whitespace_delimited(self, whitespace_file):
        loader = DataLoader(whitespace_file)
        assert loader.data.shape == (3, 3)
        np.testing.assert_array_equal(loader.data[1], [4, 5, 6])

    def test_comma_delimited(self, csv_file):
        loader = DataLoader()
        loader.load(csv_file)
        np.testing.assert_array_equal(loader.data, [[0.5, 1.5], [2.5, 3.5]])

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValueError):
            DataLoader().load(tmp_path / "missing.txt")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("")
        with pytest.raises(ValueError):
            DataLoader().load(path)

    def test_non_numeric_becomes_nan(self, tmp_path):
        path = tmp_path / "mixed.txt"
        path.write_text("1 a\n2 3\n")
        loader = DataLoader(path)
        assert np.isnan(loader.data[0, 1])
        assert loader.data[1, 1] == 3


class TestInMemory:

    def test_from_numpy_names_columns(self):
        loader = DataLoader.from_numpy(np.arange(6).reshape(2, 3))
        assert loader.columns == ["col_0", "col_1", "col_2"]
        assert loader.data.shape == (2, 3)

    def test_one_dimensional_is_one_column(self):
        assert DataLoader.from_numpy([1, 2, 3]).data.shape == (3, 1)

    def test_from_data_set_type_check(self):
        with pytest.raises(TypeError):
            DataLoader.from_data_set([[1, 2]])

    def test_save_without_data(self, tmp_path):
        with pytest.raises(ValueError):
            DataLoader().save(tmp_path / "out.txt")


class TestDataSetConversion:

    def test_to_data_set(self, whitespace_file):
        ds = DataLoader(whitespace_file).to_data_set("imported", DataSetFormat.MSET)
        assert ds.id == "imported"
        assert ds.num_data_groups() == 2

    def test_to_data_set_wrong_breadth(self, whitespace_file):
        with pytest.raises(ValueError):
            DataLoader(whitespace_file).to_data_set("d", DataSetFormat.XYZWSET)

    def test_to_data_set_without_numbers(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("a b\nc d\n")
        with pytest.raises(ValueError):
            DataLoader(path).to_data_set("d", DataSetFormat.PTSET)

    def test_export_then_load(self, tmp_path):
        ds = DataSet("d", DataSetFormat.PTSET, [[1, 2], [3, 4.5]])
        path = tmp_path / "out.txt"
        export_data_set(ds, path)
        assert path.read_text().splitlines()[0] == "1.0\t2.0"
        reloaded = DataLoader(path).to_data_set("d", DataSetFormat.PTSET)
        np.testing.assert_array_equal(reloaded.data, ds.data)


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------

class TestLoadImage:

    def test_png(self, tmp_path):
        path = tmp_path / "img.png"
        mpimg.imsave(path, np.random.default_rng(0).random((4, 6, 3)))
        img = load_image(path)
        assert img.shape[:2] == (4, 6)

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "img.png"
        path.write_text("not an image")
        with pytest.raises(ValueError):
            load_image(path)
