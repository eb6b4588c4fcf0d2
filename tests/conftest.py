"""Test configuration for figcomposer."""

import pytest

from figcomposer.fig import (
    BarPlotNode,
    DataSet,
    DataSetFormat,
    FigureNode,
    TraceNode,
)


class AlertRecorder:
    """Counts alerts instead of sounding them."""

    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


@pytest.fixture
def alert():
    return AlertRecorder()


@pytest.fixture
def figure():
    return FigureNode("Figure 1")


@pytest.fixture
def bars(figure):
    data = DataSet("counts", DataSetFormat.MSET, [[1, 3, 4], [2, 5, 2], [3, 4, 6]])
    return figure.add_child(BarPlotNode("Counts", data))


@pytest.fixture
def trace(figure):
    data = DataSet("pts", DataSetFormat.PTSET, [[0, 1], [1, 2], [2, 4]])
    return figure.add_child(TraceNode("Response", data))
