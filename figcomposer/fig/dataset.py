"""
Data sets referenced by plottable graphic nodes
"""

import re
from enum import Enum

import numpy as np

MAX_ID_LENGTH = 40

_ID_PATTERN = re.compile(r"^[A-Za-z0-9$@|.<>_\[\](){}+\-^!=]+$")


def is_valid_id(s):
    """Is ``s`` a legal data set identifier (1-40 chars, no whitespace)?"""
    return isinstance(s, str) and 0 < len(s) <= MAX_ID_LENGTH and bool(_ID_PATTERN.match(s))


class DataSetFormat(Enum):
    """
    Data set formats as (tag, minimum tuple length, maximum tuple length).
    A tuple is one row of the data array.
    """
    PTSET = ("ptset", 2, 6)
    MSET = ("mset", 2, None)
    SERIES = ("series", 1, 3)
    MSERIES = ("mseries", 1, None)
    XYZIMG = ("xyzimg", 1, None)
    XYZSET = ("xyzset", 3, 3)
    XYZWSET = ("xyzwset", 4, 4)

    def __str__(self):
        return self.value[0]

    @property
    def min_breadth(self):
        return self.value[1]

    @property
    def max_breadth(self):
        return self.value[2]

    def accepts(self, data):
        """Does a 2-D array have a legal breadth (number of columns) for this format?"""
        if data.ndim != 2:
            return False
        breadth = data.shape[1]
        if breadth < self.min_breadth:
            return False
        return self.max_breadth is None or breadth <= self.max_breadth


class DataSet:
    """
    A named, formatted block of raw data: a 2-D float array with one tuple per row.

    Parameters
    ----------
    id : str
        Identifier; see :func:`is_valid_id`.
    fmt : DataSetFormat
        Data format.
    data : array-like, optional
        Raw data; 1-D input is treated as a single column.
    """

    def __init__(self, id, fmt, data=None):
        if not is_valid_id(id):
            raise ValueError(f"Invalid data set ID: {id!r}")
        arr = np.zeros((0, fmt.min_breadth)) if data is None else np.asarray(data, dtype=float)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if not fmt.accepts(arr):
            raise ValueError(f"Data of shape {arr.shape} does not fit format {fmt}")
        self.id = id
        self.fmt = fmt
        self.data = arr

    def __repr__(self):
        return f"DataSet({self.id!r}, {self.fmt}, shape={self.data.shape})"

    @property
    def length(self):
        return self.data.shape[0]

    @property
    def breadth(self):
        return self.data.shape[1]

    def num_data_groups(self):
        """
        Number of distinct data groups: one per Y column for the collection
        formats. MSET rows lead with a shared X column; MSERIES X is implicit.
        """
        if self.fmt == DataSetFormat.MSET:
            return max(self.breadth - 1, 0)
        if self.fmt == DataSetFormat.MSERIES:
            return self.breadth
        return 1

    def with_id(self, new_id):
        """Copy of this data set under a different ID."""
        return DataSet(new_id, self.fmt, self.data.copy())

    def summary(self):
        return f"{self.fmt} {self.length}x{self.breadth}"
