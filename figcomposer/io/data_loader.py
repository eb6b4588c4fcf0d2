"""
Data loader for data-set and image files
Converts delimited text to DataSet arrays via pandas DataFrames
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd
from matplotlib import image as mpimg

from ..fig.dataset import DataSet
from ..utils.helpers import to_float_array

logger = logging.getLogger(__name__)


class DataLoader:
    """Load and save tabular data for data sets"""

    def __init__(self, filepath=None):
        """
        Initialize data loader.

        Parameters
        ----------
        filepath : str, optional
            Path to a delimited text file to load
        """
        self.filepath = filepath
        self.data = None
        self.columns = []
        self.df = None

        if filepath:
            self.load(filepath)

    def _set_dataframe(self, df):
        """
        Store a DataFrame on the loader and sync metadata.
        """
        if df is None:
            raise ValueError("DataFrame cannot be None")

        working = df.copy()
        working.columns = [str(col) for col in working.columns]

        self.df = working
        self.columns = list(working.columns)
        self.data = to_float_array(working.to_numpy())
        self.filepath = None
        return self

    def load(self, filepath, delimiter=None, header=None, **kwargs):
        """
        Load data from a delimited text file.

        Parameters
        ----------
        filepath : str
            Path to the file
        delimiter : str, optional
            Column delimiter (auto-detected if None)
        header : int or 'infer', optional
            Row number to use as column names. Data-set files have none.
        **kwargs : dict
            Additional arguments passed to pd.read_csv

        Returns
        -------
        pd.DataFrame
            Loaded data
        """
        path = Path(filepath)

        if delimiter is None:
            try:
                with open(path, 'r') as f:
                    first_line = f.readline()
            except OSError as e:
                raise ValueError(f"Failed to load {filepath}: {e}")
            if ',' in first_line and '\t' not in first_line:
                delimiter = ','
            else:
                # flexible whitespace handles tabs, spaces and a mix
                delimiter = r'\s+'

        try:
            df = pd.read_csv(
                path,
                sep=delimiter,
                header=header,
                engine='python' if delimiter == r'\s+' else 'c',
                **kwargs
            )
        except (OSError, ValueError, pd.errors.ParserError) as e:
            raise ValueError(f"Failed to load {filepath}: {e}")

        if df.empty:
            raise ValueError(f"No data in {filepath}")

        self._set_dataframe(df)
        self.filepath = path
        logger.debug("Loaded %s: %d rows x %d columns", path, *self.data.shape)
        return self.df

    def save(self, filepath, delimiter='\t', header=False):
        """
        Save current data to a delimited text file.

        Parameters
        ----------
        filepath : str
            Output file path
        delimiter : str, optional
            Column delimiter
        header : bool, optional
            Include column names
        """
        if self.df is None:
            raise ValueError("No data to save")

        self.df.to_csv(
            filepath,
            sep=delimiter,
            index=False,
            header=header
        )

    # ===== DataSet conversion =====
    def to_data_set(self, data_set_id, fmt):
        """
        Build a DataSet from the loaded data.

        Raises
        ------
        ValueError
            If nothing is loaded, the ID is invalid, the data holds non-numeric
            entries, or its column count does not fit ``fmt``.
        """
        if self.data is None:
            raise ValueError("No data loaded")
        if np.isnan(self.data).all():
            raise ValueError("Data holds no numeric values")
        return DataSet(data_set_id, fmt, self.data)

    @classmethod
    def from_data_set(cls, data_set):
        """Build a DataLoader holding a data set's raw array."""
        if not isinstance(data_set, DataSet):
            raise TypeError("data_set must be a DataSet")
        return cls.from_numpy(data_set.data)

    # ===== In-memory ingestion helpers =====
    @classmethod
    def from_numpy(cls, arr):
        """
        Build a DataLoader from a NumPy array.

        Parameters
        ----------
        arr : np.ndarray or array-like
            Input array (1D or 2D). 1D arrays are treated as a single column.
        """
        if arr is None:
            raise ValueError("arr cannot be None")

        np_arr = np.asarray(arr)
        if np_arr.ndim == 1:
            np_arr = np_arr.reshape(-1, 1)
        elif np_arr.ndim != 2:
            raise ValueError("NumPy data must be 1D or 2D")

        col_names = [f"col_{i}" for i in range(np_arr.shape[1])]

        loader = cls()
        return loader._set_dataframe(pd.DataFrame(np_arr, columns=col_names))


def export_data_set(data_set, filepath, delimiter='\t'):
    """Write a data set's raw array to a delimited text file, one tuple per line."""
    DataLoader.from_data_set(data_set).save(filepath, delimiter=delimiter)


def load_image(filepath):
    """
    Read an image file into an array via matplotlib.

    Raises
    ------
    ValueError
        If the file cannot be read as an image.
    """
    try:
        img = mpimg.imread(filepath)
    except (OSError, ValueError, SyntaxError) as e:
        raise ValueError(f"Failed to load image {filepath}: {e}")
    logger.debug("Loaded image %s with shape %s", filepath, img.shape)
    return img
