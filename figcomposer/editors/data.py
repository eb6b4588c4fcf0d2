"""
Data panels shared by the plottable editors: the data-set card and the
per-data-group property table.
"""

import logging

import ipywidgets as widgets

from .. import defaults
from ..core.controls import ColorPickerControl, set_visible, text_field
from ..core.editor import PropertyPanel
from ..io import DataLoader, export_data_set

logger = logging.getLogger(__name__)


class DataSetCard(PropertyPanel):
    """
    Shows the data set of a plottable node (ID, format and size), edits its
    ID, and imports or exports its raw data from a delimited text file.
    """

    def __init__(self, alert=None):
        super().__init__(alert)
        self.data_set_id = text_field('Data set:', width=defaults.SHORT_FIELD_WIDTH)
        self.info = widgets.HTML()
        self.path = text_field('File:', placeholder='path/to/data.txt')
        self.load_button = widgets.Button(description='Load', icon='folder-open',
                                          layout=widgets.Layout(width='90px'))
        self.export_button = widgets.Button(description='Export', icon='save',
                                            layout=widgets.Layout(width='90px'))
        self.status = widgets.HTML()
        self.load_button.on_click(lambda btn: self.load_from_file(self.path.value))
        self.export_button.on_click(lambda btn: self.export_to_file(self.path.value))

        self.bind(self.data_set_id, 'data_set_id')

        self.widget.children = [
            widgets.HBox([self.data_set_id, self.info]),
            widgets.HBox([self.path, self.load_button, self.export_button]),
            self.status,
        ]

    def update_enablement(self):
        ds = self.node.get_data_set()
        self.info.value = f"<span style='color:#555;'>{ds.summary()}</span>"

    def _report(self, message, ok):
        color = '#2E5090' if ok else '#B00020'
        self.status.value = f"<span style='color:{color};'>{message}</span>"

    def _format_for(self, breadth):
        node = self.node
        current = node.get_data_set().fmt
        candidates = [current] + [f for f in node.supported_formats if f != current]
        for fmt in candidates:
            if breadth >= fmt.min_breadth and (fmt.max_breadth is None or breadth <= fmt.max_breadth):
                return fmt
        return current

    def load_from_file(self, path):
        """
        Replace the node's data with the contents of a file, keeping the data
        set ID. The current format is kept when the column count allows.

        Returns
        -------
        bool
            False (after an alert) if the file could not be used.
        """
        node = self.node
        if node is None or not path:
            return False
        current = node.get_data_set()
        try:
            loader = DataLoader()
            loader.load(path)
            ds = loader.to_data_set(current.id, self._format_for(loader.data.shape[1]))
        except ValueError as e:
            logger.warning("Failed to load data set from %s: %s", path, e)
            self._report(f"⚠️ {e}", ok=False)
            self.alert()
            return False
        if not node.set_data_set(ds):
            logger.warning("Data set from %s rejected by %r", path, node)
            self._report(f"⚠️ {ds.fmt} data not supported here", ok=False)
            self.alert()
            return False
        self._report(f"✓ Loaded {ds.summary()} from {path}", ok=True)
        self.reload(False)
        return True

    def export_to_file(self, path):
        """Write the node's raw data to a file. Returns False on failure."""
        node = self.node
        if node is None or not path:
            return False
        try:
            export_data_set(node.get_data_set(), path)
        except (OSError, ValueError) as e:
            logger.warning("Failed to export data set to %s: %s", path, e)
            self._report(f"⚠️ {e}", ok=False)
            self.alert()
            return False
        self._report(f"✓ Exported to {path}", ok=True)
        return True


class DataGroupPropEditor(PropertyPanel):
    """
    Table with one row per data group of a plottable node: fill colour and
    legend label, plus a "displaced" flag for pie chart slices.
    """

    def __init__(self, alert=None):
        super().__init__(alert)
        self.rows = []
        self.header = widgets.HTML('<b>Data groups</b>')
        self.table = widgets.VBox()
        self.widget.children = [self.header, self.table]

    def _ensure_rows(self, node):
        n = node.get_num_data_groups() if node is not None else 0
        while len(self.rows) < n:
            self.rows.append(self._make_row(len(self.rows)))
        self.table.children = [row['box'] for row in self.rows]

    def _make_row(self, i):
        color = ColorPickerControl(f'{i + 1}.')
        label = widgets.Text(continuous_update=False, layout=widgets.Layout(width=defaults.FIELD_WIDTH))
        displaced = widgets.Checkbox(description='Displaced', value=False, indent=False)

        def applies(node):
            return i < node.get_num_data_groups()

        self.bind(color, lambda n: n.get_data_group_color(i), lambda n, v: n.set_data_group_color(i, v),
                  applies=applies)
        self.bind(label, lambda n: n.get_data_group_label(i), lambda n, v: n.set_data_group_label(i, v),
                  applies=applies)
        self.bind(displaced, lambda n: n.is_slice_displaced(i), lambda n, v: n.set_slice_displaced(i, v),
                  applies=lambda n: applies(n) and hasattr(n, 'is_slice_displaced'))
        return {'box': widgets.HBox([color, label, displaced]), 'color': color,
                'label': label, 'displaced': displaced}

    def load(self, node):
        if node is not None:
            self._ensure_rows(node)
        return super().load(node)

    def reload(self, initial=False):
        self._ensure_rows(self.node)
        super().reload(initial)

    def update_enablement(self):
        node = self.node
        n = node.get_num_data_groups()
        for i, row in enumerate(self.rows):
            set_visible(row['box'], i < n)
            set_visible(row['displaced'], hasattr(node, 'is_slice_displaced'))
        set_visible(self.header, n > 0)
