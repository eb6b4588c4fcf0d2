"""
Base classes for property panels.

:class:`PropertyPanel` is a reusable group of bound controls (a text style
editor, a symbol card, ...). :class:`NodeEditor` is the top-level panel for
one node type, presented by :class:`~figcomposer.core.host.NodeEditorHost`.
"""

import ipywidgets as widgets

from .. import defaults
from .alerts import beep
from .binding import BindingTable, ReloadGuard
from .controls import PopupMixin, set_visible


class PropertyPanel:
    """
    A panel of controls bound to the attributes of one graphic node.

    Subclasses build their controls, register bindings through
    ``self.bind(...)``, embedded panels through ``self.add_panel(...)`` and
    pop-up controls through ``self.add_popup(...)``, then assign
    ``self.widget``.

    Parameters
    ----------
    alert : callable, optional
        Called when the model rejects an edit. Defaults to :func:`beep`.
    """

    def __init__(self, alert=None):
        self.alert = alert or beep
        self.bindings = BindingTable(self.alert, on_commit=self._on_commit)
        self.panels = []
        self.popups = []
        self._sources = {}
        self.widget = widgets.VBox()

    @property
    def node(self):
        """The node loaded into this panel, or None."""
        return self.bindings.node

    def bind(self, control, getter, setter=None, **kwargs):
        binding = self.bindings.bind(control, getter, setter, **kwargs)
        if isinstance(control, PopupMixin):
            self.add_popup(control)
        return binding

    def add_panel(self, panel, source=None):
        """
        Embed a panel. ``source(node)`` selects the node it edits (a
        component, say); by default it edits the same node as this panel.
        """
        self.panels.append(panel)
        if source is not None:
            self._sources[id(panel)] = source
        return panel

    def add_popup(self, control):
        if control not in self.popups:
            self.popups.append(control)
        return control

    # ===== Load / reload =====
    def load(self, node):
        """
        Load ``node`` into the panel, or hide the panel when ``node`` is None.

        Returns
        -------
        bool
            True if a node was loaded.
        """
        self.cancel_editing()
        if node is None:
            self.bindings.load(None)
            for panel in self.panels:
                panel.load(None)
            set_visible(self.widget, False)
            return False
        self.bindings.load(node)
        self.load_panels(node)
        self.update_enablement()
        set_visible(self.widget, True)
        return True

    def reload(self, initial=False):
        """Refresh every control from the loaded node."""
        if self.node is None:
            return
        if initial:
            self.cancel_editing()
        self.bindings.load(self.node)
        self.load_panels(self.node)
        self.update_enablement()

    def load_panels(self, node):
        """Load each embedded panel with its source node."""
        for panel in self.panels:
            source = self._sources.get(id(panel))
            panel.load(source(node) if source is not None else node)

    def update_enablement(self):
        """Enable or disable controls according to the loaded node's state."""

    def _on_commit(self, binding):
        self.update_enablement()

    def cancel_editing(self):
        """Close every pop-up owned by this panel or an embedded panel."""
        for popup in self.popups:
            popup.cancel_popup()
        for panel in self.panels:
            panel.cancel_editing()

    def enable(self, control, enabled):
        control.disabled = not enabled


class NodeEditor(PropertyPanel):
    """
    Top-level property editor for one node type.

    Subclasses set ``node_type``, ``icon`` (a FontAwesome name) and
    ``title`` (e.g. "Bar Plot"), and build their widgets in ``__init__``.
    """

    node_type = None
    icon = 'pencil'
    title = ''

    def __init__(self, alert=None):
        super().__init__(alert)
        self.tabs = None
        self._tab_callbacks = []
        self._text_fields = []
        self._focused_text = None
        self._loading = ReloadGuard()
        self.widget = widgets.VBox(layout=widgets.Layout(width=defaults.PANEL_WIDTH, display='none'))

    @property
    def representative_icon(self):
        return self.icon

    @property
    def representative_title(self):
        return f'{self.title} Properties'

    def is_editor_for_node(self, node):
        return node is not None and node.node_type == self.node_type

    def load(self, node):
        if node is not None and not self.is_editor_for_node(node):
            node = None
        with self._loading:
            return super().load(node)

    def reload(self, initial=False):
        with self._loading:
            super().reload(initial)

    def on_raised(self):
        """Called by the host when this editor becomes the visible one."""
        if self.node is not None:
            self.update_enablement()

    def on_lowered(self):
        """Called by the host when another editor replaces this one."""
        self.cancel_editing()

    # ===== Tabs =====
    def make_tabs(self, pages):
        """
        Build the tab container from (title, widget) pairs.

        Returns
        -------
        ipywidgets.Tab
        """
        self.tabs = widgets.Tab(children=[w for _, w in pages])
        for i, (title, _) in enumerate(pages):
            self.tabs.set_title(i, title)
        self.tabs.selected_index = 0
        self.tabs.observe(self._on_tab_selected, 'selected_index')
        return self.tabs

    @property
    def selected_tab(self):
        return self.tabs.selected_index if self.tabs is not None else -1

    @selected_tab.setter
    def selected_tab(self, index):
        if self.tabs is not None and 0 <= index < len(self.tabs.children):
            self.tabs.selected_index = index

    def on_tab_change(self, callback):
        """Register ``callback(index)``, called when the selected tab changes."""
        self._tab_callbacks.append(callback)

    def _on_tab_selected(self, change):
        self.cancel_editing()
        for callback in list(self._tab_callbacks):
            callback(change['new'])

    # ===== Special characters =====
    def register_text_field(self, field):
        """Make a text control a target for inserted special characters."""
        self._text_fields.append(field)
        field.observe(self._make_focus_callback(field), 'value')
        return field

    def _make_focus_callback(self, field):
        def callback(change):
            if not (self._loading.active or self.bindings.guard.active):
                self._focused_text = field
        return callback

    def focus_text(self, field):
        """Designate the text control that receives special characters."""
        if field in self._text_fields:
            self._focused_text = field

    def on_insert_special_character(self, s):
        """
        Append ``s`` to the focused text control and commit it.

        Returns
        -------
        bool
            False if no enabled text control has the focus.
        """
        field = self._focused_text
        if field is None and self._text_fields:
            field = self._text_fields[0]
        if field is None or field.disabled or self.node is None or not s:
            return False
        field.value = field.value + s
        return True
