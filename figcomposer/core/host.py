"""
Host panel that presents the property editor matching the selected node
"""

import logging

import ipywidgets as widgets

from .. import defaults
from ..utils.helpers import SPECIAL_CHARACTERS
from .alerts import beep
from .controls import set_visible, is_visible

logger = logging.getLogger(__name__)


class TitlePopupEditor:
    """
    In-place pop-up for editing a node's title. OK commits through
    ``set_title``; a rejected title alerts and keeps the pop-up open.
    """

    def __init__(self, alert=None):
        self.alert = alert or beep
        self.node = None
        self.text = widgets.Textarea(
            rows=2, layout=widgets.Layout(width=defaults.FIELD_WIDTH)
        )
        self.ok_button = widgets.Button(description='OK', button_style='primary', layout=widgets.Layout(width='70px'))
        self.cancel_button = widgets.Button(description='Cancel', layout=widgets.Layout(width='70px'))
        self.ok_button.on_click(lambda btn: self.commit())
        self.cancel_button.on_click(lambda btn: self.extinguish())
        self.widget = widgets.VBox(
            [widgets.HTML('<b>Title</b>'), self.text, widgets.HBox([self.ok_button, self.cancel_button])],
            layout=widgets.Layout(display='none', border='1px solid #bbb', padding='4px')
        )

    def is_raised(self):
        return is_visible(self.widget)

    def raise_for(self, node):
        """Show the pop-up loaded with ``node``'s title. False if the node has no title."""
        if node is None or not node.has_title:
            return False
        self.node = node
        self.text.value = node.get_title()
        set_visible(self.widget, True)
        return True

    def commit(self):
        if self.node is None:
            return False
        if not self.node.set_title(self.text.value):
            logger.debug("Rejected title %r on %r", self.text.value, self.node)
            self.alert()
            return False
        self.extinguish()
        return True

    def extinguish(self):
        """Hide the pop-up, discarding any uncommitted text."""
        self.node = None
        set_visible(self.widget, False)


class TitlePopupFactory:
    """Creates the title pop-up on first use and hands out that instance."""

    def __init__(self, alert=None):
        self.alert = alert
        self._popup = None

    def get(self):
        if self._popup is None:
            self._popup = TitlePopupEditor(self.alert)
        return self._popup


class NodeEditorHost:
    """
    Presents one :class:`NodeEditor` at a time: the editor matching the
    selected node. Model changes to the selected node (or its components)
    reload the visible editor.

    Parameters
    ----------
    editors : list of NodeEditor
        One editor per supported node type.
    alert : callable, optional
        Alert for rejected title edits.
    title_popups : TitlePopupFactory, optional
        Source of the title pop-up editor.
    """

    def __init__(self, editors, alert=None, title_popups=None):
        self.alert = alert or beep
        self.editors = list(editors)
        self.title_popups = title_popups or TitlePopupFactory(self.alert)
        self.title_popup = self.title_popups.get()
        self.current = None
        self.node = None

        self.header = widgets.HTML()
        self.title_button = widgets.Button(
            icon='i-cursor', tooltip='Edit title', layout=widgets.Layout(width='36px', display='none')
        )
        self.title_button.on_click(lambda btn: self.edit_title())
        char_buttons = []
        for ch in SPECIAL_CHARACTERS:
            btn = widgets.Button(description=ch, layout=widgets.Layout(width='28px', padding='0'))
            btn.on_click(self._make_char_callback(ch))
            char_buttons.append(btn)
        self.char_palette = widgets.GridBox(char_buttons, layout=widgets.Layout(
            grid_template_columns='repeat(18, 28px)', display='none'
        ))
        self.widget = widgets.VBox(
            [widgets.HBox([self.header, self.title_button]), self.title_popup.widget, self.char_palette]
            + [e.widget for e in self.editors],
            layout=widgets.Layout(width=defaults.PANEL_WIDTH)
        )

    def _make_char_callback(self, ch):
        def callback(btn):
            self.insert_special_character(ch)
        return callback

    def editor_for(self, node):
        for editor in self.editors:
            if editor.is_editor_for_node(node):
                return editor
        return None

    def select(self, node):
        """
        Show the editor for ``node`` (None clears the selection).

        Returns
        -------
        bool
            True if an editor was found and loaded.
        """
        if self.node is not None:
            self.node.remove_listener(self._on_node_changed)
        self.title_popup.extinguish()
        editor = self.editor_for(node) if node is not None else None

        if self.current is not None and self.current is not editor:
            self.current.on_lowered()
            self.current.load(None)

        self.node = node
        if editor is None:
            self.current = None
            self.header.value = ''
            set_visible(self.title_button, False)
            set_visible(self.char_palette, False)
            return False

        raised = editor is not self.current
        editor.load(node)
        node.add_listener(self._on_node_changed)
        self.current = editor
        if raised:
            editor.on_raised()
        logger.debug("Selected %s for %r", type(editor).__name__, node)
        self.header.value = f'<b>{editor.representative_title}</b>'
        set_visible(self.title_button, node.has_title)
        set_visible(self.char_palette, True)
        return True

    def _on_node_changed(self, node, attr):
        if self.current is not None:
            self.current.reload(False)

    def edit_title(self):
        return self.title_popup.raise_for(self.node)

    def insert_special_character(self, s):
        if self.current is None:
            return False
        return self.current.on_insert_special_character(s)
