"""
Core functionality for figcomposer: the binding protocol, controls and
panel base classes
"""

from .alerts import beep
from .binding import AttributeBinding, BindingTable, ReloadGuard
from .editor import NodeEditor, PropertyPanel
from .host import NodeEditorHost, TitlePopupEditor, TitlePopupFactory

__all__ = [
    'beep',
    'AttributeBinding',
    'BindingTable',
    'ReloadGuard',
    'NodeEditor',
    'PropertyPanel',
    'NodeEditorHost',
    'TitlePopupEditor',
    'TitlePopupFactory',
]
