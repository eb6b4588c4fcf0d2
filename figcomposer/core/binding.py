"""
Two-way binding between input controls and graphic node attributes.

Each :class:`AttributeBinding` ties one control trait to a getter/setter
pair on the edited node. A :class:`BindingTable` owns the bindings of one
panel and implements the edit protocol:

* on load, control values are pulled from the node while a
  :class:`ReloadGuard` is active, so the trait observers do not mistake
  them for user edits;
* on a user edit, the converted control value is pushed to the node's
  setter; a ``False`` result (or a ``ValueError`` while converting the
  control value) is a rejection, which triggers the alert and restores the
  control from the node. An accepted edit also refreshes the control,
  since setters may store a canonical form of the value.
"""

import logging

logger = logging.getLogger(__name__)


class ReloadGuard:
    """Reentrant flag marking programmatic control updates."""

    def __init__(self):
        self._depth = 0

    def __enter__(self):
        self._depth += 1
        return self

    def __exit__(self, exc_type, exc, tb):
        self._depth -= 1
        return False

    @property
    def active(self):
        return self._depth > 0


def _identity(value):
    return value


class AttributeBinding:
    """
    One control bound to one node attribute.

    Parameters
    ----------
    control : ipywidgets.Widget
        Control whose ``trait`` holds the displayed value.
    getter : str or callable
        Attribute name, or ``getter(node)`` returning the model value.
    setter : str or callable, optional
        Attribute name, or ``setter(node, value)`` returning False on
        rejection. Defaults to ``getter`` when that is a name.
    to_control, from_control : callable, optional
        Converters between model values and control values.
    applies : callable, optional
        ``applies(node)``; bindings that do not apply are skipped on load.
    trait : str
        Name of the observed control trait.
    """

    def __init__(self, control, getter, setter=None, to_control=None, from_control=None,
                 applies=None, trait='value'):
        if setter is None:
            if not isinstance(getter, str):
                raise TypeError("setter is required when getter is a callable")
            setter = getter
        self.name = getter if isinstance(getter, str) else getattr(getter, '__name__', 'attr')
        self.control = control
        self._getter = (lambda node: node.get(getter)) if isinstance(getter, str) else getter
        self._setter = (lambda node, v: node.set(setter, v)) if isinstance(setter, str) else setter
        self.to_control = to_control or _identity
        self.from_control = from_control or _identity
        self.applies = applies
        self.trait = trait

    def __repr__(self):
        return f"AttributeBinding({self.name!r}, {type(self.control).__name__})"

    def applies_to(self, node):
        return self.applies is None or bool(self.applies(node))

    def read(self, node):
        """Model value converted for display."""
        return self.to_control(self._getter(node))

    def write(self, node, control_value):
        """Push a control value to the node. Returns False if it was rejected."""
        try:
            value = self.from_control(control_value)
        except ValueError:
            return False
        return self._setter(node, value) is not False


class BindingTable:
    """
    The bindings of one panel plus the node currently loaded into it.

    Parameters
    ----------
    alert : callable
        Called with no arguments whenever an edit is rejected.
    on_commit : callable, optional
        Called with the binding after each accepted edit.
    """

    def __init__(self, alert, on_commit=None):
        self.alert = alert
        self.on_commit = on_commit
        self.guard = ReloadGuard()
        self.bindings = []
        self.node = None

    def __iter__(self):
        return iter(self.bindings)

    def bind(self, control, getter, setter=None, **kwargs):
        """Create a binding, observe its control and return the binding."""
        binding = AttributeBinding(control, getter, setter, **kwargs)
        self.bindings.append(binding)
        control.observe(self._make_callback(binding), names=binding.trait)
        return binding

    def _make_callback(self, binding):
        def callback(change):
            if self.guard.active or self.node is None:
                return
            self.commit(binding, change['new'])
        return callback

    def commit(self, binding, control_value):
        """
        Push ``control_value`` through ``binding`` to the loaded node.
        On rejection, alert and restore the control.
        """
        node = self.node
        if node is None:
            return False
        if binding.write(node, control_value):
            if self.node is node:
                # the setter may have stored a canonical form of the value
                self.refresh(binding)
                if self.on_commit is not None:
                    self.on_commit(binding)
            return True
        logger.debug("Rejected %s=%r on %r", binding.name, control_value, node)
        self.alert()
        # the node may have been unloaded by a listener in the meantime
        if self.node is node:
            self.refresh(binding)
        return False

    def refresh(self, binding):
        """Set a control from the loaded node without treating it as an edit."""
        if self.node is None or not binding.applies_to(self.node):
            return
        with self.guard:
            setattr(binding.control, binding.trait, binding.read(self.node))

    def load(self, node):
        """
        Load ``node`` (or None) and pull every applicable value into its control.

        Returns
        -------
        bool
            False if ``node`` is None.
        """
        self.node = node
        if node is None:
            return False
        for binding in self.bindings:
            self.refresh(binding)
        return True
