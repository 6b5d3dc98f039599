"""Declarative elements and the class-style component contract.

Elements are the plain, not-yet-rendered description of a tree: a type (a
tag string or a component definition), props, and the optional ``key`` and
``ref`` identity hints.  Rendering engines consume elements and produce
their own internal instance graphs, which :mod:`inspectree.tree` converts
into the canonical inspection tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

# Props that describe element identity rather than component input.
RESERVED_PROPS = frozenset({"key", "ref"})


@dataclass(frozen=True)
class Element:
    """An immutable declarative element."""

    type: Any
    props: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    key: Any = None
    ref: Any = None

    # props is a read-only mapping, not a hashable value.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.props, MappingProxyType):
            object.__setattr__(self, "props", MappingProxyType(dict(self.props)))


def create_element(type: Any, props: Mapping[str, Any] | None = None, *children: Any) -> Element:
    """Build an :class:`Element` from a type, props and positional children.

    ``key`` and ``ref`` are lifted out of *props*.  A single positional child
    is stored as ``props["children"]`` directly; several are stored as a
    tuple.  Positional children override a ``children`` entry in *props*.

    Examples::

        >>> create_element("div", {"id": "x"}, "a", "b").props["children"]
        ('a', 'b')
        >>> create_element("li", {"key": "k"}).key
        'k'
    """
    raw = dict(props or {})
    key = raw.pop("key", None)
    ref = raw.pop("ref", None)
    if len(children) == 1:
        raw["children"] = children[0]
    elif children:
        raw["children"] = tuple(children)
    return Element(type=type, props=raw, key=key, ref=ref)


def is_valid_element(value: Any) -> bool:
    """Return True if *value* is a declarative element."""
    return isinstance(value, Element)


# ---------------------------------------------------------------------------
# Component contract
# ---------------------------------------------------------------------------


class Component:
    """Base class for stateful (class-style) components.

    Engines instantiate subclasses with the element's props and the ambient
    context, install an updater, and call :meth:`render`.  ``set_state``
    forwards to that updater, which decides when the re-render happens
    (immediately, or once at the end of a batched-update scope).
    """

    def __init__(self, props: Mapping[str, Any] | None = None, context: Any = None) -> None:
        self.props: Mapping[str, Any] = MappingProxyType(dict(props or {}))
        self.context = context
        self.state: dict[str, Any] = {}
        self._updater: Any = None

    def render(self) -> Any:
        return None

    def set_state(self, partial: Mapping[str, Any] | Callable[[dict], Mapping[str, Any]]) -> None:
        """Queue a state change through the engine's updater."""
        if self._updater is None:
            raise RuntimeError(
                f"{type(self).__name__}.set_state() called on a component "
                f"that is not mounted"
            )
        self._updater.enqueue_set_state(self, partial)


class PureComponent(Component):
    """Component whose engine may skip re-renders for equal props and state."""


def is_component_class(value: Any) -> bool:
    """Return True if *value* is a :class:`Component` subclass."""
    return isinstance(value, type) and issubclass(value, Component)
