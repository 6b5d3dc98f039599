"""Canonical inspection tree: node model, composite-kind classifier and walkers.

Two walkers produce the same :class:`Node` shape:

- :func:`element_to_tree` converts a declarative element graph that has not
  been rendered (no backing instances).
- :func:`instance_to_tree` converts an engine's internal instance graph
  after a render pass.

Text leaves are never wrapped: strings, numbers and None appear as-is in a
parent's ``rendered`` value.
"""

from __future__ import annotations

import enum
import weakref
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

from inspectree._base import InternalError
from inspectree.elements import Element, is_component_class

# ---------------------------------------------------------------------------
# Node model
# ---------------------------------------------------------------------------


class NodeType(str, enum.Enum):
    HOST = "host"
    CLASS = "class"
    FUNCTION = "function"


class CompositeType(enum.IntEnum):
    """Composite-kind codes reported by engine instances."""

    IMPURE_CLASS = 0
    PURE_CLASS = 1
    STATELESS_FUNCTIONAL = 2


def _weak(obj: Any) -> Callable[[], Any] | None:
    if obj is None:
        return None
    try:
        return weakref.ref(obj)
    except TypeError:
        # No weakref support; hold it strongly.
        return lambda: obj


@dataclass(frozen=True)
class Node:
    """One node of the canonical inspection tree.

    ``rendered`` is a tuple for host nodes and for composites that report
    several children, and a single value (node, primitive or None) for
    composites that wrap exactly one rendered instance.  Consumers branch
    on that difference, so it is kept as-is.
    """

    node_type: NodeType
    type: Any
    props: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    key: Any = None
    ref: Any = None
    rendered: Any = None
    instance_ref: Callable[[], Any] | None = field(default=None, repr=False, compare=False)

    # props is a read-only mapping, not a hashable value.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.props, MappingProxyType):
            object.__setattr__(self, "props", MappingProxyType(dict(self.props)))

    @property
    def instance(self) -> Any:
        """The live engine instance behind this node, or None."""
        if self.instance_ref is None:
            return None
        return self.instance_ref()

    @classmethod
    def build(
        cls,
        node_type: NodeType,
        element: Element,
        *,
        rendered: Any = None,
        instance: Any = None,
    ) -> Node:
        """Create a node from an element's identity plus rendered children."""
        return cls(
            node_type=node_type,
            type=element.type,
            props=element.props,
            key=element.key,
            ref=element.ref,
            rendered=rendered,
            instance_ref=_weak(instance),
        )


def is_node(value: Any) -> bool:
    return isinstance(value, Node)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def composite_type_to_node_type(code: int) -> NodeType:
    """Map an engine composite-kind code to a node type.

    Raises:
        InternalError: *code* is not a known composite kind.
    """
    if code in (CompositeType.IMPURE_CLASS, CompositeType.PURE_CLASS):
        return NodeType.CLASS
    if code == CompositeType.STATELESS_FUNCTIONAL:
        return NodeType.FUNCTION
    raise InternalError(f"unknown composite type {code!r}")


def node_type_from_type(type: Any) -> NodeType:
    """Classify a declarative element type without rendering it."""
    if isinstance(type, str):
        return NodeType.HOST
    if is_component_class(type):
        return NodeType.CLASS
    return NodeType.FUNCTION


# ---------------------------------------------------------------------------
# Element walker
# ---------------------------------------------------------------------------


def _flatten(children: Any) -> list[Any]:
    flat: list[Any] = []
    for child in children:
        if isinstance(child, (list, tuple)):
            flat.extend(_flatten(child))
        else:
            flat.append(child)
    return flat


def element_to_tree(el: Any) -> Any:
    """Convert a declarative element (or primitive) to the canonical shape.

    Primitives and None pass through unchanged.  Children declared as a
    list or tuple become a flat tuple; a single child stays a single value.
    """
    if not isinstance(el, Element):
        return el
    children = el.props.get("children")
    if isinstance(children, (list, tuple)):
        rendered: Any = tuple(element_to_tree(child) for child in _flatten(children))
    else:
        rendered = element_to_tree(children)
    return Node.build(node_type_from_type(el.type), el, rendered=rendered)


# ---------------------------------------------------------------------------
# Instance walker
# ---------------------------------------------------------------------------


class InstanceShape(enum.Enum):
    MULTI_CHILD = "multi_child"
    HOST = "host"
    SINGLE_CHILD = "single_child"
    UNKNOWN = "unknown"


def instance_shape(inst: Any) -> InstanceShape:
    """Classify an internal instance by the fields it populates."""
    if getattr(inst, "rendered_children", None) is not None:
        return InstanceShape.MULTI_CHILD
    if getattr(inst, "host_node", None) is not None:
        return InstanceShape.HOST
    if getattr(inst, "rendered_component", None) is not None:
        return InstanceShape.SINGLE_CHILD
    return InstanceShape.UNKNOWN


def _backing_instance(inst: Any) -> Any:
    public = getattr(inst, "instance", None)
    if public is not None:
        return public
    return getattr(inst, "host_node", None)


def _is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def instance_to_tree(inst: Any) -> Any:
    """Convert an engine's internal instance graph to the canonical tree.

    Returns None for a missing or torn-down instance, the raw value for a
    primitive, and a :class:`Node` otherwise.

    Raises:
        InternalError: the instance matches none of the known shapes, or
            reports an unknown composite-kind code.
    """
    if _is_primitive(inst):
        return inst
    el = getattr(inst, "current_element", None)
    if el is None:
        return None

    shape = instance_shape(inst)

    if shape is InstanceShape.MULTI_CHILD:
        if inst.host_node is not None:
            node_type = NodeType.HOST
        else:
            node_type = composite_type_to_node_type(inst.composite_type)
        return Node.build(
            node_type,
            el,
            rendered=tuple(instance_to_tree(child) for child in inst.rendered_children.values()),
            instance=_backing_instance(inst),
        )

    if shape is InstanceShape.HOST:
        if not isinstance(el, Element):
            return el
        return Node.build(
            NodeType.HOST,
            el,
            rendered=(element_to_tree(el.props.get("children")),),
            instance=_backing_instance(inst),
        )

    if shape is InstanceShape.SINGLE_CHILD:
        return Node.build(
            composite_type_to_node_type(inst.composite_type),
            el,
            rendered=instance_to_tree(inst.rendered_component),
            instance=_backing_instance(inst),
        )

    raise InternalError("unknown instance encountered")
