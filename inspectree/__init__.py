"""
inspectree -- canonical inspection trees for component rendering engines.

Normalizes an engine's internal instance graph into one engine-agnostic
tree so test tooling can traverse, query and simulate interactions on
rendered output.

Quick start::

    import inspectree

    # Adapter is the primary API: renderers + element/node utilities
    adapter = inspectree.Adapter(engine)
    renderer = adapter.create_renderer(mode="mount")
    renderer.render(adapter.create_element(App, {"title": "hi"}))
    node = renderer.get_node()                  # canonical tree snapshot
    renderer.simulate_event(node.rendered[0], "click")
    node = renderer.get_node()                  # re-read after the update
    renderer.unmount()

    shallow = adapter.create_renderer(mode="shallow")
    markup = adapter.create_renderer(mode="string").render(element)
"""

from __future__ import annotations

from typing import Any, Mapping

from inspectree._base import (
    DOMUnavailableError,
    InteractiveRenderer,
    InternalError,
    RenderEngine,
    Renderer,
    ShallowEngineRenderer,
)
from inspectree._router import MODES, MOUNT, SHALLOW, STRING, create_renderer
from inspectree.elements import Component, Element, PureComponent
from inspectree.format import display_name_of_node, node_to_dict, serialize_debug
from inspectree.tree import CompositeType, Node, NodeType, element_to_tree, instance_to_tree

__all__ = [
    "Adapter",
    "MODES",
    "MOUNT",
    "SHALLOW",
    "STRING",
    # Tree model
    "Node",
    "NodeType",
    "CompositeType",
    "Element",
    "Component",
    "PureComponent",
    # Errors
    "InternalError",
    "DOMUnavailableError",
    # Advanced / building blocks
    "RenderEngine",
    "ShallowEngineRenderer",
    "Renderer",
    "InteractiveRenderer",
    "create_renderer",
    "element_to_tree",
    "instance_to_tree",
    "node_to_dict",
    "serialize_debug",
]


class Adapter:
    """Entry point tying a rendering engine to the inspection tree.

    Each renderer returned by :meth:`create_renderer` owns its root (mount)
    or render output (shallow) exclusively; nothing is shared between them.

    Example::

        adapter = inspectree.Adapter(engine)
        renderer = adapter.create_renderer(mode="shallow")
        renderer.render(adapter.create_element(Counter))
        node = renderer.get_node()
        adapter.node_to_element(node)
    """

    def __init__(self, engine: RenderEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> RenderEngine:
        return self._engine

    def create_renderer(self, *, mode: str = MOUNT, **options: Any) -> Renderer:
        """Return a new renderer for *mode* ("mount", "shallow" or "string").

        Args:
            mode: Rendering mode.
            **options: Mode-specific options (``attach_to`` for mount).
        """
        return create_renderer(self._engine, mode, **options)

    # -- element / node conversion ----------------------------------------

    def node_to_element(self, node: Any) -> Element | None:
        """Convert a node back to a declarative element with the same type and props."""
        if not isinstance(node, Node):
            return None
        return self._engine.create_element(node.type, node.props)

    def element_to_node(self, element: Any) -> Any:
        """Convert a declarative element to a node without rendering it."""
        return element_to_tree(element)

    def node_to_host_node(self, node: Node) -> Any:
        """Resolve a node to the platform node backing it."""
        return self._engine.find_host_node(node.instance)

    def display_name_of_node(self, node: Any) -> str | None:
        return display_name_of_node(node)

    # -- elements ----------------------------------------------------------

    def is_valid_element(self, value: Any) -> bool:
        return self._engine.is_valid_element(value)

    def create_element(
        self, type: Any, props: Mapping[str, Any] | None = None, *children: Any
    ) -> Element:
        return self._engine.create_element(type, props, *children)
