"""One-level renderer: composites render once, their children stay elements."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from inspectree._base import InteractiveRenderer
from inspectree.events import prop_from_event
from inspectree.tree import Node, composite_type_to_node_type, element_to_tree

if TYPE_CHECKING:
    from inspectree._base import RenderEngine
    from inspectree.elements import Element

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ShallowRenderer(InteractiveRenderer):
    """Render a single level through the engine's shallow renderer.

    After :meth:`render` the renderer is in one of two states:

    - host leaf: the element's type is a tag string, nothing is rendered and
      :meth:`get_node` converts the element itself;
    - composite rendered: the engine rendered the composite once and
      :meth:`get_node` wraps that output in a node built from the original
      element.

    :meth:`simulate_event` calls the handler prop directly.  There is no
    synthetic event object and no propagation to parent nodes.
    """

    mode = "shallow"

    def __init__(self, engine: RenderEngine) -> None:
        self._engine = engine
        self._renderer = engine.create_shallow_renderer()
        self._element: Element | None = None
        self._is_host = False

    def render(self, element: Element, context: Any = None) -> None:
        self._element = element
        if isinstance(element.type, str):
            if not self._is_host:
                self._renderer.unmount()
            self._is_host = True
            logger.debug("shallow_render host_leaf type=%r", element.type)
            return
        self._is_host = False
        self._renderer.render(element, context)
        logger.debug("shallow_render composite type=%r", element.type)

    def unmount(self) -> None:
        if self._element is None:
            return
        self._renderer.unmount()
        self._element = None
        self._is_host = False

    def get_node(self) -> Node | None:
        if self._element is None:
            return None
        if self._is_host:
            return element_to_tree(self._element)
        internal = self._renderer.instance
        return Node.build(
            composite_type_to_node_type(internal.composite_type),
            self._element,
            rendered=element_to_tree(self._renderer.get_render_output()),
            instance=internal.instance,
        )

    def simulate_event(self, node: Node, event: str, *args: Any) -> None:
        handler = node.props.get(prop_from_event(event))
        if handler is None:
            return
        logger.debug("shallow_simulate event=%s", event)
        self._renderer.batched_updates(lambda: handler(*args))

    def batched_updates(self, fn: Callable[[], T]) -> T:
        return self._renderer.batched_updates(fn)
