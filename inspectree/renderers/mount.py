"""Full-lifecycle renderer attached to a display-surface root."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from inspectree._base import InteractiveRenderer, assert_dom_available
from inspectree.events import map_native_event_name
from inspectree.renderers.passthrough import PassthroughHost
from inspectree.tree import instance_to_tree

if TYPE_CHECKING:
    from inspectree._base import RenderEngine
    from inspectree.elements import Element
    from inspectree.tree import Node

T = TypeVar("T")

logger = logging.getLogger(__name__)


class MountRenderer(InteractiveRenderer):
    """Render the whole tree into a root node and walk the live instances.

    The caller's element is wrapped in :class:`PassthroughHost`, and
    :meth:`get_node` starts at the wrapper's single child so the wrapper
    never shows up in the result.
    """

    mode = "mount"

    def __init__(self, engine: RenderEngine, *, attach_to: Any = None) -> None:
        assert_dom_available(engine, "mount")
        self._engine = engine
        self._container = attach_to if attach_to is not None else engine.create_container()
        self._root: Any = None

    @property
    def container(self) -> Any:
        return self._container

    def render(self, element: Element, context: Any = None) -> None:
        wrapped = self._engine.create_element(PassthroughHost, {"node": element})
        self._root = self._engine.render(wrapped, self._container, context)
        logger.debug("mount_render type=%r container=%r", element.type, self._container)

    def unmount(self) -> None:
        if self._root is None:
            return
        self._engine.unmount_container(self._container)
        self._root = None
        logger.debug("mount_unmount container=%r", self._container)

    def get_node(self) -> Node | None:
        if self._root is None:
            return None
        wrapper = self._engine.get_internal_instance(self._root)
        return instance_to_tree(wrapper.rendered_component)

    def simulate_event(self, node: Node, event: str, *args: Any) -> None:
        mapped = map_native_event_name(event)
        simulator = self._engine.get_simulator(mapped)
        if simulator is None:
            raise TypeError(f"MountRenderer.simulate_event() event '{event}' does not exist")
        host_node = self._engine.find_host_node(node.instance)
        logger.debug("mount_simulate event=%s mapped=%s", event, mapped)
        simulator(host_node, *args)

    def batched_updates(self, fn: Callable[[], T]) -> T:
        return self._engine.batched_updates(fn)
