"""Abstract bases for rendering engines and renderer strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Mapping, TypeVar

from inspectree import elements

if TYPE_CHECKING:
    from inspectree.elements import Element
    from inspectree.tree import Node

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

INTERNAL_ERROR_PREFIX = "inspectree Internal Error: "


class InternalError(RuntimeError):
    """An engine structure this adapter does not understand.

    Raised for unknown composite-kind codes, unknown instance shapes and
    unrecognized renderer modes.  These point at an incompatible engine
    version rather than a mistake in the caller's test.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"{INTERNAL_ERROR_PREFIX}{message}")


class DOMUnavailableError(RuntimeError):
    """A renderer that needs a display surface was built without one."""


def assert_dom_available(engine: RenderEngine, feature: str) -> None:
    """Raise :class:`DOMUnavailableError` unless *engine* has a display surface."""
    if not engine.dom_available():
        raise DOMUnavailableError(
            f"inspectree's {feature} expects a DOM environment to be loaded, but found none"
        )


# ---------------------------------------------------------------------------
# Rendering engine (external collaborator)
# ---------------------------------------------------------------------------


class ShallowEngineRenderer(ABC):
    """Engine-side renderer that renders a composite exactly one level deep."""

    @abstractmethod
    def render(self, element: Element, context: Any = None) -> Any:
        """Render *element*'s composite once, leaving child elements unrendered."""
        ...

    @abstractmethod
    def get_render_output(self) -> Any:
        """Return the element (or primitive) produced by the last render."""
        ...

    @abstractmethod
    def unmount(self) -> None:
        """Tear down the one-level render."""
        ...

    @abstractmethod
    def batched_updates(self, fn: Callable[[], T]) -> T:
        """Run *fn*, re-rendering at most once after it returns."""
        ...

    @property
    @abstractmethod
    def instance(self) -> Any:
        """Internal instance of the rendered composite, or None.

        Exposes ``composite_type`` and ``instance`` (the public component
        object, None for function components).
        """
        ...


class RenderEngine(ABC):
    """Interface an engine must provide for the renderer strategies.

    Internal instances handed out by the engine (through
    :meth:`get_internal_instance` and the graph reachable from it) expose
    these attributes, read by :func:`inspectree.tree.instance_to_tree`:

    ``current_element``
        The element (or primitive, for text instances) the instance was
        rendered from.  None once the instance is torn down.
    ``rendered_children``
        Ordered mapping of child slot keys to child instances, or None.
    ``host_node``
        Platform node backing the instance, or None for composites.
    ``rendered_component``
        The single child instance of a composite, or None.
    ``instance``
        Public component object, or None.
    ``composite_type``
        Composite-kind code (see :class:`inspectree.tree.CompositeType`).
    """

    # ---- display surface -------------------------------------------------

    @abstractmethod
    def dom_available(self) -> bool:
        """Return True if a display surface can be attached to."""
        ...

    @abstractmethod
    def create_container(self) -> Any:
        """Return a fresh detached root node to render into."""
        ...

    # ---- full lifecycle --------------------------------------------------

    @abstractmethod
    def render(self, element: Element, container: Any, context: Any = None) -> Any:
        """Mount or update *element* in *container*; return the public root instance."""
        ...

    @abstractmethod
    def unmount_container(self, container: Any) -> bool:
        """Unmount whatever is rendered in *container*; return True if anything was."""
        ...

    @abstractmethod
    def get_internal_instance(self, public_instance: Any) -> Any:
        """Return the internal instance backing a public component object."""
        ...

    @abstractmethod
    def find_host_node(self, instance: Any) -> Any:
        """Resolve a public instance or host node to its concrete platform node."""
        ...

    # ---- events and batching ---------------------------------------------

    @abstractmethod
    def get_simulator(self, event_name: str) -> Callable[..., Any] | None:
        """Return the dispatcher for an engine event name, or None if unknown.

        The dispatcher is called as ``simulator(host_node, *args)``.
        """
        ...

    @abstractmethod
    def batched_updates(self, fn: Callable[[], T]) -> T:
        """Run *fn*, coalescing the state changes it triggers into one re-render."""
        ...

    # ---- other modes -----------------------------------------------------

    @abstractmethod
    def create_shallow_renderer(self) -> ShallowEngineRenderer:
        """Return a new one-level renderer."""
        ...

    @abstractmethod
    def render_to_static_markup(self, element: Element) -> str:
        """Render *element* to static markup text."""
        ...

    # ---- elements --------------------------------------------------------

    def create_element(
        self, type: Any, props: Mapping[str, Any] | None = None, *children: Any
    ) -> Element:
        return elements.create_element(type, props, *children)

    def is_valid_element(self, value: Any) -> bool:
        return elements.is_valid_element(value)


# ---------------------------------------------------------------------------
# Renderer strategies
# ---------------------------------------------------------------------------


class Renderer(ABC):
    """A rendering mode.  Every mode can render an element."""

    mode: str = ""

    @abstractmethod
    def render(self, element: Element, context: Any = None) -> Any:
        ...


class InteractiveRenderer(Renderer):
    """A mode that keeps its render around for inspection and interaction."""

    @abstractmethod
    def unmount(self) -> None:
        """Release everything tied to the last render.  No-op if nothing is mounted."""
        ...

    @abstractmethod
    def get_node(self) -> Node | None:
        """Return a fresh canonical tree snapshot, or None if nothing is rendered."""
        ...

    @abstractmethod
    def simulate_event(self, node: Node, event: str, *args: Any) -> None:
        """Invoke the handler reachable from *node* for the generic *event* name."""
        ...

    @abstractmethod
    def batched_updates(self, fn: Callable[[], T]) -> T:
        """Run *fn* with its state changes coalesced; return its result."""
        ...
