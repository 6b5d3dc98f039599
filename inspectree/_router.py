"""Renderer mode dispatch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from inspectree._base import InternalError

if TYPE_CHECKING:
    from inspectree._base import RenderEngine, Renderer

logger = logging.getLogger(__name__)

MOUNT = "mount"
SHALLOW = "shallow"
STRING = "string"

MODES = (MOUNT, SHALLOW, STRING)


def create_renderer(engine: RenderEngine, mode: str, **options: Any) -> Renderer:
    """Return a fresh renderer for *mode* backed by *engine*.

    Each call builds a new renderer that owns its own root or render
    output.  Callers hold on to the instance for the duration of a test.

    Args:
        engine: Rendering engine the renderer delegates to.
        mode: One of ``"mount"``, ``"shallow"`` or ``"string"``.
        **options: Mode-specific options.  Mount accepts ``attach_to``, an
            existing root node to render into.

    Raises:
        InternalError: *mode* is not a known mode.
        DOMUnavailableError: mount mode on an engine without a display surface.
    """
    if mode == MOUNT:
        from inspectree.renderers.mount import MountRenderer

        renderer: Renderer = MountRenderer(engine, attach_to=options.get("attach_to"))
    elif mode == SHALLOW:
        from inspectree.renderers.shallow import ShallowRenderer

        renderer = ShallowRenderer(engine)
    elif mode == STRING:
        from inspectree.renderers.string import StringRenderer

        renderer = StringRenderer(engine)
    else:
        raise InternalError(f"Unrecognized mode: {mode}")

    logger.debug("create_renderer mode=%s engine=%s", mode, type(engine).__name__)
    return renderer
