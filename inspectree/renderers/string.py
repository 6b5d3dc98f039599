"""Static markup renderer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from inspectree._base import Renderer

if TYPE_CHECKING:
    from inspectree._base import RenderEngine
    from inspectree.elements import Element

logger = logging.getLogger(__name__)


class StringRenderer(Renderer):
    """One-shot renderer that returns markup and keeps nothing around."""

    mode = "string"

    def __init__(self, engine: RenderEngine) -> None:
        self._engine = engine

    def render(self, element: Element, context: Any = None) -> str:
        markup = self._engine.render_to_static_markup(element)
        logger.debug("string_render type=%r chars=%d", element.type, len(markup))
        return markup
