"""Single-child wrapper the mount renderer roots every render under."""

from __future__ import annotations

from typing import Any

from inspectree.elements import Component


class PassthroughHost(Component):
    """Render the element passed as the ``node`` prop, or nothing.

    Gives the mount renderer a stable root of its own, so the caller's
    element keeps its identity and the tree walk can start one level down.
    """

    def render(self) -> Any:
        return self.props.get("node")
