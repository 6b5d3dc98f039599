"""
Inspection tree formatting: display names, JSON-safe dicts and debug text.

Shared by the CLI and by tests that want a readable dump of a tree.
"""

from __future__ import annotations

import json
from typing import Any

from inspectree.tree import Node

# ---------------------------------------------------------------------------
# Display names
# ---------------------------------------------------------------------------


def display_name_of_type(type: Any) -> str:
    """Return a readable name for an element type (tag or component)."""
    if isinstance(type, str):
        return type
    name = getattr(type, "display_name", None) or getattr(type, "__name__", None)
    return name or "Component"


def display_name_of_node(node: Any) -> str | None:
    """Return the display name of a node, or None for primitives."""
    if not isinstance(node, Node):
        return None
    return display_name_of_type(node.type)


def _rendered_list(node: Node) -> list[Any]:
    rendered = node.rendered
    if isinstance(rendered, tuple):
        return list(rendered)
    return [rendered]


# ---------------------------------------------------------------------------
# JSON-safe dicts
# ---------------------------------------------------------------------------


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Node):
        return node_to_dict(value)
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if callable(value):
        return "[function]"
    return repr(value)


def node_to_dict(node: Any) -> Any:
    """Convert a node (or primitive) to plain JSON-serializable data.

    Props keep their order; ``children`` is dropped since ``rendered``
    carries the converted children.  Single-child composites keep a bare
    ``rendered`` value, host and multi-child nodes a list.
    """
    if not isinstance(node, Node):
        return _json_safe(node)
    props = {k: _json_safe(v) for k, v in node.props.items() if k != "children"}
    data: dict[str, Any] = {
        "nodeType": node.node_type.value,
        "type": display_name_of_type(node.type),
        "props": props,
    }
    if node.key is not None:
        data["key"] = _json_safe(node.key)
    if node.ref is not None:
        data["ref"] = _json_safe(node.ref)
    data["rendered"] = _json_safe(node.rendered)
    return data


# ---------------------------------------------------------------------------
# Debug text
# ---------------------------------------------------------------------------


def _format_prop(name: str, value: Any) -> str:
    if isinstance(value, str):
        return f"{name}={json.dumps(value)}"
    if callable(value):
        return f"{name}={{[function]}}"
    return f"{name}={{{value!r}}}"


def _format_open(node: Node, self_closing: bool) -> str:
    parts = [display_name_of_type(node.type)]
    if node.key is not None:
        parts.append(_format_prop("key", node.key))
    parts.extend(_format_prop(k, v) for k, v in node.props.items() if k != "children")
    tail = " />" if self_closing else ">"
    return "<" + " ".join(parts) + tail


def _emit_debug(value: Any, depth: int, lines: list[str], indent: str) -> None:
    """Recursively emit debug lines for a node or text leaf."""
    if value is None or isinstance(value, bool):
        return
    pad = indent * depth
    if not isinstance(value, Node):
        lines.append(f"{pad}{value}")
        return

    children = [c for c in _rendered_list(value) if c is not None and not isinstance(c, bool)]
    if not children:
        lines.append(f"{pad}{_format_open(value, self_closing=True)}")
        return
    lines.append(f"{pad}{_format_open(value, self_closing=False)}")
    for child in children:
        _emit_debug(child, depth + 1, lines, indent)
    lines.append(f"{pad}</{display_name_of_type(value.type)}>")


def serialize_debug(node: Any, *, indent: int = 2) -> str:
    """Serialize a tree to indented, markup-like text.

    Example output::

        <Counter start={1}>
          <div className="counter">
            <button onClick={[function]}>
              +
            </button>
          </div>
        </Counter>
    """
    lines: list[str] = []
    _emit_debug(node, 0, lines, " " * indent)
    return "\n".join(lines) + "\n"
