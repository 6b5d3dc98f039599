"""CLI for inspection tree dumps: python -m inspectree"""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import os
import sys
import time
from typing import Any

from inspectree import Adapter
from inspectree._router import MODES, MOUNT, STRING
from inspectree.format import node_to_dict, serialize_debug


def _load(spec: str) -> Any:
    """Import ``module:attr`` (attr may be dotted)."""
    module_name, _, attr_path = spec.partition(":")
    if not module_name or not attr_path:
        raise SystemExit(f"Expected 'module:attr', got {spec!r}")
    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj


def main() -> None:
    parser = argparse.ArgumentParser(
        description="inspectree: render a component and print its inspection tree"
    )
    parser.add_argument(
        "target", help="Element or zero-argument component to render, as module:attr"
    )
    parser.add_argument(
        "--engine",
        required=True,
        help="Rendering engine class or instance, as module:attr",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default=None,
        choices=list(MODES),
        help="Rendering mode (default: $INSPECTREE_MODE or mount)",
    )
    parser.add_argument("--json-out", type=str, default=None, help="Write the tree as JSON to file")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print diagnostics (timing) and enable debug logging",
    )
    args = parser.parse_args()

    mode = args.mode or os.environ.get("INSPECTREE_MODE", MOUNT)
    verbose = args.verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")
        print(f"=== inspectree ({mode}) ===")

    sys.path.insert(0, os.getcwd())
    engine = _load(args.engine)
    if isinstance(engine, type):
        engine = engine()
    adapter = Adapter(engine)

    target = _load(args.target)
    element = target if adapter.is_valid_element(target) else adapter.create_element(target)

    renderer = adapter.create_renderer(mode=mode)

    t0 = time.perf_counter()
    if mode == STRING:
        markup = renderer.render(element)
        t_render = (time.perf_counter() - t0) * 1000
        if verbose:
            print(f"Render: {t_render:.1f} ms, {len(markup)} chars")
        print(markup)
        return

    renderer.render(element)
    node = renderer.get_node()
    t_render = (time.perf_counter() - t0) * 1000
    if verbose:
        print(f"Render + walk: {t_render:.1f} ms")

    print(serialize_debug(node), end="")

    if args.json_out:
        with open(args.json_out, "w", encoding="utf-8") as f:
            json.dump(node_to_dict(node), f, indent=2, ensure_ascii=False)
        if verbose:
            print(f"JSON written to {args.json_out}")

    renderer.unmount()


if __name__ == "__main__":
    main()
