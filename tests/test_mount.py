"""Tests for the mount renderer against the fake engine."""

from __future__ import annotations

import gc

import pytest
from components import ClickPanel, Counter, Empty, Greeting, Label, Panel, Toggle, Wrapper

from inspectree.elements import create_element
from inspectree.renderers import MountRenderer, PassthroughHost
from inspectree.tree import Node, NodeType

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer(engine):
    return MountRenderer(engine)


def _find(node, predicate):
    """Depth-first search over a canonical tree."""
    if not isinstance(node, Node):
        return None
    if predicate(node):
        return node
    rendered = node.rendered if isinstance(node.rendered, tuple) else (node.rendered,)
    for child in rendered:
        found = _find(child, predicate)
        if found is not None:
            return found
    return None


# ---------------------------------------------------------------------------
# get_node
# ---------------------------------------------------------------------------


class TestMountGetNode:
    def test_nothing_rendered(self, renderer):
        assert renderer.get_node() is None

    def test_host_with_text_children(self, renderer):
        renderer.render(create_element("div", None, "a", "b"))
        node = renderer.get_node()
        assert node.node_type is NodeType.HOST
        assert node.type == "div"
        assert node.rendered == ("a", "b")

    def test_host_with_single_text_child(self, renderer):
        renderer.render(create_element("p", {"id": "x"}, "hello"))
        node = renderer.get_node()
        assert node.rendered == ("hello",)
        assert dict(node.props) == {"id": "x", "children": "hello"}

    def test_wrapper_is_not_in_tree(self, renderer):
        renderer.render(create_element(Counter))
        node = renderer.get_node()
        assert node.type is Counter
        assert _find(node, lambda n: n.type is PassthroughHost) is None

    def test_class_component(self, renderer):
        renderer.render(create_element(Counter, {"start": 2}))
        node = renderer.get_node()
        assert node.node_type is NodeType.CLASS
        assert isinstance(node.instance, Counter)
        div = node.rendered
        assert isinstance(div, Node)
        assert div.type == "div"
        span, button = div.rendered
        assert span.type == "span"
        assert span.rendered == (2,)
        assert button.type == "button"
        assert button.rendered == ("+",)

    def test_pure_component_is_class(self, renderer):
        renderer.render(create_element(Label, {"text": "x"}))
        assert renderer.get_node().node_type is NodeType.CLASS

    def test_function_components(self, renderer):
        renderer.render(create_element(Wrapper, {"name": "Ada"}))
        node = renderer.get_node()
        assert node.node_type is NodeType.FUNCTION
        assert node.instance is None
        greeting = node.rendered
        assert greeting.type is Greeting
        assert greeting.node_type is NodeType.FUNCTION
        paragraph = greeting.rendered
        assert paragraph.type == "p"
        assert paragraph.rendered == ("Hello, ", "Ada")

    def test_nested_composites_fully_rendered(self, renderer):
        renderer.render(create_element(Panel))
        section = renderer.get_node().rendered
        label = section.rendered[0]
        assert label.type is Label
        assert label.rendered.type == "span"

    def test_component_rendering_nothing(self, renderer):
        renderer.render(create_element(Empty))
        node = renderer.get_node()
        assert node.type is Empty
        assert node.rendered is None

    def test_host_instance_is_platform_node(self, renderer, engine):
        renderer.render(create_element("div", None, "a", "b"))
        node = renderer.get_node()
        assert node.instance is renderer.container.children[0]
        assert engine.find_host_node(node.instance).tag == "div"

    def test_keyed_children_order(self, renderer):
        items = [create_element("li", {"key": k}, k) for k in ("c", "a", "b")]
        renderer.render(create_element("ul", None, *items))
        node = renderer.get_node()
        assert [li.key for li in node.rendered] == ["c", "a", "b"]

    def test_host_with_empty_children_list(self, renderer):
        renderer.render(create_element("ul", {"children": []}))
        node = renderer.get_node()
        assert node.node_type is NodeType.HOST
        assert node.rendered == ()

    def test_keyed_list_rendering_empty(self, renderer):
        def ItemList(props):
            items = [create_element("li", {"key": k}, k) for k in props["items"]]
            return create_element("ul", {"children": items})

        renderer.render(create_element(ItemList, {"items": ["a", "b"]}))
        assert len(renderer.get_node().rendered.rendered) == 2
        renderer.render(create_element(ItemList, {"items": []}))
        ul = renderer.get_node().rendered
        assert ul.type == "ul"
        assert len(ul.rendered) == 0

    def test_snapshot_not_updated_in_place(self, renderer):
        renderer.render(create_element(Counter))
        before = renderer.get_node()
        button = before.rendered.rendered[1]
        renderer.simulate_event(button, "click")
        assert before.rendered.rendered[0].rendered == (0,)
        assert renderer.get_node().rendered.rendered[0].rendered == (1,)


# ---------------------------------------------------------------------------
# render / unmount
# ---------------------------------------------------------------------------


class TestMountLifecycle:
    def test_render_attaches_to_container(self, renderer):
        renderer.render(create_element("div", None, "x"))
        assert [n.tag for n in renderer.container.children] == ["div"]

    def test_render_returns_none(self, renderer):
        assert renderer.render(create_element("div")) is None

    def test_attach_to(self, engine):
        root = engine.create_container()
        renderer = MountRenderer(engine, attach_to=root)
        renderer.render(create_element("span", None, "x"))
        assert root.children[0].tag == "span"

    def test_rerender_updates_instead_of_duplicating(self, renderer, engine):
        renderer.render(create_element(Counter, {"start": 1}))
        first = renderer.get_node().instance
        renderer.render(create_element(Counter, {"start": 5}))
        node = renderer.get_node()
        assert node.instance is first
        assert node.props["start"] == 5
        assert len(renderer.container.children) == 1
        assert engine.mounted_containers() == [renderer.container]

    def test_rerender_with_different_type(self, renderer):
        renderer.render(create_element(Counter))
        renderer.render(create_element("p", None, "plain"))
        node = renderer.get_node()
        assert node.type == "p"
        assert [n.tag for n in renderer.container.children] == ["p"]

    def test_unmount(self, renderer, engine):
        renderer.render(create_element(Counter))
        renderer.unmount()
        assert renderer.get_node() is None
        assert renderer.container.children == []
        assert engine.mounted_containers() == []

    def test_unmount_without_render_is_noop(self, renderer):
        renderer.unmount()
        renderer.unmount()
        assert renderer.get_node() is None

    def test_stale_node_does_not_own_instance(self, renderer):
        renderer.render(create_element(Label, {"text": "x"}))
        node = renderer.get_node()
        assert node.instance is not None
        renderer.unmount()
        gc.collect()
        assert node.instance is None

    def test_context_reaches_components(self, renderer):
        renderer.render(create_element(Counter), context={"theme": "dark"})
        assert renderer.get_node().instance.context == {"theme": "dark"}


# ---------------------------------------------------------------------------
# simulate_event / batched_updates
# ---------------------------------------------------------------------------


class TestMountEvents:
    def test_click_updates_state(self, renderer):
        renderer.render(create_element(Counter))
        button = renderer.get_node().rendered.rendered[1]
        renderer.simulate_event(button, "click")
        renderer.simulate_event(button, "click")
        assert renderer.get_node().instance.state == {"count": 2}

    def test_unmapped_event_raises_type_error(self, renderer):
        renderer.render(create_element("div"))
        with pytest.raises(TypeError, match="event 'nonsense' does not exist"):
            renderer.simulate_event(renderer.get_node(), "nonsense")

    def test_native_name_is_mapped(self, renderer):
        seen = []
        renderer.render(create_element("div", {"onDoubleClick": seen.append}))
        renderer.simulate_event(renderer.get_node(), "dblclick")
        assert len(seen) == 1
        assert seen[0].type == "doubleClick"

    def test_mock_fields_reach_handler(self, renderer):
        seen = []
        renderer.render(create_element("input", {"onChange": seen.append}))
        renderer.simulate_event(renderer.get_node(), "change", {"value": "typed"})
        assert seen[0].value == "typed"

    def test_event_on_component_node_targets_its_host(self, renderer):
        renderer.render(create_element(ClickPanel))
        node = renderer.get_node()
        renderer.simulate_event(node, "click")
        assert len(node.instance.clicks) == 1
        assert node.instance.clicks[0].target.tag == "div"

    def test_events_bubble(self, renderer):
        pressed = []
        renderer.render(create_element(ClickPanel, {"on_button": pressed.append}))
        node = renderer.get_node()
        button = node.rendered.rendered[0]
        renderer.simulate_event(button, "click")
        assert len(pressed) == 1
        assert len(node.instance.clicks) == 1

    def test_state_change_swaps_subtree(self, renderer):
        renderer.render(create_element(Toggle))
        node = renderer.get_node()
        assert node.rendered.type == "em"
        renderer.batched_updates(lambda: node.instance.set_state({"on": True}))
        after = renderer.get_node()
        assert after.rendered.type is Label
        assert [n.tag for n in renderer.container.children] == ["span"]

    def test_batched_updates_coalesce_rerenders(self, renderer):
        renderer.render(create_element(Counter))
        counter = renderer.get_node().instance
        assert Counter.renders == 1

        def bump_three_times():
            counter.increment()
            counter.increment()
            counter.increment()
            return "done"

        assert renderer.batched_updates(bump_three_times) == "done"
        assert Counter.renders == 2
        assert counter.state == {"count": 3}

    def test_unbatched_updates_render_each_time(self, renderer):
        renderer.render(create_element(Counter))
        counter = renderer.get_node().instance
        counter.increment()
        counter.increment()
        assert Counter.renders == 3
