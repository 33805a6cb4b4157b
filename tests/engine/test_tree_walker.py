"""
Tests for depth-first markup traversal.
"""

from html_interpreter.engine.tree_walker import iter_events, traverse
from html_interpreter.models.markup import AncestorFrame, TextNode

from tests.helpers import element


def _collect(nodes, session):
    events = []

    def callback(kind, value, data):
        if kind == "text_node":
            events.append((kind, value, [f.name for f in data]))
        else:
            events.append((kind, value, data.name))

    traverse(nodes, session, callback)
    return events


class TestTraverse:
    """Test the event protocol."""

    def test_document_order(self, session):
        tree = [element("p", None, "Hello ", element("b", None, "World"))]

        assert _collect(tree, session) == [
            ("opening_tag", "p", "p"),
            ("text_node", "Hello ", ["p"]),
            ("opening_tag", "b", "b"),
            ("text_node", "World", ["p", "b"]),
            ("closing_tag", "b", "b"),
            ("closing_tag", "p", "p"),
        ]

    def test_newlines_are_stripped(self, session):
        events = _collect([TextNode("line\r\none\n")], session)
        assert events == [("text_node", "lineone", [])]

    def test_closing_frame_carries_node(self, session):
        node = element("div", {"id": "main"})
        frames = []

        def callback(kind, value, data):
            if kind == "closing_tag":
                frames.append(data)

        traverse([node], session, callback)

        assert frames == [AncestorFrame("div", node)]
        assert frames[0].node is node

    def test_empty_element_has_no_child_events(self, session):
        assert _collect([element("br")], session) == [
            ("opening_tag", "br", "br"),
            ("closing_tag", "br", "br"),
        ]


class TestLastElement:
    """Test last sibling element tracking."""

    def test_last_element_seen_by_next_closing_tag(self, session):
        seen = []

        def callback(kind, value, data):
            if kind == "closing_tag":
                seen.append((value, session.last_element))

        traverse([element("br"), element("br")], session, callback)

        assert seen == [("br", None), ("br", "br")]
        assert session.last_element == "br"

    def test_text_resets_last_element(self, session):
        seen = []

        def callback(kind, value, data):
            if kind == "closing_tag":
                seen.append(session.last_element)

        traverse([element("br"), TextNode("x"), element("br")], session, callback)

        assert seen == [None, None]

    def test_empty_text_keeps_last_element(self, session):
        seen = []

        def callback(kind, value, data):
            if kind == "closing_tag":
                seen.append(session.last_element)

        traverse([element("br"), TextNode("\n"), element("br")], session, callback)

        assert seen == [None, "br"]


class TestIterEvents:
    """Test the generator form."""

    def test_yields_named_events(self, session):
        events = list(iter_events([element("i", None, "x")], session))

        assert [event.kind for event in events] == ["opening_tag", "text_node", "closing_tag"]
        assert events[1].value == "x"
        assert [f.name for f in events[1].data] == ["i"]
