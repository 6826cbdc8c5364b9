import pytest

from lumen_blocks.core import (
    IdGenerator,
    Node,
    Signal,
    id_or,
    join_classes,
    prepend_classes,
    reset_ids,
    unique_id,
)


def test_node_flattens_children_and_drops_none():
    node = Node("div", children=["a", None, [Node("span"), ["b"]]])
    assert len(node.children) == 3
    assert node.children[0] == "a"
    assert node.children[2] == "b"


def test_node_rejects_bad_child():
    with pytest.raises(TypeError):
        Node("div", children=[42])


def test_iter_is_depth_first():
    tree = Node("div", children=[Node("p", children=[Node("b")]), Node("span")])
    assert [n.tag for n in tree.iter()] == ["div", "p", "b", "span"]


def test_find_and_find_all():
    tree = Node("div", children=[Node("span", {"id": "one"}), Node("span", {"id": "two"})])
    assert tree.find(lambda n: n.tag == "span").attrs["id"] == "one"
    assert tree.find(lambda n: n.tag == "table") is None
    assert [n.attrs["id"] for n in tree.find_all(lambda n: n.tag == "span")] == ["one", "two"]


def test_trigger_calls_handler():
    node = Node("button", handlers={"click": lambda x, y: x + y})
    assert node.trigger("click", 2, 3) == 5


def test_trigger_unknown_event():
    with pytest.raises(KeyError):
        Node("button").trigger("click")


def test_to_html_attributes_and_escaping():
    node = Node("p", {"class": "x", "hidden": True, "title": None}, ["a<b"])
    assert node.to_html() == '<p class="x" hidden>a&lt;b</p>'


def test_to_html_void_element():
    node = Node("input", {"disabled": False, "type": "text"})
    assert node.to_html() == '<input type="text">'


def test_signal_set_and_subscribe():
    signal = Signal(1)
    seen = []
    unsubscribe = signal.subscribe(seen.append)
    signal.set(5)
    assert signal.value == 5
    assert signal() == 5
    unsubscribe()
    signal.set(7)
    assert seen == [5]


def test_id_generator_sequence_and_reset():
    gen = IdGenerator()
    first = gen.next_id()
    second = gen.next_id()
    assert first == "dxc-0"
    assert first != second
    gen.reset()
    assert gen.next_id() == first


def test_shared_ids_reset():
    reset_ids()
    a = unique_id()
    b = unique_id()
    assert a != b
    reset_ids()
    assert unique_id() == a


def test_id_or_prefers_user_id():
    assert id_or("gen", "mine") == "mine"
    assert id_or("gen", None) == "gen"
    assert id_or("gen", "") == ""


def test_join_classes_filters_empty():
    assert join_classes("a", "", None, "b") == "a b"
    assert join_classes() == ""


def test_prepend_classes():
    assert prepend_classes("x", "y") == "x y"
    assert prepend_classes(None, "y") == "y"
    assert prepend_classes("", "y") == " y"