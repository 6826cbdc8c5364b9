import pytest

from lumen_blocks.core import Node, Signal
from lumen_blocks.dropdown import (
    Dropdown,
    DropdownRadioGroup,
    dropdown_checkbox_item,
    dropdown_content,
    dropdown_item,
    dropdown_label,
    dropdown_separator,
    dropdown_trigger,
)


def _by_tag(tag):
    return lambda node: node.tag == tag


def test_dropdown_root_classes_and_disabled():
    root = Dropdown(id="menu").render("x")
    assert root.attrs["class"] == "relative inline-block text-left"
    assert root.attrs["id"] == "menu"
    assert root.attrs["aria-disabled"] == "false"

    disabled = Dropdown(disabled=True).render()
    assert "opacity-50 pointer-events-none" in disabled.attrs["class"]
    assert disabled.attrs["aria-disabled"] == "true"


def test_dropdown_set_open_and_default_open():
    dropdown = Dropdown()
    assert dropdown.is_open.value is False
    dropdown.set_open(True)
    assert dropdown.render().attrs["data-state"] == "open"
    assert Dropdown(default_open=True).is_open.value is True


def test_focus_out_closes_after_delay():
    dropdown = Dropdown(default_open=True, close_delay=0.0)
    timer = dropdown.focus_out()
    timer.join(timeout=2)
    assert dropdown.is_open.value is False


def test_focusout_handler_on_inner_wrapper():
    dropdown = Dropdown(default_open=True, close_delay=0.0)
    root = dropdown.render("item")
    inner = root.children[0]
    assert inner.attrs["tabindex"] == "0"
    timer = inner.trigger("focusout")
    timer.join(timeout=2)
    assert dropdown.is_open.value is False


def test_trigger_click_toggles_open():
    dropdown = Dropdown()
    root = dropdown.render(dropdown_trigger("Open"), dropdown_content(dropdown_item("A")))
    button = root.find(_by_tag("button"))
    assert button.attrs["aria-expanded"] == "false"
    button.trigger("click")
    assert dropdown.is_open.value is True
    button.trigger("click")
    assert dropdown.is_open.value is False


def test_disabled_dropdown_trigger_does_not_open():
    dropdown = Dropdown(disabled=True)
    root = dropdown.render(dropdown_trigger("Open"))
    root.find(_by_tag("button")).trigger("click")
    assert dropdown.is_open.value is False


def test_content_hidden_state_follows_open():
    dropdown = Dropdown()
    closed = dropdown.render(dropdown_content("A"))
    content = closed.find(lambda n: n.attrs.get("role") == "menu")
    assert content.attrs["data-state"] == "closed"
    assert content.attrs["hidden"] is True
    dropdown.set_open(True)
    opened = dropdown.render(dropdown_content("A"))
    content = opened.find(lambda n: n.attrs.get("role") == "menu")
    assert content.attrs["hidden"] is False


@pytest.mark.parametrize(
    "align, expected",
    [
        ("end", "right-0 origin-top-right"),
        ("center", "left-1/2 -translate-x-1/2 origin-top"),
        ("start", "left-0 origin-top-left"),
        ("bogus", "left-0 origin-top-left"),
    ],
)
def test_content_alignment(align, expected):
    node = dropdown_content(align=align)
    assert expected in node.attrs["class"]
    assert node.attrs["class"].endswith("w-56")


def test_label_and_separator():
    label_node = dropdown_label("Account", id="lbl")
    assert label_node.attrs["class"] == "px-2 py-1.5 text-xs font-semibold text-foreground/80"
    assert label_node.children == ["Account"]
    sep = dropdown_separator(id="sep")
    assert sep.attrs["role"] == "separator"
    assert sep.attrs["class"] == "h-px my-1 bg-muted"


def test_item_select_passes_value():
    seen = []
    node = dropdown_item("Copy", value="copy", on_select=seen.append)
    node.trigger("select")
    assert seen == ["copy"]
    assert "hover:bg-secondary" in node.attrs["class"]


def test_disabled_item_does_not_select():
    seen = []
    node = dropdown_item("Copy", value="copy", disabled=True, on_select=seen.append)
    node.trigger("select")
    assert seen == []
    assert node.attrs["data-disabled"] == "true"


def test_destructive_item_and_icon():
    icon = Node("svg")
    node = dropdown_item("Delete", destructive=True, icon=icon)
    assert "text-destructive focus:text-destructive" in node.attrs["class"]
    assert node.children[0].children[0] is icon
    assert node.children[1] == "Delete"


def test_checkbox_item_reports_toggled_state():
    seen = []
    node = dropdown_checkbox_item("Bold", checked=True, on_change=seen.append)
    node.trigger("select")
    assert seen == [False]
    assert node.find(_by_tag("svg")) is not None

    unchecked = dropdown_checkbox_item("Bold", on_change=seen.append)
    unchecked.trigger("select")
    assert seen == [False, True]
    assert unchecked.find(_by_tag("svg")) is None


def test_radio_group_selection():
    chosen = []
    group = DropdownRadioGroup(value=Signal("b"), on_value_change=chosen.append)
    a = group.item("A", value="a")
    b = group.item("B", value="b")
    assert a.attrs["aria-checked"] == "false"
    assert b.attrs["aria-checked"] == "true"
    a.trigger("select")
    assert chosen == ["a"]
    container = group.render(a, b)
    assert container.attrs["class"] == "dropdown-radio-group"
    assert container.attrs["role"] == "radiogroup"


def test_radio_item_without_handler_raises():
    group = DropdownRadioGroup(value="a")
    with pytest.raises(RuntimeError):
        group.item("A", value="a")