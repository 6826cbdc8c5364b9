import pytest

from lumen_blocks.context_menu import (
    ContextMenuRadioGroup,
    context_menu,
    context_menu_checkbox_item,
    context_menu_content,
    context_menu_item,
    context_menu_label,
    context_menu_separator,
    context_menu_trigger,
)
from lumen_blocks.core import Node, Signal


def _has_svg(node):
    return node.find(lambda n: n.tag == "svg") is not None


def test_enabled_menu_classes():
    node = context_menu(id="menu")
    assert node.attrs["class"] == "relative"
    assert node.attrs["aria-disabled"] == "false"
    assert node.attrs["id"] == "menu"


def test_disabled_menu_classes():
    node = context_menu(disabled=True, aria_label="Actions")
    assert "opacity-50 pointer-events-none" in node.attrs["class"]
    assert node.attrs["aria-disabled"] == "true"
    assert node.attrs["aria-label"] == "Actions"


def test_generated_ids_are_distinct():
    first = context_menu_item(value="a")
    second = context_menu_item(value="a")
    assert first.attrs["id"] != second.attrs["id"]
    assert first.attrs["id"].startswith("dxc-")


def test_trigger_wraps_children():
    child = Node("span", children=["Right click"])
    node = context_menu_trigger(child)
    assert node.children == [child]


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
    node = context_menu_content(align=align)
    assert expected in node.attrs["class"]


def test_content_width_is_last_class():
    assert context_menu_content().attrs["class"].endswith("w-56")
    assert context_menu_content(width="w-72").attrs["class"].endswith("w-72")


def test_label_classes_and_attributes():
    node = context_menu_label("Section", attributes={"data-x": "y"})
    assert node.attrs["class"] == "px-2 py-1.5 text-xs font-semibold text-foreground/80"
    assert node.attrs["data-x"] == "y"
    assert node.children == ["Section"]


def test_separator():
    node = context_menu_separator(id="sep")
    assert node.attrs["role"] == "separator"
    assert node.attrs["aria-orientation"] == "horizontal"
    assert node.attrs["class"] == "h-px my-1 bg-muted"
    assert node.attrs["id"] == "sep"


@pytest.mark.parametrize("checked", [True, False])
def test_checkbox_item_reports_toggled_state(checked):
    received = []
    node = context_menu_checkbox_item("Bold", checked=checked, on_change=received.append)
    node.trigger("select")
    assert received == [not checked]
    assert _has_svg(node) is checked


def test_disabled_checkbox_item_classes():
    node = context_menu_checkbox_item(disabled=True)
    assert "pointer-events-none opacity-50" in node.attrs["class"]
    assert "hover:bg-accent hover:text-accent-foreground" not in node.attrs["class"]


def test_radio_group_marks_selected_item():
    chosen = []
    group = ContextMenuRadioGroup(value=Signal("a"), on_value_change=chosen.append)
    item_a = group.item("A", value="a")
    item_b = group.item("B", value="b")
    dot_a = item_a.find(lambda n: "style" in n.attrs)
    dot_b = item_b.find(lambda n: "style" in n.attrs)
    assert dot_a.attrs["style"] == "opacity: 1"
    assert dot_b.attrs["style"] == "opacity: 0"
    item_b.trigger("select")
    assert chosen == ["b"]


def test_radio_group_render():
    group = ContextMenuRadioGroup(value="a", id="grp", on_value_change=lambda v: None)
    node = group.render(group.item(value="a"))
    assert node.attrs["role"] == "radiogroup"
    assert node.attrs["class"] == "context-menu-radio-group"
    assert node.attrs["id"] == "grp"
    assert len(node.children) == 1


def test_radio_item_without_handler_raises():
    group = ContextMenuRadioGroup(value="a")
    with pytest.raises(RuntimeError):
        group.item(value="a")


def test_item_select_passes_value():
    received = []
    node = context_menu_item("Copy", value="copy", on_select=received.append)
    node.trigger("select")
    assert received == ["copy"]
    assert node.attrs["data-value"] == "copy"


def test_item_destructive_and_icon():
    icon = Node("svg")
    node = context_menu_item("Delete", destructive=True, icon=icon)
    assert "text-destructive focus:text-destructive" in node.attrs["class"]
    wrapper = node.children[0]
    assert wrapper.attrs["class"] == "mr-2"
    assert wrapper.children == [icon]


def test_plain_item_without_handler_returns_none():
    node = context_menu_item("Copy")
    assert node.trigger("select") is None
    assert "text-destructive" not in node.attrs["class"]