import pytest

from lumen_blocks.label import LabelSize, label


def test_default_classes():
    node = label("Email", id="l1")
    assert node.attrs["class"] == "font-medium mb-1.5 block text-sm text-foreground"
    assert node.attrs["id"] == "l1"


@pytest.mark.parametrize(
    "size, expected",
    [(LabelSize.SMALL, "text-xs"), (LabelSize.MEDIUM, "text-sm"), (LabelSize.LARGE, "text-base")],
)
def test_size_classes(size, expected):
    assert expected in label("x", size=size).attrs["class"].split()


def test_disabled_classes():
    node = label("x", disabled=True)
    assert node.attrs["class"].endswith("text-muted-foreground cursor-not-allowed opacity-70")
    assert "text-foreground" not in node.attrs["class"].split()


def test_user_class_last():
    node = label("x", class_="uppercase")
    assert node.attrs["class"].split()[-1] == "uppercase"


def test_for_attribute_in_html():
    html = label("Email", for_id="email", id="l1").to_html()
    assert 'for="email"' in html
    assert html.startswith("<label")


def test_for_omitted_when_missing():
    assert "for=" not in label("Email", id="l1").to_html()


def test_required_marker():
    node = label("Email", required=True)
    marker = node.children[-1]
    assert marker.children == ["*"]
    assert marker.attrs["class"] == "ml-1 text-destructive"
    assert marker.attrs["aria-hidden"] == "true"


def test_no_marker_when_optional():
    assert label("Email").children == ["Email"]


def test_attributes_pass_through():
    node = label("Email", attributes={"title": "Your address"})
    assert node.attrs["title"] == "Your address"


def test_generated_ids_distinct():
    first = label("a")
    second = label("b")
    assert first.attrs["id"] != second.attrs["id"]
    assert first.attrs["id"].startswith("dxc-")