from __future__ import annotations

import xml.etree.ElementTree as ET
from types import SimpleNamespace
from xml.dom import minidom

import pytest

from html_aria import VirtualElement, calculate_accessible_name, get_role, virtualize_element
from html_aria.util import is_empty_ancestor_list, iter_ancestors, parse_token_list


def test_mapping_shapes() -> None:
    for element in (
        {"tagName": "BUTTON", "attributes": {"Type": "submit"}},
        {"tag_name": "button", "attrs": {"type": "submit"}},
        {"tag": "button", "attributes": {"type": "submit"}},
    ):
        el = virtualize_element(element)
        assert el == VirtualElement("button", {"type": "submit"})


def test_mapping_without_attributes_keeps_none() -> None:
    assert virtualize_element({"tagName": "a"}).attributes is None
    assert virtualize_element({"tagName": "a", "attributes": {}}).attributes == {}


def test_virtual_element_round_trips() -> None:
    el = VirtualElement("nav", {"role": "menu"})
    assert virtualize_element(el) == el
    assert el.to_dict() == {"tagName": "nav", "attributes": {"role": "menu"}}
    assert VirtualElement("nav").to_dict() == {"tagName": "nav", "attributes": None}


def test_virtual_element_is_normalized() -> None:
    el = VirtualElement("DIV", {"ROLE": "button", "Class": ["a", "b"]})
    assert virtualize_element(el) == VirtualElement("div", {"role": "button", "class": "a b"})
    assert get_role(el) == "button"
    assert virtualize_element(VirtualElement(" Nav ")).attributes is None


def test_beautifulsoup_tag() -> None:
    bs4 = pytest.importorskip("bs4")
    soup = bs4.BeautifulSoup('<BUTTON aria-pressed="true" class="a b">x</BUTTON>', "html.parser")
    tag = soup.button
    assert virtualize_element(tag) == VirtualElement("button", {"aria-pressed": "true", "class": "a b"})
    assert get_role(tag) == "button"
    link = bs4.BeautifulSoup('<a href="/" rel="noopener">home</a>', "html.parser").a
    assert get_role(link) == "link"


def test_etree_element() -> None:
    el = virtualize_element(ET.Element("{http://www.w3.org/2000/svg}SVG", {"ROLE": "img"}))
    assert el.tag_name == "svg"
    assert el.attr("role") == "img"


def test_minidom_element() -> None:
    node = minidom.parseString('<DIV ROLE="button" aria-pressed="true"/>').documentElement
    el = virtualize_element(node)
    assert el.tag_name == "div"
    assert el.attr("role") == "button"
    assert get_role(node) == "button"


def test_soup_like_element_joins_list_values() -> None:
    tag = SimpleNamespace(name="a", attrs={"href": "/", "rel": ["noopener", "noreferrer"]})
    el = virtualize_element(tag)
    assert el.tag_name == "a"
    assert el.attr("rel") == "noopener noreferrer"
    assert get_role(tag) == "link"


def test_unsupported_shape_raises() -> None:
    with pytest.raises(TypeError, match="Unsupported element type: int"):
        virtualize_element(42)


def test_attr_helpers() -> None:
    el = VirtualElement("input", {"type": "checkbox", "checked": True})
    assert el.attr("type") == "checkbox"
    assert el.attr("missing") is None
    assert el.has_attr("checked")
    assert not el.has_attr("missing")
    assert not VirtualElement("input").has_attr("type")
    assert virtualize_element({"tagName": "  SPAN "}).tag_name == "span"


def test_token_and_ancestor_helpers() -> None:
    assert parse_token_list("  button   link ") == ["button", "link"]
    assert parse_token_list(None) == []
    assert is_empty_ancestor_list([])
    assert is_empty_ancestor_list(())
    assert not is_empty_ancestor_list(None)
    assert not is_empty_ancestor_list([{"tagName": "ul"}])
    assert [a.tag_name for a in iter_ancestors([{"tagName": "UL"}, ET.Element("body")])] == ["ul", "body"]
    assert list(iter_ancestors(None)) == []


@pytest.mark.parametrize(
    ("element", "want"),
    [
        ({"tagName": "button", "attributes": {"aria-label": "  Close   dialog "}}, "Close dialog"),
        ({"tagName": "button", "attributes": {"aria-labelledby": "title", "aria-label": "Close"}}, "title"),
        ({"tagName": "img", "attributes": {"alt": "Logo"}}, "Logo"),
        ({"tagName": "area", "attributes": {"alt": "Map region"}}, "Map region"),
        ({"tagName": "input", "attributes": {"type": "image", "alt": "Go"}}, "Go"),
        ({"tagName": "div", "attributes": {"alt": "ignored"}}, ""),
        ({"tagName": "div", "attributes": {"title": "Tooltip"}}, "Tooltip"),
        ({"tagName": "img", "attributes": {"alt": ""}}, ""),
        ({"tagName": "img", "attributes": {"aria-label": True}}, ""),
        ({"tagName": "img"}, ""),
    ],
)
def test_calculate_accessible_name(element: dict, want: str) -> None:
    assert calculate_accessible_name(element) == want
