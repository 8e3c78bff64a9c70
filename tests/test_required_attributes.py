from __future__ import annotations

import pytest

from html_aria import ROLE_NAMES, get_required_attributes, is_name_required, is_required_attribute

NAME_REQUIRED = {
    "alertdialog",
    "application",
    "button",
    "checkbox",
    "columnheader",
    "combobox",
    "dialog",
    "form",
    "graphics-document",
    "graphics-symbol",
    "grid",
    "heading",
    "image",
    "img",
    "link",
    "listbox",
    "menuitem",
    "menuitemcheckbox",
    "menuitemradio",
    "meter",
    "option",
    "progressbar",
    "radio",
    "radiogroup",
    "region",
    "rowheader",
    "searchbox",
    "slider",
    "spinbutton",
    "switch",
    "tab",
    "table",
    "tabpanel",
    "textbox",
    "tree",
    "treegrid",
    "treeitem",
}


@pytest.mark.parametrize(
    ("role", "want"),
    [
        ("checkbox", ("aria-checked",)),
        ("combobox", ("aria-expanded",)),
        ("heading", ("aria-level",)),
        ("menuitemcheckbox", ("aria-checked",)),
        ("menuitemradio", ("aria-checked",)),
        ("meter", ("aria-valuenow",)),
        ("radio", ("aria-checked",)),
        ("scrollbar", ("aria-controls", "aria-valuenow")),
        ("slider", ("aria-valuenow",)),
        ("switch", ("aria-checked",)),
        ("button", ()),
        ("generic", ()),
        ("spinbutton", ()),
        ("not-a-role", ()),
        (None, ()),
    ],
)
def test_get_required_attributes(role: str | None, want: tuple) -> None:
    assert get_required_attributes(role) == want


def test_is_required_attribute() -> None:
    assert is_required_attribute("aria-checked", "checkbox")
    assert is_required_attribute("aria-controls", "scrollbar")
    assert not is_required_attribute("aria-pressed", "button")
    assert not is_required_attribute("aria-checked", "not-a-role")


@pytest.mark.parametrize("role", ROLE_NAMES)
def test_is_name_required(role: str) -> None:
    assert is_name_required(role) is (role in NAME_REQUIRED)


def test_name_required_roles_are_all_known() -> None:
    assert NAME_REQUIRED <= set(ROLE_NAMES)
    assert not is_name_required("not-a-role")
    assert not is_name_required(None)
