from __future__ import annotations

import pytest

from html_aria import ATTRIBUTES, GLOBAL_ATTRIBUTES, ROLES, TAGS, get_supported_attributes, is_supported_attribute
from html_aria.attributes import NAMING_ATTRIBUTES
from html_aria.supported_attributes import COLOR_INPUT_ATTRIBUTES, FILE_INPUT_ATTRIBUTES, remove_prohibited

GENERIC_ATTRIBUTES = (
    "aria-atomic",
    "aria-busy",
    "aria-controls",
    "aria-current",
    "aria-describedby",
    "aria-description",
    "aria-details",
    "aria-dropeffect",
    "aria-flowto",
    "aria-grabbed",
    "aria-hidden",
    "aria-keyshortcuts",
    "aria-live",
    "aria-owns",
    "aria-relevant",
)
UNNAMED_GLOBALS = tuple(a for a in GLOBAL_ATTRIBUTES if a not in NAMING_ATTRIBUTES)


CASES = [
    ("div", {"tagName": "div"}, None, GENERIC_ATTRIBUTES),
    ("span", {"tagName": "span"}, None, GENERIC_ATTRIBUTES),
    ("div[role=button]", {"tagName": "div", "attributes": {"role": "button"}}, None, ROLES["button"].supported),
    ("div[role=bogus]", {"tagName": "div", "attributes": {"role": "bogus"}}, None, GENERIC_ATTRIBUTES),
    ("p", {"tagName": "p"}, None, UNNAMED_GLOBALS),
    ("abbr", {"tagName": "abbr"}, None, UNNAMED_GLOBALS),
    ("h1", {"tagName": "h1"}, None, ROLES["heading"].supported),
    ("html", {"tagName": "html"}, None, ()),
    ("datalist", {"tagName": "datalist"}, None, ()),
    ("meta", {"tagName": "meta"}, None, ()),
    ("br", {"tagName": "br"}, None, ("aria-hidden",)),
    ("wbr", {"tagName": "wbr"}, None, ("aria-hidden",)),
    ("picture", {"tagName": "picture"}, None, ("aria-hidden",)),
    ("html[role=document]", {"tagName": "html", "attributes": {"role": "document"}}, None, ()),
    ("img (no name)", {"tagName": "img"}, None, ("aria-hidden",)),
    ("img (empty alt)", {"tagName": "img", "attributes": {"alt": ""}}, None, ("aria-hidden",)),
    ("img (name)", {"tagName": "img", "attributes": {"alt": "Logo"}}, None, ROLES["img"].supported),
    ("audio", {"tagName": "audio"}, None, ROLES["application"].supported),
    ("video", {"tagName": "video"}, None, ROLES["application"].supported),
    ("input", {"tagName": "input"}, None, ROLES["textbox"].supported),
    ("input[type=search]", {"tagName": "input", "attributes": {"type": "search"}}, None, ROLES["searchbox"].supported),
    ("input[type=range]", {"tagName": "input", "attributes": {"type": "range"}}, None, ROLES["slider"].supported),
    ("input[type=color]", {"tagName": "input", "attributes": {"type": "color"}}, None, COLOR_INPUT_ATTRIBUTES),
    ("input[type=file]", {"tagName": "input", "attributes": {"type": "file"}}, None, FILE_INPUT_ATTRIBUTES),
    ("input[type=hidden]", {"tagName": "input", "attributes": {"type": "hidden"}}, None, ()),
    ("input[type=date]", {"tagName": "input", "attributes": {"type": "date"}}, None, ROLES["textbox"].supported),
    (
        "input[type=checkbox]",
        {"tagName": "input", "attributes": {"type": "checkbox"}},
        None,
        tuple(a for a in ROLES["checkbox"].supported if a != "aria-checked"),
    ),
    (
        "input[type=radio]",
        {"tagName": "input", "attributes": {"type": "radio"}},
        None,
        tuple(a for a in ROLES["radio"].supported if a != "aria-checked"),
    ),
    (
        "summary",
        {"tagName": "summary"},
        None,
        tuple(sorted(GLOBAL_ATTRIBUTES + ("aria-disabled", "aria-haspopup"))),
    ),
    ("footer", {"tagName": "footer"}, None, ROLES["contentinfo"].supported),
    ("footer (in main)", {"tagName": "footer"}, [{"tagName": "main"}], GENERIC_ATTRIBUTES),
    ("td (grid)", {"tagName": "td"}, [{"tagName": "table", "attributes": {"role": "grid"}}], ROLES["gridcell"].supported),
    ("td (no table)", {"tagName": "td"}, [], GLOBAL_ATTRIBUTES),
    ("x-widget", {"tagName": "x-widget"}, None, ()),
]


@pytest.mark.parametrize(("element", "ancestors", "want"), [c[1:] for c in CASES], ids=[c[0] for c in CASES])
def test_get_supported_attributes(element: dict, ancestors: list | None, want: tuple) -> None:
    assert get_supported_attributes(element, ancestors=ancestors) == tuple(sorted(want))


@pytest.mark.parametrize("tag", sorted(TAGS))
def test_results_are_sorted_known_attributes(tag: str) -> None:
    got = get_supported_attributes({"tagName": tag})
    assert list(got) == sorted(set(got))
    assert all(a in ATTRIBUTES for a in got)


@pytest.mark.parametrize("tag", sorted(t for t, info in TAGS.items() if info.naming_prohibited))
def test_naming_prohibited_tags_drop_naming_attributes(tag: str) -> None:
    got = get_supported_attributes({"tagName": tag})
    assert not set(got) & set(NAMING_ATTRIBUTES)


def test_explicit_role_restores_naming() -> None:
    assert not is_supported_attribute("aria-label", {"tagName": "div"})
    assert is_supported_attribute("aria-label", {"tagName": "div", "attributes": {"role": "button"}})
    assert not is_supported_attribute("aria-label", {"tagName": "div", "attributes": {"role": "bogus"}})
    # first known token wins
    assert is_supported_attribute("aria-pressed", {"tagName": "span", "attributes": {"role": "bogus button"}})


def test_override_beats_explicit_role() -> None:
    assert get_supported_attributes({"tagName": "br", "attributes": {"role": "button"}}) == ("aria-hidden",)


def test_remove_prohibited_is_idempotent() -> None:
    once = remove_prohibited(GLOBAL_ATTRIBUTES, name_prohibited=True, prohibited=("aria-roledescription",))
    twice = remove_prohibited(once, name_prohibited=True, prohibited=("aria-roledescription",))
    assert once == twice
    assert "aria-label" not in once
    assert "aria-roledescription" not in once
    assert "aria-hidden" in once


def test_remove_prohibited_without_flags_only_sorts() -> None:
    assert remove_prohibited(("aria-live", "aria-atomic", "aria-live")) == ("aria-atomic", "aria-live")
