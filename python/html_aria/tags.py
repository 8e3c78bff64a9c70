# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""Per-element defaults from ARIA in HTML (https://www.w3.org/TR/html-aria/).

``default_role`` and ``supported_roles`` are only the starting point: many
elements depend on attributes or ancestors, and those rules live in the
resolvers. ``supported_attributes_override`` wins over anything role-derived;
an empty tuple there means the element takes no aria-* attributes at all.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .roles import ALL_ROLES, NO_ROLES
from .types import RoleSet, TagInfo

NO_CORRESPONDING_ROLE = None

_HEADING = ("heading", "none", "presentation", "tab")
_LIST = (
    "group",
    "list",
    "listbox",
    "menu",
    "menubar",
    "none",
    "presentation",
    "radiogroup",
    "tablist",
    "toolbar",
    "tree",
)
_BUTTON = (
    "button",
    "checkbox",
    "combobox",
    "gridcell",
    "link",
    "menuitem",
    "menuitemcheckbox",
    "menuitemradio",
    "option",
    "radio",
    "separator",
    "slider",
    "switch",
    "tab",
    "treeitem",
)
_EMBEDDED = ("application", "document", "img", "image", "none", "presentation")
_LANDMARK_HEADER = ("generic", "group", "none", "presentation")

# <body> takes every global attribute except aria-hidden and the naming ones.
_BODY_ATTRIBUTES = (
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
    "aria-keyshortcuts",
    "aria-live",
    "aria-owns",
    "aria-relevant",
)


def _tag(
    default_role: str | None,
    supported_roles: Iterable[str] | RoleSet,
    *,
    override: Iterable[str] | None = None,
    naming_prohibited: bool = False,
) -> TagInfo:
    if not isinstance(supported_roles, RoleSet):
        supported_roles = tuple(sorted(supported_roles))
    return TagInfo(
        default_role=default_role,
        supported_roles=supported_roles,
        supported_attributes_override=None if override is None else tuple(sorted(override)),
        naming_prohibited=naming_prohibited,
    )


def _phrasing(default_role: str | None = "generic") -> TagInfo:
    return _tag(default_role, ALL_ROLES, naming_prohibited=True)


def _metadata(supported_roles: Iterable[str] | RoleSet = ()) -> TagInfo:
    return _tag(NO_CORRESPONDING_ROLE, supported_roles, override=())


_TAGS: dict[str, TagInfo] = {
    # main root
    "html": _tag("document", ("document",), override=()),
    # document metadata
    "base": _metadata(NO_ROLES),
    "head": _metadata(),
    "link": _metadata(),
    "meta": _metadata(),
    "style": _metadata(),
    "title": _metadata(),
    # sectioning root
    "body": _tag("generic", ("generic",), override=_BODY_ATTRIBUTES, naming_prohibited=True),
    # content sectioning
    "address": _tag("group", ALL_ROLES),
    "article": _tag(
        "article", ("application", "article", "document", "feed", "main", "none", "presentation", "region")
    ),
    "aside": _tag("complementary", ("complementary", "feed", "none", "note", "presentation", "region", "search")),
    "footer": _tag("contentinfo", ("contentinfo",) + _LANDMARK_HEADER),
    "header": _tag("banner", ("banner",) + _LANDMARK_HEADER),
    "h1": _tag("heading", _HEADING),
    "h2": _tag("heading", _HEADING),
    "h3": _tag("heading", _HEADING),
    "h4": _tag("heading", _HEADING),
    "h5": _tag("heading", _HEADING),
    "h6": _tag("heading", _HEADING),
    "hgroup": _tag("group", ALL_ROLES),
    "main": _tag("main", ("main",)),
    "nav": _tag("navigation", ("menu", "menubar", "navigation", "none", "presentation", "tablist")),
    # the name of a <section> needs the whole document; "region" is the named case
    "section": _tag(
        "region",
        (
            "alert",
            "alertdialog",
            "application",
            "banner",
            "complementary",
            "contentinfo",
            "dialog",
            "document",
            "feed",
            "generic",
            "group",
            "log",
            "main",
            "marquee",
            "navigation",
            "none",
            "note",
            "presentation",
            "region",
            "search",
            "status",
            "tabpanel",
        ),
    ),
    "search": _tag("search", ("form", "group", "none", "presentation", "region", "search")),
    # text content
    "blockquote": _tag("blockquote", ALL_ROLES),
    "dd": _tag(NO_CORRESPONDING_ROLE, NO_ROLES),
    "div": _phrasing(),
    "dl": _tag(NO_CORRESPONDING_ROLE, ("group", "list", "none", "presentation")),
    "dt": _tag(NO_CORRESPONDING_ROLE, ("listitem",)),
    "figcaption": _tag(NO_CORRESPONDING_ROLE, ("group", "none", "presentation"), naming_prohibited=True),
    "figure": _tag("figure", ALL_ROLES),
    "hr": _tag("separator", ("none", "presentation", "separator")),
    "li": _tag("listitem", ("listitem",)),
    "menu": _tag("list", _LIST),
    "ol": _tag("list", _LIST),
    "p": _phrasing("paragraph"),
    "pre": _phrasing(),
    "ul": _tag("list", _LIST),
    # inline text semantics
    "a": _tag(
        "link",
        (
            "button",
            "checkbox",
            "link",
            "menuitem",
            "menuitemcheckbox",
            "menuitemradio",
            "option",
            "radio",
            "switch",
            "tab",
            "treeitem",
        ),
    ),
    "abbr": _phrasing(NO_CORRESPONDING_ROLE),
    "b": _phrasing(),
    "bdi": _phrasing(),
    "bdo": _phrasing(),
    "br": _tag(NO_CORRESPONDING_ROLE, ("none", "presentation"), override=("aria-hidden",)),
    "cite": _phrasing(NO_CORRESPONDING_ROLE),
    "code": _phrasing("code"),
    "data": _phrasing(),
    "dfn": _tag("term", ALL_ROLES),
    "em": _phrasing("emphasis"),
    "i": _phrasing(),
    "kbd": _phrasing(NO_CORRESPONDING_ROLE),
    "mark": _phrasing("mark"),
    "q": _phrasing(),
    "rp": _phrasing(NO_CORRESPONDING_ROLE),
    "rt": _phrasing(NO_CORRESPONDING_ROLE),
    "ruby": _tag(NO_CORRESPONDING_ROLE, ALL_ROLES),
    "s": _phrasing("deletion"),
    "samp": _phrasing(),
    "small": _phrasing(),
    "span": _phrasing(),
    "strong": _phrasing("strong"),
    "sub": _phrasing("subscript"),
    "sup": _phrasing("superscript"),
    "time": _phrasing("time"),
    "u": _phrasing(),
    "var": _phrasing(NO_CORRESPONDING_ROLE),
    "wbr": _tag(NO_CORRESPONDING_ROLE, ("none", "presentation"), override=("aria-hidden",)),
    # image and multimedia
    "area": _tag("link", ("link",)),
    "audio": _tag(NO_CORRESPONDING_ROLE, ("application",)),
    "img": _tag("none", ("image", "img", "none", "presentation")),
    "map": _metadata(),
    "track": _metadata(),
    "video": _tag(NO_CORRESPONDING_ROLE, ("application",)),
    # embedded content
    "embed": _tag(NO_CORRESPONDING_ROLE, _EMBEDDED),
    "iframe": _tag(NO_CORRESPONDING_ROLE, _EMBEDDED),
    "object": _tag(NO_CORRESPONDING_ROLE, ("application", "document", "image", "img")),
    "picture": _tag(NO_CORRESPONDING_ROLE, (), override=("aria-hidden",)),
    "source": _metadata(),
    # svg and mathml
    "svg": _tag("graphics-document", ALL_ROLES),
    "math": _tag("math", ("math",)),
    # scripting
    "canvas": _tag(NO_CORRESPONDING_ROLE, ALL_ROLES),
    "noscript": _metadata(),
    "script": _metadata(),
    # demarcating edits
    "del": _phrasing("deletion"),
    "ins": _phrasing("insertion"),
    # table content
    "caption": _tag("caption", ("caption",), naming_prohibited=True),
    "col": _metadata(NO_ROLES),
    "colgroup": _metadata(NO_ROLES),
    "table": _tag("table", ALL_ROLES),
    "tbody": _tag("rowgroup", ALL_ROLES),
    "td": _tag("cell", ("cell",)),
    "tfoot": _tag("rowgroup", ALL_ROLES),
    "th": _tag("columnheader", ("cell", "columnheader", "gridcell", "rowheader")),
    "thead": _tag("rowgroup", ALL_ROLES),
    "tr": _tag("row", ("row",)),
    # forms
    "button": _tag("button", _BUTTON),
    "datalist": _tag("listbox", ("listbox",), override=()),
    "fieldset": _tag("group", ("group", "none", "presentation", "radiogroup")),
    "form": _tag("form", ("form", "none", "presentation", "search")),
    "input": _tag("textbox", ("combobox", "searchbox", "spinbutton", "textbox")),
    "label": _tag(NO_CORRESPONDING_ROLE, (), naming_prohibited=True),
    "legend": _tag(NO_CORRESPONDING_ROLE, (), naming_prohibited=True),
    "meter": _tag("meter", ("meter",)),
    "optgroup": _tag("group", ("group",)),
    "option": _tag("option", ("option",)),
    "output": _tag("status", ALL_ROLES),
    "progress": _tag("progressbar", ("progressbar",)),
    "select": _tag("combobox", ("combobox", "menu")),
    "textarea": _tag("textbox", ("textbox",)),
    # interactive elements
    "details": _tag("group", ("group",)),
    "dialog": _tag("dialog", ("alertdialog", "dialog")),
    "summary": _tag(NO_CORRESPONDING_ROLE, ALL_ROLES),
    # web components
    "slot": _metadata(),
    "template": _metadata(),
    # svg (partial)
    "g": _tag(NO_CORRESPONDING_ROLE, ("graphics-object", "group")),
}

TAGS: Mapping[str, TagInfo] = MappingProxyType(_TAGS)

# Button-like inputs share the <button> allowlist.
BUTTON_ROLES: tuple[str, ...] = tuple(sorted(_BUTTON))
