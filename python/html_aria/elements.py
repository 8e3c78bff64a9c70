# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""Attribute and ancestor classification shared by the role resolvers.

Both get_role() and get_supported_roles() go through these helpers so they
always agree on which bucket an element or ancestor falls into; they only
differ in what they return for each bucket.
"""
from __future__ import annotations

import enum
from typing import Any

from .roles import ROLES
from .tags import TAGS
from .types import AncestorList, VirtualElement
from .util import calculate_accessible_name, is_empty_ancestor_list, iter_ancestors, parse_token_list

SECTIONING_CONTENT = frozenset({"article", "aside", "nav", "section"})
SECTIONING_ROOTS = frozenset({"blockquote", "details", "dialog", "fieldset", "figure", "td"})
# roles that scope a <header>/<footer> the same way sectioning elements do
SCOPING_ROLES = frozenset({"article", "complementary", "main", "navigation", "region"})

INPUT_TYPE_ROLES = {
    "button": "button",
    "checkbox": "checkbox",
    "email": "textbox",
    "image": "button",
    "number": "spinbutton",
    "radio": "radio",
    "range": "slider",
    "reset": "button",
    "search": "searchbox",
    "submit": "button",
    "tel": "textbox",
    "text": "textbox",
    "url": "textbox",
}
NO_ROLE_INPUT_TYPES = frozenset(
    {"color", "date", "datetime-local", "file", "hidden", "month", "password", "time", "week"}
)
# types for which a list="" attribute turns the input into a combobox
LIST_INPUT_TYPES = frozenset({"email", "search", "tel", "text", "url"})


class CellContext(enum.Enum):
    UNKNOWN = "unknown"
    NO_TABLE = "no_table"
    TABLE = "table"
    GRID = "grid"


def explicit_role(element: VirtualElement) -> str | None:
    """First token of ``role`` that names a known role, if any."""
    for token in parse_token_list(element.attr("role")):
        if token in ROLES:
            return token
    return None


def is_landmark_scoped(ancestors: AncestorList) -> bool:
    """Whether a <header>/<footer> sits inside sectioning content or a sectioning root."""
    for ancestor in iter_ancestors(ancestors):
        role = explicit_role(ancestor)
        if role is not None:
            if role in SCOPING_ROLES:
                return True
            continue
        if ancestor.tag_name in SECTIONING_CONTENT or ancestor.tag_name == "main":
            return True
        if ancestor.tag_name in SECTIONING_ROOTS:
            return True
        if ancestor.tag_name == "body":
            return False
    return False


def get_landmark_role(tag_name: str, ancestors: AncestorList) -> str | None:
    if is_landmark_scoped(ancestors):
        return "generic"
    return TAGS[tag_name].default_role


def get_aside_role(element: VirtualElement, ancestors: AncestorList) -> str:
    if calculate_accessible_name(element):
        return "complementary"
    for ancestor in iter_ancestors(ancestors):
        role = explicit_role(ancestor)
        if ancestor.tag_name in SECTIONING_CONTENT or role in {"article", "complementary", "navigation", "region"}:
            return "generic"
        if ancestor.tag_name in {"body", "main"} or role == "main":
            break
    return "complementary"


def get_section_role(element: VirtualElement) -> str:
    return "region" if calculate_accessible_name(element) else "generic"


def get_input_type(element: VirtualElement) -> str:
    """Lower-cased ``type``; missing or unrecognized types read as ``text``."""
    value = str(element.attr("type") or "").strip().lower()
    if value in INPUT_TYPE_ROLES or value in NO_ROLE_INPUT_TYPES:
        return value
    return "text"


def has_input_list(element: VirtualElement) -> bool:
    return element.has_attr("list") and get_input_type(element) in LIST_INPUT_TYPES


def get_input_role(element: VirtualElement) -> str | None:
    input_type = get_input_type(element)
    if input_type in NO_ROLE_INPUT_TYPES:
        return None
    if has_input_list(element):
        return "combobox"
    return INPUT_TYPE_ROLES[input_type]


def _coerce_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _flag(element: VirtualElement, name: str) -> bool:
    if not element.has_attr(name):
        return False
    return element.attr(name) is not False and element.attr(name) is not None


def is_listbox_select(element: VirtualElement) -> bool:
    if _flag(element, "multiple"):
        return True
    size = _coerce_int(element.attr("size"))
    return size is not None and size > 1


def get_select_role(element: VirtualElement) -> str:
    return "listbox" if is_listbox_select(element) else "combobox"


def get_cell_context(ancestors: AncestorList) -> CellContext:
    if ancestors is None:
        return CellContext.UNKNOWN
    if is_empty_ancestor_list(ancestors):
        return CellContext.NO_TABLE
    for ancestor in iter_ancestors(ancestors):
        role = explicit_role(ancestor)
        if role in {"grid", "treegrid"}:
            return CellContext.GRID
        if role == "table" or (role is None and ancestor.tag_name == "table"):
            return CellContext.TABLE
    return CellContext.UNKNOWN


def get_td_role(ancestors: AncestorList) -> str | None:
    context = get_cell_context(ancestors)
    if context is CellContext.NO_TABLE:
        return None
    if context is CellContext.GRID:
        return "gridcell"
    return "cell"


def get_th_role(element: VirtualElement, ancestors: AncestorList) -> str | None:
    context = get_cell_context(ancestors)
    if context is CellContext.NO_TABLE:
        return None
    if context is CellContext.GRID:
        return "gridcell"
    if context is CellContext.TABLE:
        return "cell"
    scope = str(element.attr("scope") or "").strip().lower()
    if scope in {"col", "colgroup"}:
        return "columnheader"
    if scope in {"row", "rowgroup"}:
        return "rowheader"
    return TAGS["th"].default_role
