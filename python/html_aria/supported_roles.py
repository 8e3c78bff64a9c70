# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""Roles an element may legally declare.

Legality and the default role are different questions, so this table only
mostly mirrors the one in :mod:`html_aria.role` (an ``<a>`` without
``href`` defaults to ``generic`` but may take any role). Both go through
:mod:`html_aria.elements` for ancestor classification.
"""
from __future__ import annotations

import logging
from typing import Callable

from . import elements
from .roles import ALL_ROLES, NO_ROLES, is_known_role
from .tags import BUTTON_ROLES, TAGS
from .types import AncestorList, ElementLike, SupportedRoles, VirtualElement
from .util import calculate_accessible_name, is_empty_ancestor_list, iter_ancestors, virtualize_element

logger = logging.getLogger(__name__)

SupportedRolesRule = Callable[[VirtualElement, AncestorList], SupportedRoles]

# https://www.w3.org/TR/html-aria/#el-img
NAMED_IMG_ROLES: tuple[str, ...] = (
    "button",
    "checkbox",
    "image",
    "img",
    "link",
    "math",
    "menuitem",
    "menuitemcheckbox",
    "menuitemradio",
    "meter",
    "option",
    "progressbar",
    "radio",
    "scrollbar",
    "separator",
    "slider",
    "switch",
    "tab",
    "treeitem",
)
# input[type=image] gets the button allowlist minus combobox
IMAGE_INPUT_ROLES: tuple[str, ...] = tuple(r for r in BUTTON_ROLES if r != "combobox")
CHECKBOX_INPUT_ROLES: tuple[str, ...] = ("checkbox", "menuitemcheckbox", "option", "switch")
DEMOTED_LANDMARK_ROLES: tuple[str, ...] = ("generic", "group", "none", "presentation")

_INPUT_TYPE_ROLES: dict[str, tuple[str, ...]] = {
    "button": BUTTON_ROLES,
    "image": IMAGE_INPUT_ROLES,
    "number": ("spinbutton",),
    "radio": ("menuitemradio", "radio"),
    "range": ("slider",),
    "reset": BUTTON_ROLES,
    "submit": BUTTON_ROLES,
}


def _first_ancestor_tag(ancestors: AncestorList) -> str | None:
    for ancestor in iter_ancestors(ancestors):
        return ancestor.tag_name
    return None


def _anchor_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    if element.attributes is not None and not element.has_attr("href"):
        return ALL_ROLES
    return TAGS["a"].supported_roles


def _area_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    if element.attributes is not None and not element.has_attr("href"):
        return ("button", "generic", "link")
    return TAGS["area"].supported_roles


def _landmark_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    if elements.is_landmark_scoped(ancestors):
        return DEMOTED_LANDMARK_ROLES
    return TAGS[element.tag_name].supported_roles


def _div_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    # only the direct parent is checked; deeper <dl> content models need the full tree
    if _first_ancestor_tag(ancestors) == "dl":
        return ("none", "presentation")
    return TAGS["div"].supported_roles


def _img_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    if calculate_accessible_name(element):
        return NAMED_IMG_ROLES
    return TAGS["img"].supported_roles


def _input_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    input_type = elements.get_input_type(element)
    if input_type in elements.NO_ROLE_INPUT_TYPES:
        return ()
    if input_type == "checkbox":
        if element.has_attr("aria-pressed"):
            return tuple(sorted(CHECKBOX_INPUT_ROLES + ("button",)))
        return CHECKBOX_INPUT_ROLES
    if input_type in _INPUT_TYPE_ROLES:
        return _INPUT_TYPE_ROLES[input_type]
    if elements.has_input_list(element):
        return ("combobox",)
    if input_type == "search":
        return ("searchbox",)
    if input_type in {"email", "tel", "url"}:
        return ("textbox",)
    return TAGS["input"].supported_roles


def _li_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    return ALL_ROLES if is_empty_ancestor_list(ancestors) else TAGS["li"].supported_roles


def _select_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    return ("listbox",) if elements.is_listbox_select(element) else TAGS["select"].supported_roles


def _summary_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    if _first_ancestor_tag(ancestors) == "details":
        return ()
    return TAGS["summary"].supported_roles


def _td_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    role = elements.get_td_role(ancestors)
    if role is None:
        return ALL_ROLES
    return (role,)


def _th_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    context = elements.get_cell_context(ancestors)
    if context is elements.CellContext.NO_TABLE:
        return ALL_ROLES
    if context is elements.CellContext.GRID:
        return ("columnheader", "gridcell", "rowheader")
    if context is elements.CellContext.TABLE:
        return ("cell", "columnheader", "rowheader")
    return TAGS["th"].supported_roles


def _tr_roles(element: VirtualElement, ancestors: AncestorList) -> SupportedRoles:
    return ALL_ROLES if is_empty_ancestor_list(ancestors) else TAGS["tr"].supported_roles


_RULES: dict[str, SupportedRolesRule] = {
    "a": _anchor_roles,
    "area": _area_roles,
    "div": _div_roles,
    "footer": _landmark_roles,
    "header": _landmark_roles,
    "img": _img_roles,
    "input": _input_roles,
    "li": _li_roles,
    "select": _select_roles,
    "summary": _summary_roles,
    "td": _td_roles,
    "th": _th_roles,
    "tr": _tr_roles,
}


def get_supported_roles(element: ElementLike, *, ancestors: AncestorList = None) -> SupportedRoles:
    """Return the roles ``element`` may declare.

    The result is a sorted tuple, or one of the :data:`ALL_ROLES` /
    :data:`NO_ROLES` sentinels. An explicit ``role`` attribute is ignored:
    this answers what the element could be, not what it is.
    """
    el = virtualize_element(element)
    tag = TAGS.get(el.tag_name)
    if tag is None:
        logger.debug("unknown tag <%s>", el.tag_name)
        return ()
    rule = _RULES.get(el.tag_name)
    if rule is None:
        return tag.supported_roles
    return rule(el, ancestors)


def is_supported_role(role: str, element: ElementLike, *, ancestors: AncestorList = None) -> bool:
    supported = get_supported_roles(element, ancestors=ancestors)
    if supported is ALL_ROLES:
        return is_known_role(role)
    if supported is NO_ROLES:
        return False
    return role in supported
