# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""Implicit and explicit role resolution.

No DOM traversal happens here: the caller supplies whatever ancestors are
relevant, nearest first. ``ancestors=None`` means "unknown", ``[]`` means
"known to have none", and those give different answers for list items and
table parts.
"""
from __future__ import annotations

import logging
from typing import Callable

from . import elements
from .tags import NO_CORRESPONDING_ROLE, TAGS
from .types import AncestorList, ElementLike, VirtualElement
from .util import calculate_accessible_name, is_empty_ancestor_list, virtualize_element

logger = logging.getLogger(__name__)

RoleRule = Callable[[VirtualElement, AncestorList], "str | None"]


def _anchor_role(element: VirtualElement, ancestors: AncestorList) -> str | None:
    # attributes=None means "not supplied": keep the link default
    if element.attributes is not None and not element.has_attr("href"):
        return "generic"
    return TAGS[element.tag_name].default_role


def _img_role(element: VirtualElement, ancestors: AncestorList) -> str:
    return "img" if calculate_accessible_name(element) else "none"


def _li_role(element: VirtualElement, ancestors: AncestorList) -> str | None:
    return "generic" if is_empty_ancestor_list(ancestors) else TAGS["li"].default_role


def _tr_role(element: VirtualElement, ancestors: AncestorList) -> str | None:
    return NO_CORRESPONDING_ROLE if is_empty_ancestor_list(ancestors) else TAGS["tr"].default_role


_RULES: dict[str, RoleRule] = {
    "a": _anchor_role,
    "area": _anchor_role,
    "aside": elements.get_aside_role,
    "footer": lambda el, ancestors: elements.get_landmark_role("footer", ancestors),
    "header": lambda el, ancestors: elements.get_landmark_role("header", ancestors),
    "img": _img_role,
    "input": lambda el, ancestors: elements.get_input_role(el),
    "li": _li_role,
    "section": lambda el, ancestors: elements.get_section_role(el),
    "select": lambda el, ancestors: elements.get_select_role(el),
    "td": lambda el, ancestors: elements.get_td_role(ancestors),
    "th": elements.get_th_role,
    "tr": _tr_role,
}


def get_role(element: ElementLike, *, ancestors: AncestorList = None) -> str | None:
    """Return the ARIA role of ``element``, or ``None`` for "no corresponding role".

    An explicit ``role`` attribute wins: the first token naming a known role
    is returned even if ARIA in HTML forbids it on this element, since
    browsers take the author at their word.
    """
    el = virtualize_element(element)

    if el.has_attr("role"):
        role = elements.explicit_role(el)
        if role is not None:
            return role
        logger.debug("no known role in role=%r on <%s>", el.attr("role"), el.tag_name)

    tag = TAGS.get(el.tag_name)
    if tag is None:
        logger.debug("unknown tag <%s>", el.tag_name)
        return NO_CORRESPONDING_ROLE

    rule = _RULES.get(el.tag_name)
    if rule is None:
        return tag.default_role
    return rule(el, ancestors)


def is_role(role: str, element: ElementLike, *, ancestors: AncestorList = None) -> bool:
    """Boolean form of :func:`get_role`."""
    return get_role(element, ancestors=ancestors) == role
