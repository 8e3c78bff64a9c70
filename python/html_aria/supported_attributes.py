# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""Supported aria-* attributes per element, and attribute value checks."""
from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Any, Callable, Iterable

from . import elements
from .attributes import GLOBAL_ATTRIBUTES, NAMING_ATTRIBUTES, attribute_info, concat_dedupe_and_sort
from .role import get_role
from .roles import ROLES
from .tags import TAGS
from .types import AncestorList, AttributeKind, ElementLike, NameFrom, RoleInfo, VirtualElement
from .util import calculate_accessible_name, virtualize_element

# Returns None to fall through to the role-derived set.
AttributesRule = Callable[[VirtualElement, "RoleInfo | None"], "tuple[str, ...] | None"]

COLOR_INPUT_ATTRIBUTES = concat_dedupe_and_sort(GLOBAL_ATTRIBUTES, ("aria-disabled",))
FILE_INPUT_ATTRIBUTES = concat_dedupe_and_sort(GLOBAL_ATTRIBUTES, ("aria-disabled", "aria-invalid", "aria-required"))


def remove_prohibited(
    attributes: Iterable[str],
    *,
    name_prohibited: bool = False,
    prohibited: Iterable[str] = (),
) -> tuple[str, ...]:
    """Drop prohibited attributes (and naming attributes when ``name_prohibited``).

    Applying it twice gives the same result as applying it once.
    """
    dropped = set(prohibited)
    if name_prohibited:
        dropped.update(NAMING_ATTRIBUTES)
    return tuple(sorted(set(attributes) - dropped))


def _media_attributes(element: VirtualElement, role_info: RoleInfo | None) -> tuple[str, ...]:
    # <audio>/<video> have no role by default but take application's attributes
    return ROLES["application"].supported


def _img_attributes(element: VirtualElement, role_info: RoleInfo | None) -> tuple[str, ...]:
    if calculate_accessible_name(element) and role_info is not None and role_info.supported:
        return role_info.supported
    return ("aria-hidden",)


def _input_attributes(element: VirtualElement, role_info: RoleInfo | None) -> tuple[str, ...] | None:
    input_type = elements.get_input_type(element)
    if input_type in {"checkbox", "radio"}:
        if role_info is None:
            return None
        # native checkedness makes aria-checked redundant
        return tuple(a for a in role_info.supported if a != "aria-checked")
    if input_type == "color":
        return COLOR_INPUT_ATTRIBUTES
    if input_type == "file":
        return FILE_INPUT_ATTRIBUTES
    if input_type == "hidden":
        return ()
    if role_info is None:
        return ROLES["textbox"].supported
    return role_info.supported


def _summary_attributes(element: VirtualElement, role_info: RoleInfo | None) -> tuple[str, ...]:
    supported = role_info.supported if role_info is not None else GLOBAL_ATTRIBUTES
    return concat_dedupe_and_sort(supported, ("aria-disabled", "aria-haspopup"))


_RULES: dict[str, AttributesRule] = {
    "audio": _media_attributes,
    "img": _img_attributes,
    "input": _input_attributes,
    "summary": _summary_attributes,
    "video": _media_attributes,
}


def get_supported_attributes(element: ElementLike, *, ancestors: AncestorList = None) -> tuple[str, ...]:
    """Return the sorted aria-* attributes usable on ``element``.

    A tag-level override is authoritative. Otherwise the set comes from the
    resolved role, with naming attributes filtered out for naming-prohibited
    tags and roles unless the author set a valid explicit ``role``.
    """
    el = virtualize_element(element)
    tag = TAGS.get(el.tag_name)
    if tag is None:
        return ()
    # an empty override means "no aria-* attributes at all", so test for None
    if tag.supported_attributes_override is not None:
        return tag.supported_attributes_override

    role = get_role(el, ancestors=ancestors)
    role_info = ROLES.get(role) if role is not None else None

    rule = _RULES.get(el.tag_name)
    if rule is not None:
        result = rule(el, role_info)
        if result is not None:
            return tuple(sorted(set(result)))

    supported = role_info.supported if role_info is not None else GLOBAL_ATTRIBUTES

    if role_info is not None and elements.explicit_role(el) is not None:
        return tuple(sorted(set(supported)))

    return remove_prohibited(
        supported,
        name_prohibited=(role_info is not None and role_info.name_from is NameFrom.PROHIBITED) or tag.naming_prohibited,
        prohibited=role_info.prohibited if role_info is not None else (),
    )


def is_supported_attribute(attribute: str, element: ElementLike, *, ancestors: AncestorList = None) -> bool:
    return attribute in get_supported_attributes(element, ancestors=ancestors)


def _coerce_value(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


def is_valid_attribute_value(attribute: str, value: Any) -> bool:
    """Whether ``value`` is admissible for ``attribute``.

    Only boolean and enumerated attributes are checked; anything else is
    assumed valid (ID references aren't resolved, numbers aren't parsed).
    ``None`` and container values are never valid.

    Raises:
        UnknownAttributeError: ``attribute`` is not an ARIA attribute.
    """
    if attribute is None or isinstance(attribute, (Mapping, list, tuple, Set)):
        return False
    info = attribute_info(attribute)
    if value is None or isinstance(value, (Mapping, list, tuple, Set)):
        return False

    text = _coerce_value(value)
    if info.kind is AttributeKind.BOOLEAN:
        # ="" is equivalent to "true"
        return text in ("true", "false", "")
    if info.kind is AttributeKind.ENUM:
        return text in info.values
    return True
