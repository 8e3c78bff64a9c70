# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""ARIA in HTML role and attribute resolution.

Given an element description (tag name plus attributes) and, optionally, its
ancestors nearest first, this package answers three questions: what role the
element has, which roles it may declare, and which aria-* attributes it
supports. Everything is a pure function over read-only tables built at import.
"""
from .attributes import ATTRIBUTES, GLOBAL_ATTRIBUTES, UnknownAttributeError
from .audit import audit_file, audit_html
from .required import get_required_attributes, is_name_required, is_required_attribute
from .role import get_role, is_role
from .roles import ALL_ROLES, NO_ROLES, ROLE_NAMES, ROLES
from .supported_attributes import get_supported_attributes, is_supported_attribute, is_valid_attribute_value
from .supported_roles import get_supported_roles, is_supported_role
from .tags import NO_CORRESPONDING_ROLE, TAGS
from .types import AttributeInfo, AttributeKind, NameFrom, RoleInfo, RoleSet, TagInfo, VirtualElement
from .util import calculate_accessible_name, virtualize_element

SPDX_LICENSE_EXPRESSION = "AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial"

__all__ = [
    "ALL_ROLES",
    "ATTRIBUTES",
    "AttributeInfo",
    "AttributeKind",
    "GLOBAL_ATTRIBUTES",
    "NO_CORRESPONDING_ROLE",
    "NO_ROLES",
    "NameFrom",
    "ROLES",
    "ROLE_NAMES",
    "RoleInfo",
    "RoleSet",
    "TAGS",
    "TagInfo",
    "UnknownAttributeError",
    "VirtualElement",
    "audit_file",
    "audit_html",
    "calculate_accessible_name",
    "get_required_attributes",
    "get_role",
    "get_supported_attributes",
    "get_supported_roles",
    "is_name_required",
    "is_required_attribute",
    "is_role",
    "is_supported_attribute",
    "is_supported_role",
    "is_valid_attribute_value",
    "virtualize_element",
]
