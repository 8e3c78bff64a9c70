# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Union


class RoleSet(enum.Enum):
    """Sentinels for role candidate sets that are not spelled out."""

    ALL_ROLES = "all_roles"
    NO_ROLES = "no_roles"

    def __repr__(self) -> str:
        return self.name


class NameFrom(enum.Enum):
    AUTHOR = "author"
    CONTENTS = "contents"
    PROHIBITED = "prohibited"


class AttributeKind(enum.Enum):
    BOOLEAN = "boolean"
    ENUM = "enum"
    ID_REFERENCE = "id_reference"
    ID_REFERENCE_LIST = "id_reference_list"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    TOKEN_LIST = "token_list"


@dataclass(frozen=True)
class VirtualElement:
    """Plain description of an element: lower-case tag name plus attributes.

    ``attributes=None`` means the caller did not supply attributes at all,
    which only matters for ``<a>`` and ``<area>`` (an anchor with unknown
    attributes keeps its ``link`` default).
    """

    tag_name: str
    attributes: Mapping[str, Any] | None = None

    def attr(self, name: str) -> Any:
        if not self.attributes:
            return None
        return self.attributes.get(name)

    def has_attr(self, name: str) -> bool:
        return bool(self.attributes) and name in self.attributes

    def to_dict(self) -> dict[str, Any]:
        return {
            "tagName": self.tag_name,
            "attributes": None if self.attributes is None else dict(self.attributes),
        }


@dataclass(frozen=True)
class AttributeInfo:
    kind: AttributeKind
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class RoleInfo:
    supported: tuple[str, ...]
    required: tuple[str, ...] = ()
    prohibited: tuple[str, ...] = ()
    name_from: NameFrom = NameFrom.AUTHOR
    name_required: bool = False


@dataclass(frozen=True)
class TagInfo:
    default_role: str | None
    supported_roles: tuple[str, ...] | RoleSet
    supported_attributes_override: tuple[str, ...] | None = None
    naming_prohibited: bool = False


# Anything virtualize_element() accepts: mappings, VirtualElement, live elements.
ElementLike = Any
AncestorList = Union[Sequence[ElementLike], None]
SupportedRoles = Union[tuple[str, ...], RoleSet]


@dataclass
class AuditFinding:
    rule_id: str
    verdict: str
    severity: str
    message: str
    element: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "verdict": self.verdict,
            "severity": self.severity,
            "message": self.message,
            "element": dict(self.element),
        }
