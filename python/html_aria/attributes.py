# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""WAI-ARIA 1.3 states and properties.

Each entry records the value kind of the attribute; enumerated attributes also
carry the complete list of allowed tokens. Boolean attributes accept
``"true"``, ``"false"`` and the empty string.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .types import AttributeInfo, AttributeKind

_B = AttributeKind.BOOLEAN
_E = AttributeKind.ENUM
_ID = AttributeKind.ID_REFERENCE
_IDS = AttributeKind.ID_REFERENCE_LIST
_INT = AttributeKind.INTEGER
_NUM = AttributeKind.NUMBER
_STR = AttributeKind.STRING
_TOK = AttributeKind.TOKEN_LIST

_TRUE_FALSE_UNDEFINED = ("false", "true", "undefined")
_TRISTATE = ("false", "mixed", "true", "undefined")


class UnknownAttributeError(ValueError):
    def __init__(self, attribute: str) -> None:
        super().__init__(f"{attribute} isn't a valid ARIA attribute")
        self.attribute = attribute


_ATTRIBUTES: dict[str, AttributeInfo] = {
    "aria-activedescendant": AttributeInfo(_ID),
    "aria-atomic": AttributeInfo(_B),
    "aria-autocomplete": AttributeInfo(_E, ("both", "inline", "list", "none")),
    "aria-braillelabel": AttributeInfo(_STR),
    "aria-brailleroledescription": AttributeInfo(_STR),
    "aria-busy": AttributeInfo(_B),
    "aria-checked": AttributeInfo(_E, _TRISTATE),
    "aria-colcount": AttributeInfo(_INT),
    "aria-colindex": AttributeInfo(_INT),
    "aria-colindextext": AttributeInfo(_STR),
    "aria-colspan": AttributeInfo(_INT),
    "aria-controls": AttributeInfo(_IDS),
    "aria-current": AttributeInfo(_E, ("date", "false", "location", "page", "step", "time", "true")),
    "aria-describedby": AttributeInfo(_IDS),
    "aria-description": AttributeInfo(_STR),
    "aria-details": AttributeInfo(_IDS),
    "aria-disabled": AttributeInfo(_B),
    "aria-dropeffect": AttributeInfo(_TOK, ("copy", "execute", "link", "move", "none", "popup")),
    "aria-errormessage": AttributeInfo(_IDS),
    "aria-expanded": AttributeInfo(_E, _TRUE_FALSE_UNDEFINED),
    "aria-flowto": AttributeInfo(_IDS),
    "aria-grabbed": AttributeInfo(_E, _TRUE_FALSE_UNDEFINED),
    "aria-haspopup": AttributeInfo(_E, ("dialog", "false", "grid", "listbox", "menu", "tree", "true")),
    "aria-hidden": AttributeInfo(_E, _TRUE_FALSE_UNDEFINED),
    "aria-invalid": AttributeInfo(_E, ("false", "grammar", "spelling", "true")),
    "aria-keyshortcuts": AttributeInfo(_STR),
    "aria-label": AttributeInfo(_STR),
    "aria-labelledby": AttributeInfo(_IDS),
    "aria-level": AttributeInfo(_INT),
    "aria-live": AttributeInfo(_E, ("assertive", "off", "polite")),
    "aria-modal": AttributeInfo(_B),
    "aria-multiline": AttributeInfo(_B),
    "aria-multiselectable": AttributeInfo(_B),
    "aria-orientation": AttributeInfo(_E, ("horizontal", "undefined", "vertical")),
    "aria-owns": AttributeInfo(_IDS),
    "aria-placeholder": AttributeInfo(_STR),
    "aria-posinset": AttributeInfo(_INT),
    "aria-pressed": AttributeInfo(_E, _TRISTATE),
    "aria-readonly": AttributeInfo(_B),
    "aria-relevant": AttributeInfo(_TOK, ("additions", "all", "removals", "text")),
    "aria-required": AttributeInfo(_B),
    "aria-roledescription": AttributeInfo(_STR),
    "aria-rowcount": AttributeInfo(_INT),
    "aria-rowindex": AttributeInfo(_INT),
    "aria-rowindextext": AttributeInfo(_STR),
    "aria-rowspan": AttributeInfo(_INT),
    "aria-selected": AttributeInfo(_E, _TRUE_FALSE_UNDEFINED),
    "aria-setsize": AttributeInfo(_INT),
    "aria-sort": AttributeInfo(_E, ("ascending", "descending", "none", "other")),
    "aria-valuemax": AttributeInfo(_NUM),
    "aria-valuemin": AttributeInfo(_NUM),
    "aria-valuenow": AttributeInfo(_NUM),
    "aria-valuetext": AttributeInfo(_STR),
}

ATTRIBUTES: Mapping[str, AttributeInfo] = MappingProxyType(_ATTRIBUTES)

# Attributes every role inherits from roletype (WAI-ARIA 1.3 "global" set).
GLOBAL_ATTRIBUTES: tuple[str, ...] = (
    "aria-atomic",
    "aria-braillelabel",
    "aria-brailleroledescription",
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
    "aria-label",
    "aria-labelledby",
    "aria-live",
    "aria-owns",
    "aria-relevant",
    "aria-roledescription",
)

# Removed from the supported set when naming is prohibited.
NAMING_ATTRIBUTES: tuple[str, ...] = ("aria-braillelabel", "aria-label", "aria-labelledby")


def is_aria_attribute(name: str) -> bool:
    return name in _ATTRIBUTES


def attribute_info(name: str) -> AttributeInfo:
    try:
        return _ATTRIBUTES[name]
    except KeyError:
        raise UnknownAttributeError(name) from None


def concat_dedupe_and_sort(*groups: Iterable[str]) -> tuple[str, ...]:
    merged: set[str] = set()
    for group in groups:
        merged.update(group)
    return tuple(sorted(merged))
