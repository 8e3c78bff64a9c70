# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""WAI-ARIA 1.3 concrete roles.

``supported`` already includes the inherited global attributes and never
contains anything listed in ``prohibited``. Abstract roles are not listed;
they can't be used in content.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .attributes import GLOBAL_ATTRIBUTES
from .types import NameFrom, RoleInfo, RoleSet

ALL_ROLES = RoleSet.ALL_ROLES
NO_ROLES = RoleSet.NO_ROLES

_AUTHOR = NameFrom.AUTHOR
_CONTENTS = NameFrom.CONTENTS
_PROHIBITED = NameFrom.PROHIBITED

_NAMING = ("aria-braillelabel", "aria-label", "aria-labelledby")

_CELL = ("aria-colindex", "aria-colindextext", "aria-colspan", "aria-rowindex", "aria-rowindextext", "aria-rowspan")
_GRIDCELL = _CELL + (
    "aria-disabled",
    "aria-errormessage",
    "aria-expanded",
    "aria-haspopup",
    "aria-invalid",
    "aria-readonly",
    "aria-required",
    "aria-selected",
)
_HEADER = _GRIDCELL + ("aria-sort",)
_CHECKBOX = (
    "aria-checked",
    "aria-disabled",
    "aria-errormessage",
    "aria-expanded",
    "aria-invalid",
    "aria-readonly",
    "aria-required",
)
_MENUITEM = ("aria-disabled", "aria-expanded", "aria-haspopup", "aria-posinset", "aria-setsize")
_RANGE = ("aria-valuemax", "aria-valuemin", "aria-valuenow", "aria-valuetext")
_TEXTBOX = (
    "aria-activedescendant",
    "aria-autocomplete",
    "aria-disabled",
    "aria-errormessage",
    "aria-haspopup",
    "aria-invalid",
    "aria-multiline",
    "aria-placeholder",
    "aria-readonly",
    "aria-required",
)
_COMPOSITE_LIST = ("aria-activedescendant", "aria-disabled", "aria-orientation")
_GRID = ("aria-activedescendant", "aria-colcount", "aria-disabled", "aria-multiselectable", "aria-readonly", "aria-rowcount")
_TREE = (
    "aria-activedescendant",
    "aria-disabled",
    "aria-errormessage",
    "aria-invalid",
    "aria-multiselectable",
    "aria-orientation",
    "aria-required",
)


def _role(
    own: Iterable[str] = (),
    *,
    required: Iterable[str] = (),
    prohibited: Iterable[str] = (),
    name_from: NameFrom = _AUTHOR,
    name_required: bool = False,
) -> RoleInfo:
    prohibited = tuple(sorted(set(prohibited)))
    supported = sorted((set(GLOBAL_ATTRIBUTES) | set(own)) - set(prohibited))
    return RoleInfo(
        supported=tuple(supported),
        required=tuple(sorted(set(required))),
        prohibited=prohibited,
        name_from=name_from,
        name_required=name_required,
    )


def _unnamed(own: Iterable[str] = (), *, extra: Iterable[str] = ()) -> RoleInfo:
    return _role(own, prohibited=_NAMING + tuple(extra), name_from=_PROHIBITED)


_ROLES: dict[str, RoleInfo] = {
    "alert": _role(),
    "alertdialog": _role(("aria-modal",), name_required=True),
    "application": _role(
        ("aria-activedescendant", "aria-disabled", "aria-errormessage", "aria-expanded", "aria-haspopup", "aria-invalid"),
        name_required=True,
    ),
    "article": _role(("aria-posinset", "aria-setsize")),
    "banner": _role(),
    "blockquote": _role(),
    "button": _role(
        ("aria-disabled", "aria-expanded", "aria-haspopup", "aria-pressed"),
        name_from=_CONTENTS,
        name_required=True,
    ),
    "caption": _unnamed(),
    "cell": _role(_CELL, name_from=_CONTENTS),
    "checkbox": _role(_CHECKBOX, required=("aria-checked",), name_from=_CONTENTS, name_required=True),
    "code": _unnamed(),
    "columnheader": _role(_HEADER, name_from=_CONTENTS, name_required=True),
    "combobox": _role(
        (
            "aria-activedescendant",
            "aria-autocomplete",
            "aria-disabled",
            "aria-errormessage",
            "aria-expanded",
            "aria-haspopup",
            "aria-invalid",
            "aria-readonly",
            "aria-required",
        ),
        required=("aria-expanded",),
        name_required=True,
    ),
    "comment": _role(("aria-level", "aria-posinset", "aria-setsize"), name_from=_CONTENTS),
    "complementary": _role(),
    "contentinfo": _role(),
    "definition": _role(),
    "deletion": _unnamed(),
    "dialog": _role(("aria-modal",), name_required=True),
    "directory": _role(),
    "document": _role(),
    "emphasis": _unnamed(),
    "feed": _role(),
    "figure": _role(),
    "form": _role(name_required=True),
    "generic": _unnamed(extra=("aria-brailleroledescription", "aria-roledescription")),
    "graphics-document": _role(name_required=True),
    "graphics-object": _role(),
    "graphics-symbol": _role(name_required=True),
    "grid": _role(_GRID, name_required=True),
    "gridcell": _role(_GRIDCELL, name_from=_CONTENTS),
    "group": _role(("aria-activedescendant", "aria-disabled")),
    "heading": _role(("aria-level",), required=("aria-level",), name_from=_CONTENTS, name_required=True),
    "image": _role(name_required=True),
    "img": _role(name_required=True),
    "insertion": _unnamed(),
    "link": _role(("aria-disabled", "aria-expanded", "aria-haspopup"), name_from=_CONTENTS, name_required=True),
    "list": _role(),
    "listbox": _role(
        (
            "aria-activedescendant",
            "aria-disabled",
            "aria-errormessage",
            "aria-expanded",
            "aria-invalid",
            "aria-multiselectable",
            "aria-orientation",
            "aria-readonly",
            "aria-required",
        ),
        name_required=True,
    ),
    "listitem": _role(("aria-level", "aria-posinset", "aria-setsize")),
    "log": _role(),
    "main": _role(),
    "mark": _unnamed(),
    "marquee": _role(),
    "math": _role(),
    "menu": _role(_COMPOSITE_LIST),
    "menubar": _role(_COMPOSITE_LIST),
    "menuitem": _role(_MENUITEM, name_from=_CONTENTS, name_required=True),
    "menuitemcheckbox": _role(
        _MENUITEM + ("aria-checked",), required=("aria-checked",), name_from=_CONTENTS, name_required=True
    ),
    "menuitemradio": _role(
        _MENUITEM + ("aria-checked",), required=("aria-checked",), name_from=_CONTENTS, name_required=True
    ),
    "meter": _role(_RANGE, required=("aria-valuenow",), name_required=True),
    "navigation": _role(),
    "none": _unnamed(),
    "note": _role(),
    "option": _role(
        ("aria-checked", "aria-disabled", "aria-posinset", "aria-selected", "aria-setsize"),
        name_from=_CONTENTS,
        name_required=True,
    ),
    "paragraph": _unnamed(),
    "presentation": _unnamed(),
    "progressbar": _role(_RANGE, name_required=True),
    "radio": _role(
        ("aria-checked", "aria-disabled", "aria-posinset", "aria-setsize"),
        required=("aria-checked",),
        name_from=_CONTENTS,
        name_required=True,
    ),
    "radiogroup": _role(
        (
            "aria-activedescendant",
            "aria-disabled",
            "aria-errormessage",
            "aria-invalid",
            "aria-orientation",
            "aria-readonly",
            "aria-required",
        ),
        name_required=True,
    ),
    "region": _role(name_required=True),
    "row": _role(
        (
            "aria-activedescendant",
            "aria-colindex",
            "aria-disabled",
            "aria-expanded",
            "aria-level",
            "aria-posinset",
            "aria-rowindex",
            "aria-selected",
            "aria-setsize",
        ),
        name_from=_CONTENTS,
    ),
    "rowgroup": _role(),
    "rowheader": _role(_HEADER, name_from=_CONTENTS, name_required=True),
    "scrollbar": _role(
        ("aria-controls", "aria-disabled", "aria-orientation") + _RANGE,
        required=("aria-controls", "aria-valuenow"),
    ),
    "search": _role(),
    "searchbox": _role(_TEXTBOX, name_required=True),
    "separator": _role(("aria-disabled", "aria-orientation") + _RANGE),
    "slider": _role(
        ("aria-disabled", "aria-errormessage", "aria-haspopup", "aria-invalid", "aria-orientation", "aria-readonly")
        + _RANGE,
        required=("aria-valuenow",),
        name_required=True,
    ),
    "spinbutton": _role(
        (
            "aria-activedescendant",
            "aria-disabled",
            "aria-errormessage",
            "aria-invalid",
            "aria-readonly",
            "aria-required",
        )
        + _RANGE,
        name_required=True,
    ),
    "status": _role(),
    "strong": _unnamed(),
    "subscript": _unnamed(),
    "suggestion": _unnamed(),
    "superscript": _unnamed(),
    "switch": _role(_CHECKBOX, required=("aria-checked",), name_from=_CONTENTS, name_required=True),
    "tab": _role(
        ("aria-disabled", "aria-expanded", "aria-haspopup", "aria-posinset", "aria-selected", "aria-setsize"),
        name_from=_CONTENTS,
        name_required=True,
    ),
    "table": _role(("aria-colcount", "aria-rowcount"), name_required=True),
    "tablist": _role(_COMPOSITE_LIST + ("aria-multiselectable",)),
    "tabpanel": _role(name_required=True),
    "term": _role(),
    "textbox": _role(_TEXTBOX, name_required=True),
    "time": _role(),
    "timer": _role(),
    "toolbar": _role(_COMPOSITE_LIST),
    "tooltip": _role(name_from=_CONTENTS),
    "tree": _role(_TREE, name_required=True),
    "treegrid": _role(_GRID + _TREE, name_required=True),
    "treeitem": _role(
        (
            "aria-checked",
            "aria-disabled",
            "aria-expanded",
            "aria-haspopup",
            "aria-level",
            "aria-posinset",
            "aria-selected",
            "aria-setsize",
        ),
        name_from=_CONTENTS,
        name_required=True,
    ),
}

ROLES: Mapping[str, RoleInfo] = MappingProxyType(_ROLES)

# Materialized for consumers that want to enumerate; resolvers keep returning
# the ALL_ROLES sentinel instead.
ROLE_NAMES: tuple[str, ...] = tuple(sorted(_ROLES))


def is_known_role(name: object) -> bool:
    return isinstance(name, str) and name in _ROLES


def expand_roles(roles: tuple[str, ...] | RoleSet) -> tuple[str, ...]:
    if roles is ALL_ROLES:
        return ROLE_NAMES
    if roles is NO_ROLES:
        return ()
    return tuple(roles)
