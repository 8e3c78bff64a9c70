# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
from __future__ import annotations

from .roles import ROLES


def get_required_attributes(role: str | None) -> tuple[str, ...]:
    """aria-* attributes a role can't do without (``()`` for unknown roles)."""
    info = ROLES.get(role) if role is not None else None
    return info.required if info is not None else ()


def is_required_attribute(attribute: str, role: str | None) -> bool:
    return attribute in get_required_attributes(role)


def is_name_required(role: str | None) -> bool:
    """Whether WAI-ARIA lists the role as "Accessible Name Required"."""
    info = ROLES.get(role) if role is not None else None
    return info is not None and info.name_required
