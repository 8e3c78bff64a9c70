# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""Per-element ARIA checks over an HTML document.

The document is read with :class:`html.parser.HTMLParser`; every element the
knowledge base knows about is checked against the resolvers using the open
element stack as its ancestor list. Only element-local rules run here:
content-model checks that need the whole tree are out of reach.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from html.parser import HTMLParser
from pathlib import Path
from typing import Any, Iterable

from . import elements
from .attributes import ATTRIBUTES
from .required import get_required_attributes, is_name_required
from .role import get_role
from .roles import ROLES
from .supported_attributes import get_supported_attributes, is_valid_attribute_value
from .supported_roles import is_supported_role
from .tags import TAGS
from .types import AuditFinding, NameFrom, VirtualElement
from .util import calculate_accessible_name

logger = logging.getLogger(__name__)

REPORT_SCHEMA = "html_aria.audit.v1"
SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / f"{REPORT_SCHEMA}.schema.json"

RULE_ROLE_UNKNOWN = "aria.role.unknown"
RULE_ROLE_NOT_SUPPORTED = "aria.role.not_supported"
RULE_ATTRIBUTE_UNKNOWN = "aria.attribute.unknown"
RULE_ATTRIBUTE_NOT_SUPPORTED = "aria.attribute.not_supported"
RULE_ATTRIBUTE_INVALID_VALUE = "aria.attribute.invalid_value"
RULE_REQUIRED_MISSING = "aria.attribute.required_missing"
RULE_NAME_MISSING = "aria.name.required_missing"

RULE_IDS: tuple[str, ...] = (
    RULE_ROLE_UNKNOWN,
    RULE_ROLE_NOT_SUPPORTED,
    RULE_ATTRIBUTE_UNKNOWN,
    RULE_ATTRIBUTE_NOT_SUPPORTED,
    RULE_ATTRIBUTE_INVALID_VALUE,
    RULE_REQUIRED_MISSING,
    RULE_NAME_MISSING,
)

FAIL_ON_CHOICES = ("fail", "warn", "never")

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)
# start tag -> open tags it implicitly closes when they sit on top of the stack
_IMPLIED_END: dict[str, frozenset[str]] = {
    "li": frozenset({"li"}),
    "dt": frozenset({"dt", "dd"}),
    "dd": frozenset({"dt", "dd"}),
    "tr": frozenset({"tr", "td", "th"}),
    "td": frozenset({"td", "th"}),
    "th": frozenset({"td", "th"}),
    "option": frozenset({"option"}),
    "p": frozenset({"p"}),
    "div": frozenset({"p"}),
    "ul": frozenset({"p"}),
    "ol": frozenset({"p"}),
    "table": frozenset({"p"}),
}
# native controls whose name normally comes from a <label>
_LABELABLE = frozenset({"input", "meter", "output", "progress", "select", "textarea"})


def _vf(rule_id: str, verdict: str, severity: str, message: str, *, element: dict[str, Any]) -> AuditFinding:
    return AuditFinding(rule_id=rule_id, verdict=verdict, severity=severity, message=message, element=element)


def _count_by_key(rows: list[dict[str, Any]], key: str) -> dict[str, int]:
    out: dict[str, int] = {}
    for row in rows:
        val = str(row.get(key) or "")
        if not val:
            continue
        out[val] = out.get(val, 0) + 1
    return out


@dataclass
class _Open:
    element: VirtualElement
    evidence: dict[str, Any]
    chunks: list[str] = field(default_factory=list)
    name_role: str | None = None
    in_label: bool = False


class _Auditor(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.stack: list[_Open] = []
        self.findings: list[AuditFinding] = []
        self.element_count = 0
        self.label_for_targets: set[str] = set()
        # name checks waiting for the document end, when every <label for> is known
        self._deferred_names: list[tuple[_Open, str]] = []

    def handle_starttag(self, tag: str, attrs_in: list[tuple[str, str | None]]) -> None:
        self._tag(tag, attrs_in, void=tag.lower() in VOID_ELEMENTS)

    def handle_startendtag(self, tag: str, attrs_in: list[tuple[str, str | None]]) -> None:
        self._tag(tag, attrs_in, void=True)

    def handle_endtag(self, tag: str) -> None:
        t = tag.lower()
        for idx in range(len(self.stack) - 1, -1, -1):
            if self.stack[idx].element.tag_name != t:
                continue
            while len(self.stack) > idx:
                self._close(self.stack.pop())
            return
        logger.debug("stray </%s> at line %s", t, self.getpos()[0])

    def handle_data(self, data: str) -> None:
        for item in self.stack:
            if item.name_role is not None:
                item.chunks.append(data)

    def close(self) -> None:
        super().close()
        while self.stack:
            self._close(self.stack.pop())
        for item, role in self._deferred_names:
            self._check_name(item, role)
        self._deferred_names = []

    def _ancestors(self) -> list[VirtualElement]:
        return [item.element for item in reversed(self.stack)]

    def _tag(self, tag: str, attrs_in: list[tuple[str, str | None]], *, void: bool) -> None:
        t = tag.lower()
        closes = _IMPLIED_END.get(t)
        while closes and self.stack and self.stack[-1].element.tag_name in closes:
            self._close(self.stack.pop())

        attrs = {k.lower(): (v or "") for k, v in attrs_in}
        element = VirtualElement(tag_name=t, attributes=attrs)
        line, offset = self.getpos()
        evidence = {"tag": t, "attributes": dict(attrs), "line": line, "column": offset + 1}
        if t == "label" and attrs.get("for"):
            self.label_for_targets.add(attrs["for"].strip())

        in_label = any(open_item.element.tag_name == "label" for open_item in self.stack)
        item = _Open(element=element, evidence=evidence, in_label=in_label)
        if t in TAGS:
            self.element_count += 1
            item.name_role = self._check(element, evidence)
        if void:
            self._close(item)
        else:
            self.stack.append(item)

    def _close(self, item: _Open) -> None:
        if item.name_role is not None:
            self._deferred_names.append((item, item.name_role))

    def _check(self, element: VirtualElement, evidence: dict[str, Any]) -> str | None:
        """Run the element-local rules; return the role whose name check is pending."""
        ancestors = self._ancestors()
        explicit: str | None = None

        if element.has_attr("role"):
            explicit = elements.explicit_role(element)
            if explicit is None:
                self.findings.append(
                    _vf(
                        RULE_ROLE_UNKNOWN,
                        "fail",
                        "high",
                        f"role={element.attr('role')!r} on <{element.tag_name}> names no known ARIA role.",
                        element=evidence,
                    )
                )
            elif not is_supported_role(explicit, element, ancestors=ancestors):
                self.findings.append(
                    _vf(
                        RULE_ROLE_NOT_SUPPORTED,
                        "fail",
                        "medium",
                        f"role={explicit!r} is not allowed on <{element.tag_name}>.",
                        element=evidence,
                    )
                )

        supported = get_supported_attributes(element, ancestors=ancestors)
        for name, value in (element.attributes or {}).items():
            if not name.startswith("aria-"):
                continue
            if name not in ATTRIBUTES:
                self.findings.append(
                    _vf(
                        RULE_ATTRIBUTE_UNKNOWN,
                        "fail",
                        "high",
                        f"{name} is not an ARIA attribute.",
                        element=evidence,
                    )
                )
                continue
            if name not in supported:
                self.findings.append(
                    _vf(
                        RULE_ATTRIBUTE_NOT_SUPPORTED,
                        "fail",
                        "medium",
                        f"{name} is not supported on <{element.tag_name}>.",
                        element=evidence,
                    )
                )
            if not is_valid_attribute_value(name, value):
                self.findings.append(
                    _vf(
                        RULE_ATTRIBUTE_INVALID_VALUE,
                        "fail",
                        "medium",
                        f"{name}={value!r} is not a valid value.",
                        element=evidence,
                    )
                )

        if explicit is not None:
            native = get_role(VirtualElement(element.tag_name, _without_role(element)), ancestors=ancestors)
            # the native element already exposes the states its implicit role needs
            if native != explicit:
                for name in get_required_attributes(explicit):
                    if element.has_attr(name) or _native_state(element, name):
                        continue
                    self.findings.append(
                        _vf(
                            RULE_REQUIRED_MISSING,
                            "fail",
                            "high",
                            f"role={explicit!r} requires {name}.",
                            element=evidence,
                        )
                    )

        role = get_role(element, ancestors=ancestors)
        if role is None or not is_name_required(role):
            return None
        if explicit is None and element.tag_name not in _LABELABLE:
            return None
        return role

    def _check_name(self, item: _Open, role: str) -> None:
        element = item.element
        if calculate_accessible_name(element):
            return
        if ROLES[role].name_from is NameFrom.CONTENTS and "".join(item.chunks).strip():
            return
        if element.tag_name in _LABELABLE:
            element_id = str(element.attr("id") or "").strip()
            if element_id and element_id in self.label_for_targets:
                return
            input_type = str(element.attr("type") or "").strip().lower()
            # reset/submit get a UA-provided label; button-type inputs are named by value
            if input_type in {"reset", "submit"} or (input_type == "button" and element.attr("value")):
                return
        if item.in_label:
            return
        self.findings.append(
            _vf(
                RULE_NAME_MISSING,
                "warn",
                "medium",
                f"<{element.tag_name}> with role {role!r} has no accessible name.",
                element=item.evidence,
            )
        )


def _without_role(element: VirtualElement) -> dict[str, Any]:
    return {k: v for k, v in (element.attributes or {}).items() if k != "role"}


def _native_state(element: VirtualElement, attribute: str) -> bool:
    if attribute == "aria-checked":
        return element.tag_name == "input" and str(element.attr("type") or "").lower() in {"checkbox", "radio"}
    if attribute == "aria-level":
        return element.tag_name in {"h1", "h2", "h3", "h4", "h5", "h6"}
    if attribute == "aria-valuenow":
        return element.tag_name in {"input", "meter", "progress"} and element.has_attr("value")
    return False


def audit_html(html: str, *, source: str | None = None, ignore_rules: Iterable[str] = ()) -> dict[str, Any]:
    """Audit one HTML document and return an ``html_aria.audit.v1`` report.

    Malformed markup never raises: the parser recovers and unmatched end tags
    are skipped. ``ignore_rules`` removes findings by rule id.
    """
    parser = _Auditor()
    parser.feed(html)
    parser.close()

    ignored = set(ignore_rules)
    findings = [f.to_dict() for f in parser.findings if f.rule_id not in ignored]
    ok = not any(f["verdict"] == "fail" for f in findings)
    logger.info(
        "audited %s: %d elements, %d findings", source or "<string>", parser.element_count, len(findings)
    )
    return {
        "schema": REPORT_SCHEMA,
        "source": source,
        "ok": ok,
        "element_count": parser.element_count,
        "finding_count": len(findings),
        "counts_by_rule": _count_by_key(findings, "rule_id"),
        "findings": findings,
    }


def audit_file(path: str | Path, *, ignore_rules: Iterable[str] = ()) -> dict[str, Any]:
    p = Path(path)
    return audit_html(p.read_text(encoding="utf-8"), source=str(p), ignore_rules=ignore_rules)


def gate_ok(report: dict[str, Any], fail_on: str = "fail") -> bool:
    """Whether the report passes under ``fail_on`` (``fail``, ``warn`` or ``never``)."""
    if fail_on not in FAIL_ON_CHOICES:
        raise ValueError(f"fail_on must be one of {', '.join(FAIL_ON_CHOICES)}; got {fail_on!r}")
    if fail_on == "never":
        return True
    blocking = {"fail"} if fail_on == "fail" else {"fail", "warn"}
    return not any(f.get("verdict") in blocking for f in report.get("findings", []))


def load_report_schema() -> dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_report(report: dict[str, Any]) -> None:
    """Validate against the bundled JSON schema (needs the ``schema`` extra)."""
    import jsonschema  # type: ignore

    jsonschema.Draft202012Validator(load_report_schema()).validate(report)
