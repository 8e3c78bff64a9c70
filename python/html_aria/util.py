# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
from __future__ import annotations

from typing import Any, Iterator, Mapping

from .types import AncestorList, ElementLike, VirtualElement


def _normalize_tag(tag: Any) -> str:
    text = str(tag or "").strip()
    # xml.etree / lxml qualified names: "{http://www.w3.org/2000/svg}svg"
    if text.startswith("{") and "}" in text:
        text = text.split("}", 1)[1]
    return text.lower()


def _normalize_value(value: Any) -> Any:
    # BeautifulSoup hands multi-valued attributes (class, rel) back as lists
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return value


def _normalize_attributes(raw: Any) -> dict[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, Mapping):
        items = raw.items()
    elif hasattr(raw, "items"):
        # xml.dom.minidom NamedNodeMap
        items = raw.items()
    else:
        items = raw
    return {str(k).strip().lower(): _normalize_value(v) for k, v in items}


def virtualize_element(element: ElementLike) -> VirtualElement:
    """Normalize any supported element shape into a :class:`VirtualElement`.

    Accepted shapes: ``VirtualElement``; mappings with ``tagName`` (or
    ``tag_name`` / ``tag``) and optional ``attributes`` (or ``attrs``);
    ``xml.etree``/``lxml`` elements (``tag`` + ``attrib``); BeautifulSoup tags
    (``name`` + ``attrs``); DOM-style objects (``tagName`` + ``attributes``).
    """
    if isinstance(element, (VirtualElement, Mapping)):
        if isinstance(element, VirtualElement):
            tag, raw = element.tag_name, element.attributes
        else:
            tag = element.get("tagName", element.get("tag_name", element.get("tag")))
            raw = element.get("attributes", element.get("attrs"))
        return VirtualElement(
            tag_name=_normalize_tag(tag),
            attributes=None if raw is None else _normalize_attributes(raw),
        )
    # bs4 tags answer any attribute name with a child lookup (tag.tagName is None)
    name = getattr(element, "name", None)
    attrs = getattr(element, "attrs", None)
    if isinstance(name, str) and isinstance(attrs, Mapping):
        return VirtualElement(tag_name=_normalize_tag(name), attributes=_normalize_attributes(attrs))
    tag_name = getattr(element, "tagName", None)
    if isinstance(tag_name, str):
        return VirtualElement(
            tag_name=_normalize_tag(tag_name),
            attributes=_normalize_attributes(getattr(element, "attributes", None)),
        )
    tag = getattr(element, "tag", None)
    attrib = getattr(element, "attrib", None)
    if isinstance(tag, str) and attrib is not None:
        return VirtualElement(tag_name=_normalize_tag(tag), attributes=_normalize_attributes(attrib))
    raise TypeError(f"Unsupported element type: {type(element).__name__}")


def parse_token_list(value: Any) -> list[str]:
    if value is None:
        return []
    return [token for token in str(value).split() if token]


def is_empty_ancestor_list(ancestors: AncestorList) -> bool:
    """True only when ancestors were supplied and there are none.

    ``None`` (unknown context) is deliberately not empty.
    """
    return ancestors is not None and len(ancestors) == 0


def iter_ancestors(ancestors: AncestorList) -> Iterator[VirtualElement]:
    for ancestor in ancestors or ():
        yield virtualize_element(ancestor)


def _text(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return ""
    return " ".join(str(value).split())


def calculate_accessible_name(element: ElementLike) -> str:
    """Approximate the accessible name from attributes alone.

    Element content and ``aria-labelledby`` targets aren't available, so a
    non-empty ``aria-labelledby`` counts as a name (its raw ID list is
    returned). Empty string means "unnamed".
    """
    el = virtualize_element(element)
    for name in ("aria-labelledby", "aria-label"):
        text = _text(el.attr(name))
        if text:
            return text
    if el.tag_name in {"img", "area"} or (
        el.tag_name == "input" and str(el.attr("type") or "").strip().lower() == "image"
    ):
        text = _text(el.attr("alt"))
        if text:
            return text
    return _text(el.attr("title"))
