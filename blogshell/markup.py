"""
markup.py

Responsibility: small markup primitives shared by the card and the document shell.

- `TrustedHTML` marks strings that are inserted without escaping. It is the
  same `Markup` type Jinja2 uses, so templates never escape it twice.
- `render_attributes` turns an open attribute map into an escaped attribute string.
- `inline_style` and `rhythm` serialize the card's style constants.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from markupsafe import Markup, escape

logger = logging.getLogger("blogshell.markup")

TrustedHTML = Markup

# Characters an HTML attribute name may not contain.
ATTRIBUTE_NAME_RE = re.compile(r"[^\s\"'>/=\x00-\x1f\x7f]+")

BASE_LINE_HEIGHT_REM = 1.75

# Keys the document shell documents for <html> and <body>. Anything else is
# passed through untouched.
RECOGNIZED_ATTRIBUTES = frozenset({"lang", "class", "dir", "style"})

# JSX-style property names as handed over by the framework.
ATTRIBUTE_ALIASES = {
    "className": "class",
    "htmlFor": "for",
    "httpEquiv": "http-equiv",
    "charSet": "charset",
}


def trusted(fragment: str | None) -> TrustedHTML:
    """
    Mark a pre-rendered fragment as safe to insert verbatim.

    The caller owns the guarantee that `fragment` is already sanitized.
    """
    if fragment is None:
        return TrustedHTML("")
    if isinstance(fragment, Markup):
        return fragment
    return TrustedHTML(fragment)


def attribute_name(key: str) -> str:
    return ATTRIBUTE_ALIASES.get(key, key)


def render_attributes(attributes: Mapping[str, Any] | None) -> TrustedHTML:
    """
    Render `attributes` as ` key="value"` pairs in insertion order.

    - `None` and `False` drop the attribute.
    - `True` renders a bare attribute (`<html amp>`).
    - Names that are not valid HTML attribute names are dropped.
    - Everything else is stringified and attribute-escaped.
    """
    if not attributes:
        return TrustedHTML("")
    parts: list[str] = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        name = attribute_name(str(key))
        if not ATTRIBUTE_NAME_RE.fullmatch(name):
            logger.debug("Dropping invalid attribute name %r", name)
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(str(value))}"')
    return TrustedHTML("".join(parts))


def rhythm(lines: float) -> str:
    """Vertical rhythm in rem, e.g. `rhythm(2.5) == "4.375rem"`."""
    return f"{round(lines * BASE_LINE_HEIGHT_REM, 4):g}rem"


def _kebab(name: str) -> str:
    return re.sub(r"(?<!^)([A-Z])", r"-\1", name).lower()


def inline_style(declarations: Mapping[str, Any]) -> str:
    """
    Serialize a style mapping written with camelCase keys.

    Bare numbers are pixels, except `0`, which stays unitless.
    """
    parts: list[str] = []
    for key, value in declarations.items():
        if value is None:
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = "0" if value == 0 else f"{value:g}px"
        parts.append(f"{_kebab(key)}: {value}")
    return "; ".join(parts)
