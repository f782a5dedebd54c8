"""
site.py

Responsibility: Compose the profile card and the document shell into a page.
"""

from __future__ import annotations

from typing import Any, Mapping

from blogshell.bio import render_bio
from blogshell.config import SiteConfig
from blogshell.document import DocumentProps, render_document
from blogshell.markup import TrustedHTML, trusted

DEFAULT_HTML_ATTRIBUTES = {"lang": "en"}


def build_page(
    config: SiteConfig,
    body: str | TrustedHTML,
    *,
    html_attributes: Mapping[str, Any] | None = None,
    **document_overrides: Any,
) -> str:
    """
    Render a full document whose container holds the card followed by `body`.

    `document_overrides` are forwarded to `DocumentProps` (head/body components,
    body attributes).
    """
    card = render_bio(config.metadata, config.avatar)
    props = DocumentProps(
        html_attributes=DEFAULT_HTML_ATTRIBUTES if html_attributes is None else html_attributes,
        body=card + trusted(body),
        **document_overrides,
    )
    return render_document(props, config.analytics)
