"""
document.py

Responsibility: Render the html/head/body shell every page is emitted into.

The framework hands over pre-rendered fragments; they are inserted verbatim and
in order. Only the attribute maps are escaped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from blogshell.analytics import AnalyticsConfig, bootstrap_script
from blogshell.markup import RECOGNIZED_ATTRIBUTES, TrustedHTML, attribute_name, trusted
from blogshell.renderer import render_template

logger = logging.getLogger("blogshell.document")

CONTAINER_ID = "___gatsby"


@dataclass(frozen=True)
class DocumentProps:
    """
    Per-page input to the shell.

    `body` and the component lists are trusted raw HTML. Plain strings are
    accepted and marked trusted on construction; the attribute maps are not
    trusted and are escaped at render time.
    """

    html_attributes: Mapping[str, Any] = field(default_factory=dict)
    head_components: Sequence[TrustedHTML] = ()
    body_attributes: Mapping[str, Any] = field(default_factory=dict)
    pre_body_components: Sequence[TrustedHTML] = ()
    body: TrustedHTML = TrustedHTML("")
    post_body_components: Sequence[TrustedHTML] = ()

    def __post_init__(self) -> None:
        for name in ("head_components", "pre_body_components", "post_body_components"):
            object.__setattr__(self, name, tuple(trusted(c) for c in getattr(self, name) or ()))
        object.__setattr__(self, "body", trusted(self.body))
        object.__setattr__(self, "html_attributes", dict(self.html_attributes or {}))
        object.__setattr__(self, "body_attributes", dict(self.body_attributes or {}))


def render_document(props: DocumentProps, analytics: AnalyticsConfig | None = None) -> str:
    for key in (*props.html_attributes, *props.body_attributes):
        if attribute_name(key) not in RECOGNIZED_ATTRIBUTES:
            logger.debug("Passing through unrecognized attribute %r", key)
    return str(
        render_template(
            "html.html.j2",
            html_attributes=props.html_attributes,
            head_components=props.head_components,
            body_attributes=props.body_attributes,
            pre_body_components=props.pre_body_components,
            body=props.body,
            post_body_components=props.post_body_components,
            container_id=CONTAINER_ID,
            analytics_script=bootstrap_script(analytics),
        )
    )
