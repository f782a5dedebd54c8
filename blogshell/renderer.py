"""
renderer.py

Responsibility: Own the Jinja2 environment and deterministically write rendered pages.

Rules:
- Templates are loaded from the package, autoescaped, with undefined names as errors.
- Raw HTML only reaches the output through `Markup` values.
- Pages are written in sorted path order with `\\n` newlines, so repeated builds
  produce identical trees.

This module intentionally does NOT know about site config or the CLI.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError, select_autoescape
from markupsafe import Markup

from blogshell.markup import render_attributes

logger = logging.getLogger("blogshell.renderer")


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class EmitResult:
    written_files: int
    written_bytes: int


@functools.lru_cache(maxsize=None)
def environment() -> Environment:
    env = Environment(
        loader=PackageLoader("blogshell", "templates"),
        autoescape=select_autoescape(enabled_extensions=("html", "j2"), default_for_string=True),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["attrs"] = render_attributes
    return env


def render_template(name: str, **context: Any) -> Markup:
    """Render a packaged template; failures surface as `RenderError`."""
    try:
        template = environment().get_template(name)
        out = template.render(**context)
    except TemplateError as e:
        raise RenderError(f"Failed rendering template: {name}") from e
    logger.debug("Rendered %s (%d chars)", name, len(out))
    return Markup(out)


def _resolve_inside(root: Path, rel: str) -> Path:
    target = (root / rel).resolve()
    if root not in target.parents:
        raise RenderError(f"Page path escapes destination directory: {rel}")
    return target


def emit_pages(
    *,
    pages: Mapping[str, str],
    destination_dir: str | Path,
) -> EmitResult:
    """
    Write `{relative_path: html}` under destination_dir.

    - Creates parent directories as needed.
    - Overwrites existing files.
    """
    dst_dir = Path(destination_dir).resolve()
    dst_dir.mkdir(parents=True, exist_ok=True)

    written = 0
    size = 0
    for rel in sorted(pages, key=lambda p: p.replace("\\", "/")):
        dst_path = _resolve_inside(dst_dir, rel)
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        data = str(pages[rel]).replace("\r\n", "\n")
        try:
            dst_path.write_text(data, encoding="utf-8", newline="\n")
        except OSError as e:
            raise RenderError(f"Failed writing page: {rel}") from e
        written += 1
        size += len(data.encode("utf-8"))
        logger.debug("Wrote %s", dst_path)

    return EmitResult(written_files=written, written_bytes=size)
