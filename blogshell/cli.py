"""
cli.py

Responsibility: CLI entrypoint for blogshell.

High-level flow (single command `render`):
1) Load site config YAML -> `SiteConfig`
2) Read the pre-rendered page body (trusted HTML)
3) Render card + document shell
4) Write the page under the output directory

This module should orchestrate behavior but keep concerns isolated:
- Config loading: `config.py`
- Page composition: `site.py`
- Writing files: `renderer.py`
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from blogshell import __version__
from blogshell.config import ConfigError, load_site_config
from blogshell.markup import trusted
from blogshell.renderer import RenderError, emit_pages
from blogshell.site import build_page

logger = logging.getLogger("blogshell.cli")


class CLIError(RuntimeError):
    pass


def _read_body(path: Path) -> str:
    if not path.is_file():
        raise CLIError(f"Body file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CLIError(f"Body file is not readable: {path}") from e


def render_cmd(args: argparse.Namespace) -> int:
    config = load_site_config(args.config_path)
    body = trusted(_read_body(Path(args.body_path)))

    out = Path(args.out)
    if not out.name or out.is_dir():
        raise CLIError(f"Output path must be a file, not a directory: {args.out}")
    html = build_page(config, body, html_attributes={"lang": args.lang})

    result = emit_pages(pages={out.name: html}, destination_dir=out.parent)
    logger.info("Wrote %s (%d bytes)", out, result.written_bytes)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="blogshell", description="Render blog pages into the site's HTML shell")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    r = sub.add_parser("render", help="Render one page with the profile card and document shell")
    r.add_argument("config_path", help="Path to the site config YAML")
    r.add_argument("body_path", help="Path to the pre-rendered page body (trusted HTML)")
    r.add_argument("--out", default="public/index.html", help="Output file (default: public/index.html)")
    r.add_argument("--lang", default="en", help="Value of the <html lang> attribute (default: en)")

    r.set_defaults(func=render_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except (ConfigError, RenderError, CLIError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
