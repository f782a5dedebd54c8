"""
blogshell package

Presentational shell of a personal blog: the biography card and the outer
HTML document, rendered with Jinja2 at build time.

Key responsibilities are split across modules:
- `config.py`: load the YAML site config into typed, read-only metadata
- `markup.py`: trusted raw HTML, attribute rendering and shared style constants
- `bio.py`: the profile card (avatar, biography, social links)
- `document.py`: the html/head/body document shell
- `analytics.py`: the inline counter.dev bootstrap script
- `renderer.py`: the Jinja2 environment and deterministic page emission
- `site.py`: composition of card + shell into a finished page
- `cli.py`: CLI entrypoint (load -> render -> write)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
