from __future__ import annotations

from pathlib import Path

from blogshell.cli import main
from blogshell.config import parse_site_config
from blogshell.site import build_page


def _write_inputs(tmp_path: Path) -> tuple[Path, Path]:
    config = tmp_path / "site.yml"
    config.write_text(
        "siteMetadata:\n  author: Elle Florio\n  social:\n    twitter: elleflorio\n",
        encoding="utf-8",
    )
    body = tmp_path / "body.html"
    body.write_text("<article><h1>Hello</h1></article>", encoding="utf-8")
    return config, body


def test_build_page_places_card_before_body() -> None:
    cfg = parse_site_config({"siteMetadata": {"author": "Elle Florio"}})
    out = build_page(cfg, "<article>post</article>")
    assert '<html lang="en">' in out
    container = out.index('<div id="___gatsby"><div class="bio"')
    assert container < out.index('alt="Elle Florio"') < out.index("<article>post</article></div>")


def test_build_page_forwards_components() -> None:
    cfg = parse_site_config({})
    out = build_page(cfg, "", html_attributes={"lang": "it"}, head_components=["<title>t</title>"])
    assert '<html lang="it">' in out
    assert "<title>t</title>\n</head>" in out


def test_render_command(tmp_path: Path) -> None:
    config, body = _write_inputs(tmp_path)
    out = tmp_path / "public" / "index.html"

    code = main(["render", str(config), str(body), "--out", str(out)])
    assert code == 0
    html = out.read_text(encoding="utf-8")
    assert "<article><h1>Hello</h1></article></div>" in html
    assert 'href="https://twitter.com/elleflorio"' in html


def test_render_command_missing_body(tmp_path: Path, capsys) -> None:
    config, _body = _write_inputs(tmp_path)
    code = main(["render", str(config), str(tmp_path / "missing.html"), "--out", str(tmp_path / "x.html")])
    assert code == 2
    assert "Body file not found" in capsys.readouterr().err


def test_render_command_bad_config(tmp_path: Path, capsys) -> None:
    _config, body = _write_inputs(tmp_path)
    bad = tmp_path / "bad.yml"
    bad.write_text("- a\n- b\n", encoding="utf-8")
    code = main(["render", str(bad), str(body)])
    assert code == 2
    assert "mapping" in capsys.readouterr().err


def test_render_command_undecodable_body(tmp_path: Path, capsys) -> None:
    config, body = _write_inputs(tmp_path)
    body.write_bytes(b"<p>\xff</p>")
    code = main(["render", str(config), str(body), "--out", str(tmp_path / "x.html")])
    assert code == 2
    assert "not readable" in capsys.readouterr().err


def test_render_command_directory_output(tmp_path: Path, capsys) -> None:
    config, body = _write_inputs(tmp_path)
    (tmp_path / "public").mkdir()
    code = main(["render", str(config), str(body), "--out", f"{tmp_path / 'public'}/."])
    assert code == 2
    assert "not a directory" in capsys.readouterr().err
