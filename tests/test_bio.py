from __future__ import annotations

from blogshell.bio import DESCRIPTION, render_bio, social_links
from blogshell.config import AvatarAsset, SiteMetadata, Social


def test_social_links_follow_handles(metadata: SiteMetadata) -> None:
    links = social_links(metadata.social)
    assert [link.href for link in links] == [
        "https://twitter.com/elleflorio",
        "https://github.com/elleFlorio",
        "https://www.linkedin.com/in/elleflorio",
    ]
    assert [link.label for link in links] == ["Twitter", "GitHub", "LinkedIn"]


def test_links_rendered_as_bar_separated_row(metadata: SiteMetadata, avatar: AvatarAsset) -> None:
    out = render_bio(metadata, avatar)
    assert (
        '<a href="https://twitter.com/elleflorio"> Twitter </a> | '
        '<a href="https://github.com/elleFlorio"> GitHub </a> | '
        '<a href="https://www.linkedin.com/in/elleflorio"> LinkedIn </a>'
    ) in out


def test_alt_text_is_author(metadata: SiteMetadata, avatar: AvatarAsset) -> None:
    out = render_bio(metadata, avatar)
    assert 'alt="Elle Florio"' in out
    assert 'width="50" height="50"' in out
    assert 'srcset="/static/profile-pic.png 1x, /static/profile-pic@2x.png 2x"' in out


def test_author_is_attribute_escaped(avatar: AvatarAsset) -> None:
    out = render_bio(SiteMetadata(author='A & "B"'), avatar)
    assert 'alt="A &amp; &#34;B&#34;"' in out
    assert "<strong>A &amp; &#34;B&#34;</strong>" in out


def test_card_order_image_text_links(metadata: SiteMetadata, avatar: AvatarAsset) -> None:
    out = render_bio(metadata, avatar)
    img = out.index('<img src="/static/profile-pic.png"')
    text = out.index("Powered by <strong>Elle Florio</strong>.")
    links = out.index('<a href="https://twitter.com/')
    assert img < text < links
    assert DESCRIPTION in out


def test_circular_fixed_size_avatar(metadata: SiteMetadata, avatar: AvatarAsset) -> None:
    out = render_bio(metadata, avatar)
    assert 'style="display: flex; margin-bottom: 4.375rem"' in out
    assert "margin-right: 0.875rem; margin-bottom: 0; min-width: 50px; border-radius: 100%" in out
    assert "width: 50px; height: 50px" in out
    assert "border-radius: 50%" in out


def test_missing_handles_leave_segment_empty(avatar: AvatarAsset) -> None:
    out = render_bio(SiteMetadata(author="x", social=Social()), avatar)
    assert 'href="https://twitter.com/"' in out
    assert 'href="https://github.com/"' in out
    assert 'href="https://www.linkedin.com/in/"' in out


def test_placeholder_only_when_base64_present(metadata: SiteMetadata, avatar: AvatarAsset) -> None:
    assert 'aria-hidden="true"' not in render_bio(metadata, avatar)
    with_placeholder = AvatarAsset(src="/p.png", base64="data:image/png;base64,AAAA")
    assert '<img aria-hidden="true" src="data:image/png;base64,AAAA" alt=""' in render_bio(metadata, with_placeholder)


def test_render_is_pure(metadata: SiteMetadata, avatar: AvatarAsset) -> None:
    assert render_bio(metadata, avatar) == render_bio(metadata, avatar)
