"""
bio.py

Responsibility: Render the profile card shown above every post.

The card is a pure function of `SiteMetadata` and `AvatarAsset`. Social handles
are interpolated into the profile URLs without validation; an empty handle
yields a link to the site root of that network.
"""

from __future__ import annotations

from dataclasses import dataclass

from markupsafe import Markup

from blogshell.config import AvatarAsset, SiteMetadata, Social
from blogshell.markup import inline_style, rhythm
from blogshell.renderer import render_template

DESCRIPTION = (
    "Computer Science PhD, passionate about Distributed Systems. "
    "Functional Programming Enthusiast. "
    "Krav Maga black belt."
)

WRAPPER_STYLE = {
    "display": "flex",
    "marginBottom": rhythm(2.5),
}

AVATAR_STYLE = {
    "position": "relative",
    "overflow": "hidden",
    "display": "inline-block",
    "marginRight": rhythm(1 / 2),
    "marginBottom": 0,
    "minWidth": 50,
    "borderRadius": "100%",
}

IMAGE_STYLE = {
    "position": "absolute",
    "top": 0,
    "left": 0,
    "width": "100%",
    "height": "100%",
    "objectFit": "cover",
    "objectPosition": "center",
    "borderRadius": "50%",
}


@dataclass(frozen=True)
class SocialLink:
    label: str
    href: str


def social_links(social: Social) -> list[SocialLink]:
    return [
        SocialLink("Twitter", f"https://twitter.com/{social.twitter}"),
        SocialLink("GitHub", f"https://github.com/{social.gitHub}"),
        SocialLink("LinkedIn", f"https://www.linkedin.com/in/{social.linkedIn}"),
    ]


def render_bio(metadata: SiteMetadata, avatar: AvatarAsset) -> Markup:
    """Render the card: avatar, then biography, then the social link row."""
    avatar_style = dict(AVATAR_STYLE, width=avatar.width, height=avatar.height)
    return render_template(
        "bio.html.j2",
        author=metadata.author,
        description=DESCRIPTION,
        avatar=avatar,
        links=social_links(metadata.social),
        wrapper_style=inline_style(WRAPPER_STYLE),
        avatar_style=inline_style(avatar_style),
        image_style=inline_style(IMAGE_STYLE),
    )
