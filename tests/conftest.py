from __future__ import annotations

import pytest

from blogshell.config import AvatarAsset, SiteMetadata, Social


@pytest.fixture
def metadata() -> SiteMetadata:
    return SiteMetadata(
        author="Elle Florio",
        social=Social(twitter="elleflorio", gitHub="elleFlorio", linkedIn="elleflorio"),
    )


@pytest.fixture
def avatar() -> AvatarAsset:
    return AvatarAsset(src="/static/profile-pic.png", src_set="/static/profile-pic.png 1x, /static/profile-pic@2x.png 2x")
