"""
config.py

Responsibility: Load the site config into deterministic, typed, read-only models.

This replaces a global build-time query: callers load the config once and hand
the resulting objects to the renderers explicitly.

Loading stays permissive about *values* (a missing author or social handle
renders as an empty string) but strict about *shape* (sections must be mappings).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from blogshell.analytics import AnalyticsConfig

logger = logging.getLogger("blogshell.config")

AVATAR_SIZE = 50


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Social:
    """Social network handles, interpolated into profile links as-is."""

    twitter: str = ""
    gitHub: str = ""
    linkedIn: str = ""


@dataclass(frozen=True)
class SiteMetadata:
    author: str = ""
    social: Social = field(default_factory=Social)


@dataclass(frozen=True)
class AvatarAsset:
    """
    A pre-processed fixed-size image, as produced by the image pipeline.

    `src_set` and `base64` are optional descriptors; the card only reads them.
    """

    src: str = ""
    src_set: str = ""
    base64: str | None = None
    width: int = AVATAR_SIZE
    height: int = AVATAR_SIZE


@dataclass(frozen=True)
class SiteConfig:
    metadata: SiteMetadata = field(default_factory=SiteMetadata)
    avatar: AvatarAsset = field(default_factory=AvatarAsset)
    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    raw = data.get(key)
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"`{key}` must be an object/mapping when provided.")
    return raw


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value)


def parse_site_config(data: Mapping[str, Any]) -> SiteConfig:
    """
    Build a `SiteConfig` from an already-decoded mapping.

    Recognized keys:
    - siteMetadata.author: str
    - siteMetadata.social.{twitter,gitHub,linkedIn}: str
    - avatar.{src,srcSet,base64}: str
    - analytics.{user,utcoffset,endpoint}: str
    """
    if not isinstance(data, Mapping):
        raise ConfigError("Site config must be a mapping/object at the top level.")

    meta_raw = _section(data, "siteMetadata")
    social_raw = _section(meta_raw, "social")
    avatar_raw = _section(data, "avatar")
    analytics_raw = _section(data, "analytics")

    metadata = SiteMetadata(
        author=_text(meta_raw, "author"),
        social=Social(
            twitter=_text(social_raw, "twitter"),
            gitHub=_text(social_raw, "gitHub"),
            linkedIn=_text(social_raw, "linkedIn"),
        ),
    )
    if not metadata.author:
        logger.debug("siteMetadata.author is empty; avatar alt text will be blank")

    avatar = AvatarAsset(
        src=_text(avatar_raw, "src"),
        src_set=_text(avatar_raw, "srcSet"),
        base64=_text(avatar_raw, "base64") or None,
    )

    defaults = AnalyticsConfig()
    analytics = AnalyticsConfig(
        user=_text(analytics_raw, "user") or defaults.user,
        utcoffset=_text(analytics_raw, "utcoffset") or defaults.utcoffset,
        endpoint=_text(analytics_raw, "endpoint") or defaults.endpoint,
    )

    return SiteConfig(metadata=metadata, avatar=avatar, analytics=analytics)


def load_site_config(config_path: str | Path) -> SiteConfig:
    """Read and parse a YAML site config file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Site config does not exist: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Site config is not readable: {path}") from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Site config is not valid YAML: {path}") from e
    logger.debug("Loaded site config from %s", path)
    return parse_site_config(data)
