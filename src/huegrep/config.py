"""Configuration file loading and merging with command line flags."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from platformdirs import user_config_dir
from pydantic import ValidationError

from huegrep.exceptions import ConflictingFlagsError
from huegrep.models import DEFAULT_PALETTE, AppConfig, HighlightMode, Settings

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the huegrep config directory.

    Respects HUEGREP_CONFIG_DIR environment variable if set.
    """
    if override := os.environ.get("HUEGREP_CONFIG_DIR"):
        return Path(override)
    return Path(user_config_dir("huegrep"))


def load_config() -> AppConfig:
    """Load defaults from config.toml, falling back to built-in defaults."""
    path = get_config_dir() / "config.toml"
    if not path.exists():
        return AppConfig()
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text())
        config = AppConfig(**data)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        logger.warning("ignoring config file %s: %s", path, e)
        return AppConfig()
    logger.debug("loaded config from %s", path)
    return config


def build_settings(  # noqa: PLR0913
    patterns: Sequence[str],
    config: AppConfig | None = None,
    *,
    fixed_strings: bool = False,
    ignore_case: bool = False,
    no_highlight: bool = False,
    only_highlight: bool = False,
    full_match_highlight: bool = False,
    only_matching_lines: bool = False,
    vary_group_colors: bool = False,
    no_vary_group_colors: bool = False,
) -> Settings:
    """Merge command line flags over the configured defaults.

    Raises ConflictingFlagsError for mutually exclusive flag pairs.
    """
    if no_highlight and only_highlight:
        raise ConflictingFlagsError("--no-highlight", "--only-highlight")
    if vary_group_colors and no_vary_group_colors:
        raise ConflictingFlagsError("--vary-group-colors", "--no-vary-group-colors")

    cfg = config or AppConfig()

    highlight_mode = cfg.highlight_mode
    if no_highlight:
        highlight_mode = HighlightMode.FOREGROUND
    elif only_highlight:
        highlight_mode = HighlightMode.BACKGROUND

    vary = cfg.vary_group_colors
    if vary_group_colors:
        vary = True
    elif no_vary_group_colors:
        vary = False

    return Settings(
        patterns=tuple(patterns),
        fixed_strings=fixed_strings or cfg.fixed_strings,
        ignore_case=ignore_case or cfg.ignore_case,
        highlight_mode=highlight_mode,
        full_match_highlight=full_match_highlight or cfg.full_match_highlight,
        only_matching_lines=only_matching_lines or cfg.only_matching_lines,
        vary_group_colors=vary,
        palette=cfg.palette or DEFAULT_PALETTE,
    )
