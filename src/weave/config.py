"""Weave configuration schema and loading."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from weave.exceptions import ConfigurationError
from weave.layout import Alignment, Axis, Distribution


class StackConfig(BaseModel):
    """Layout parameters applied when a stack is finalized."""

    model_config = ConfigDict(extra="forbid")

    axis: Axis = Field(default=Axis.HORIZONTAL, description="Direction children are laid out")
    alignment: Alignment = Field(default=Alignment.CENTER, description="Cross-axis alignment")
    spacing: float = Field(default=0, ge=0, description="Gap between children in points")
    distribution: Distribution = Field(
        default=Distribution.EQUAL_SPACING, description="Main-axis distribution"
    )


class TextConfig(BaseModel):
    """How the text builder describes leaves without a natural text form."""

    true_literal: str = Field(default="true", description="Text used for True")
    false_literal: str = Field(default="false", description="Text used for False")


class WeaveConfig(BaseModel):
    """Complete Weave configuration.

    Loaded from .weave/config.yaml. Finalize options override config values
    with precedence:
    1. Keyword options passed to the builder (highest)
    2. .weave/config.yaml
    3. Defaults (lowest)
    """

    stack: StackConfig = Field(default_factory=StackConfig)
    text: TextConfig = Field(default_factory=TextConfig)


def load_config_file(config_path: Path) -> WeaveConfig:
    """Load configuration from a specific YAML file.

    Args:
        config_path: Path to a YAML file with optional stack/text sections

    Returns:
        WeaveConfig with values from the file

    Raises:
        ConfigurationError: If the file is missing, not YAML, or fails validation
    """
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if raw_config is None:
        return WeaveConfig()
    if not isinstance(raw_config, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {config_path}")

    try:
        return WeaveConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config in {config_path}: {e}") from e


def load_config(project_root: Path | None = None) -> WeaveConfig:
    """Load configuration from .weave/config.yaml.

    Args:
        project_root: Directory containing .weave/. Defaults to cwd.

    Returns:
        WeaveConfig with values from file or defaults

    Example:
        config = load_config()
        print(f"Default spacing: {config.stack.spacing}")
    """
    if project_root is None:
        project_root = Path.cwd()

    config_path = project_root / ".weave" / "config.yaml"
    if not config_path.exists():
        return WeaveConfig()
    return load_config_file(config_path)


def resolve_stack_config(base: StackConfig, **overrides: Any) -> StackConfig:
    """Apply finalize options on top of a base stack config.

    None values are ignored so callers can pass optional keyword
    arguments straight through.

    Raises:
        ConfigurationError: If the merged options fail validation
    """
    values = base.model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return StackConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid stack options: {e}") from e


def merge_overrides(
    config: WeaveConfig,
    axis: Axis | str | None = None,
    alignment: Alignment | str | None = None,
    spacing: float | None = None,
    distribution: Distribution | str | None = None,
) -> WeaveConfig:
    """Merge stack overrides into config.

    Returns:
        New WeaveConfig with overrides applied; the original is untouched

    Example:
        config = load_config()
        config = merge_overrides(config, axis="vertical", spacing=10)
    """
    updated = config.model_copy(deep=True)
    updated.stack = resolve_stack_config(
        config.stack,
        axis=axis,
        alignment=alignment,
        spacing=spacing,
        distribution=distribution,
    )
    return updated


# Process-wide default configuration
_default_config: WeaveConfig | None = None


def get_config() -> WeaveConfig:
    """Get the current default configuration."""
    global _default_config
    if _default_config is None:
        _default_config = WeaveConfig()
    return _default_config


def set_config(config: WeaveConfig | None) -> None:
    """Set the default configuration.

    Args:
        config: Configuration to use, or None to reset to defaults
    """
    global _default_config
    _default_config = config
