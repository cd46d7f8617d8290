"""Configuration management for circles sketch.

This module provides configuration management using Pydantic models.
Render configuration is read from YAML files; logging configuration comes
from CLI arguments or defaults.

Key classes:
- StepRange / HarmonicSchedule: How the harmonic count grows loop over loop
- AlwaysVisible / NeverVisible / CongruenceVisible: Per-loop visibility rules
- RenderConfig: Everything the pipeline and renderer need
- LoggingConfig: Logging settings
- SketchSettings: Main application settings
"""

from circlesketch.config.loader import dump_config, load_config, resolve_config, validate_config
from circlesketch.config.settings import (
    AlwaysVisible,
    CongruenceVisible,
    HarmonicSchedule,
    LoggingConfig,
    NeverVisible,
    RenderConfig,
    SketchSettings,
    StepRange,
    VisibilityPredicate,
    get_default_settings,
)

__all__ = [
    "AlwaysVisible",
    "CongruenceVisible",
    "HarmonicSchedule",
    "LoggingConfig",
    "NeverVisible",
    "RenderConfig",
    "SketchSettings",
    "StepRange",
    "VisibilityPredicate",
    "dump_config",
    "get_default_settings",
    "load_config",
    "resolve_config",
    "validate_config",
]
