"""Vision document loader.

Parses the YAML vision document into a frozen VisionConfig. Loading is
all-or-nothing: a document that is not well-formed YAML, is not a mapping,
or lacks a required field raises ConfigParseError and no config is produced.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from solarroots.models.directory import VisionConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """The vision configuration could not be loaded."""


class ConfigParseError(ConfigError):
    """The vision document is malformed or missing required fields."""


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<document>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def load_vision_config(raw_document: str) -> VisionConfig:
    """Parse a vision document.

    Args:
        raw_document: YAML text with mission, pillars and directory_targets

    Returns:
        The parsed, immutable VisionConfig

    Raises:
        ConfigParseError: if the text is not valid YAML or fails validation
    """
    try:
        data = yaml.safe_load(raw_document)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Vision document is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigParseError("Vision document must be a mapping")

    try:
        return VisionConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(
            f"Vision document is invalid: {_describe_validation_error(e)}"
        ) from e


def load_vision_file(path: Path) -> tuple[VisionConfig, str]:
    """Read and parse a vision document from disk.

    Returns the parsed config together with the trimmed document text, which
    the JSON API serves verbatim.
    """
    try:
        raw_document = Path(path).read_text(encoding="utf-8").strip()
    except OSError as e:
        raise ConfigError(f"Could not read vision document {path}: {e}") from e

    config = load_vision_config(raw_document)
    logger.info(
        f"Loaded vision document from {path}: "
        f"{len(config.pillars)} pillars, "
        f"{len(config.directory_targets.recommended_tags)} recommended tags"
    )
    return config, raw_document
