"""
Reader configuration and YAML I/O for qif-ingest.

Key model:
- ReaderConfig: Day/month order for numeric dates, file encoding, and
  tolerance for an unterminated final record.

Key functions:
- load_config(path) -> ReaderConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML, each setting commented
  with its description.

Why Pydantic + YAML:
- Pydantic gives strict validation and clear error messages for typos
  such as ``day_frist: true`` (unknown keys are rejected).
- YAML is human-editable and sits comfortably next to exported files.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from qif_ingest.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

_CONFIG_HEADER = "# qif-ingest reader configuration"


class ReaderConfig(BaseModel):
    """Configuration of a QIF reader.

    Only ``day_first`` affects parsing. ``encoding`` and
    ``tolerate_truncation`` are used by ``qif_ingest.load()`` when reading
    from disk.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    day_first: bool = Field(
        False,
        description="Interpret numeric dates as dd/mm/yy instead of mm/dd/yy",
    )
    encoding: str = Field(
        "utf-8-sig", description="Text encoding used when opening QIF files"
    )
    tolerate_truncation: bool = Field(
        False,
        description=(
            "If True, an unterminated final record is kept instead of "
            "raising RecordEndError"
        ),
    )

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        """Reject codec names Python does not know, before any file is opened."""
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown text encoding '{value}'") from None
        return value


def load_config(path: str | Path) -> ReaderConfig:
    """Load and validate a reader config YAML file.

    Keys left out of the file keep their defaults.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or is not a YAML mapping.
        pydantic.ValidationError: If a value fails schema validation or a
            key is unknown.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must hold a mapping of settings, got {type(raw).__name__}: {path}"
        )

    config = ReaderConfig.model_validate(raw)
    logger.info(
        "Loaded reader config from %s (day_first=%s, encoding=%s)",
        path, config.day_first, config.encoding,
    )
    return config


def save_config(config: ReaderConfig, path: str | Path) -> None:
    """Write a ReaderConfig as YAML, one commented entry per setting.

    Every setting is written, defaults included, preceded by its field
    description so the file documents itself.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = [_CONFIG_HEADER, ""]
    for name, field_info in ReaderConfig.model_fields.items():
        if field_info.description:
            lines.append(f"# {field_info.description}")
        entry = {name: getattr(config, name)}
        lines.append(yaml.safe_dump(entry, default_flow_style=False).rstrip("\n"))

    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.info("Saved reader config to %s", path)
