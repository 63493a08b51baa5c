"""Configuration for path resolution and entity behavior."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fsentity.errors import UnsupportedOSError
from fsentity.types import OSFamily

ENV_PREFIX = "FSENTITY_"

# Permissive for the owner and group, never world writable
DEFAULT_DIR_MODE = 0o775


class FsSettings(BaseModel):
    """Settings shared by every entity created from one context."""

    model_config = ConfigDict(frozen=True)

    base_dir: str | None = None
    os_family: OSFamily | None = None
    dir_mode: int = Field(default=DEFAULT_DIR_MODE, ge=0, le=0o7777)
    sniff_mime: bool = True

    @field_validator("os_family", mode="before")
    @classmethod
    def _parse_os_family(cls, value: object) -> object:
        if value is None or isinstance(value, OSFamily):
            return value
        try:
            return OSFamily(str(value).strip().lower())
        except ValueError as e:
            raise UnsupportedOSError(str(value)) from e

    @field_validator("dir_mode", mode="before")
    @classmethod
    def _parse_dir_mode(cls, value: object) -> object:
        # Modes given as text are octal, e.g. "0755" or "755"
        if isinstance(value, str):
            return int(value, 8)
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FsSettings:
        """Load settings from ``FSENTITY_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Settings with every variable that is set applied.
        """
        env = os.environ if environ is None else environ
        data: dict[str, object] = {}

        if base_dir := env.get(f"{ENV_PREFIX}BASE_DIR"):
            data["base_dir"] = base_dir
        if os_family := env.get(f"{ENV_PREFIX}OS"):
            data["os_family"] = os_family
        if dir_mode := env.get(f"{ENV_PREFIX}DIR_MODE"):
            data["dir_mode"] = dir_mode
        if sniff := env.get(f"{ENV_PREFIX}SNIFF_MIME"):
            data["sniff_mime"] = sniff.strip().lower() not in ("0", "false", "no", "off")

        return cls.model_validate(data)
