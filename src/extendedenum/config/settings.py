"""
Settings configuration using pydantic-settings.

Controls where deployment configuration files are searched for. Files found
in these directories are chained with the bundled defaults of each family.

Search order (discovery order, before priority sorting):
1. Bundled defaults shipped next to the family
2. User config directory: ~/.config/extendedenum (or EXTENDEDENUM_CONFIG_DIR)
3. Extra directories from EXTENDEDENUM_CONFIG_PATH (os.pathsep separated)
"""

from __future__ import annotations

import os as _os
import pathlib as _pathlib

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings


def get_default_config_dir() -> _pathlib.Path:
    """Get the default user config directory (XDG path)."""
    return _pathlib.Path.home() / ".config" / "extendedenum"


class Settings(_pydantic_settings.BaseSettings):
    """
    Deployment settings for extended enum discovery.

    All settings can be overridden via environment variables with the
    EXTENDEDENUM_ prefix.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="EXTENDEDENUM_",
        extra="ignore",
    )

    config_dir: _pathlib.Path = _pydantic.Field(
        default_factory=get_default_config_dir,
        description="User directory searched for configuration files",
    )

    config_path: str = _pydantic.Field(
        default="",
        description="Extra directories searched for configuration files",
    )

    @_pydantic.field_validator("config_dir")
    @classmethod
    def _expand_config_dir(cls, value: _pathlib.Path) -> _pathlib.Path:
        return value.expanduser()

    def extra_dirs(self) -> list[_pathlib.Path]:
        """
        Get the directories listed in config_path.

        Returns:
            Directories in the order given, empty entries skipped.
        """
        dirs: list[_pathlib.Path] = []
        for p in self.config_path.split(_os.pathsep):
            p = p.strip()
            if p:
                dirs.append(_pathlib.Path(p).expanduser().resolve())
        return dirs

    def search_dirs(self, bundled_dir: _pathlib.Path | None = None) -> list[_pathlib.Path]:
        """
        Get all configuration search directories in discovery order.

        Args:
            bundled_dir: Directory of the family's bundled defaults, if any.

        Returns:
            Bundled directory first, then the user directory, then extra dirs.
        """
        dirs: list[_pathlib.Path] = []
        if bundled_dir is not None:
            dirs.append(bundled_dir)
        dirs.append(self.config_dir)
        dirs.extend(self.extra_dirs())
        return dirs
