"""
YAML settings source for dotspace configuration.

Configuration layers (in precedence order, highest first):
1. Environment variables (handled by pydantic-settings)
2. Project config: .dotspace/config.yaml in the working directory
3. User config: ~/.config/dotspace/config.yaml (or DOTSPACE_CONFIG_DIR)

The YAML layers are merged by flattening each one to dotted paths and
expanding the combined result, so nested sections merge key by key while
scalars and lists from the higher layer win.

Environment variables:
- DOTSPACE_CONFIG_DIR: Override user config directory (default: ~/.config/dotspace)
"""

import collections.abc as _abc
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic.fields as _pydantic_fields
import pydantic_settings as _pydantic_settings

import dotspace.documents as documents
import dotspace.namespace as namespace

_logger = _logging.getLogger(__name__)

# Environment variable for overriding user config directory
ENV_CONFIG_DIR = "DOTSPACE_CONFIG_DIR"


class ConfigFileError(Exception):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")


def get_user_config_path() -> _pathlib.Path:
    """
    Get the path to the user config file.

    Respects DOTSPACE_CONFIG_DIR environment variable if set,
    otherwise uses XDG standard path.
    """
    config_dir_env = _os.environ.get(ENV_CONFIG_DIR)
    if config_dir_env:
        return _pathlib.Path(config_dir_env) / "config.yaml"
    return _pathlib.Path.home() / ".config" / "dotspace" / "config.yaml"


def get_project_config_path(project_root: _pathlib.Path) -> _pathlib.Path:
    """Get the path to the project config file within project_root."""
    return project_root / ".dotspace" / "config.yaml"


def _merge_flat(base: dict[str, _typing.Any], layer: dict[str, _typing.Any]) -> None:
    """
    Merge a flattened higher-precedence layer into base, in place.

    A layer entry replaces base entries at the same path, below it (a leaf
    replacing a section) and above it (a section replacing a leaf).
    """
    for path in layer:
        below = path + namespace.SEPARATOR
        for existing in list(base):
            if existing.startswith(below) or path.startswith(existing + namespace.SEPARATOR):
                del base[existing]
    base.update(layer)


class YamlLayersSettingsSource(_pydantic_settings.PydanticBaseSettingsSource):
    """
    Settings source that merges the user and project YAML config files.

    Both files are optional. A file that exists but cannot be parsed is an
    error, not something to skip.
    """

    def __init__(
        self,
        settings_cls: type[_pydantic_settings.BaseSettings],
        project_root: _pathlib.Path | None = None,
        *,
        user_config_path: _pathlib.Path | None = None,
    ) -> None:
        """
        Initialize the settings source.

        Args:
            settings_cls: The Settings class being populated.
            project_root: Directory holding .dotspace/config.yaml. Defaults
                to the current working directory.
            user_config_path: Override path for user config file (for testing).
        """
        super().__init__(settings_cls)
        self._project_root = project_root if project_root is not None else _pathlib.Path.cwd()
        self._user_config_path = user_config_path
        self._loaded_layers: list[tuple[str, _pathlib.Path]] = []
        self._merged = self._load_config_layers()

    def _load_config_layers(self) -> dict[str, _typing.Any]:
        """Load the config files and merge them, lowest precedence first."""
        candidates = [
            ("user", self._user_config_path or get_user_config_path()),
            ("project", get_project_config_path(self._project_root)),
        ]
        flat: dict[str, _typing.Any] = {}
        for name, path in candidates:
            if not path.exists():
                continue
            content = self._load_yaml_file(path)
            if not content:
                continue
            _logger.debug("Loaded %s config from %s", name, path)
            self._loaded_layers.append((name, path))
            _merge_flat(flat, namespace.flatten(content))
        return namespace.expand(flat)

    def get_loaded_layers(self) -> list[tuple[str, _pathlib.Path]]:
        """Layers that were actually loaded, lowest precedence first."""
        return list(self._loaded_layers)

    def _load_yaml_file(self, path: _pathlib.Path) -> dict[str, _typing.Any]:
        """
        Raises:
            ConfigFileError: If the file cannot be read, is malformed YAML,
                or is not a mapping at the top level.
        """
        try:
            return documents.load_document(path, "yaml")
        except documents.DocumentError as e:
            raise ConfigFileError(path, e.message) from e

    def get_field_value(
        self,
        field: _pydantic_fields.FieldInfo,  # noqa: ARG002 - required by pydantic-settings interface
        field_name: str,
    ) -> tuple[_typing.Any, str, bool]:
        """
        Get value for a field from the merged layers.

        Returns:
            Tuple of (value, field_name, is_complex).
        """
        value = namespace.get_if_exists(self._merged, field_name, None)
        return value, field_name, isinstance(value, (_abc.Mapping, list))

    def __call__(self) -> dict[str, _typing.Any]:
        """Return the merged config as a plain dict for validation."""
        return dict(self._merged)
