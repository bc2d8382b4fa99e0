"""Configuration file loader for release-candidate.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``release-candidate.toml``, settings under the ``[release-candidate]`` table
- ``pyproject.toml``, settings under the ``[tool.release-candidate]`` table

Discovery order:

1. Explicit path from ``--config`` or ``RELEASE_CANDIDATE_CONFIG``
2. ``release-candidate.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.release-candidate]`` section

Configuration precedence: defaults < config file < environment < CLI args.

Typical usage::

    config = load_config()  # Auto-discover
    config = load_config(Path("custom.toml"))  # Explicit path
    config = config.merged(output_uri="file:///tmp/version.properties")

Example (``release-candidate.toml``)::

    [release-candidate]
    release_version_format = "{{ api_version }}.{{ timestamp('yyyyMMdd') }}"
    output_uri = "stdout"
    output_template = '''
        ##teamcity[setParameter name='env.PROJECT_VERSION' value='{{ version }}']
        ##teamcity[message text='Project version: {{ version }}']
    '''
"""

from __future__ import annotations

import codecs
import dataclasses
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import tomli as tomllib

from release_candidate.exceptions import ConfigError
from release_candidate.utils.logger import get_logger
from release_candidate.utils.output import resolve_output_target
from release_candidate.constants import (
    CONFIG_FILE_NAME,
    CONFIG_SECTION,
    DEFAULT_ENCODING,
    DEFAULT_OUTPUT_TEMPLATE,
    DEFAULT_OUTPUT_URI,
    DEFAULT_RELEASE_VERSION_FORMAT,
)

logger = get_logger("config")

_OPTIONS = (
    "release_version_format",
    "encoding",
    "output_uri",
    "output_template",
)


@dataclass
class ReleaseCandidateConfig:
    """Parsed and validated release-candidate configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        release_version_format: Template turning the project version into
            the release version, e.g. ``{{ api_version }}-build.${build_number}``.
        encoding: Encoding used when reading and writing files on disk.
        output_uri: ``stdout`` or an absolute ``file://`` URI.
        output_template: Template structuring the output; ``{{ version }}``
            is the release version.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    release_version_format: str = DEFAULT_RELEASE_VERSION_FORMAT
    encoding: str = DEFAULT_ENCODING
    output_uri: str = DEFAULT_OUTPUT_URI
    output_template: str = DEFAULT_OUTPUT_TEMPLATE

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging.

        Excludes ``source_path`` metadata.
        """
        return {name: getattr(self, name) for name in _OPTIONS}

    def merged(self, **overrides: Optional[str]) -> "ReleaseCandidateConfig":
        """Return a copy with every non-``None`` override applied and validated.

        Raises:
            ConfigError: Unknown option name or invalid value.
        """
        unknown = set(overrides) - set(_OPTIONS)
        if unknown:
            raise ConfigError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}"
            )

        applied = {k: v for k, v in overrides.items() if v is not None}
        config = dataclasses.replace(self, **applied)
        config.validate()
        return config

    def validate(self) -> None:
        """Check values that can be wrong even when they are strings.

        Raises:
            ConfigError: Unknown encoding or unusable output URI.
        """
        config_path = str(self.source_path) if self.source_path else None

        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigError(
                f"Unknown encoding: {self.encoding}",
                config_path=config_path,
                option="encoding",
            ) from exc

        try:
            resolve_output_target(self.output_uri)
        except ConfigError as exc:
            raise ConfigError(
                exc.message,
                config_path=config_path,
                option="output_uri",
            ) from exc


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Search order:

    1. ``explicit_path`` (from ``--config`` or ``RELEASE_CANDIDATE_CONFIG``)
    2. ``release-candidate.toml`` in current directory
    3. ``pyproject.toml`` with ``[tool.release-candidate]`` section

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_section(pyproject_toml):
        logger.debug("Found [tool.%s] in pyproject.toml: %s", CONFIG_SECTION, pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Check if pyproject.toml contains a ``[tool.release-candidate]`` section.

    Parse errors count as "no section" so a broken pyproject.toml does not
    block a run that relies on defaults.
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    return CONFIG_SECTION in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> ReleaseCandidateConfig:
    """Load and validate release-candidate configuration.

    Discovers config file (or uses provided path), parses and validates it.
    Returns config with defaults if no file found.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`ReleaseCandidateConfig`.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return ReleaseCandidateConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get(CONFIG_SECTION, {})
    else:
        section = raw.get(CONFIG_SECTION, {})

    if not section:
        logger.debug("Config file found but no %s section, using defaults", CONFIG_SECTION)
        return ReleaseCandidateConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved
    config.validate()

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> ReleaseCandidateConfig:
    """Parse the ``[release-candidate]`` table.

    Rejects unknown keys and non-string values.

    Raises:
        ConfigError: Unknown keys or incorrect types.
    """
    if not isinstance(section, dict):
        raise ConfigError(
            f"[{CONFIG_SECTION}] must be a table",
            config_path=config_path,
        )

    unknown = set(section) - set(_OPTIONS)
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    values: Dict[str, str] = {}
    for name, value in section.items():
        if not isinstance(value, str):
            raise ConfigError(
                f"{name} must be a string, got {type(value).__name__}",
                config_path=config_path,
                option=name,
            )
        values[name] = value

    return ReleaseCandidateConfig(**values)
