"""
Centralized constants for release-candidate.

This module defines immutable configuration values used across
release-candidate, including configuration defaults, token names, file
names, and logging formats. All values are intended to be treated as
read-only.
"""

from typing import Final, FrozenSet, Sequence

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Template used to turn the project version into the release version.
DEFAULT_RELEASE_VERSION_FORMAT: Final[str] = "{{ version }}"

#: Template used to structure the emitted output.
DEFAULT_OUTPUT_TEMPLATE: Final[str] = "{{ version }}"

#: Destination of the rendered output.
DEFAULT_OUTPUT_URI: Final[str] = "stdout"

#: Encoding used when reading and writing files on disk.
DEFAULT_ENCODING: Final[str] = "UTF-8"

#: Output URI value selecting standard output.
STDOUT_URI: Final[str] = "stdout"

# ---------------------------------------------------------------------------
# Version parsing
# ---------------------------------------------------------------------------

#: Characters separating the numeric release from the qualifier.
DEFAULT_QUALIFIER_SEPARATORS: Final[str] = "-"

# ---------------------------------------------------------------------------
# Template tokens
# ---------------------------------------------------------------------------

TOKEN_VERSION: Final[str] = "version"
TOKEN_API_VERSION: Final[str] = "api_version"
TOKEN_QUALIFIED_API_VERSION: Final[str] = "qualified_api_version"
TOKEN_TIMESTAMP: Final[str] = "timestamp"

#: Every token name the renderer understands.
KNOWN_TOKENS: Final[FrozenSet[str]] = frozenset(
    {
        TOKEN_VERSION,
        TOKEN_API_VERSION,
        TOKEN_QUALIFIED_API_VERSION,
        TOKEN_TIMESTAMP,
    }
)

#: Opening and closing token delimiters.
TOKEN_OPEN: Final[str] = "{{"
TOKEN_CLOSE: Final[str] = "}}"

#: Locale used to render textual timestamp fields (month and day names).
DEFAULT_TIMESTAMP_LOCALE: Final[str] = "en_US"

# ---------------------------------------------------------------------------
# Configuration and project files
# ---------------------------------------------------------------------------

#: Dedicated configuration file, settings under ``[release-candidate]``.
CONFIG_FILE_NAME: Final[str] = "release-candidate.toml"

#: Section name in the dedicated file and under ``[tool]`` in pyproject.toml.
CONFIG_SECTION: Final[str] = "release-candidate"

#: Project descriptors searched for the current version, in order.
PROJECT_FILE_NAMES: Final[Sequence[str]] = ("pom.xml", "pyproject.toml")

#: Maximum allowed file size (in bytes) when reading project descriptors.
MAX_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10 MB

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
