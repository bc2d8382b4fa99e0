"""Current project version discovery.

Reads the version a release is derived from out of a project descriptor:

- ``pom.xml``: ``<project><version>``, falling back to the parent's
  ``<project><parent><version>`` the way Maven inherits it. The POM
  namespace is optional.
- ``pyproject.toml``: ``[project].version``, then ``[tool.poetry].version``.

The descriptor is only read, never rewritten.
"""

from __future__ import annotations

import xml.etree.ElementTree as ElementTree
from pathlib import Path
from typing import Any, Dict, Optional

import tomli as tomllib

from release_candidate.constants import DEFAULT_ENCODING, PROJECT_FILE_NAMES
from release_candidate.exceptions import FileOperationError, ProjectError
from release_candidate.utils.filesystem import safe_read_file
from release_candidate.utils.logger import get_logger

logger = get_logger("project")


def discover_project_file(directory: Optional[Path] = None) -> Optional[Path]:
    """Find a supported project descriptor in ``directory``.

    ``pom.xml`` is preferred over ``pyproject.toml``.

    Args:
        directory: Directory to search; defaults to the working directory.

    Returns:
        Path to the descriptor, or ``None`` if there is none.
    """
    base = directory or Path.cwd()

    for name in PROJECT_FILE_NAMES:
        candidate = base / name
        if candidate.is_file():
            logger.debug("Found project descriptor: %s", candidate)
            return candidate

    logger.debug("No project descriptor found in %s", base)
    return None


def read_project_version(path: Path, *, encoding: str = DEFAULT_ENCODING) -> str:
    """Return the version declared by the project descriptor at ``path``.

    Args:
        path: ``pom.xml`` or ``pyproject.toml`` (matched by file name, or
            by suffix for differently named files).
        encoding: Encoding used to read the file.

    Returns:
        The declared version, stripped of surrounding whitespace.

    Raises:
        ProjectError: The file is missing, unreadable, of an unsupported
            type, or declares no version.
    """
    try:
        content = safe_read_file(path, encoding=encoding)
    except FileOperationError as exc:
        raise ProjectError(
            f"Cannot read project descriptor: {exc.message}",
            file_path=str(path),
        ) from exc

    if path.suffix == ".xml":
        version = _version_from_pom(content, path)
    elif path.suffix == ".toml":
        version = _version_from_pyproject(content, path)
    else:
        raise ProjectError(
            "Unsupported project descriptor, expected pom.xml or pyproject.toml",
            file_path=str(path),
        )

    logger.info("Project version from %s: %s", path.name, version)
    return version


def _version_from_pom(content: str, path: Path) -> str:
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as exc:
        raise ProjectError(f"Invalid XML: {exc}", file_path=str(path)) from exc

    if _local_name(root.tag) != "project":
        raise ProjectError(
            f"Root element is <{_local_name(root.tag)}>, expected <project>",
            file_path=str(path),
        )

    version = _child_text(root, "version")
    if version is None:
        parent = _child(root, "parent")
        version = _child_text(parent, "version") if parent is not None else None

    if not version:
        raise ProjectError("No <version> element in POM", file_path=str(path))
    return version


def _local_name(tag: str) -> str:
    """Strip an ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def _child(element: ElementTree.Element, name: str) -> Optional[ElementTree.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _child_text(element: ElementTree.Element, name: str) -> Optional[str]:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    return child.text.strip() or None


def _version_from_pyproject(content: str, path: Path) -> str:
    try:
        data: Dict[str, Any] = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise ProjectError(f"Invalid TOML: {exc}", file_path=str(path)) from exc

    candidates = (
        data.get("project", {}).get("version"),
        data.get("tool", {}).get("poetry", {}).get("version"),
    )
    for version in candidates:
        if isinstance(version, str) and version.strip():
            return version.strip()

    if "version" in data.get("project", {}).get("dynamic", []):
        raise ProjectError(
            "Project version is dynamic; pass it with --project-version",
            file_path=str(path),
        )
    raise ProjectError(
        "No version in [project] or [tool.poetry]",
        file_path=str(path),
    )
