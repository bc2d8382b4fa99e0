"""
Shared context object for release-candidate CLI commands.

This module defines the global Click context used to share configuration
and runtime options across CLI subcommands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from release_candidate.config import ReleaseCandidateConfig


class ReleaseCandidateContext:
    """Global context object for release-candidate CLI commands.

    An instance of this class is created once per CLI invocation and
    passed to commands using Click's context mechanism.

    Attributes:
        config_path: Path to the configuration file, if one was loaded.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Configuration loaded from file, ``None`` until loaded.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[ReleaseCandidateConfig] = None

    def effective_config(self) -> ReleaseCandidateConfig:
        """Return the loaded configuration, or defaults if none was loaded."""
        return self.config if self.config is not None else ReleaseCandidateConfig()


#: Click decorator for injecting :class:`ReleaseCandidateContext` into commands.
pass_context = click.make_pass_decorator(ReleaseCandidateContext, ensure=True)
