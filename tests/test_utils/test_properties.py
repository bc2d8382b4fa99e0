"""Unit tests for release_candidate.utils.properties."""

from __future__ import annotations

import pytest

from release_candidate.exceptions import ConfigError
from release_candidate.utils.properties import (
    interpolate_properties,
    parse_definitions,
)


@pytest.mark.unit
class TestParseDefinitions:
    """Tests for parse_definitions."""

    def test_empty(self) -> None:
        """Test no definitions yields an empty mapping."""
        assert parse_definitions([]) == {}

    def test_simple_definitions(self) -> None:
        """Test name=value pairs are parsed."""
        assert parse_definitions(["build_number=176", "branch=main"]) == {
            "build_number": "176",
            "branch": "main",
        }

    def test_value_may_contain_equals(self) -> None:
        """Test only the first '=' separates name and value."""
        assert parse_definitions(["expr=a=b"]) == {"expr": "a=b"}

    def test_empty_value(self) -> None:
        """Test an empty value is allowed."""
        assert parse_definitions(["suffix="]) == {"suffix": ""}

    def test_later_definition_wins(self) -> None:
        """Test repeated names keep the last value."""
        assert parse_definitions(["n=1", "n=2"]) == {"n": "2"}

    @pytest.mark.parametrize("definition", ["build_number", "=176", " =x"])
    def test_invalid_definition(self, definition: str) -> None:
        """Test entries without a name or '=' raise ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            parse_definitions([definition])

        assert exc_info.value.option == "define"


@pytest.mark.unit
class TestInterpolateProperties:
    """Tests for interpolate_properties."""

    def test_defined_placeholder(self) -> None:
        """Test a defined property is substituted."""
        text = "1.2.0-build.${build_number}"

        assert interpolate_properties(text, {"build_number": "176"}) == "1.2.0-build.176"

    def test_undefined_placeholder_kept(self) -> None:
        """Test unknown placeholders stay for a later stage."""
        assert interpolate_properties("${a}-${b}", {"a": "1"}) == "1-${b}"

    def test_no_properties(self) -> None:
        """Test text is returned unchanged without definitions."""
        assert interpolate_properties("${a}", {}) == "${a}"

    def test_values_not_reinterpolated(self) -> None:
        """Test substituted values are not scanned again."""
        assert interpolate_properties("${a}", {"a": "${b}", "b": "x"}) == "${b}"

    def test_dotted_names(self) -> None:
        """Test Maven-style dotted property names."""
        assert interpolate_properties("${project.basedir}", {"project.basedir": "/src"}) == "/src"
