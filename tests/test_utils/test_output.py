"""Unit tests for release_candidate.utils.output."""

from __future__ import annotations

from pathlib import Path

import pytest

from release_candidate.exceptions import ConfigError
from release_candidate.utils.output import emit, resolve_output_target


@pytest.mark.unit
class TestResolveOutputTarget:
    """Tests for resolve_output_target."""

    @pytest.mark.parametrize("uri", ["stdout", "STDOUT", " stdout "])
    def test_stdout(self, uri: str) -> None:
        """Test 'stdout' in any case selects standard output."""
        assert resolve_output_target(uri) is None

    def test_file_uri(self, tmp_path: Path) -> None:
        """Test an absolute file URI resolves to its path."""
        target = tmp_path / "project.properties"

        assert resolve_output_target(target.as_uri()) == target

    def test_localhost_file_uri(self) -> None:
        """Test file://localhost/ URIs are accepted."""
        assert resolve_output_target("file://localhost/tmp/v.txt") == Path("/tmp/v.txt")

    def test_percent_encoded_path(self) -> None:
        """Test escaped characters in the path are decoded."""
        assert resolve_output_target("file:///tmp/my%20dir/v.txt") == Path(
            "/tmp/my dir/v.txt"
        )

    @pytest.mark.parametrize(
        "uri",
        ["project.properties", "http://example.com/v", "file://", "file://server/share/v"],
        ids=["relative", "http", "no-path", "remote-host"],
    )
    def test_invalid_uris(self, uri: str) -> None:
        """Test unsupported URIs raise ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            resolve_output_target(uri)

        assert exc_info.value.option == "output_uri"


@pytest.mark.unit
class TestEmit:
    """Tests for emit."""

    def test_stdout(self, capsys: pytest.CaptureFixture) -> None:
        """Test stdout output is printed verbatim with a newline."""
        result = emit("##teamcity[message text='1.0']", "stdout")

        captured = capsys.readouterr()
        assert result is None
        assert captured.out == "##teamcity[message text='1.0']\n"

    def test_file(self, tmp_path: Path) -> None:
        """Test file output is written with the requested encoding."""
        target = tmp_path / "out" / "version.properties"

        result = emit("PROJECT_VERSION=1.0-ß", target.as_uri(), encoding="ISO-8859-1")

        assert result == target
        assert target.read_bytes() == "PROJECT_VERSION=1.0-ß".encode("iso-8859-1")

    def test_file_nothing_on_stdout(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """Test writing a file prints nothing to stdout."""
        emit("1.0", (tmp_path / "v.txt").as_uri())

        assert capsys.readouterr().out == ""
