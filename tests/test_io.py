"""
Тесты записи файлов, сборки и ошибок
"""

import subprocess

import pytest

from sdkmaker.internal.errors import ErrorKind, GenerationError
from sdkmaker.internal.io import FileWriter, NpmBuildRunner


class TestFileWriter:
    @pytest.mark.asyncio
    async def test_creates_directories(self, tmp_path):
        path = await FileWriter().write(str(tmp_path / "sdk" / "src"), "index.ts", "export {};\n")

        assert path == str(tmp_path / "sdk" / "src" / "index.ts")
        assert (tmp_path / "sdk" / "src" / "index.ts").read_text(encoding="utf-8") == "export {};\n"


class TestNpmBuildRunner:
    """Тесты сборки SDK"""

    def test_success(self, monkeypatch, tmp_path):
        commands = []
        monkeypatch.setattr(
            subprocess, "run", lambda command, cwd, check: commands.append((command, cwd))
        )

        assert NpmBuildRunner().build(str(tmp_path)) is True
        assert commands == [
            (("npm", "install"), str(tmp_path)),
            (("npm", "run", "build"), str(tmp_path)),
        ]

    def test_failed_install_stops_build(self, monkeypatch, tmp_path):
        commands = []

        def run(command, cwd, check):
            commands.append(command)
            raise subprocess.CalledProcessError(1, command)

        monkeypatch.setattr(subprocess, "run", run)

        assert NpmBuildRunner().build(str(tmp_path)) is False
        assert commands == [("npm", "install")]

    def test_missing_npm(self, monkeypatch, tmp_path):
        def run(command, cwd, check):
            raise FileNotFoundError("npm")

        monkeypatch.setattr(subprocess, "run", run)
        assert NpmBuildRunner().build(str(tmp_path)) is False


class TestGenerationError:
    """Тесты единой ошибки конвейера"""

    def test_message(self):
        error = GenerationError.network("fetch_from_url", "Failed", {"url": "http://x"})

        assert str(error) == "[NetworkError] in fetch_from_url: Failed"
        assert error.category == "Network Operation"
        assert error.severity == "Error"

    def test_to_dict(self):
        data = GenerationError.validation("load", "Input is not a valid string").to_dict()

        assert data["type"] == "ValidationError"
        assert data["severity"] == "Warning"
        assert data["details"] == {}
        assert data["timestamp"]

    def test_describe(self):
        description = GenerationError.content_parsing(
            "process_content", "Failed", {"attempted_formats": ["JSON", "YAML"]}
        ).describe()

        assert "Error Type: ContentParsingError" in description
        assert '"JSON"' in description

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_every_kind_has_metadata(self, kind):
        error = GenerationError(kind, "m", "msg")
        assert error.category and error.severity
