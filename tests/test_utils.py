"""
Tests for utility functions.
"""

from __future__ import annotations

import json
import subprocess
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from github_to_jira.utils import InvalidPassPathError, PassError, get_pass_value, write_json

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.unit
class TestWriteJson:
    def test_writes_indented_json(self, tmp_path: Path) -> None:
        data = {"projects": [{"key": "OCTO", "versions": ["v1.0"]}]}
        path = tmp_path / "output.json"

        returned = write_json(data, path)

        assert returned is data
        text = path.read_text(encoding="utf-8")
        assert json.loads(text) == data
        assert '\n  "projects"' in text

    def test_keeps_non_ascii_text(self, tmp_path: Path) -> None:
        path = tmp_path / "output.json"
        write_json({"summary": "Größe ändern"}, path)
        assert "Größe ändern" in path.read_text(encoding="utf-8")


@pytest.mark.unit
class TestGetPassValue:
    def test_invalid_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid pass path"):
            get_pass_value("../etc/passwd")

    @patch("github_to_jira.utils.subprocess.run")
    def test_returns_stripped_value(self, mock_run: Mock) -> None:
        mock_run.return_value = Mock(stdout="secret-token\n")
        assert get_pass_value("github/cli/token") == "secret-token"
        mock_run.assert_called_once_with(["pass", "github/cli/token"], capture_output=True, text=True, check=True)

    @patch("github_to_jira.utils.subprocess.run")
    def test_missing_entry(self, mock_run: Mock) -> None:
        mock_run.side_effect = subprocess.CalledProcessError(
            1, ["pass"], stderr="Error: github/x is not in the password store."
        )
        with pytest.raises(InvalidPassPathError, match="not found or invalid"):
            get_pass_value("github/x")

    @patch("github_to_jira.utils.subprocess.run")
    def test_pass_not_installed(self, mock_run: Mock) -> None:
        mock_run.side_effect = FileNotFoundError("pass")
        with pytest.raises(PassError, match="not installed"):
            get_pass_value("github/cli/token")
