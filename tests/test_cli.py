"""Tests for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from staticsearch.cli import _setup_logging, _to_rich, app
from staticsearch.config import SearchConfig


runner = CliRunner()


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("staticsearch.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode sets INFO level."""
        with patch("staticsearch.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO


class TestToRich:
    """Tests for marker to rich Text conversion."""

    def test_marked_spans_are_styled(self) -> None:
        """Markers are removed and their content styled."""
        text = _to_rich("<mark>Eleventy</mark> is simple", SearchConfig())

        assert text.plain == "Eleventy is simple"
        assert len(text.spans) == 1
        assert (text.spans[0].start, text.spans[0].end) == (0, 8)

    def test_brackets_are_not_markup(self) -> None:
        """Square brackets in data are kept literally."""
        text = _to_rich("[bold]x[/bold]", SearchConfig())

        assert text.plain == "[bold]x[/bold]"
        assert text.spans == []


class TestSearchCommand:
    """Tests for the search command."""

    def test_search_matches(self, dataset_file: Path) -> None:
        """Prints matching records and a summary."""
        result = runner.invoke(app, ["search", "eleventy", "--data", str(dataset_file)])

        assert result.exit_code == 0
        assert "Eleventy" in result.stdout
        assert "1 of 2 records matched." in result.stdout

    def test_search_no_results(self, dataset_file: Path) -> None:
        """Prints the no-results message."""
        result = runner.invoke(app, ["search", "zzz", "--data", str(dataset_file)])

        assert result.exit_code == 0
        assert "Sorry no search results found" in result.stdout

    def test_search_html(self, dataset_file: Path) -> None:
        """--html prints the rendered result list."""
        result = runner.invoke(
            app, ["search", "eleventy", "--data", str(dataset_file), "--html", "--template", "{title}"]
        )

        assert result.exit_code == 0
        assert "<mark>Eleventy</mark> is simple" in result.stdout
        assert 'id="static-search-results"' in result.stdout

    def test_search_html_no_highlight(self, dataset_file: Path) -> None:
        """--no-highlight leaves values unmarked."""
        result = runner.invoke(
            app,
            ["search", "eleventy", "--data", str(dataset_file), "--html", "--no-highlight", "--template", "{title}"],
        )

        assert result.exit_code == 0
        assert "<mark>" not in result.stdout
        assert "Eleventy is simple" in result.stdout

    def test_search_pattern_mode_warning(self, dataset_file: Path) -> None:
        """Invalid patterns produce a warning instead of a crash."""
        result = runner.invoke(app, ["search", "C++", "--data", str(dataset_file), "--pattern-mode"])

        assert result.exit_code == 0
        assert "Warning" in result.stdout
        assert "Sorry no search results found" in result.stdout

    def test_search_missing_data(self, tmp_path: Path) -> None:
        """Unavailable data exits with an error code."""
        result = runner.invoke(app, ["search", "x", "--data", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "unavailable" in result.stdout


class TestWebCommand:
    """Tests for the web command."""

    def test_web_starts_uvicorn(self, dataset_file: Path) -> None:
        """Configures the app and hands it to uvicorn."""
        mock_uvicorn = MagicMock()
        with patch.dict("sys.modules", {"uvicorn": mock_uvicorn}):
            result = runner.invoke(app, ["web", "--port", "9000", "--data", str(dataset_file)])

        assert result.exit_code == 0
        mock_uvicorn.run.assert_called_once()
        assert mock_uvicorn.run.call_args[1]["port"] == 9000

        from staticsearch.web.app import app as web_app

        assert web_app.state.config.data_source == str(dataset_file)
        web_app.state.config = None
        web_app.state.loader = None
