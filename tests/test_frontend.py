"""Tests for the frontend module."""

from __future__ import annotations

from fastapi.testclient import TestClient

from staticsearch.web.app import app
from staticsearch.web.frontend import _load_template, router


class TestLoadTemplate:
    """Tests for _load_template function."""

    def test_load_template_returns_string(self) -> None:
        """Template is loaded as a string."""
        result = _load_template()
        assert isinstance(result, str)
        assert len(result) > 0

    def test_load_template_contains_html(self) -> None:
        """Template contains valid HTML."""
        result = _load_template()
        assert "<html" in result.lower() or "<!doctype" in result.lower()
        assert "</html>" in result.lower()

    def test_load_template_contains_search_form(self) -> None:
        """Template contains the search form the results attach to."""
        result = _load_template()
        assert 'id="static-search-form"' in result
        assert 'id="static-search-query"' in result


class TestRouter:
    """Tests for the frontend router."""

    def test_router_has_index_route(self) -> None:
        """Router has the index route registered."""
        routes = [route.path for route in router.routes]
        assert "/" in routes

    def test_index_served_from_app(self) -> None:
        """GET / returns the search page."""
        response = TestClient(app).get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'id="static-search-form"' in response.text


class TestPageScript:
    """Tests for the wiring between the page and the API."""

    def test_submit_posts_to_search(self) -> None:
        """The form submit handler calls POST /search with the query."""
        result = _load_template()
        assert 'fetch("/search"' in result
        assert 'method: "POST"' in result
        assert "query: input.value" in result

    def test_hover_primes_dataset(self) -> None:
        """The first hover over the form warms the session dataset."""
        result = _load_template()
        assert 'fetch("/dataset")' in result
        assert "{ once: true }" in result

    def test_results_container_is_removed_on_outside_click(self) -> None:
        """Outside clicks dismiss the rendered result list."""
        result = _load_template()
        assert "#static-search-results" in result
        assert "removeResults()" in result
