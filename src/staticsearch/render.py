"""HTML rendering of search outcomes."""

from __future__ import annotations

import html
from string import Formatter
from typing import Mapping

from staticsearch.config import SearchConfig
from staticsearch.search.engine import SearchOutcome

RESULTS_ID = "static-search-results"
LOGO_HTML = (
    '<li id="static-search-logo">'
    '<p>Search provided by <a href="#">static search</a></p>'
    "</li>"
)


class _FieldDefaults(dict):
    """Template namespace where unknown fields render as an empty string."""

    def __missing__(self, key: str) -> str:
        return ""


def render_item(fields: Mapping[str, str], template: str) -> str:
    # Formatter.vformat with a mapping keeps positional braces out of play.
    body = Formatter().vformat(template, (), _FieldDefaults(fields))
    return f'<li class="result-item">{body}</li>'


def render_results(
    outcome: SearchOutcome,
    *,
    template: str,
    no_results_message: str,
    show_logo: bool = True,
) -> str:
    """Render an outcome as the ``<ul>`` result list.

    Field values are inserted as they are since they carry marker markup; the
    no-results message is plain text and gets escaped.
    """
    items = [render_item(record, template) for record in outcome.annotated]
    if not items:
        message = html.escape(no_results_message)
        items.append(f'<li><p id="no-results-found">{message}</p></li>')
    if show_logo:
        items.append(LOGO_HTML)
    return f'<ul id="{RESULTS_ID}">{"".join(items)}</ul>'


def render_outcome(outcome: SearchOutcome, config: SearchConfig) -> str:
    return render_results(
        outcome,
        template=config.result_template,
        no_results_message=config.no_results_message,
        show_logo=config.show_logo,
    )
