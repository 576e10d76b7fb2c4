import io
import logging

from snippetmanager.errors import SnippetNotFoundError, SnippetParseError, UsageError
from snippetmanager.exception_handler import EXIT_FAILURE, EXIT_USAGE, ErrorHandler


def _make_handler():
    stream = io.StringIO()
    return ErrorHandler(stream=stream), stream


def test_snippet_errors_are_reported_with_prefix():
    handler, stream = _make_handler()

    code = handler.handle_error(SnippetNotFoundError("x"), {"prefix": "Error deleting snippet"})

    assert code == EXIT_FAILURE
    assert stream.getvalue() == "Error deleting snippet: Snippet 'x' not found\n"


def test_usage_error_maps_to_usage_exit_code():
    handler, stream = _make_handler()

    assert handler.handle_error(UsageError("snippet name must not be empty"), {}) == EXIT_USAGE
    assert stream.getvalue() == "snippet name must not be empty\n"


def test_unexpected_errors_are_logged_with_traceback(caplog):
    handler, stream = _make_handler()

    with caplog.at_level(logging.ERROR, logger="snippet_manager"):
        code = handler.handle_error(RuntimeError("boom"), {"prefix": "Fatal error"})

    assert code == EXIT_FAILURE
    assert stream.getvalue() == "Fatal error: boom\n"
    assert caplog.records[-1].exc_info is not None


def test_known_errors_stay_out_of_error_log(caplog):
    handler, _ = _make_handler()

    with caplog.at_level(logging.ERROR, logger="snippet_manager"):
        handler.handle_error(SnippetParseError("bad file"), {"prefix": "Error loading snippets"})

    assert caplog.records == []
