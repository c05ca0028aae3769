import logging
from pathlib import Path

from infrastructure.observability import make_session_tag, set_log_context, taxonomy_log_context
from infrastructure.observability.logging import ContextInjectFilter, cv_taxonomy
from infrastructure.storage import TaxonomyLoader


def test_session_tag_is_stable_and_short() -> None:
    assert make_session_tag("20260101_120000_42") == make_session_tag("20260101_120000_42")
    assert len(make_session_tag("abc")) == 8
    assert make_session_tag("abc") != make_session_tag("abd")


def test_filter_injects_context_fields() -> None:
    set_log_context(session_id="s-1")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    with taxonomy_log_context("magic_place"):
        assert ContextInjectFilter().filter(record) is True

    assert record.taxonomy == "magic_place"
    assert record.session == make_session_tag("s-1")


def test_taxonomy_context_restores_previous_value() -> None:
    before = cv_taxonomy.get()
    with taxonomy_log_context("outer"):
        with taxonomy_log_context("inner"):
            assert cv_taxonomy.get() == "inner"
        assert cv_taxonomy.get() == "outer"
    assert cv_taxonomy.get() == before


def test_loader_restores_callers_taxonomy_context(storage_root: Path) -> None:
    with taxonomy_log_context("caller"):
        TaxonomyLoader(storage_root).load("creature")
        assert cv_taxonomy.get() == "caller"
