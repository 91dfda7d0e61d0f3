from __future__ import annotations

import logging

import pytest
import yaml

from ramlib.diagnostics import (
    IncludeInfo,
    IncludeStackError,
    Level,
    ValidationCollector,
    ValidationResult,
)


class TestValidationCollector:
    def test_empty_collector(self):
        collector = ValidationCollector()
        assert not collector.has_errors()
        assert collector.get_all() == []
        assert collector.include_depth == 0

    def test_add_error(self):
        collector = ValidationCollector()
        result = collector.error("error message")

        assert collector.has_errors()
        results = collector.get_all()
        assert results == [result]
        assert results[0].level is Level.ERROR
        assert results[0].message == "error message"
        assert results[0].start_mark is None

    def test_add_error_at_node(self):
        node = yaml.compose("title: My API\n").value[0][1]
        collector = ValidationCollector()
        result = collector.error("bad title", node)
        assert result.start_mark is node.start_mark
        assert result.end_mark is node.end_mark

    def test_add_warning(self):
        collector = ValidationCollector()
        collector.warning("warning message")

        assert not collector.has_errors()  # warnings don't set has_errors
        results = collector.get_all()
        assert len(results) == 1
        assert results[0].level is Level.WARN

    def test_add_info(self):
        collector = ValidationCollector()
        collector.info("info message")

        assert not collector.has_errors()
        assert collector.get_all()[0].level is Level.INFO

    def test_get_level(self):
        collector = ValidationCollector()
        collector.info("i")
        e1 = collector.error("e1")
        collector.warning("w")
        e2 = collector.error("e2")

        assert collector.get_level(Level.ERROR) == [e1, e2]
        assert [r.message for r in collector.get_level(Level.WARN)] == ["w"]

    def test_get_all_is_a_copy(self):
        collector = ValidationCollector()
        collector.error("e")
        collector.get_all().clear()
        assert len(collector.get_all()) == 1

    def test_format_all(self):
        collector = ValidationCollector()
        with collector.including(IncludeInfo("types.raml")):
            collector.error("test error")
        collector.warning("test warning")

        assert collector.format_all() == "error: test error\nwarn: test warning"

    def test_format_all_empty(self):
        assert ValidationCollector().format_all() == ""


class TestIncludeTracking:
    def test_results_outside_includes_have_no_context(self):
        collector = ValidationCollector()
        result = collector.error("e")
        assert result.include_context == ()
        assert result.include_name is None

    def test_nested_includes_are_innermost_first(self):
        collector = ValidationCollector()
        outer, inner = IncludeInfo("outer.raml"), IncludeInfo("inner.raml")

        with collector.including(outer):
            with collector.including(inner):
                assert collector.include_depth == 2
                nested = collector.error("nested")
            shallow = collector.warning("shallow")
        top = collector.info("top")

        assert nested.include_context == (inner, outer)
        assert nested.include_name == "inner.raml"
        assert shallow.include_context == (outer,)
        assert top.include_context == ()
        assert collector.include_depth == 0

    def test_snapshot_survives_pop(self):
        collector = ValidationCollector()
        collector.push_include(IncludeInfo("a.raml"))
        result = collector.error("e")
        assert collector.pop_include() == IncludeInfo("a.raml")
        collector.push_include(IncludeInfo("b.raml"))

        assert result.include_name == "a.raml"
        assert collector.get_all()[0].include_context == (IncludeInfo("a.raml"),)

    def test_existing_context_is_kept(self):
        collector = ValidationCollector()
        tagged = ValidationResult.error("e").with_include_context([IncludeInfo("x.raml")])
        with collector.including(IncludeInfo("y.raml")):
            recorded = collector.add(tagged)
        assert recorded.include_name == "x.raml"

    def test_initial_stack(self):
        collector = ValidationCollector(include_stack=[IncludeInfo("b.raml"), IncludeInfo("a.raml")])
        assert collector.include_depth == 2
        assert collector.error("e").include_name == "b.raml"

    def test_including_pops_on_exception(self):
        collector = ValidationCollector()
        with pytest.raises(ValueError):
            with collector.including(IncludeInfo("a.raml")):
                raise ValueError("boom")
        assert collector.include_depth == 0

    def test_pop_empty_stack(self):
        collector = ValidationCollector()
        with pytest.raises(IncludeStackError):
            collector.pop_include()


def test_logs_recorded_results(caplog):
    collector = ValidationCollector()
    with caplog.at_level(logging.DEBUG, logger="ramlib.diagnostics.collector"):
        with collector.including(IncludeInfo("types.raml")):
            collector.error("missing type")

    assert "entering include types.raml" in caplog.text
    assert "recorded error: missing type (include=types.raml)" in caplog.text
    assert "leaving include types.raml" in caplog.text
