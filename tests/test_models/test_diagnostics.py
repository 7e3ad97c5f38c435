"""
Tests for diagnostics collection.
"""

from instatus_provider.models.diagnostics import Diagnostic, Diagnostics, Severity


class TestDiagnostics:
    """Test the diagnostics collection."""

    def test_empty(self):
        """An empty collection has no errors."""
        diagnostics = Diagnostics()

        assert len(diagnostics) == 0
        assert not diagnostics.has_error()
        assert list(diagnostics) == []

    def test_add_error_and_warning(self):
        """Errors and warnings are kept in order and filterable."""
        diagnostics = Diagnostics()
        error = RuntimeError("boom")
        diagnostics.add_warning("Careful", "detail")
        diagnostics.add_error("Failed", "boom", error)

        assert len(diagnostics) == 2
        assert diagnostics.has_error()
        assert [d.summary for d in diagnostics] == ["Careful", "Failed"]
        assert diagnostics.errors()[0].error is error
        assert diagnostics.warnings()[0].severity == Severity.WARNING

    def test_extend(self):
        """extend appends another collection's diagnostics."""
        first = Diagnostics()
        second = Diagnostics()
        second.add_error("Failed")

        first.extend(second)

        assert first.has_error()
        assert first.items == second.items

    def test_diagnostic_equality_ignores_error(self):
        """Diagnostics compare by severity and text only."""
        a = Diagnostic(Severity.ERROR, "Failed", "x", ValueError("a"))
        b = Diagnostic(Severity.ERROR, "Failed", "x", ValueError("b"))

        assert a == b
