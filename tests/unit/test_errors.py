"""
Tests for error types and rustc-style diagnostic rendering.
"""

import pytest

from republic.shared.errors import (
    Diagnostic,
    MalformedClauseError,
    RepublicError,
    RepublicImplementationError,
    UndefinedNameError,
    UnresolvedPathError,
    VisibilityConflictError,
    format_diagnostic,
)
from republic.shared.source_location import SourceLocation


class TestFormatDiagnostic:

    def test_message_only(self):
        text = format_diagnostic(Diagnostic("boom", code="R0001"))
        assert text == "error[R0001]: boom"

    def test_without_code(self):
        assert format_diagnostic(Diagnostic("boom")) == "error: boom"

    def test_source_line_and_caret(self):
        diag = Diagnostic("bad path", location=SourceLocation("api.rep", 1, 7), code="R0432")
        text = format_diagnostic(diag, "using Main.A")
        assert text.splitlines() == [
            "error[R0432]: bad path",
            " --> api.rep:1:7",
            "  |",
            "1 | using Main.A",
            "  |       ^^^^^^",
        ]

    def test_explicit_span_and_label(self):
        loc = SourceLocation("api.rep", 1, 1, end_line=1, end_column=15)
        diag = Diagnostic("bad policy", location=loc, label="here")
        last = format_diagnostic(diag, "reexport=maybe using Main.A").splitlines()[-1]
        assert last == "  | " + "^" * 14 + " here"

    def test_location_without_source(self):
        diag = Diagnostic("x", location=SourceLocation("api.rep", 4, 2))
        assert format_diagnostic(diag).splitlines()[1] == " --> api.rep:4:2"

    def test_help_and_note(self):
        diag = Diagnostic("x", help="try this", note="loaded roots: Main")
        lines = format_diagnostic(diag).splitlines()
        assert lines[1:] == ["  = help: try this", "  = note: loaded roots: Main"]

    def test_no_ansi_when_color_disabled(self):
        diag = Diagnostic("x", location=SourceLocation("f", 1, 1), help="h")
        assert "\033[" not in format_diagnostic(diag, "using A", color=False)

    def test_ansi_when_color_enabled(self):
        assert "\033[" in format_diagnostic(Diagnostic("x"), color=True)


class TestRepublicError:

    def test_default_codes(self):
        assert MalformedClauseError("m").code == "R0001"
        assert UnresolvedPathError("m").code == "R0432"
        assert UndefinedNameError("m").code == "R0425"

    def test_explicit_code_wins(self):
        assert UnresolvedPathError("m", code="R1234").code == "R1234"

    def test_str_without_location_is_message(self):
        assert str(UnresolvedPathError("module 'Nope' is not loaded")) == "module 'Nope' is not loaded"

    def test_str_with_location_is_diagnostic(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        error = MalformedClauseError(
            "syntax error: unexpected `@`",
            location=SourceLocation("<republic>", 1, 17),
            source_code="using Main.A: x @ y",
        )
        text = str(error)
        assert text.startswith("error[R0001]: syntax error")
        assert "1 | using Main.A: x @ y" in text
        assert "\033[" not in text

    def test_to_diagnostic_carries_annotations(self):
        diag = UnresolvedPathError("m", help="h", note="n").to_diagnostic()
        assert (diag.code, diag.help, diag.note) == ("R0432", "h", "n")

    def test_all_are_republic_errors(self):
        for cls in (MalformedClauseError, UnresolvedPathError, UndefinedNameError):
            assert issubclass(cls, RepublicError)


class TestVisibilityConflictError:

    def test_fields_and_message(self):
        error = VisibilityConflictError("Main.X", "f", "public", "exported")
        assert error.module_name == "Main.X"
        assert error.name == "f"
        assert error.code == "R0364"
        assert "already exported" in error.message
        assert "'f'" in error.help_text

    def test_raised_by_strict_module_declarations(self, main):
        main.export("f")
        with pytest.raises(VisibilityConflictError):
            main.public("f")


def test_implementation_error_is_not_a_user_error():
    error = RepublicImplementationError("visitor fell through")
    assert not isinstance(error, RepublicError)
    assert str(error) == "[R9999] visitor fell through"
