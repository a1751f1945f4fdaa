"""
Error Reporting

Rust Pattern: rustc_errors::Diagnostic

Structural problems (a path that does not resolve, a clause of unknown
shape) are fatal and raised eagerly. Visibility conflicts are not errors
for the republication engine; VisibilityConflictError is only raised by the
strict host declarations on Module, which the engine never triggers.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

from .source_location import SourceLocation
from ..utils.config import (
    COLOR_ENV_VAR,
    NO_COLOR_ENV_VAR,
    ERR_IMPLEMENTATION,
    ERR_MALFORMED_CLAUSE,
    ERR_UNDEFINED_NAME,
    ERR_UNRESOLVED_PATH,
    ERR_VISIBILITY_CONFLICT,
)


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set or REPUBLIC_COLOR=never)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get(NO_COLOR_ENV_VAR):
        return False
    explicit = os.environ.get(COLOR_ENV_VAR, "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return True

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_CYAN   = "\033[36m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


# ---------------------------------------------------------------------------
# Diagnostic dataclass
# ---------------------------------------------------------------------------

@dataclass
class Diagnostic:
    """
    One reportable problem.

    Rust Pattern: rustc_errors::Diagnostic
    """
    message: str
    location: Optional[SourceLocation] = None
    code: Optional[str] = None
    help: Optional[str] = None
    note: Optional[str] = None
    label: Optional[str] = None


def format_diagnostic(
    diagnostic: Diagnostic,
    source: Optional[str] = None,
    color: bool = False,
) -> str:
    """
    Render a diagnostic in rustc style.

    Example output (plain, no color)::

        error[R0001]: expected `reexport=true` or `reexport=false`
         --> <republic>:1:1
          |
        1 | reexport=maybe using Foo
          | ^^^^^^^^^^^^^^
    """
    out: List[str] = []

    code_str = f"[{diagnostic.code}]" if diagnostic.code else ""
    out.append(
        _style(f"error{code_str}", _BOLD, _RED, color=color)
        + _style(f": {diagnostic.message}", _BOLD, color=color)
    )

    loc = diagnostic.location
    if loc is None:
        _append_annotations(out, diagnostic, 1, color)
        return "\n".join(out)

    src_lines = source.split("\n") if source is not None else []
    if not 1 <= loc.line <= len(src_lines):
        out.append(_style(" --> ", _BOLD, _BLUE, color=color) + str(loc))
        _append_annotations(out, diagnostic, 1, color)
        return "\n".join(out)

    gw = len(str(loc.line))
    code_line = src_lines[loc.line - 1]
    col_start = max(loc.column, 1) - 1
    if loc.end_line in (0, loc.line) and loc.end_column > loc.column:
        span_len = loc.end_column - loc.column
    else:
        span_len = _guess_span(code_line, col_start)
    label_suffix = f" {diagnostic.label}" if diagnostic.label else ""

    out.append(_style(" " * gw + "--> ", _BOLD, _BLUE, color=color) + str(loc))
    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    out.append(_style(str(loc.line).rjust(gw) + " | ", _BOLD, _BLUE, color=color) + code_line)
    out.append(
        _style(" " * (gw + 1) + "| ", _BOLD, _BLUE, color=color)
        + _style(" " * col_start + "^" * max(1, span_len) + label_suffix, _BOLD, _RED, color=color)
    )
    _append_annotations(out, diagnostic, gw, color)
    return "\n".join(out)


def _guess_span(code_line: str, col_start: int) -> int:
    """Guess token length when end_column is unavailable."""
    length = 0
    for ch in code_line[col_start:]:
        if ch in (" ", "\t", ",", ":", ";"):
            break
        length += 1
    return max(1, length)


def _append_annotations(out: List[str], diagnostic: Diagnostic, gw: int, color: bool) -> None:
    if not (diagnostic.help or diagnostic.note):
        return
    pad = " " * (gw + 1)
    if diagnostic.help:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("help: ", _BOLD, color=color)
            + diagnostic.help
        )
    if diagnostic.note:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("note: ", _BOLD, color=color)
            + diagnostic.note
        )


# ============================================================================
# Exception Classes
# ============================================================================

class RepublicError(Exception):
    """Base exception for all republication errors"""

    default_code: Optional[str] = None

    def __init__(self,
                 message: str,
                 location: Optional[SourceLocation] = None,
                 code: Optional[str] = None,
                 help: Optional[str] = None,
                 note: Optional[str] = None,
                 source_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.location = location
        self.code = code or self.default_code
        self.help_text = help
        self.note_text = note
        self.source_code = source_code

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            message=self.message,
            location=self.location,
            code=self.code,
            help=self.help_text,
            note=self.note_text,
        )

    def format(self, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        return format_diagnostic(self.to_diagnostic(), self.source_code, color=use_color)

    def __str__(self):
        if self.location is None:
            return self.message
        return self.format()


class UnresolvedPathError(RepublicError):
    """A module-path segment (or imported symbol) does not resolve"""
    default_code = ERR_UNRESOLVED_PATH


class MalformedClauseError(RepublicError):
    """A consumption clause does not match any recognized shape"""
    default_code = ERR_MALFORMED_CLAUSE


class UndefinedNameError(RepublicError):
    """Qualified access to a name that is not reachable in a module"""
    default_code = ERR_UNDEFINED_NAME


class VisibilityConflictError(RepublicError):
    """
    Illegal visibility transition requested directly on a module
    (public after export, or export after public).
    """
    default_code = ERR_VISIBILITY_CONFLICT

    def __init__(self, module_name: str, name: str, requested: str, existing: str):
        super().__init__(
            f"cannot declare '{name}' {requested} in module '{module_name}': already {existing}",
            help=f"remove one of the conflicting declarations of '{name}'",
        )
        self.module_name = module_name
        self.name = name


class RepublicImplementationError(Exception):
    """
    Error in the Python implementation (not in a user's clause).

    Never use this for problems in user clauses - use RepublicError subclasses.
    """
    def __init__(self, message: str, error_code: str = ERR_IMPLEMENTATION):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"
