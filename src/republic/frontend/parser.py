"""
Clause Parser

Rust Pattern: rustc_parse

Parses republication source text such as

    reexport=true using Main.Foo: bar, baz as qux

into (reexport, Clause). Uses a Lark LALR parser with native caching;
every syntax problem surfaces as MalformedClauseError with a location.
"""

from pathlib import Path
from typing import Tuple
import logging

from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError

from .transformer import ClauseTransformer
from ..shared.clauses import Clause
from ..shared.errors import MalformedClauseError, RepublicError
from ..shared.source_location import SourceLocation
from ..utils.config import DEFAULT_PARSER_CACHE_FILE, DEFAULT_SOURCE_NAME

logger = logging.getLogger("republic.frontend.parser")


class ClauseParser:
    """
    Parser for republication clauses.

    Rust Pattern: rustc_parse::parse()
    """

    def __init__(self, cache_file: str = DEFAULT_PARSER_CACHE_FILE):
        grammar_path = Path(__file__).parent / "grammar.lark"
        self.parser = Lark.open(
            grammar_path,
            start='start',
            parser='lalr',              # Required for caching
            cache=cache_file,
            propagate_positions=True,   # Locations for diagnostics
            maybe_placeholders=False,
        )
        self.transformer = ClauseTransformer()

    def parse(self, source: str, source_file: str = DEFAULT_SOURCE_NAME) -> Tuple[bool, Clause]:
        """
        Parse one invocation.

        Returns: (reexport, clause)
        Raises: MalformedClauseError
        """
        self.transformer.current_file = source_file
        try:
            tree = self.parser.parse(source)
            reexport, clause = self.transformer.transform(tree)
        except UnexpectedInput as e:
            location = None
            if getattr(e, 'line', -1) > 0:
                location = SourceLocation(file=source_file, line=e.line, column=e.column)
            raise MalformedClauseError(
                f"syntax error: {_describe(e)}",
                location=location,
                source_code=source,
                help="expected `using`, `import` or `begin ... end`",
            ) from e
        except VisitError as e:
            if isinstance(e.orig_exc, RepublicError):
                e.orig_exc.source_code = source
                raise e.orig_exc from None
            raise

        logger.debug(f"Parsed {source_file}: reexport={reexport}, {clause}")
        return reexport, clause


def _describe(error: UnexpectedInput) -> str:
    token = getattr(error, 'token', None)
    if token is not None:
        if token.type == '$END':
            return "unexpected end of input"
        return f"unexpected `{token}`"
    char = getattr(error, 'char', None)
    if char is not None:
        return f"unexpected character `{char}`"
    return "unexpected input"


_default_parser = None


def parse_clause(source: str, source_file: str = DEFAULT_SOURCE_NAME) -> Tuple[bool, Clause]:
    """Parse with a shared ClauseParser instance."""
    global _default_parser
    if _default_parser is None:
        _default_parser = ClauseParser()
    return _default_parser.parse(source, source_file)
