"""Text front end: republication clause syntax -> clause tree."""

from .parser import ClauseParser, parse_clause
from .transformer import ClauseTransformer

__all__ = ['ClauseParser', 'ClauseTransformer', 'parse_clause']
