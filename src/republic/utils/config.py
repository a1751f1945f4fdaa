"""
Configuration constants for Republic (module paths, policy keyword, diagnostics)
"""

import os
import tempfile

# Module path constants
RELATIVE_MARKER = "."  # One leading marker = current module, each extra marker = one level up
PATH_SEPARATOR = "."
NAME_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*!?"

# Re-export policy constants
POLICY_KEYWORD = "reexport"
DEFAULT_REEXPORT = False
BOOLEAN_TRUE_LITERAL = "true"
BOOLEAN_FALSE_LITERAL = "false"

# Clause keywords (surface syntax)
USING_KEYWORD = "using"
IMPORT_KEYWORD = "import"
ALIAS_KEYWORD = "as"

# Parser configuration (cache under temp dir to avoid cluttering project root)
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "republic_clause_parser.cache")
DEFAULT_SOURCE_NAME = "<republic>"

# Diagnostics
NO_COLOR_ENV_VAR = "NO_COLOR"
COLOR_ENV_VAR = "REPUBLIC_COLOR"

# Error codes
ERR_MALFORMED_CLAUSE = "R0001"
ERR_VISIBILITY_CONFLICT = "R0364"
ERR_UNDEFINED_NAME = "R0425"
ERR_UNRESOLVED_PATH = "R0432"
ERR_IMPLEMENTATION = "R9999"
