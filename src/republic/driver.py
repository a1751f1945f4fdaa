"""
Republication Driver

Rust Pattern: rustc_driver::driver

Text in, declarations out: parses a republication invocation and runs it
against a consuming module.
"""

import logging
from typing import Optional

from .frontend.parser import ClauseParser
from .module_system.module_info import Module
from .republication.orchestrator import Republisher
from .shared.clauses import Clause
from .shared.errors import UnresolvedPathError
from .utils.config import DEFAULT_SOURCE_NAME

logger = logging.getLogger(__name__)


class RepublicDriver:
    """Parser + engine, reusable across invocations and registries."""

    def __init__(self, parser: Optional[ClauseParser] = None):
        self.parser = parser or ClauseParser()

    def run(self, module: Module, source: str, source_file: str = DEFAULT_SOURCE_NAME) -> Clause:
        """
        Parse `source` and republish it into `module`.

        Returns the parsed clause.
        """
        reexport, clause = self.parser.parse(source, source_file)
        if module.registry is None:
            raise UnresolvedPathError(
                f"module '{module.qualified_name}' is not attached to a registry"
            )
        Republisher(module.registry).republish(module, clause, reexport)
        return clause


_default_driver: Optional[RepublicDriver] = None


def republish_source(module: Module, source: str, source_file: str = DEFAULT_SOURCE_NAME) -> Clause:
    """
    Run one textual invocation, e.g.

        republish_source(pkg, "reexport=true using Main.Core: Vec, norm as vnorm")
    """
    global _default_driver
    if _default_driver is None:
        _default_driver = RepublicDriver()
    return _default_driver.run(module, source, source_file)
