## chainopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# chainopt — Getopt-like matching where options take chains of required/optional values.
#

import sys
from typing import Iterable, Mapping, Sequence

from .types import ParseResult
from .grammar import Grammar
from .matcher import ParseRun, check_argv


class CliParser:
    """Command line parser where each option may take several required or optional values.

    Short options are declared like getopt, `ab:c;;` with `:` for a required value and `;` for an
    optional one; markers chain, so `c::` takes two values and `c:;;` one to three. Long options are
    declared the same way, either as `{'name': ':'}` or as a sequence of `'name:'` strings.
    """

    def __init__(self, shortopts: str, longopts: Mapping[str, str] | Iterable[str] = ()):
        self.grammar = Grammar.from_spec(shortopts, longopts)
        self.last_result: ParseResult | None = None

    def parse_args(self, argv: Sequence[str] | None = None) -> ParseResult:
        tokens = check_argv(sys.argv if argv is None else argv)
        self.last_result = ParseRun(self.grammar, tokens)()
        return self.last_result

    def parse(self, argv: Sequence[str] | None = None) -> dict[str, list[str]]:
        return self.parse_args(argv).ast

    def is_invalid_commandline(self) -> bool:
        return self.last_result is not None and self.last_result.error

    def __repr__(self):
        return f"CliParser({str(self.grammar)!r})"
