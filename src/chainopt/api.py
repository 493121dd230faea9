## chainopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable, Mapping, Sequence

from .types import Arity, OptionSpec, Diagnostic, ParseResult
from .errors import *
from .grammar import Grammar
from .parser import CliParser


def parse(argv: Sequence[str] | None, shortopts: str, longopts: Mapping[str, str] | Iterable[str] = ()) -> ParseResult:
    return CliParser(shortopts, longopts).parse_args(argv)
