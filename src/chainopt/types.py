## chainopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Literal
from dataclasses import dataclass, field

from .errors import CommandLineError


class Arity:
    REQUIRED = ':'
    OPTIONAL = ';'

    MARKERS = (REQUIRED, OPTIONAL)

    @staticmethod
    def chains(current: str, following: str) -> bool:
        """Whether a value consumed for `current` lets the walk continue into `following`."""
        return following == Arity.OPTIONAL or (current == Arity.REQUIRED and following == Arity.REQUIRED)


@dataclass(frozen=True)
class OptionSpec:
    name: str
    markers: tuple[str, ...] = ()
    long: bool = False

    @property
    def flag(self) -> str:
        return ('--' if self.long else '-') + self.name

    @property
    def max_values(self) -> int:
        """Upper bound on values this option can take, following the chaining rule."""
        if not self.markers: return 0
        count = 1
        for current, following in zip(self.markers, self.markers[1:]):
            if not Arity.chains(current, following): break
            count += 1
        return count

    def __str__(self):
        return self.name + ''.join(self.markers)


DiagnosticKind = Literal["superfluous", "unknown-option", "missing-argument"]


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    token: str
    index: int
    message: str

    @property
    def fatal(self) -> bool:
        return self.kind != "superfluous"


@dataclass
class ParseResult:
    ast: dict[str, list[str]] = field(default_factory=dict)
    error: bool = False
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def is_invalid_commandline(self) -> bool:
        return self.error

    def raise_for_error(self) -> dict[str, list[str]]:
        if not self.error: return self.ast
        fatal = [d for d in self.diagnostics if d.fatal]
        raise CommandLineError('; '.join(d.message for d in fatal) or "Invalid command line.", diagnostics=fatal)
