## chainopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# chainopt — Getopt-like matching where options take chains of required/optional values.
#

import logging
from typing import Sequence

from .types import Arity, OptionSpec, Diagnostic, DiagnosticKind, ParseResult
from .grammar import Grammar, classify as classify_token
from .errors import ArgvError


logger = logging.getLogger(__name__)


def check_argv(argv) -> tuple[str, ...]:
    if not isinstance(argv, (list, tuple)):
        raise ArgvError(f"Command line arguments must be a list of strings, got `{type(argv).__name__}`.")
    for index, token in enumerate(argv):
        if not isinstance(token, str):
            raise ArgvError(f"Command line argument {index} is not a string!", index=index)
    return tuple(argv)


class ParseRun:
    """State of one pass over an argument vector; discarded once the result is built."""

    def __init__(self, grammar: Grammar, tokens: Sequence[str]):
        self.grammar = grammar
        self.tokens = tuple(tokens)
        self.consumed: set[int] = set()
        self.result = ParseResult()

    def __call__(self) -> ParseResult:
        # Token 0 is the program name.
        for index in range(1, len(self.tokens)):
            if index not in self.consumed:
                self.classify(index, toplevel=True)
        return self.result

    # Diagnostics ─────────────────────────────────────────────────────────────────────────────
    def _report(self, kind: DiagnosticKind, index: int, message: str) -> None:
        diag = Diagnostic(kind, self.tokens[index], index, message)
        self.result.diagnostics.append(diag)
        if diag.fatal:
            self.result.error = True
            logger.warning(message)
        else:
            logger.info(message)

    # Classifier ──────────────────────────────────────────────────────────────────────────────
    def classify(self, index: int, toplevel: bool = False) -> bool:
        self.consumed.add(index)
        token = self.tokens[index]
        kind, name = classify_token(token)

        if kind == 'value':
            if toplevel: self._report('superfluous', index, f"Superfluous argument: {token}")
            return False
        return self.match(index, kind, name)

    # Matcher ─────────────────────────────────────────────────────────────────────────────────
    def match(self, index: int, kind: str, name: str) -> bool:
        spec = (self.grammar.long if kind == 'long' else self.grammar.short).get(name)
        if spec is None:
            self._report('unknown-option', index, f"Invalid parameter given: {self.tokens[index]}")
            return False

        # Entry exists once recognized, even if values turn out missing; a repeat starts over.
        self.result.ast[spec.name] = []
        return self.consume(spec, index)

    # Argument consumer ───────────────────────────────────────────────────────────────────────
    def _is_value(self, index: int) -> bool:
        if index >= len(self.tokens) or index in self.consumed: return False
        token = self.tokens[index]
        return token != '' and self.grammar.lookup(token) is None and not token.startswith('-')

    def consume(self, spec: OptionSpec, index: int) -> bool:
        values = self.result.ast[spec.name]

        if not spec.markers:
            if self._is_value(index + 1):
                self.consumed.add(index + 1)
                self._report('superfluous', index + 1, f"Superfluous argument: {self.tokens[index + 1]}")
                return True
            return False

        cursor = index
        for position, marker in enumerate(spec.markers):
            if position > 0 and not Arity.chains(spec.markers[position - 1], marker):
                break
            if not self._is_value(cursor + 1):
                if marker == Arity.REQUIRED:
                    self._report('missing-argument', index, f"Missing argument for {spec.flag}")
                    return False
                break
            cursor += 1
            self.consumed.add(cursor)
            values.append(self.tokens[cursor])
        return cursor > index
