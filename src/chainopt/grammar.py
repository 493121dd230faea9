## chainopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# chainopt — Option declarations: `ab:c;;` for short options, `name:` for long ones.
#

from typing import Iterable, Literal, Mapping
from dataclasses import dataclass, field

import lark

from .types import OptionSpec
from .errors import GrammarSpecError


GRAMMAR = r"""short_spec: short_option*
short_option: LETTER MARKER*
long_decl: NAME MARKER*

// `:` is a required value, `;` an optional one.
MARKER: /[:;]/
LETTER: /[^\s:;\-]/
NAME: /[^\s:;=\-][^\s:;=]*/
"""

_PARSER = lark.Lark(GRAMMAR, start=['short_spec', 'long_decl'], parser="lalr", lexer="contextual")


TokenKind = Literal["short", "long", "value"]


def classify(token: str) -> tuple[TokenKind, str]:
    """Split a raw token into its category and the option name without dashes."""
    if not token.startswith('-'): return 'value', token
    if token.startswith('--'): return 'long', token[2:]
    return 'short', token[1:]


def _declaration(tree: lark.Tree, long: bool) -> OptionSpec:
    name, *markers = tree.children
    return OptionSpec(str(name), tuple(str(m) for m in markers), long=long)

def _parse(text: str, start: str) -> lark.Tree:
    if not isinstance(text, str):
        raise GrammarSpecError(f"Option declaration `{text!r}` is not a string.", spec=text)
    try:
        return _PARSER.parse(text, start=start)
    except (lark.exceptions.ParseError, lark.exceptions.UnexpectedCharacters) as exc:
        def attr(k): return getattr(exc, k, None)
        token = attr('token') if attr('token') is not None else attr('char')
        token_val, column = getattr(token, 'value', token) or '', attr('column')
        if token_val in (':', ';'):
            message = f"Arity marker `{token_val}` without a preceding option in `{text}`."
        elif token_val == '':
            message = f"Incomplete option declaration `{text}`."
        else:
            message = f"Unexpected `{token_val}` at column {column} of option declaration `{text}`."
        raise GrammarSpecError(message, spec=text, column=column, token=token_val) from None


def _index(specs: Iterable[OptionSpec]) -> dict[str, OptionSpec]:
    table = {}
    for spec in specs:
        if spec.name in table:
            raise GrammarSpecError(f"Option `{spec.flag}` declared more than once.", spec=str(spec), token=spec.name)
        table[spec.name] = spec
    return table


@dataclass(frozen=True)
class Grammar:
    """Immutable set of declared options, keyed by name without dashes."""
    short: dict[str, OptionSpec] = field(default_factory=dict)
    long: dict[str, OptionSpec] = field(default_factory=dict)

    @classmethod
    def from_spec(cls, shortopts: str = '', longopts: Mapping[str, str] | Iterable[str] = ()) -> 'Grammar':
        short = [_declaration(t, long=False) for t in _parse(shortopts, 'short_spec').children]

        if isinstance(longopts, str):
            raise GrammarSpecError("Long options must be a mapping or a sequence of declarations, not a string.", spec=longopts)
        if isinstance(longopts, Mapping):
            long = []
            for name, markers in longopts.items():
                spec = _declaration(_parse(f"{name}{markers}", 'long_decl'), long=True)
                if spec.name != name:
                    raise GrammarSpecError(f"Arity markers `{markers}` for `--{name}` must only contain `:` or `;`.", spec=f"{name}{markers}", token=markers)
                long.append(spec)
        else:
            long = [_declaration(_parse(decl, 'long_decl'), long=True) for decl in longopts]

        return cls(short=_index(short), long=_index(long))

    def lookup(self, token: str) -> OptionSpec | None:
        """Side-effect free check of whether `token` names a declared option."""
        kind, name = classify(token)
        if kind == 'short': return self.short.get(name)
        if kind == 'long': return self.long.get(name)
        return None

    def __str__(self):
        short = ''.join(str(s) for s in self.short.values())
        return ' '.join([short] + [f"--{s}" for s in self.long.values()]).strip()
