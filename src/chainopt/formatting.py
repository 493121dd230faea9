## chainopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import logging

from .types import ParseResult
from .grammar import Grammar


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def _format_value(it: str) -> str:
    if it == '' or any(ch.isspace() or ch in '"\\' for ch in it):
        return '"' + it.replace('\\', '\\\\').replace('"', '\\"') + '"'
    return it

def _flag(name: str, grammar: Grammar | None) -> str:
    if grammar is not None and name in grammar.short: return '-' + name
    if grammar is not None and name in grammar.long: return '--' + name
    return ('-' if len(name) == 1 else '--') + name

def format_result(result: ParseResult, grammar: Grammar | None = None) -> str:
    if not result.ast: return '∅'
    flags = {name: _flag(name, grammar) for name in result.ast}
    width = max(len(f) for f in flags.values()) + 2
    lines = []
    for name, values in result.ast.items():
        line = f"\033[1;97m{flags[name]}\033[0m"
        if values:
            line += ' ' * (width - len(flags[name])) + ' '.join(_format_value(v) for v in values)
        lines.append(line)
    return '\n'.join(lines)


class DiagnosticFormatter(logging.Formatter):
    """Renders diagnostics with a colored banner per severity."""

    BANNERS = {
        logging.INFO: '\033[30;47m NOTICE. \033[0m',
        logging.WARNING: '\033[30;43m WARNING. \033[0m',
        logging.ERROR: '\033[97;41m ERROR. \033[0m',
    }

    def format(self, record: logging.LogRecord) -> str:
        banner = self.BANNERS.get(record.levelno, f'\033[30;47m {record.levelname}. \033[0m')
        return f"{banner} {record.getMessage()}"
