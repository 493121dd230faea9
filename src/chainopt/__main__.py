## chainopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# chainopt — Inspect how a command line is matched against an option declaration.
#

import sys
import json
import logging
from dataclasses import dataclass, asdict

import click

from .types import ParseResult
from .errors import GrammarSpecError, CommandLineError
from .parser import CliParser
from .formatting import write_without_ansi, format_result, DiagnosticFormatter


@dataclass(frozen=True)
class CliConfig:
    json: bool
    strict: bool
    quiet: bool
    plain: bool


class ParseInspector:
    def __init__(self, config: CliConfig):
        self.as_json = config.json
        self.strict = config.strict
        self.quiet = config.quiet
        self.plain = config.plain

        if self.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        self._configure_logging()

    def _configure_logging(self) -> None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(DiagnosticFormatter())
        logger = logging.getLogger('chainopt')
        logger.handlers[:] = [handler]
        logger.setLevel(logging.ERROR if self.quiet else logging.INFO)
        logger.propagate = False

    def _print_result(self, parser: CliParser, result: ParseResult) -> None:
        if self.as_json:
            print(json.dumps(asdict(result), indent=2, ensure_ascii=False))
        else:
            print(format_result(result, parser.grammar))

    def inspect(self, parser: CliParser, tokens: list[str]) -> int:
        result = parser.parse_args(['chainopt', *tokens])
        if self.strict:
            try:
                result.raise_for_error()
            except CommandLineError as exc:
                print(f'\033[97;41m INVALID COMMAND LINE. \033[0m {exc}', file=sys.stderr)
                return 1
        self._print_result(parser, result)
        return 1 if parser.is_invalid_commandline() else 0


@click.command(context_settings={'ignore_unknown_options': True, 'allow_extra_args': True})
@click.option('--short', '-s', 'shortopts', default='', help='Short options, e.g. `ab:c;;` (`:` required value, `;` optional).')
@click.option('--long', '-l', 'longopts', multiple=True, help='Long option declaration, e.g. `name::`; repeatable.')
@click.option('--json', 'as_json', is_flag=True, help='Print the full result as JSON, diagnostics included.')
@click.option('--strict', is_flag=True, help='Print only the errors if the command line is invalid.')
@click.option('--quiet', '-q', is_flag=True, help='Do not report notices and warnings on stderr.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, shortopts: str, longopts: tuple[str, ...], as_json: bool,
        strict: bool, quiet: bool, plain: bool, tokens: tuple[str, ...]) -> None:
    """Match TOKENS against the declared options and print what each option received.

    Place TOKENS after `--` so they are not taken as options of this command.
    """
    try:
        parser = CliParser(shortopts, list(longopts))
    except GrammarSpecError as exc:
        raise click.BadParameter(str(exc), param_hint="'--short' / '--long'")

    inspector = ParseInspector(CliConfig(json=as_json, strict=strict, quiet=quiet, plain=plain))
    ctx.exit(inspector.inspect(parser, list(tokens)))


def main(argv: list[str] | None = None) -> None:
    cli.main(args=argv, prog_name='chainopt')


if __name__ == "__main__":
    main()
