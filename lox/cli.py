"""
Command line front end for the Lox scanner.
"""

import json
import sys

import click

from . import __version__
from .config import EXIT_OK, EXIT_DATAERR, REPL_FILENAME, REPL_PROMPT, SOURCE_ENCODING
from .lexer import Lexer, ScanResult
from .utils.logging import get_logger, set_level

logger = get_logger(__name__)


def _emit_tokens(result: ScanResult, output_format: str) -> None:
    if output_format == "json":
        click.echo(json.dumps([token.to_dict() for token in result.tokens], indent=2, allow_nan=False))
    else:
        for token in result.tokens:
            click.echo(str(token))


def _emit_diagnostics(result: ScanResult) -> None:
    for warning in result.warnings:
        click.echo(warning.report(), err=True)
    for error in result.errors:
        click.echo(error.report(), err=True)


@click.group()
@click.version_option(__version__, prog_name="lox")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override the LOX_LOG_LEVEL setting')
def cli(log_level):
    """Lox scanner command line tools"""
    if log_level:
        set_level(log_level)


@cli.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']), default='text',
              help='Token output format')
@click.option('--comments', is_flag=True, help='Keep comments as COMMENT tokens')
def scan(path, output_format, comments):
    """Scan a source file and print its tokens"""
    try:
        with open(path, 'r', encoding=SOURCE_ENCODING) as f:
            source = f.read()
    except UnicodeDecodeError as e:
        raise click.FileError(path, hint=f"not valid {SOURCE_ENCODING} (byte offset {e.start})")
    logger.info("read %d characters from %s", len(source), path)

    result = Lexer(source, path, include_comments=comments).scan()
    _emit_tokens(result, output_format)
    _emit_diagnostics(result)

    status = EXIT_OK if result.ok else EXIT_DATAERR
    logger.info("%s: exit status %d", path, status)
    sys.exit(status)


@cli.command()
def repl():
    """Scan lines typed on standard input"""
    stdin = click.get_text_stream('stdin')
    while True:
        click.echo(REPL_PROMPT, nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            break
        result = Lexer(line, REPL_FILENAME).scan()
        _emit_tokens(result, 'text')
        _emit_diagnostics(result)


def main():
    cli()


if __name__ == '__main__':
    main()
