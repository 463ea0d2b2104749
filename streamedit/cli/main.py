"""
streamedit command-line interface.

Commands:
- find:  print the text around the first match
- split: print the input as literal/match segments
- edit:  replace every match

PATTERN is a regular expression unless --literal is given. FILE
defaults to stdin.
"""

from __future__ import annotations

import json
import re
from functools import wraps
from pathlib import Path
from typing import Any, Callable

import click

from streamedit import __version__
from streamedit.constants import DEFAULT_ENCODING, EXIT_ERROR, EXIT_NO_MATCH
from streamedit.engine import break_on_first, split_cap, stream_edit
from streamedit.patterns import Matcher, get_offset, literal, regex
from streamedit.types import ErrorCode, ErrorContext, ResourceError, StreamEditError
from streamedit.utils.logger import configure_logging, logger


# ============================================================================
# Helpers
# ============================================================================


def _build_matcher(pattern: str, as_literal: bool, ignore_case: bool) -> Matcher[Any]:
    """Matcher whose value is the matched text (literal) or re.Match (regex)."""
    if as_literal:
        return literal(pattern, ignore_case=ignore_case)
    return regex(pattern, re.IGNORECASE if ignore_case else 0)


def _matched_text(value: Any) -> str:
    return value.group(0) if isinstance(value, re.Match) else value


def _read_input(file: str | None) -> str:
    """Read FILE, or stdin when FILE is omitted or '-'."""
    if file is None or file == "-":
        return click.get_text_stream("stdin", encoding=DEFAULT_ENCODING).read()

    path = Path(file)
    try:
        return path.read_text(encoding=DEFAULT_ENCODING)
    except FileNotFoundError as e:
        raise ResourceError(
            f"Input file not found: {path}",
            user_message=f"File not found: {path}",
            context=ErrorContext(operation="read", file_path=str(path), component="cli"),
            original_error=e,
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceError(
            f"Cannot read {path}: {e}",
            user_message=f"Could not read {path} as {DEFAULT_ENCODING} text.",
            context=ErrorContext(operation="read", file_path=str(path), component="cli"),
            original_error=e,
            code=ErrorCode.FILE_READ_FAILED,
        ) from e


def _handle_errors(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Report streamedit errors on stderr and exit with EXIT_ERROR."""

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except StreamEditError as e:
            logger.debug("Command failed: {}", e)
            click.echo(e.get_formatted_message(), err=True)
            raise SystemExit(EXIT_ERROR)
        except re.error as e:
            click.echo(f"[Error] Invalid replacement template: {e}", err=True)
            raise SystemExit(EXIT_ERROR)

    return wrapper


def pattern_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every pattern-driven command."""
    fn = click.option(
        "--ignore-case", "-I", is_flag=True, help="Match case-insensitively."
    )(fn)
    fn = click.option(
        "--literal", "-F", "as_literal", is_flag=True, help="Treat PATTERN as plain text."
    )(fn)
    return fn


# ============================================================================
# Commands
# ============================================================================


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="streamedit", message="streamedit v%(version)s")
@click.option("--debug", is_flag=True, help="Log scan details to stderr.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """streamedit - find, split and replace with pattern matchers."""
    try:
        configure_logging("DEBUG" if debug else None)
    except StreamEditError as e:
        click.echo(e.get_formatted_message(), err=True)
        ctx.exit(EXIT_ERROR)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("pattern")
@click.argument("file", required=False)
@pattern_options
@_handle_errors
def find(pattern: str, file: str | None, as_literal: bool, ignore_case: bool) -> None:
    """Print prefix, match and suffix of the first match as JSON."""
    matcher = _build_matcher(pattern, as_literal, ignore_case)
    found = break_on_first(_read_input(file), matcher)
    if found is None:
        raise SystemExit(EXIT_NO_MATCH)

    prefix, value, suffix = found
    click.echo(
        json.dumps(
            {"prefix": prefix, "match": _matched_text(value), "suffix": suffix},
            ensure_ascii=False,
        )
    )


@cli.command()
@click.argument("pattern")
@click.argument("file", required=False)
@pattern_options
@click.option("--offsets", is_flag=True, help="Report the offset of each match.")
@_handle_errors
def split(
    pattern: str,
    file: str | None,
    as_literal: bool,
    ignore_case: bool,
    offsets: bool,
) -> None:
    """Print the input as a JSON list of literal and match segments."""
    matcher = _build_matcher(pattern, as_literal, ignore_case).map(_matched_text)
    if offsets:
        matcher = get_offset().then(matcher).map(lambda pair: {"offset": pair[0], "text": pair[1]})

    segments = split_cap(_read_input(file), matcher)
    click.echo(json.dumps([s.to_dict() for s in segments], ensure_ascii=False, indent=2))


@cli.command()
@click.argument("pattern")
@click.argument("file", required=False)
@pattern_options
@click.option("--replace", "-r", "replacement", help=r"Replacement text; \1 and \g<name> refer to groups.")
@click.option("--upper", is_flag=True, help="Upper-case every match.")
@click.option("--lower", is_flag=True, help="Lower-case every match.")
@click.option("--in-place", "-i", is_flag=True, help="Write the result back to FILE.")
@_handle_errors
def edit(
    pattern: str,
    file: str | None,
    as_literal: bool,
    ignore_case: bool,
    replacement: str | None,
    upper: bool,
    lower: bool,
    in_place: bool,
) -> None:
    """Replace every match and print the edited text."""
    if sum((replacement is not None, upper, lower)) != 1:
        raise click.UsageError("Give exactly one of --replace, --upper or --lower.")
    if in_place and file in (None, "-"):
        raise click.UsageError("--in-place needs a FILE.")

    if upper:
        editor = lambda value: _matched_text(value).upper()  # noqa: E731
    elif lower:
        editor = lambda value: _matched_text(value).lower()  # noqa: E731
    elif as_literal:
        editor = lambda value: replacement  # noqa: E731
    else:
        editor = lambda value: value.expand(replacement)  # noqa: E731

    matcher = _build_matcher(pattern, as_literal, ignore_case)
    result = stream_edit(_read_input(file), matcher, editor)

    if in_place:
        Path(file).write_text(result, encoding=DEFAULT_ENCODING)
        logger.info("Rewrote {}", file)
    else:
        click.echo(result, nl=False)


def main() -> None:
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    main()
