"""
Command line interface for convcommit.

This module defines the ``main`` function used as the entry point of
the ``convcommit`` command. It reads a single commit message from a
file, from standard input, or from a Git revision, parses it, and
prints the structured result as text or JSON. The exit code tells
whether the message could be parsed, so the command can be used as a
``commit-msg`` hook.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any, Dict, List, Optional

import click

from convcommit import __version__
from convcommit.config.loader import ConfigError, load_config
from convcommit.parsing.commit_model import Commit
from convcommit.parsing.commit_parser import EmptyMessageError, MalformedHeaderError, parse
from convcommit.vcs.git_client import GitClient, GitError

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_USAGE = 2
EXIT_EMPTY_MESSAGE = 3
EXIT_MALFORMED_HEADER = 4
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_text(commit: Commit, color: bool = True) -> str:
    """Render a parsed commit as human readable text.

    Parameters
    ----------
    commit : Commit
        The parsed commit.
    color : bool
        Whether labels and the breaking flag are styled.

    Returns
    -------
    str
        The rendered text without a trailing newline.
    """

    def label(name: str) -> str:
        text = f"{name}:".ljust(10)
        return click.style(text, bold=True) if color else text

    if commit.is_breaking_change:
        breaking = click.style("yes", fg="red", bold=True) if color else "yes"
    else:
        breaking = "no"

    lines: List[str] = [
        f"{label('Type')}{commit.type}",
        f"{label('Scope')}{commit.scope or '-'}",
        f"{label('Breaking')}{breaking}",
        f"{label('Title')}{commit.title}",
    ]

    if commit.body:
        lines.append(label("Body").rstrip())
        lines.extend(f"    {line}".rstrip() for line in commit.body.splitlines())

    if commit.footer:
        lines.append(label("Footer").rstrip())
        for token, values in commit.footer.items():
            for value in values:
                first, *continuation = value.split("\n")
                lines.append(f"    {token}: {first}".rstrip())
                lines.extend(f"      {line}".rstrip() for line in continuation)

    return "\n".join(lines)


def render_json(commit: Commit, indent: Optional[int] = 2) -> str:
    """Render a parsed commit as a JSON document."""
    return json.dumps(commit.to_dict(), indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------

def read_message(message_file: Optional[IO[str]], rev: Optional[str], cwd: Path) -> str:
    """Read the raw commit message from a file, stdin, or a Git revision.

    Undecodable bytes are replaced with U+FFFD for every source.

    Raises
    ------
    GitError
        If ``rev`` is given and cannot be read from the repository.
    """
    if rev is not None:
        repo_root = GitClient.find_repo_root(cwd)
        if repo_root is None:
            raise GitError(f"{cwd} is not inside a Git repository")
        logger.debug("Reading message of %s from %s", rev, repo_root)
        return GitClient(repo_root).get_commit_message(rev)

    if message_file is not None:
        return message_file.read()
    return click.get_text_stream("stdin", encoding="utf-8", errors="replace").read()


@click.command()
@click.argument("message_file", type=click.File("r", encoding="utf-8", errors="replace"), required=False)
@click.option("--rev", metavar="REV", help="Parse the message of this Git revision instead of a file.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    help="Output format (overrides the configured one).",
)
@click.option("--quiet", is_flag=True, help="Print nothing on success; only set the exit code.")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="convcommit")
def main(
    message_file: Optional[IO[str]],
    rev: Optional[str],
    output_format: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """Parse a Conventional Commit message.

    Reads MESSAGE_FILE (standard input when omitted or "-") or, with
    --rev, the message of a Git commit, and prints its type, scope,
    title, body and footer entries.
    """
    # force=True so handlers are reconfigured on repeated invocations.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    try:
        if rev is not None and message_file is not None:
            print_error("MESSAGE_FILE and --rev cannot be used together.")
            raise click.exceptions.Exit(EXIT_INVALID_USAGE)

        cwd = Path.cwd()

        try:
            config: Dict[str, Any] = load_config(GitClient.find_repo_root(cwd))
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        try:
            message = read_message(message_file, rev, cwd)
        except GitError as exc:
            print_error(f"Git error: {exc}")
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)

        try:
            commit = parse(message)
        except EmptyMessageError as exc:
            print_error(f"Invalid commit message: {exc}")
            raise click.exceptions.Exit(EXIT_EMPTY_MESSAGE)
        except MalformedHeaderError as exc:
            print_error(f"Invalid commit message: {exc}")
            raise click.exceptions.Exit(EXIT_MALFORMED_HEADER)

        if quiet:
            raise click.exceptions.Exit(EXIT_SUCCESS)

        fmt = output_format or config["output_format"]
        if fmt == "json":
            click.echo(render_json(commit, indent=config["json_indent"]))
        else:
            click.echo(render_text(commit, color=config["color"]))

        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        raise click.exceptions.Exit(EXIT_GENERIC_ERROR)
