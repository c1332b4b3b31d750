"""Command line interface of the addchain tool."""

from __future__ import annotations

import platform
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from .meta import META, Properties

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE_ERROR = 2

_TOOL = "addchain"


@dataclass(frozen=True)
class _Command:
    name: str
    synopsis: str
    usage: str
    run: Callable[[Sequence[str], TextIO], None]


def _cite_command(properties: Properties) -> _Command:
    def run(args: Sequence[str], out: TextIO) -> None:
        properties.check_citable()
        properties.write_citation(out)

    return _Command(
        name="cite",
        synopsis="output addchain citation",
        usage="Usage: cite\n\nOutput citation for addchain.\n\n",
        run=run,
    )


def _version_command(version: str) -> _Command:
    def run(args: Sequence[str], out: TextIO) -> None:
        out.write(f"{_TOOL} version {version} {sys.platform}/{platform.machine()}\n")

    return _Command(
        name="version",
        synopsis="print addchain version",
        usage="Usage: version\n\nPrint the version of the addchain tool.\n\n",
        run=run,
    )


def _commands(properties: Properties) -> dict[str, _Command]:
    commands = [_cite_command(properties)]
    if properties.build_version:
        commands.append(_version_command(properties.build_version))
    return {c.name: c for c in commands}


def _write_usage(commands: dict[str, _Command], w: TextIO) -> None:
    w.write(f"Usage: {_TOOL} <flags> <subcommand> <subcommand args>\n\nSubcommands:\n")
    entries = {"help": "describe subcommands and their syntax"}
    entries.update({name: c.synopsis for name, c in commands.items()})
    for name in sorted(entries):
        w.write(f"\t{name:<16} {entries[name]}\n")
    w.write("\n")


def _run(
    argv: Sequence[str], properties: Properties, out: TextIO, err: TextIO
) -> int:
    commands = _commands(properties)
    if not argv:
        _write_usage(commands, err)
        return EXIT_USAGE_ERROR

    name, *args = argv
    if name in ("help", "-h", "-help", "--help"):
        if not args or name != "help":
            _write_usage(commands, out)
            return EXIT_SUCCESS
        topic = args[0]
        if topic == "help":
            out.write("help [<subcommand>]:\n\tWith an argument, prints detailed "
                      "information on the use of\n\tthe specified subcommand. "
                      "With no argument, print a list of\n\tall commands and a "
                      "brief description of each.\n")
            return EXIT_SUCCESS
        if topic not in commands:
            err.write(f"Subcommand {topic} not understood\n")
            return EXIT_USAGE_ERROR
        out.write(commands[topic].usage)
        return EXIT_SUCCESS

    command = commands.get(name)
    if command is None:
        _write_usage(commands, err)
        return EXIT_USAGE_ERROR

    try:
        command.run(args, out)
    except (ValueError, OSError) as exc:
        err.write(f"{_TOOL}: {exc}\n")
        return EXIT_FAILURE
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """Run the addchain command and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    return _run(list(argv), META, sys.stdout, sys.stderr)