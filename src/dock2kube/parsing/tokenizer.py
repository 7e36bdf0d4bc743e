#!/usr/bin/env python3
"""
DOCK2KUBE TOKENIZER
-------------------
Splits raw `docker run` text into a CommandTokens flag map.

Only the flags the generator understands are declared; anything else a
user pastes (`--rm`, `-it`, `--restart=always`, ...) is tolerated and
dropped. Repeated `-p`/`--port` and `-e`/`--env` flags are collected in
order instead of overwriting each other.
"""

import argparse
import shlex
from typing import List, NoReturn

from dock2kube.core.errors import ErrorKind, ValidationError
from dock2kube.core.models import CommandTokens

# Leading words that name the program, not the image
PROGRAM_PREFIXES = [
    ("docker", "container", "run"),
    ("podman", "container", "run"),
    ("docker", "run"),
    ("podman", "run"),
]


class _RaisingArgumentParser(argparse.ArgumentParser):
    """argparse prints and exits on error; we need a ValidationError instead."""

    def error(self, message: str) -> NoReturn:
        raise ValidationError(
            ErrorKind.MALFORMED_COMMAND,
            f"Cannot split command: {message}",
            "tokenize", "command_text", "command_is_tokenizable"
        )


class CommandTokenizer:
    """
    Flag splitter for the `docker run` surface:
    -p/--port (repeatable), -e/--env (repeatable), --name, -d and positionals.
    """

    def __init__(self):
        self.parser = _RaisingArgumentParser(prog="docker run", add_help=False, allow_abbrev=False)
        self.parser.add_argument("-p", "--port", dest="ports", action="append", default=[])
        self.parser.add_argument("-e", "--env", dest="env", action="append", default=[])
        self.parser.add_argument("--name", dest="name", default=None)
        self.parser.add_argument("-d", "--detach", dest="detach", action="store_true")
        # accepted so clusters like -dit expand cleanly; not modelled
        self.parser.add_argument("-i", "--interactive", dest="_interactive", action="store_true")
        self.parser.add_argument("-t", "--tty", dest="_tty", action="store_true")
        self.parser.add_argument("positionals", nargs="*")

    def split(self, command_text: str) -> List[str]:
        """Shell-style word splitting; line continuations are folded first."""
        text = command_text.replace("\\\r\n", " ").replace("\\\n", " ")
        try:
            return shlex.split(text)
        except ValueError as e:
            raise ValidationError(
                ErrorKind.MALFORMED_COMMAND,
                f"Cannot split command: {e}",
                "tokenize", "command_text", "command_is_tokenizable"
            )

    def _strip_program(self, positionals: List[str]) -> List[str]:
        for prefix in PROGRAM_PREFIXES:
            if tuple(positionals[:len(prefix)]) == prefix:
                return positionals[len(prefix):]
        return positionals

    def tokenize(self, command_text: str) -> CommandTokens:
        args, _unknown = self.parser.parse_known_intermixed_args(self.split(command_text))
        return CommandTokens(
            ports=tuple(args.ports),
            env=tuple(args.env),
            name=args.name or None,
            detach=args.detach,
            positionals=tuple(self._strip_program(args.positionals)),
        )
