#!/usr/bin/env python3
"""
DOCK2KUBE CLI
-------------
Reads a `docker run` command (arguments, stdin or clipboard) and produces
a Kubernetes manifest plus a Skaffold config.

Subcommands:
1. generate - render and write both files
2. preview  - render only, print highlighted YAML
"""

import sys
import logging
import argparse
import shlex
from typing import List, Optional

from dock2kube import __version__
from dock2kube.cli.formatter import D2KFormatter
from dock2kube.core.config import ConfigManager
from dock2kube.core.engine import GenerationEngine
from dock2kube.core.errors import ValidationError
from dock2kube.sources.clipboard import ClipboardSource, LiteralSource, StdinSource, TextSource, select_clipboard

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_VALIDATION_ERROR = 2


class Dock2KubeCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self, formatter: Optional[D2KFormatter] = None):
        self.formatter = formatter or D2KFormatter()
        self._clipboard: Optional[ClipboardSource] = None
        self.parser = argparse.ArgumentParser(
            prog="dock2kube",
            description="Dock2Kube - turn a `docker run` command into a Kubernetes manifest and Skaffold config",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="Example: dock2kube generate docker run -d --name=api -p 3000:3000 myorg/api:latest"
        )
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("--version", action="version", version=f"dock2kube v{__version__}")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        gen_parser = subparsers.add_parser("generate", help="Write manifest + skaffold config")
        self._add_source_args(gen_parser)
        gen_parser.add_argument("--out", default=None, help="Output root directory (default from config)")
        gen_parser.add_argument("--dry-run", action="store_true", help="Render without writing")
        gen_parser.add_argument("--copy", action="store_true", help="Copy the follow-up run command to the clipboard")

        preview_parser = subparsers.add_parser("preview", help="Print the generated YAML only")
        self._add_source_args(preview_parser)

    def _add_source_args(self, parser: argparse.ArgumentParser):
        # REMAINDER keeps docker flags (-p, -e, ...) away from our own parser
        parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details")
        parser.add_argument("--stdin", action="store_true", help="Read the command from stdin")
        parser.add_argument("text", nargs=argparse.REMAINDER, help="The docker run command (default: clipboard)")

    def _get_clipboard(self) -> ClipboardSource:
        """Picks the platform clipboard on first use and keeps it."""
        if self._clipboard is None:
            self._clipboard = select_clipboard()
        return self._clipboard

    def _get_source(self, args: argparse.Namespace) -> TextSource:
        if args.text:
            # re-quote so words like "MSG=hello world" survive the tokenizer
            return LiteralSource(shlex.join(args.text))
        if args.stdin:
            return StdinSource()
        return self._get_clipboard()

    def _run_engine(self, args: argparse.Namespace, dry_run: bool) -> int:
        config = ConfigManager().resolve(output_root=getattr(args, "out", None))
        engine = GenerationEngine(config)

        try:
            command_text = self._get_source(args).read_text()
            result = engine.generate(command_text, dry_run=dry_run)
        except ValidationError as e:
            self.formatter.show_validation_error(e)
            return EXIT_VALIDATION_ERROR
        except (OSError, RuntimeError) as e:
            self.formatter.show_error("Error", str(e))
            return EXIT_IO_ERROR

        self.formatter.show_documents(result)
        self.formatter.show_summary(result)

        if result.written:
            run_hint = f"cd {result.service_dir} && skaffold run --port-forward --tail"
            self.formatter.show_next_steps(run_hint)
            if getattr(args, "copy", False):
                try:
                    self._get_clipboard().write_text(run_hint)
                except RuntimeError as e:
                    self.formatter.show_error("Clipboard", str(e))
                    return EXIT_IO_ERROR

        return EXIT_OK

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point."""
        args = self.parser.parse_args(argv)

        if args.command is None:
            self.formatter.print_header("docker run -> Kubernetes", __version__)
            self.parser.print_help()
            return EXIT_OK

        logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

        if args.command == "preview":
            return self._run_engine(args, dry_run=True)
        return self._run_engine(args, dry_run=args.dry_run)


def main(argv: Optional[List[str]] = None):
    """Application entry point with interrupt handling."""
    try:
        sys.exit(Dock2KubeCLI().run(argv))
    except KeyboardInterrupt:
        D2KFormatter().show_error("Terminated", "interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
