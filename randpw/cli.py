"""CLI for randpw: generate cryptographically secure passwords, print them or copy to the clipboard."""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .clipboard import copy_text
from .config import load_config
from .errors import ClipboardError, PasswordError
from .generator import DIGITS, LOWERCASE, UPPERCASE, CharacterSet, Generator

console = Console()
err_console = Console(stderr=True)

def build_generator(no_symbols: bool) -> Generator:
    if no_symbols:
        return Generator(CharacterSet(lowercase=LOWERCASE, uppercase=UPPERCASE, digits=DIGITS))
    return Generator()

def cmd_generate(args) -> None:
    g = build_generator(args.no_symbols)
    passwords = [g.generate_length(args.length) for _ in range(args.copies)]
    if args.clip:
        copy_text("\n".join(passwords))
        err_console.print("[green]Password copied to clipboard.[/green]")
        return
    for pw in passwords:
        # plain output so the password can be piped
        console.print(pw, markup=False, emoji=False, highlight=False, soft_wrap=True)

def _setup_logging(verbose: bool) -> None:
    # handler lives on the package logger, independent of root configuration
    log = logging.getLogger("randpw")
    for h in [h for h in log.handlers if isinstance(h, RichHandler)]:
        log.removeHandler(h)
    handler = RichHandler(console=err_console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    log.propagate = False

def build_parser() -> argparse.ArgumentParser:
    cfg = load_config()
    parser = argparse.ArgumentParser(
        prog="randpw",
        description="randpw is a command-line application which generates cryptographically-secure passwords.",
    )
    parser.add_argument("-l", "--length", type=int, default=cfg["length"], help="Password length")
    parser.add_argument("-n", "--no-symbols", action="store_true", default=cfg["no_symbols"],
                        help="Exclude symbols from password")
    parser.add_argument("-c", "--clip", action="store_true", default=cfg["clip"],
                        help="Copy password to clipboard")
    parser.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log generation details")
    parser.set_defaults(func=cmd_generate)
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.copies < 1:
        parser.error("--copies must be at least 1")
    _setup_logging(args.verbose)
    try:
        args.func(args)
    except (PasswordError, ClipboardError, OSError) as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
