"""CLI command that converts one image file to PNG."""

import sys

from rich.console import Console

from topng.core.convert import convert_file
from topng.core.errors import ConversionInputError
from topng.core.shapes import Settings

console = Console(highlight=False, emoji=False, soft_wrap=True)


def _say(message: str) -> None:
    console.print(message, markup=False)


def _should_pause(settings: Settings) -> bool:
    if settings.pause == "always":
        return True
    if settings.pause == "never":
        return False
    return sys.stdin is not None and sys.stdin.isatty()


def _acknowledge(settings: Settings) -> None:
    """Wait for Enter so a console opened from a file manager stays readable."""
    if not _should_pause(settings):
        return
    try:
        console.input()
    except EOFError:
        pass


def convert_command(args, settings: Settings):
    if args.path is None:
        return 0

    try:
        convert_file(args.path, notify=_say)
    except ConversionInputError as e:
        _say(str(e))
        _acknowledge(settings)
        return 0

    return 0
