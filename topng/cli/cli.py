#!/usr/bin/env python3
"""Main CLI entry point for topng."""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from topng.cli.convert.convert_command import convert_command
from topng.core.bundle import install_resource_loader
from topng.core.config import load_settings


def main(argv=None):
    """Parse the single path argument and run the conversion."""
    install_resource_loader()
    load_dotenv(dotenv_path=os.path.join(os.getcwd(), ".env"))

    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    try:
        parser = argparse.ArgumentParser(
            prog="topng",
            description="Convert an image to PNG next to the original and delete the original",
        )
        parser.add_argument(
            "path",
            nargs="?",
            help="Image file (.bmp, .gif, .exif, .jpg, .png, .tiff or .webp)",
        )

        args = parser.parse_args(argv)
        return convert_command(args, settings)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main() or 0)
