"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from create_q_base_web.catalog import list_template_ids

PROG = "create-q-base-web"


def _package_version() -> str:
    try:
        return version("create-q-base-web")
    except PackageNotFoundError:
        return "0.0.0"


def _epilog() -> str:
    return "Available templates:\n  " + "    ".join(list_template_ids())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [OPTION]... [DIRECTORY]",
        description=(
            "Create a new q-base-web project in JavaScript or TypeScript.\n"
            "With no arguments, start the scaffolder in interactive mode."
        ),
        epilog=_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("directory", nargs="?", default=None, help="Target directory for the new project")
    parser.add_argument("--template", "-t", metavar="NAME", default=None, help="Use a specific template")
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Remove existing files in a non-empty target directory without asking",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


__all__ = ["PROG", "build_parser"]
