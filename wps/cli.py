"""
wps — narzędzie CLI potoku snippetów WebPerf.

Użycie:
  wps <komenda> [opcje]

Komendy:
  extract   Przebieg 1: wyodrębnia snippety z MDX i przepisuje dokumenty.
  generate  Przebieg 2: generuje manifesty SKILL.md (kategorie + zbiorczy).
  install   Generuje manifesty i kopiuje je do .claude/skills.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, wymuszamy UTF-8 (glify w tabelach progów).
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from wps.commands import extract as cmd_extract
from wps.commands import generate as cmd_generate
from wps.commands import install as cmd_install


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wps",
        description="wps — ekstrakcja snippetów i generowanie manifestów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="wps 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_extract.add_parser(subparsers)
    cmd_generate.add_parser(subparsers)
    cmd_install.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
