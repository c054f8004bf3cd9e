"""Komenda: wps install — generuje manifesty i kopiuje je do .claude/skills."""

from __future__ import annotations

import argparse

from rich.console import Console

from data_model.errors import PipelineError
from wps._config import get_settings
from wps.commands.generate import generate
from wps.install import LOCAL_DEST, LOCAL_SETTINGS, global_dest, install_skills

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = get_settings(
        root=args.root,
        pages_dir=args.pages,
        snippets_dir=args.snippets,
        skills_dir=args.skills,
        categories_file=args.categories,
    )

    if not args.skip_generate:
        console.print("1. Generuję manifesty…")
        generate(settings)

    if args.globally:
        dest, settings_file = global_dest(), None
    else:
        dest, settings_file = settings.root / LOCAL_DEST, settings.root / LOCAL_SETTINGS

    console.print(f"\n2. Kopiuję manifesty do [bold]{dest}[/bold]…")
    try:
        names = install_skills(settings.skills_dir, dest, settings_file=settings_file, console=console)
    except PipelineError as e:
        console.print(f"[red]Błąd instalacji:[/red] {e}")
        raise SystemExit(1)

    console.print("\n[green]Manifesty zainstalowane.[/green]")
    for name in names:
        console.print(f"   - {name}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "install",
        help="Instaluje manifesty lokalnie (.claude/skills) lub globalnie (~/.claude/skills).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Uruchamia `wps generate`, a następnie zastępuje katalogi manifestów w miejscu
docelowym. Instalacja lokalna aktualizuje też .claude/settings.json.

Przykłady:
  wps install
  wps install --global
  wps install --skip-generate
        """,
    )
    p.add_argument("--root", metavar="KATALOG", help="Katalog projektu (domyślnie: WPS_ROOT lub bieżący).")
    p.add_argument("--pages", metavar="KATALOG", help="Katalog dokumentów MDX.")
    p.add_argument("--snippets", metavar="KATALOG", help="Katalog snippetów.")
    p.add_argument("--skills", metavar="KATALOG", help="Katalog wygenerowanych manifestów.")
    p.add_argument("--categories", "-c", metavar="PLIK", help="Plik JSON z konfiguracją kategorii.")
    p.add_argument(
        "--global",
        dest="globally",
        action="store_true",
        help="Instaluj do ~/.claude/skills (bez pliku ustawień).",
    )
    p.add_argument(
        "--skip-generate",
        action="store_true",
        help="Nie generuj manifestów przed instalacją.",
    )
    p.set_defaults(func=run)
