"""Komenda: wps generate — przebieg 2: manifesty SKILL.md z snippetów i dokumentacji."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table

from data_model.errors import ManifestValidationError, PipelineError
from manifest import load_toolkit
from wps._config import Settings, get_settings
from wps.generation import GenerationReport, generate_manifests

console = Console()


def _show_table(report: GenerationReport) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("MANIFEST", no_wrap=True, style="bold cyan")
    table.add_column("PLIK", no_wrap=True)
    table.add_column("TYTUŁ", no_wrap=False, max_width=50)
    table.add_column("OPIS", justify="center", no_wrap=True)
    table.add_column("PROGI", justify="center", no_wrap=True)

    for result in report.categories:
        for d in result.descriptors:
            table.add_row(
                result.config.skill,
                d.filename,
                d.title,
                "✓" if d.description else "[dim]-[/dim]",
                "✓" if d.thresholds else "[dim]-[/dim]",
            )

    console.print()
    console.print(table)


def generate(settings: Settings) -> GenerationReport:
    """Wspólne z `wps install`: generuje manifesty albo kończy z kodem 1."""
    try:
        toolkit = load_toolkit(settings.categories_file)
        return generate_manifests(
            settings.pages_dir,
            settings.snippets_dir,
            settings.skills_dir,
            toolkit,
            console=console,
        )
    except ManifestValidationError as e:
        console.print("[red]Błędy walidacji (nic nie zostało zapisane):[/red]")
        for err in e.errors:
            console.print(f"  [bold]{err.manifest}[/bold]: {err.message}")
        raise SystemExit(1)
    except PipelineError as e:
        console.print(f"[red]Błąd generowania:[/red] {e}")
        raise SystemExit(1)


def run(args: argparse.Namespace) -> None:
    settings = get_settings(
        root=args.root,
        pages_dir=args.pages,
        snippets_dir=args.snippets,
        skills_dir=args.skills,
        categories_file=args.categories,
    )
    console.print("Generuję manifesty…")
    report = generate(settings)

    if args.show:
        _show_table(report)

    console.print(
        f"\n[green]Gotowe![/green] {report.total_artifacts} snippetów, "
        f"manifesty w {settings.skills_dir}"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "generate",
        help="Generuje manifesty SKILL.md dla kategorii i manifest zbiorczy.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dla każdej kategorii (np. Loading → webperf-loading) odnajduje dokument MDX,
który importuje dany snippet, wyciąga tytuł, opis i tabelę progów, a potem
zapisuje skills/<manifest>/SKILL.md oraz kopie skryptów w scripts/.

Przed jakimkolwiek zapisem sprawdzane są limity frontmatter
(name ≤ 64, description ≤ 1024 znaków) dla WSZYSTKICH manifestów;
jeden błąd przerywa całe uruchomienie.

Przykłady:
  wps generate
  wps generate --show
  wps generate --categories kategorie.json
        """,
    )
    p.add_argument("--root", metavar="KATALOG", help="Katalog projektu (domyślnie: WPS_ROOT lub bieżący).")
    p.add_argument("--pages", metavar="KATALOG", help="Katalog dokumentów MDX (domyślnie: <root>/pages).")
    p.add_argument("--snippets", metavar="KATALOG", help="Katalog snippetów (domyślnie: <root>/snippets).")
    p.add_argument("--skills", metavar="KATALOG", help="Katalog wyjściowy manifestów (domyślnie: <root>/skills).")
    p.add_argument(
        "--categories", "-c",
        metavar="PLIK",
        help="Plik JSON z konfiguracją kategorii (domyślnie: wbudowana).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę metadanych snippetów po zapisie.",
    )
    p.set_defaults(func=run)
