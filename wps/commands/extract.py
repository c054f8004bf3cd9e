"""Komenda: wps extract — przebieg 1: snippety z MDX do osobnych plików."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table

from data_model.errors import PipelineError
from wps._config import get_settings
from wps.extraction import DocumentStatus, ExtractionReport, extract_all

console = Console()


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(report: ExtractionReport) -> None:
    rows = [d for d in report.documents if d.artifacts]
    if not rows:
        console.print("[yellow]Brak bloków do ekstrakcji.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("KATEGORIA", no_wrap=True, style="bold cyan")
    table.add_column("DOKUMENT", no_wrap=True)
    table.add_column("#", justify="right", no_wrap=True, style="dim")
    table.add_column("PLIK", no_wrap=True)
    table.add_column("SEKCJA H2", no_wrap=False, max_width=50)

    for doc in rows:
        for a in doc.artifacts:
            table.add_row(a.category, doc.path.name, str(a.index), a.filename, a.heading or "-")

    console.print()
    console.print(table)


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    settings = get_settings(
        root=args.root,
        pages_dir=args.pages,
        snippets_dir=args.snippets,
    )

    try:
        report = extract_all(
            settings.pages_dir,
            settings.snippets_dir,
            dry_run=args.dry_run,
            console=console,
        )
    except PipelineError as e:
        console.print(f"[red]Błąd ekstrakcji:[/red] {e}")
        raise SystemExit(1)

    if args.show or args.dry_run:
        _show_table(report)

    done = report.with_status(DocumentStatus.PLANNED if args.dry_run else DocumentStatus.UPDATED)
    skipped = report.with_status(DocumentStatus.REWRITTEN)
    console.print(
        f"\n[green]Gotowe[/green] — dokumentów: {report.scanned}, "
        f"{'do przepisania' if args.dry_run else 'przepisanych'}: {len(done)}, "
        f"snippetów: {len(report.artifacts)}, już przepisanych: {len(skipped)}"
    )
    if args.dry_run:
        console.print("[dim](--dry-run: nic nie zostało zapisane)[/dim]")


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract",
        help="Wyodrębnia snippety z sekcji '### Snippet' do plików .js.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dla każdego pliku pages/**/*.mdx znajduje bloki ```js copy pod nagłówkami
"### Snippet", zapisuje je do snippets/<kategoria>/<nazwa>.js i zastępuje
w dokumencie komponentem <Snippet code={...} /> z importem na początku pliku.

Dokumenty już przepisane są pomijane, więc komendę można uruchamiać wielokrotnie.

Przykłady:
  wps extract
  wps extract --dry-run
  wps extract --root ../webperf-snippets --show
        """,
    )
    p.add_argument(
        "--root",
        metavar="KATALOG",
        help="Katalog projektu (domyślnie: WPS_ROOT lub bieżący).",
    )
    p.add_argument(
        "--pages",
        metavar="KATALOG",
        help="Katalog dokumentów MDX (domyślnie: <root>/pages).",
    )
    p.add_argument(
        "--snippets",
        metavar="KATALOG",
        help="Katalog wyjściowy snippetów (domyślnie: <root>/snippets).",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Tylko pokaż, co zostałoby wyodrębnione; nic nie zapisuj.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę wyodrębnionych snippetów.",
    )
    p.set_defaults(func=run)
