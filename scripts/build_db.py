#!/usr/bin/env python3
"""Build the statute database from seed JSON files.

Any existing database at the target path is replaced.

Usage:
    python scripts/build_db.py
    python scripts/build_db.py --seed-dir ./data/seed --db-path ./data/database.db
    python scripts/build_db.py --tier professional
"""

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.progress import Progress, SpinnerColumn, TextColumn

from thailaw.core.config import settings
from thailaw.store import SqlLegalStore, build_database

console = Console()


def main():
    parser = argparse.ArgumentParser(description="Build the Thai statute database")
    parser.add_argument(
        "--seed-dir",
        type=Path,
        default=settings.seed_path,
        help="Directory containing seed JSON files",
    )
    parser.add_argument(
        "--db-path",
        type=Path,
        default=settings.database_path,
        help="Output SQLite database",
    )
    parser.add_argument(
        "--tier",
        default="free",
        help="Tier recorded in the build metadata",
    )

    args = parser.parse_args()

    console.print("\n[bold blue]Thai Law Lite - Database Builder[/bold blue]\n")

    console.print(f"[dim]Seed directory: {args.seed_dir}[/dim]")
    console.print(f"[dim]Database path: {args.db_path}[/dim]")
    console.print(f"[dim]Tier: {args.tier}[/dim]\n")

    if not args.seed_dir.exists():
        console.print(f"[yellow]No seed directory at {args.seed_dir}; building an empty database.[/yellow]")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Building database...", total=None)

        stats = build_database(args.seed_dir, args.db_path, tier=args.tier)

        progress.update(task, description="Done!")

    # Show per-statute results
    store = SqlLegalStore(args.db_path)

    table = Table(title="Statutes")
    table.add_column("Id", style="cyan")
    table.add_column("Title")
    table.add_column("B.E.", justify="right")
    table.add_column("Provisions", justify="right", style="green")
    table.add_column("Status")

    for document in store.list_documents():
        status_style = "red" if document.status.value == "repealed" else "green"
        table.add_row(
            document.id,
            document.display_title[:50],
            str(document.be_year or "-"),
            str(store.count_provisions(document.id)),
            f"[{status_style}]{document.status.value}[/{status_style}]",
        )

    store.close()
    console.print(table)

    # Summary
    console.print(f"\n[bold]Summary:[/bold]")
    console.print(f"  Statutes: {stats.documents} ({stats.empty_documents} without provisions)")
    console.print(f"  Provisions: {stats.provisions}")
    console.print(f"  EU instruments: {stats.eu_documents} ({stats.eu_references} links)")
    if stats.skipped_eu_references:
        console.print(f"  [yellow]EU links skipped (missing provision): {stats.skipped_eu_references}[/yellow]")
    if stats.duplicate_refs:
        console.print(
            f"  [yellow]Duplicate refs dropped: {stats.duplicate_refs} "
            f"({stats.conflicting_duplicates} with different text)[/yellow]"
        )
    console.print(f"\n[dim]Built at {stats.built_at}[/dim]")


if __name__ == "__main__":
    main()
