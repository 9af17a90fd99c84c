#!/usr/bin/env python3
"""End-to-end demo for Thai Law Lite.

Demonstrates:
1. Citation parsing (Thai and English forms, B.E./C.E. years)
2. Citation formatting in every output format
3. Citation validation against the statute database
4. Full-text search with FTS5
5. EU instruments behind a statute

Usage:
    python scripts/demo.py
    python scripts/demo.py --query "personal data consent"
    python scripts/demo.py --citation "มาตรา 19 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562"
"""

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from thailaw.citations import format_citation, parse_citation
from thailaw.core.config import settings
from thailaw.core.models import CitationFormat
from thailaw.store import SqlLegalStore, build_database
from thailaw.tools import (
    GetEUBasisInput,
    SearchLegislationInput,
    ValidateCitationInput,
    ValidateEUComplianceInput,
    get_eu_basis,
    search_legislation,
    validate_citation_tool,
    validate_eu_compliance,
)

console = Console()

DEFAULT_CITATIONS = [
    "มาตรา 3 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562",
    "Section 19, Personal Data Protection Act B.E. 2562 (2019)",
    "s. 5 CCA 2007",
    "s. 14 CCA 2550",
    "pdpa-be2562, s. 26",
    "Section 999, Personal Data Protection Act B.E. 2562",
    "Copyright Act B.E. 2521, s. 4",
    "garbage text",
]


def main():
    parser = argparse.ArgumentParser(description="Thai Law Lite Demo")
    parser.add_argument("--citation", action="append", help="Citation to check (repeatable)")
    parser.add_argument("--query", default="personal data consent", help="Search query")
    parser.add_argument("--db-path", type=Path, default=settings.database_path, help="SQLite database")

    args = parser.parse_args()
    citations = args.citation or DEFAULT_CITATIONS

    console.print(Panel.fit(
        "[bold blue]Thai Law Lite - Thai Statute Citations[/bold blue]\n"
        "Parse, format, validate and search with SQLite FTS5",
        border_style="blue",
    ))

    if not args.db_path.exists():
        console.print(f"\n[yellow]No database at {args.db_path}; building from {settings.seed_path}[/yellow]")
        build_database(settings.seed_path, args.db_path)

    store = SqlLegalStore(args.db_path)

    # =========================================================================
    # Step 1: Parse
    # =========================================================================
    console.print("\n[bold]Step 1: Parsing Citations[/bold]")

    table = Table(title="Parsed Citations")
    table.add_column("Input", max_width=45)
    table.add_column("Kind")
    table.add_column("Title", max_width=35)
    table.add_column("Section")
    table.add_column("B.E.")
    table.add_column("C.E.")

    parsed_citations = [parse_citation(c) for c in citations]

    for raw, parsed in zip(citations, parsed_citations):
        if not parsed.valid:
            table.add_row(raw, "[red]invalid[/red]", parsed.error or "", "-", "-", "-")
            continue
        table.add_row(
            raw,
            parsed.kind.value,
            parsed.title or "-",
            parsed.pinpoint,
            str(parsed.era_year or "-"),
            str(parsed.western_year or "-"),
        )

    console.print(table)

    # =========================================================================
    # Step 2: Format
    # =========================================================================
    console.print("\n[bold]Step 2: Formatting Citations[/bold]")

    table = Table(title="Formatted Citations")
    for fmt in CitationFormat:
        table.add_column(fmt.value, max_width=40)

    for parsed in parsed_citations:
        if parsed.valid:
            table.add_row(*(format_citation(parsed, fmt) for fmt in CitationFormat))

    console.print(table)

    # =========================================================================
    # Step 3: Validate
    # =========================================================================
    console.print("\n[bold]Step 3: Validating Against Database[/bold]")

    table = Table(title="Validation Results")
    table.add_column("Citation", max_width=45)
    table.add_column("Status")
    table.add_column("Statute", max_width=35)
    table.add_column("Warnings", max_width=40)

    for raw in citations:
        result = validate_citation_tool(store, ValidateCitationInput(citation=raw)).results
        status = "[green]VALID[/green]" if result.valid else "[red]INVALID[/red]"
        table.add_row(
            raw,
            status,
            result.document_title or "-",
            "; ".join(result.warnings) or "-",
        )

    console.print(table)

    # =========================================================================
    # Step 4: Search
    # =========================================================================
    console.print(f"\n[bold]Step 4: Searching[/bold] [dim]{args.query}[/dim]")

    response = search_legislation(store, SearchLegislationInput(query=args.query, limit=5))

    if response.results:
        for i, hit in enumerate(response.results):
            snippet = hit.snippet.replace(">>>", "[bold yellow]").replace("<<<", "[/bold yellow]")
            console.print(f"\n[cyan][{i+1}] {hit.document_title}, {hit.provision_ref}[/cyan]")
            console.print(f"    {snippet}")
    else:
        console.print("[yellow]No matching provisions[/yellow]")

    console.print(f"\n[dim]{response.metadata.data_freshness}[/dim]")
    console.print(f"[dim]{response.metadata.disclaimer}[/dim]")

    # =========================================================================
    # Step 5: EU basis
    # =========================================================================
    console.print("\n[bold]Step 5: EU Basis of the PDPA[/bold]")

    basis = get_eu_basis(store, GetEUBasisInput(document_id="pdpa-be2562", include_articles=True)).results
    compliance = validate_eu_compliance(store, ValidateEUComplianceInput(document_id="pdpa-be2562")).results

    table = Table(show_header=True)
    table.add_column("EU Instrument", style="cyan")
    table.add_column("Link")
    table.add_column("Primary")
    table.add_column("Articles")

    for eu_document in basis.eu_documents:
        table.add_row(
            eu_document.short_name or eu_document.id,
            eu_document.reference_type.value,
            "[green]yes[/green]" if eu_document.is_primary_implementation else "no",
            ", ".join(eu_document.articles or []) or "-",
        )

    console.print(table)
    console.print(f"Compliance: [bold]{compliance.compliance_status.value}[/bold]")

    store.close()


if __name__ == "__main__":
    main()
