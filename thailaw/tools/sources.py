"""Provenance tools: list_sources and about."""

import hashlib
from pathlib import Path
from typing import Optional

from thailaw.citations.calendar import BE_OFFSET
from thailaw.core.models import ToolResponse
from thailaw.store.sql import COUNTABLE_TABLES, SqlLegalStore
from .metadata import generate_response_metadata
from .models import (
    AboutResult,
    DatabaseInfo,
    DatasetInfo,
    ListSourcesResult,
    ProvenanceInfo,
    ServerInfo,
    SourceInfo,
)

UNKNOWN = "unknown"
JURISDICTION_LABEL = "Thailand (TH)"

SOURCES = [
    SourceInfo(
        name="Office of the Council of State (Krisdika)",
        authority="Office of the Council of State, Kingdom of Thailand (สำนักงานคณะกรรมการกฤษฎีกา)",
        url="https://www.krisdika.go.th",
        license="Government Open Data",
        coverage=(
            "Acts of Parliament (Phra Ratchabanyat), Royal Decrees, Ministerial Regulations, "
            "English translations for major statutes."
        ),
        languages=["th", "en"],
    ),
    SourceInfo(
        name="Royal Thai Government Gazette (Ratchakitcha)",
        authority="Cabinet Secretariat, Office of the Prime Minister",
        url="https://ratchakitcha.soc.go.th",
        license="Government Publication",
        coverage=(
            "Official Royal Thai Government Gazette. All legislation must be "
            "published here to take legal effect."
        ),
        languages=["th"],
    ),
]

CALENDAR_NOTE = (
    "Thailand uses the Buddhist Era (B.E.) calendar for legislation. "
    f"B.E. year = CE year + {BE_OFFSET}. Example: 2019 CE = B.E. {2019 + BE_OFFSET}."
)


def _metadata_value(store: SqlLegalStore, key: str) -> str:
    return store.get_metadata(key) or UNKNOWN


def database_fingerprint(db_path: Optional[Path]) -> str:
    """Short SHA-256 of the database file, or "unknown" without a file."""
    if db_path is None or not db_path.exists():
        return UNKNOWN

    digest = hashlib.sha256()
    with open(db_path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()[:12]


def list_sources(store: SqlLegalStore) -> ToolResponse[ListSourcesResult]:
    """Describe data sources, database coverage and known limitations."""
    document_count = store.count_rows("legal_documents")
    provision_count = store.count_rows("legal_provisions")
    eu_document_count = store.count_rows("eu_documents")

    return ToolResponse(
        results=ListSourcesResult(
            jurisdiction=JURISDICTION_LABEL,
            sources=SOURCES,
            database=DatabaseInfo(
                tier=_metadata_value(store, "tier"),
                schema_version=_metadata_value(store, "schema_version"),
                built_at=_metadata_value(store, "built_at"),
                document_count=document_count,
                provision_count=provision_count,
                eu_document_count=eu_document_count,
            ),
            calendar_note=CALENDAR_NOTE,
            limitations=[
                f"Covers {document_count:,} Thai statutes. Subsidiary legislation is not yet fully indexed.",
                "Thai is the legally binding language; English translations are unofficial and may contain inaccuracies.",
                "English translations may lag behind Thai originals for recently amended provisions.",
                "Historical legislation before digitisation on Krisdika may be incomplete.",
                f"EU cross-references cover {eu_document_count:,} EU instruments and record drafting links, not legal equivalence.",
                "Always verify against official Royal Gazette publications when legal certainty is required.",
            ],
        ),
        metadata=generate_response_metadata(store),
    )


def about(store: SqlLegalStore, version: str) -> AboutResult:
    """Server, dataset, provenance and security summary."""
    return AboutResult(
        server=ServerInfo(name="Thai Law Lite", package="thailaw", version=version),
        dataset=DatasetInfo(
            fingerprint=database_fingerprint(store.db_path),
            built=_metadata_value(store, "built_at"),
            jurisdiction=JURISDICTION_LABEL,
            content_basis=(
                "Thai statute text from the Office of the Council of State (krisdika.go.th). "
                "Covers cybersecurity, data protection, electronic transactions, and related legislation. "
                "Buddhist Era (B.E.) calendar used for legislative dating."
            ),
            counts={table: store.count_rows(table) for table in COUNTABLE_TABLES},
        ),
        provenance=ProvenanceInfo(
            sources=[
                "krisdika.go.th (Office of the Council of State)",
                "Royal Thai Government Gazette (ratchakitcha.soc.go.th)",
            ],
            license="Legal source texts are government open data.",
            authenticity_note=(
                "Statute text is derived from the Office of the Council of State (krisdika.go.th). "
                "English translations are unofficial. Thai is the legally binding language. "
                "Verify against official Royal Gazette publications when legal certainty is required."
            ),
        ),
    )
