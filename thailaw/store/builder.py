"""Statute database builder.

Builds the SQLite database from seed JSON files, one statute per file
with its provisions nested:

    {
      "id": "pdpa-be2562",
      "title_th": "พระราชบัญญัติคุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562",
      "title_en": "Personal Data Protection Act B.E. 2562 (2019)",
      "short_name": "PDPA 2019",
      "status": "in_force",
      "be_year": 2562,
      "ce_year": 2019,
      "provisions": [{"provision_ref": "s3", "section": "3", "content": "..."}],
      "eu_references": [{"eu_document": {"id": "regulation:2016/679", ...},
                         "reference_type": "modeled_on", "is_primary": true}]
    }
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from thailaw.core.config import settings
from thailaw.core.logging import get_logger
from thailaw.core.models import (
    DocumentStatus,
    DocumentType,
    EUDocument,
    ImplementationStatus,
    LegalDocument,
    ReferenceType,
)
from .schema import SCHEMA_VERSION
from .sql import SqlLegalStore

logger = get_logger(__name__)

JURISDICTION = "TH"
DEFAULT_TIER = "free"


class ProvisionSeed(BaseModel):
    """One provision entry in a seed file."""
    provision_ref: str
    chapter: Optional[str] = None
    section: str
    title: Optional[str] = None
    content: str
    language: str = "en"
    metadata: Optional[dict[str, Any]] = None


class EUReferenceSeed(BaseModel):
    """A link from the statute, or one of its provisions, to an EU instrument.

    The first entry naming an EU instrument should carry its full record;
    later entries may repeat only id, type, year and number.
    """
    eu_document: EUDocument
    provision_ref: Optional[str] = None
    eu_article: Optional[str] = None
    reference_type: ReferenceType
    is_primary: bool = False
    implementation_status: Optional[ImplementationStatus] = None
    context: Optional[str] = None

    @property
    def status(self) -> ImplementationStatus:
        if self.implementation_status is not None:
            return self.implementation_status
        return ImplementationStatus.COMPLETE if self.is_primary else ImplementationStatus.UNKNOWN


class DocumentSeed(BaseModel):
    """One statute seed file."""
    id: str
    type: DocumentType = DocumentType.STATUTE
    title_th: Optional[str] = None
    title_en: Optional[str] = None
    short_name: Optional[str] = None
    status: DocumentStatus = DocumentStatus.IN_FORCE
    be_year: Optional[int] = None
    ce_year: Optional[int] = None
    issued_date: Optional[str] = None
    in_force_date: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    provisions: list[ProvisionSeed] = Field(default_factory=list)
    eu_references: list[EUReferenceSeed] = Field(default_factory=list)

    def to_document(self) -> LegalDocument:
        return LegalDocument(
            id=self.id,
            type=self.type,
            title=self.title_th or self.id,
            title_en=self.title_en,
            short_name=self.short_name,
            status=self.status,
            be_year=self.be_year,
            ce_year=self.ce_year,
            issued_date=self.issued_date,
            in_force_date=self.in_force_date,
            url=self.url,
            description=self.description,
        )


class BuildStats(BaseModel):
    """Counts reported after a build."""
    documents: int = 0
    provisions: int = 0
    empty_documents: int = 0
    duplicate_refs: int = 0
    conflicting_duplicates: int = 0
    eu_documents: int = 0
    eu_references: int = 0
    skipped_eu_references: int = 0
    built_at: str = ""


def _normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


def dedupe_provisions(
    provisions: list[ProvisionSeed],
) -> tuple[list[ProvisionSeed], int, int]:
    """Drop repeated provision refs, keeping the first occurrence.

    Returns:
        (deduplicated provisions, duplicate count, duplicates whose text differs)
    """
    by_ref: dict[str, ProvisionSeed] = {}
    duplicates = 0
    conflicts = 0

    for provision in provisions:
        ref = provision.provision_ref.strip()
        existing = by_ref.get(ref)

        if existing is None:
            by_ref[ref] = provision.model_copy(update={"provision_ref": ref})
            continue

        duplicates += 1
        if _normalize_whitespace(existing.content) != _normalize_whitespace(provision.content):
            conflicts += 1

    return list(by_ref.values()), duplicates, conflicts


def insert_eu_references(store: SqlLegalStore, seed: DocumentSeed, stats: BuildStats) -> None:
    """Write a statute's EU links, adding each EU instrument once.

    Links to a provision the statute does not have are skipped with a
    warning.
    """
    for link in seed.eu_references:
        eu_document = link.eu_document
        if eu_document.description is None and link.provision_ref is None:
            eu_document = eu_document.model_copy(update={"description": link.context})
        if store.insert_eu_document(eu_document):
            stats.eu_documents += 1
        stored = store.get_eu_document(eu_document.id) or eu_document

        row: dict[str, Any] = {
            "source_type": "document",
            "source_id": seed.id,
            "document_id": seed.id,
            "eu_document_id": eu_document.id,
            "eu_article": link.eu_article,
            "reference_type": link.reference_type.value,
            "reference_context": link.context,
            "full_citation": f"{stored.short_name or stored.id} ({stored.id})",
            "is_primary_implementation": link.is_primary,
            "implementation_status": link.status.value,
        }

        if link.provision_ref:
            provision_id = store.provision_row_id(seed.id, link.provision_ref)
            if provision_id is None:
                stats.skipped_eu_references += 1
                logger.warning(
                    "eu_reference_provision_missing",
                    document_id=seed.id,
                    provision_ref=link.provision_ref,
                    eu_document_id=eu_document.id,
                )
                continue
            row["source_type"] = "provision"
            row["source_id"] = f"{seed.id}:{link.provision_ref}"
            row["provision_id"] = provision_id

        if store.insert_eu_reference(row):
            stats.eu_references += 1


def load_seed_files(seed_dir: Path) -> list[DocumentSeed]:
    """Read every ``*.json`` seed in name order.

    Files starting with ``.`` or ``_`` are skipped.
    """
    if not seed_dir.exists():
        logger.warning("seed_dir_missing", seed_dir=str(seed_dir))
        return []

    seeds = []
    for path in sorted(seed_dir.glob("*.json")):
        if path.name.startswith((".", "_")):
            continue
        data = json.loads(path.read_text(encoding="utf-8"))
        seeds.append(DocumentSeed.model_validate(data))
        logger.debug("seed_loaded", file=path.name, document_id=data.get("id"))

    return seeds


def build_database(
    seed_dir: Optional[Path] = None,
    db_path: Optional[Path] = None,
    tier: str = DEFAULT_TIER,
) -> BuildStats:
    """Rebuild the statute database from seed files.

    An existing database at ``db_path`` is deleted first.

    Args:
        seed_dir: Directory of seed JSON files (defaults to settings.seed_path)
        db_path: Output SQLite file (defaults to settings.database_path)
        tier: Value recorded as the ``tier`` build metadata

    Returns:
        BuildStats for the run
    """
    seed_dir = Path(seed_dir or settings.seed_path)
    db_path = Path(db_path or settings.database_path)

    if db_path.exists():
        db_path.unlink()
        logger.info("existing_database_deleted", db_path=str(db_path))

    db_path.parent.mkdir(parents=True, exist_ok=True)

    store = SqlLegalStore(db_path)
    store.create_schema()

    stats = BuildStats()

    try:
        seeds = load_seed_files(seed_dir)
        for seed in seeds:
            store.insert_document(seed.to_document())
            stats.documents += 1

            if not seed.provisions:
                stats.empty_documents += 1
                continue

            provisions, duplicates, conflicts = dedupe_provisions(seed.provisions)
            stats.duplicate_refs += duplicates
            stats.conflicting_duplicates += conflicts

            if duplicates:
                logger.warning(
                    "duplicate_provision_refs",
                    document_id=seed.id,
                    duplicates=duplicates,
                    conflicting=conflicts,
                )

            rows = []
            for provision in provisions:
                row = provision.model_dump()
                row["document_id"] = seed.id
                if provision.metadata is not None:
                    row["metadata"] = json.dumps(provision.metadata, ensure_ascii=False)
                rows.append(row)

            stats.provisions += store.insert_provisions(rows)

        for seed in seeds:
            insert_eu_references(store, seed, stats)

        stats.built_at = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        store.set_metadata("built_at", stats.built_at)
        store.set_metadata("schema_version", SCHEMA_VERSION)
        store.set_metadata("jurisdiction", JURISDICTION)
        store.set_metadata("tier", tier)
    finally:
        store.close()

    logger.info(
        "database_built",
        db_path=str(db_path),
        documents=stats.documents,
        provisions=stats.provisions,
        empty_documents=stats.empty_documents,
        duplicate_refs=stats.duplicate_refs,
        eu_documents=stats.eu_documents,
        eu_references=stats.eu_references,
    )

    return stats
