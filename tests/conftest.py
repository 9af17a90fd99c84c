"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from pathlib import Path
from typing import Optional

import pytest

from thailaw.core.models import LegalDocument, LegalProvision
from thailaw.store import SqlLegalStore, build_database
from thailaw.store.builder import load_seed_files

SEED_DIR = Path(__file__).parent.parent / "data" / "seed"


class FakeLegalStore:
    """In-memory LegalStore with the same matching rules as the SQL store."""

    def __init__(self, documents: list[LegalDocument], provisions: list[LegalProvision]):
        self.documents = documents
        self.provisions = provisions

    def get_document(self, document_id: str) -> Optional[LegalDocument]:
        return next((d for d in self.documents if d.id == document_id), None)

    def find_document_by_title(self, fragment: str) -> Optional[LegalDocument]:
        needle = fragment.lower()
        return next(
            (
                d for d in self.documents
                if needle in d.title.lower() or needle in (d.title_en or "").lower()
            ),
            None,
        )

    def find_document_by_short_name(self, fragment: str) -> Optional[LegalDocument]:
        needle = fragment.lower()
        return next((d for d in self.documents if needle in (d.short_name or "").lower()), None)

    def find_document(
        self,
        fragment: str,
        era_year: Optional[int] = None,
        western_year: Optional[int] = None,
    ) -> Optional[LegalDocument]:
        needle = fragment.lower()
        for d in self.documents:
            haystacks = [d.title, d.title_en or "", d.short_name or ""]
            if not any(needle in h.lower() for h in haystacks):
                continue
            if era_year is not None or western_year is not None:
                if d.be_year != era_year and d.ce_year != western_year:
                    continue
            return d
        return None

    def provision_exists(
        self,
        document_id: str,
        provision_ref: str,
        section: str,
        allow_prefix: bool = False,
    ) -> bool:
        for p in self.provisions:
            if p.document_id != document_id:
                continue
            if p.provision_ref == provision_ref or p.section == section:
                return True
            if allow_prefix and (
                p.provision_ref.startswith(f"{provision_ref}(")
                or p.section.startswith(f"{section}(")
            ):
                return True
        return False


def _seed_rows() -> tuple[list[LegalDocument], list[LegalProvision]]:
    documents = []
    provisions = []
    for seed in load_seed_files(SEED_DIR):
        document = seed.to_document()
        documents.append(document)
        for p in seed.provisions:
            provisions.append(
                LegalProvision(
                    document_id=document.id,
                    document_title=document.display_title,
                    document_status=document.status.value,
                    provision_ref=p.provision_ref,
                    chapter=p.chapter,
                    section=p.section,
                    title=p.title,
                    content=p.content,
                )
            )
    return documents, provisions


@pytest.fixture
def seed_dir() -> Path:
    """Directory of the bundled seed JSON files."""
    return SEED_DIR


@pytest.fixture
def fake_store() -> FakeLegalStore:
    """In-memory store holding the seed statutes.

    Returns:
        FakeLegalStore with PDPA, CCA (amended), CSA, ETA and a repealed act.
    """
    documents, provisions = _seed_rows()
    return FakeLegalStore(documents, provisions)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Build the seed database into a temporary file.

    Returns:
        Path to the SQLite database.
    """
    path = tmp_path / "test.db"
    build_database(SEED_DIR, path)
    return path


@pytest.fixture
def sql_store(db_path: Path) -> Iterator[SqlLegalStore]:
    """SqlLegalStore over the temporary seed database.

    Yields:
        Store with a fixed built_at of 2026-02-19T00:00:00Z.
    """
    store = SqlLegalStore(db_path)
    store.set_metadata("built_at", "2026-02-19T00:00:00Z")
    yield store
    store.close()
