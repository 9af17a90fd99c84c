"""SQLite-backed statute store.

Wraps a SQLAlchemy engine over the database produced by
``thailaw.store.builder``. Implements the ``LegalStore`` protocol plus the
read queries the tool layer needs (provision retrieval, FTS5 search,
build metadata).
"""

from pathlib import Path
from typing import Any, Optional, Union

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError

from thailaw.core.config import settings
from thailaw.core.exceptions import SearchSyntaxError
from thailaw.core.logging import get_logger
from thailaw.core.models import (
    EUBasisDocument,
    EUDocument,
    EUImplementationSummary,
    EUReference,
    LegalDocument,
    LegalProvision,
    ProvisionHit,
    ThaiImplementation,
)
from .schema import SCHEMA_STATEMENTS

logger = get_logger(__name__)

_DOCUMENT_COLUMNS = (
    "id, type, title, title_en, short_name, status, be_year, ce_year, "
    "issued_date, in_force_date, url, description"
)

_EU_DOCUMENT_COLUMNS = (
    "id, type, year, number, community, celex_number, title, short_name, "
    "url_eur_lex, description"
)
_EU_DOCUMENT_SELECT = ", ".join("ed." + column for column in _EU_DOCUMENT_COLUMNS.split(", "))

_PROVISION_SELECT = """
    SELECT
      lp.document_id,
      COALESCE(ld.title_en, ld.title) AS document_title,
      ld.status AS document_status,
      lp.provision_ref,
      lp.chapter,
      lp.section,
      lp.title,
      lp.content
    FROM legal_provisions lp
    JOIN legal_documents ld ON ld.id = lp.document_id
"""

# Error text SQLite uses for MATCH expressions FTS5 cannot parse
FTS5_QUERY_ERRORS = ("fts5: syntax error", "unterminated string", "no such column", "unknown special query")

# Tables whose row counts are reported by list_sources / about
COUNTABLE_TABLES = ("legal_documents", "legal_provisions", "eu_documents", "eu_references")


def like_pattern(value: str, prefix_only: bool = False) -> str:
    """Escape LIKE wildcards in ``value`` and wrap it for substring match.

    With ``prefix_only`` the pattern matches values that start with
    ``value``.
    """
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    if prefix_only:
        return f"{escaped}%"
    return f"%{escaped}%"


def _article_sort_key(article: str) -> tuple[int, str]:
    digits = "".join(ch for ch in article if ch.isdigit())
    return (int(digits) if digits else 0, article)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class SqlLegalStore:
    """Read access to the statute database.

    Example usage:
        store = SqlLegalStore(Path("data/database.db"))
        doc = store.get_document("pdpa-be2562")
        hits = store.search_provisions('"personal"* "data"*', limit=5)
    """

    def __init__(
        self,
        db_path: Optional[Union[str, Path]] = None,
        engine: Optional[Engine] = None,
    ):
        """Initialize the store.

        Args:
            db_path: SQLite database file (defaults to settings.database_path)
            engine: Pre-built engine; overrides db_path
        """
        if engine is None:
            self.db_path = Path(db_path or settings.database_path)
            engine = create_engine(f"sqlite:///{self.db_path}")
        else:
            self.db_path = None

        event.listen(engine, "connect", _enable_foreign_keys)
        self.engine = engine

        logger.debug("legal_store_initialized", db_path=str(self.db_path))

    # =========================================================================
    # Schema and writes (used by the database builder)
    # =========================================================================

    def create_schema(self) -> None:
        """Create all tables, indexes and triggers if missing."""
        with self.engine.begin() as conn:
            for statement in SCHEMA_STATEMENTS:
                conn.execute(text(statement))

    def insert_document(self, document: LegalDocument) -> None:
        with self.engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO legal_documents "
                    "(id, type, title, title_en, short_name, status, be_year, ce_year, "
                    " issued_date, in_force_date, url, description) "
                    "VALUES (:id, :type, :title, :title_en, :short_name, :status, :be_year, "
                    " :ce_year, :issued_date, :in_force_date, :url, :description)"
                ),
                document.model_dump(mode="json"),
            )

    def insert_provisions(self, rows: list[dict[str, Any]]) -> int:
        """Insert provision rows in one transaction.

        Each row needs document_id, provision_ref, section and content;
        chapter, title, language and metadata are optional.
        """
        if not rows:
            return 0

        params = [
            {
                "chapter": None,
                "title": None,
                "language": "en",
                "metadata": None,
                **row,
            }
            for row in rows
        ]

        with self.engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO legal_provisions "
                    "(document_id, provision_ref, chapter, section, title, content, language, metadata) "
                    "VALUES (:document_id, :provision_ref, :chapter, :section, :title, :content, "
                    " :language, :metadata)"
                ),
                params,
            )
        return len(params)

    def insert_eu_document(self, document: EUDocument) -> bool:
        """Insert an EU instrument; returns False when the id already exists."""
        with self.engine.begin() as conn:
            result = conn.execute(
                text(
                    "INSERT OR IGNORE INTO eu_documents "
                    "(id, type, year, number, community, celex_number, title, short_name, "
                    " url_eur_lex, description) "
                    "VALUES (:id, :type, :year, :number, :community, :celex_number, :title, "
                    " :short_name, :url_eur_lex, :description)"
                ),
                document.model_dump(mode="json"),
            )
        return result.rowcount > 0

    def insert_eu_reference(self, row: dict[str, Any]) -> bool:
        """Insert one statute-to-EU link; duplicates are skipped.

        ``row`` needs source_type, source_id, document_id, eu_document_id and
        reference_type; the remaining columns are optional.
        """
        params = {
            "provision_id": None,
            "eu_article": None,
            "reference_context": None,
            "full_citation": None,
            "is_primary_implementation": False,
            "implementation_status": None,
            **row,
        }
        with self.engine.begin() as conn:
            result = conn.execute(
                text(
                    "INSERT OR IGNORE INTO eu_references "
                    "(source_type, source_id, document_id, provision_id, eu_document_id, "
                    " eu_article, reference_type, reference_context, full_citation, "
                    " is_primary_implementation, implementation_status) "
                    "VALUES (:source_type, :source_id, :document_id, :provision_id, "
                    " :eu_document_id, :eu_article, :reference_type, :reference_context, "
                    " :full_citation, :is_primary_implementation, :implementation_status)"
                ),
                params,
            )
        return result.rowcount > 0

    def set_metadata(self, key: str, value: str) -> None:
        with self.engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO db_metadata (key, value) VALUES (:key, :value) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value"
                ),
                {"key": key, "value": value},
            )

    # =========================================================================
    # LegalStore protocol
    # =========================================================================

    def _one_document(self, where: str, params: dict[str, Any]) -> Optional[LegalDocument]:
        sql = f"SELECT {_DOCUMENT_COLUMNS} FROM legal_documents WHERE {where} ORDER BY rowid LIMIT 1"
        with self.engine.connect() as conn:
            row = conn.execute(text(sql), params).mappings().first()
        if row is None:
            return None
        return LegalDocument.model_validate(dict(row))

    def get_document(self, document_id: str) -> Optional[LegalDocument]:
        return self._one_document("id = :id", {"id": document_id})

    def list_documents(self) -> list[LegalDocument]:
        """Every document in insertion order."""
        sql = f"SELECT {_DOCUMENT_COLUMNS} FROM legal_documents ORDER BY rowid"
        with self.engine.connect() as conn:
            rows = conn.execute(text(sql)).mappings().all()
        return [LegalDocument.model_validate(dict(r)) for r in rows]

    def find_document_by_title(self, fragment: str) -> Optional[LegalDocument]:
        return self._one_document(
            "title LIKE :pattern ESCAPE '\\' OR title_en LIKE :pattern ESCAPE '\\'",
            {"pattern": like_pattern(fragment)},
        )

    def find_document_by_short_name(self, fragment: str) -> Optional[LegalDocument]:
        return self._one_document(
            "short_name LIKE :pattern ESCAPE '\\'",
            {"pattern": like_pattern(fragment)},
        )

    def find_document(
        self,
        fragment: str,
        era_year: Optional[int] = None,
        western_year: Optional[int] = None,
    ) -> Optional[LegalDocument]:
        where = (
            "(title LIKE :pattern ESCAPE '\\' "
            " OR title_en LIKE :pattern ESCAPE '\\' "
            " OR short_name LIKE :pattern ESCAPE '\\')"
        )
        params: dict[str, Any] = {"pattern": like_pattern(fragment)}

        if era_year is not None or western_year is not None:
            where += " AND (be_year = :era_year OR ce_year = :western_year)"
            params["era_year"] = era_year
            params["western_year"] = western_year

        return self._one_document(where, params)

    def provision_exists(
        self,
        document_id: str,
        provision_ref: str,
        section: str,
        allow_prefix: bool = False,
    ) -> bool:
        sql = """
            SELECT 1
            FROM legal_provisions
            WHERE document_id = :document_id
              AND (
                provision_ref = :provision_ref
                OR section = :section
                OR (
                  :allow_prefix = 1
                  AND (
                    provision_ref LIKE :ref_prefix ESCAPE '\\'
                    OR section LIKE :section_prefix ESCAPE '\\'
                  )
                )
              )
            LIMIT 1
        """
        params = {
            "document_id": document_id,
            "provision_ref": provision_ref,
            "section": section,
            "allow_prefix": 1 if allow_prefix else 0,
            "ref_prefix": like_pattern(f"{provision_ref}(", prefix_only=True),
            "section_prefix": like_pattern(f"{section}(", prefix_only=True),
        }
        with self.engine.connect() as conn:
            row = conn.execute(text(sql), params).first()
        return row is not None

    # =========================================================================
    # Provision retrieval
    # =========================================================================

    def get_provision(self, document_id: str, reference: str) -> Optional[LegalProvision]:
        """Fetch one provision by canonical reference or bare section."""
        sql = _PROVISION_SELECT + (
            " WHERE lp.document_id = :document_id"
            " AND (lp.provision_ref = :reference OR lp.section = :reference)"
            " ORDER BY lp.id LIMIT 1"
        )
        with self.engine.connect() as conn:
            row = conn.execute(
                text(sql), {"document_id": document_id, "reference": reference}
            ).mappings().first()
        if row is None:
            return None
        return LegalProvision.model_validate(dict(row))

    def list_provisions(self, document_id: str, limit: int) -> list[LegalProvision]:
        """All provisions of a document in source order, capped at ``limit``."""
        sql = _PROVISION_SELECT + " WHERE lp.document_id = :document_id ORDER BY lp.id LIMIT :limit"
        with self.engine.connect() as conn:
            rows = conn.execute(
                text(sql), {"document_id": document_id, "limit": limit}
            ).mappings().all()
        return [LegalProvision.model_validate(dict(r)) for r in rows]

    def count_provisions(self, document_id: str) -> int:
        with self.engine.connect() as conn:
            count = conn.execute(
                text("SELECT COUNT(*) FROM legal_provisions WHERE document_id = :document_id"),
                {"document_id": document_id},
            ).scalar_one()
        return int(count)

    def provision_row_id(self, document_id: str, reference: str) -> Optional[int]:
        """Row id of a provision matched by canonical reference or bare section."""
        with self.engine.connect() as conn:
            value = conn.execute(
                text(
                    "SELECT id FROM legal_provisions WHERE document_id = :document_id"
                    " AND (provision_ref = :reference OR section = :reference)"
                    " ORDER BY id LIMIT 1"
                ),
                {"document_id": document_id, "reference": reference},
            ).scalar_one_or_none()
        return value

    # =========================================================================
    # EU cross-references
    # =========================================================================

    def get_eu_document(self, eu_document_id: str) -> Optional[EUDocument]:
        sql = f"SELECT {_EU_DOCUMENT_COLUMNS} FROM eu_documents WHERE id = :id"
        with self.engine.connect() as conn:
            row = conn.execute(text(sql), {"id": eu_document_id}).mappings().first()
        if row is None:
            return None
        return EUDocument.model_validate(dict(row))

    def eu_basis(
        self,
        document_id: str,
        reference_types: Optional[list[str]] = None,
    ) -> list[EUBasisDocument]:
        """EU instruments linked to a statute, one row per instrument.

        Primary implementations come first, then newer instruments. The
        reference type reported is that of the primary link when there is one.
        """
        sql = """
            SELECT
              ed.id, ed.type, ed.year, ed.number, ed.community, ed.celex_number,
              ed.title, ed.short_name, ed.url_eur_lex,
              MAX(er.is_primary_implementation) AS is_primary_implementation,
              er.reference_type,
              GROUP_CONCAT(DISTINCT er.eu_article) AS articles
            FROM eu_references er
            JOIN eu_documents ed ON ed.id = er.eu_document_id
            WHERE er.document_id = :document_id
        """
        params: dict[str, Any] = {"document_id": document_id}

        if reference_types:
            names = []
            for i, reference_type in enumerate(reference_types):
                params[f"rt{i}"] = reference_type
                names.append(f":rt{i}")
            sql += f" AND er.reference_type IN ({', '.join(names)})"

        sql += " GROUP BY ed.id ORDER BY is_primary_implementation DESC, ed.year DESC, ed.id"

        with self.engine.connect() as conn:
            rows = conn.execute(text(sql), params).mappings().all()

        results = []
        for row in rows:
            data = dict(row)
            articles = data.pop("articles")
            data["articles"] = sorted(articles.split(","), key=_article_sort_key) if articles else []
            results.append(EUBasisDocument.model_validate(data))
        return results

    def thai_implementations(
        self,
        eu_document_id: str,
        primary_only: bool = False,
        in_force_only: bool = False,
    ) -> list[ThaiImplementation]:
        """Thai statutes linked to an EU instrument, primary ones first."""
        sql = """
            SELECT
              ld.id AS document_id,
              COALESCE(ld.title_en, ld.title) AS title,
              ld.status,
              MAX(er.is_primary_implementation) AS is_primary,
              er.reference_type
            FROM eu_references er
            JOIN legal_documents ld ON ld.id = er.document_id
            WHERE er.eu_document_id = :eu_document_id
        """
        if primary_only:
            sql += " AND er.is_primary_implementation = 1"
        if in_force_only:
            sql += " AND ld.status = 'in_force'"
        sql += " GROUP BY ld.id ORDER BY is_primary DESC, title"

        with self.engine.connect() as conn:
            rows = conn.execute(text(sql), {"eu_document_id": eu_document_id}).mappings().all()
        return [ThaiImplementation.model_validate(dict(r)) for r in rows]

    def search_eu_documents(
        self,
        query: Optional[str] = None,
        document_type: Optional[str] = None,
        year_from: Optional[int] = None,
        year_to: Optional[int] = None,
        community: Optional[str] = None,
        has_thai_implementation: Optional[bool] = None,
        limit: int = 20,
    ) -> list[EUImplementationSummary]:
        """EU instruments matching the filters, newest first."""
        sql = f"""
            SELECT
              {_EU_DOCUMENT_SELECT},
              COUNT(DISTINCT er.document_id) AS thai_statute_count,
              GROUP_CONCAT(DISTINCT CASE WHEN er.is_primary_implementation = 1
                                         THEN er.document_id END) AS primary_implementations
            FROM eu_documents ed
            LEFT JOIN eu_references er ON er.eu_document_id = ed.id
            WHERE 1 = 1
        """
        params: dict[str, Any] = {"limit": limit}

        if query:
            sql += (
                " AND (ed.title LIKE :pattern ESCAPE '\\'"
                " OR ed.short_name LIKE :pattern ESCAPE '\\'"
                " OR ed.celex_number LIKE :pattern ESCAPE '\\')"
            )
            params["pattern"] = like_pattern(query)
        if document_type:
            sql += " AND ed.type = :type"
            params["type"] = document_type
        if year_from is not None:
            sql += " AND ed.year >= :year_from"
            params["year_from"] = year_from
        if year_to is not None:
            sql += " AND ed.year <= :year_to"
            params["year_to"] = year_to
        if community:
            sql += " AND ed.community = :community"
            params["community"] = community

        sql += " GROUP BY ed.id"
        if has_thai_implementation is True:
            sql += " HAVING thai_statute_count > 0"
        elif has_thai_implementation is False:
            sql += " HAVING thai_statute_count = 0"
        sql += " ORDER BY ed.year DESC, ed.number DESC LIMIT :limit"

        with self.engine.connect() as conn:
            rows = conn.execute(text(sql), params).mappings().all()

        results = []
        for row in rows:
            data = dict(row)
            count = data.pop("thai_statute_count")
            primary = data.pop("primary_implementations")
            results.append(
                EUImplementationSummary(
                    eu_document=EUDocument.model_validate(data),
                    thai_statute_count=count,
                    primary_implementations=sorted(primary.split(",")) if primary else [],
                )
            )
        return results

    def list_eu_references(
        self,
        document_id: str,
        provision_id: Optional[int] = None,
        include_document_level: bool = False,
        eu_document_id: Optional[str] = None,
    ) -> list[EUReference]:
        """Individual EU links of a statute.

        With ``provision_id`` only that provision's links are returned, plus
        the statute-wide ones when ``include_document_level`` is set.
        """
        sql = """
            SELECT
              ed.id,
              ed.type,
              ed.title,
              ed.short_name,
              er.eu_article AS article,
              er.reference_type,
              COALESCE(er.full_citation, ed.id) AS full_citation,
              er.reference_context AS context,
              er.is_primary_implementation,
              er.implementation_status,
              er.source_type
            FROM eu_references er
            JOIN eu_documents ed ON ed.id = er.eu_document_id
            WHERE er.document_id = :document_id
        """
        params: dict[str, Any] = {"document_id": document_id}

        if provision_id is not None:
            if include_document_level:
                sql += " AND (er.provision_id = :provision_id OR er.source_type = 'document')"
            else:
                sql += " AND er.provision_id = :provision_id"
            params["provision_id"] = provision_id
        if eu_document_id:
            sql += " AND er.eu_document_id = :eu_document_id"
            params["eu_document_id"] = eu_document_id

        sql += " ORDER BY er.is_primary_implementation DESC, ed.year DESC, er.id"

        with self.engine.connect() as conn:
            rows = conn.execute(text(sql), params).mappings().all()
        return [EUReference.model_validate(dict(r)) for r in rows]

    # =========================================================================
    # Full-text search
    # =========================================================================

    def search_provisions(
        self,
        fts_query: str,
        document_id: Optional[str] = None,
        status: Optional[str] = None,
        limit: int = 10,
    ) -> list[ProvisionHit]:
        """Run an FTS5 MATCH query, best matches first.

        Raises:
            SearchSyntaxError: FTS5 rejected the query expression
        """
        sql = """
            SELECT
              lp.document_id,
              COALESCE(ld.title_en, ld.title) AS document_title,
              lp.provision_ref,
              lp.chapter,
              lp.section,
              lp.title,
              snippet(provisions_fts, 0, '>>>', '<<<', '...', 32) AS snippet,
              bm25(provisions_fts) AS relevance
            FROM provisions_fts
            JOIN legal_provisions lp ON lp.id = provisions_fts.rowid
            JOIN legal_documents ld ON ld.id = lp.document_id
            WHERE provisions_fts MATCH :query
        """
        params: dict[str, Any] = {"query": fts_query, "limit": limit}

        if document_id:
            sql += " AND lp.document_id = :document_id"
            params["document_id"] = document_id

        if status:
            sql += " AND ld.status = :status"
            params["status"] = status

        sql += " ORDER BY relevance LIMIT :limit"

        try:
            with self.engine.connect() as conn:
                rows = conn.execute(text(sql), params).mappings().all()
        except OperationalError as e:
            message = str(e.orig) if e.orig is not None else str(e)
            if any(marker in message.lower() for marker in FTS5_QUERY_ERRORS):
                raise SearchSyntaxError(fts_query, message) from e
            raise

        return [ProvisionHit.model_validate(dict(r)) for r in rows]

    # =========================================================================
    # Metadata
    # =========================================================================

    def get_metadata(self, key: str) -> Optional[str]:
        with self.engine.connect() as conn:
            value = conn.execute(
                text("SELECT value FROM db_metadata WHERE key = :key"), {"key": key}
            ).scalar_one_or_none()
        return value

    def count_rows(self, table: str) -> int:
        if table not in COUNTABLE_TABLES:
            raise ValueError(f"Unknown table: {table}")
        with self.engine.connect() as conn:
            count = conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()
        return int(count)

    def close(self) -> None:
        self.engine.dispose()
