"""SQLite schema for the statute database.

FTS5 with the unicode61 tokenizer indexes provision content and titles in
both Thai and English. EU tables link statutes and provisions to the
EU instruments they implement or follow.
"""

SCHEMA_VERSION = "3"

SCHEMA_STATEMENTS: list[str] = [
    # Legal documents (statutes)
    """
    CREATE TABLE IF NOT EXISTS legal_documents (
      id TEXT PRIMARY KEY,
      type TEXT NOT NULL DEFAULT 'statute'
        CHECK(type IN ('statute', 'royal_decree', 'ministerial_regulation')),
      title TEXT NOT NULL,
      title_en TEXT,
      short_name TEXT,
      status TEXT NOT NULL DEFAULT 'in_force'
        CHECK(status IN ('in_force', 'amended', 'repealed', 'not_yet_in_force')),
      be_year INTEGER,
      ce_year INTEGER,
      issued_date TEXT,
      in_force_date TEXT,
      url TEXT,
      description TEXT,
      last_updated TEXT DEFAULT (datetime('now'))
    )
    """,
    # Individual provisions from statutes
    """
    CREATE TABLE IF NOT EXISTS legal_provisions (
      id INTEGER PRIMARY KEY,
      document_id TEXT NOT NULL REFERENCES legal_documents(id),
      provision_ref TEXT NOT NULL,
      chapter TEXT,
      section TEXT NOT NULL,
      title TEXT,
      content TEXT NOT NULL,
      language TEXT DEFAULT 'en',
      metadata TEXT,
      UNIQUE(document_id, provision_ref)
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_provisions_doc ON legal_provisions(document_id)",
    "CREATE INDEX IF NOT EXISTS idx_provisions_chapter ON legal_provisions(document_id, chapter)",
    """
    CREATE VIRTUAL TABLE IF NOT EXISTS provisions_fts USING fts5(
      content, title,
      content='legal_provisions',
      content_rowid='id',
      tokenize='unicode61'
    )
    """,
    # Keep the FTS index in sync with legal_provisions
    """
    CREATE TRIGGER IF NOT EXISTS provisions_ai AFTER INSERT ON legal_provisions BEGIN
      INSERT INTO provisions_fts(rowid, content, title)
      VALUES (new.id, new.content, new.title);
    END
    """,
    """
    CREATE TRIGGER IF NOT EXISTS provisions_ad AFTER DELETE ON legal_provisions BEGIN
      INSERT INTO provisions_fts(provisions_fts, rowid, content, title)
      VALUES ('delete', old.id, old.content, old.title);
    END
    """,
    """
    CREATE TRIGGER IF NOT EXISTS provisions_au AFTER UPDATE ON legal_provisions BEGIN
      INSERT INTO provisions_fts(provisions_fts, rowid, content, title)
      VALUES ('delete', old.id, old.content, old.title);
      INSERT INTO provisions_fts(rowid, content, title)
      VALUES (new.id, new.content, new.title);
    END
    """,
    # EU directives and regulations referenced by Thai statutes
    """
    CREATE TABLE IF NOT EXISTS eu_documents (
      id TEXT PRIMARY KEY,
      type TEXT NOT NULL CHECK(type IN ('directive', 'regulation')),
      year INTEGER NOT NULL,
      number INTEGER NOT NULL,
      community TEXT CHECK(community IN ('EU', 'EC', 'EEC', 'Euratom')),
      celex_number TEXT,
      title TEXT,
      title_en TEXT,
      short_name TEXT,
      adoption_date TEXT,
      entry_into_force_date TEXT,
      in_force BOOLEAN DEFAULT 1,
      amended_by TEXT,
      repeals TEXT,
      url_eur_lex TEXT,
      description TEXT,
      last_updated TEXT DEFAULT (datetime('now'))
    )
    """,
    # Links from a Thai statute or provision to an EU instrument
    """
    CREATE TABLE IF NOT EXISTS eu_references (
      id INTEGER PRIMARY KEY,
      source_type TEXT NOT NULL CHECK(source_type IN ('provision', 'document', 'case_law')),
      source_id TEXT NOT NULL,
      document_id TEXT NOT NULL REFERENCES legal_documents(id),
      provision_id INTEGER REFERENCES legal_provisions(id),
      eu_document_id TEXT NOT NULL REFERENCES eu_documents(id),
      eu_article TEXT,
      reference_type TEXT NOT NULL CHECK(reference_type IN (
        'implements', 'supplements', 'applies', 'references', 'complies_with',
        'derogates_from', 'amended_by', 'repealed_by', 'cites_article', 'modeled_on'
      )),
      reference_context TEXT,
      full_citation TEXT,
      is_primary_implementation BOOLEAN DEFAULT 0,
      implementation_status TEXT
        CHECK(implementation_status IN ('complete', 'partial', 'pending', 'unknown')),
      last_verified TEXT,
      UNIQUE(source_id, eu_document_id, eu_article)
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_eu_documents_type_year ON eu_documents(type, year DESC)",
    "CREATE INDEX IF NOT EXISTS idx_eu_references_document ON eu_references(document_id, eu_document_id)",
    "CREATE INDEX IF NOT EXISTS idx_eu_references_eu_document ON eu_references(eu_document_id, document_id)",
    "CREATE INDEX IF NOT EXISTS idx_eu_references_provision ON eu_references(provision_id)",
    # Build metadata (built_at, schema_version, jurisdiction, tier)
    """
    CREATE TABLE IF NOT EXISTS db_metadata (
      key TEXT PRIMARY KEY,
      value TEXT NOT NULL
    )
    """,
]
