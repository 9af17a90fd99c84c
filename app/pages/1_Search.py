"""Search Page - Full-text search across statute provisions."""

import streamlit as st
from pathlib import Path
import sys
import pandas as pd

# Add parent directory for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from thailaw.core.config import settings
from thailaw.core.exceptions import ThaiLawError
from thailaw.core.models import DocumentStatus
from thailaw.store import SqlLegalStore
from thailaw.tools import SearchLegislationInput, search_legislation

st.set_page_config(page_title="Search | Thai Law Lite", page_icon="🔍", layout="wide")

st.markdown("## 🔍 Legislation Search")
st.markdown("Search provision text in Thai or English. Quotes, AND, OR, NOT and trailing * are passed to FTS5.")

db_path = Path(settings.database_path)
if not db_path.exists():
    st.warning("⚠️ Database not built. Run `python scripts/build_db.py` first.")
    st.stop()

store = SqlLegalStore(db_path)

# Search settings
with st.expander("⚙️ Search Settings", expanded=False):
    col1, col2, col3 = st.columns(3)

    with col1:
        document_id = st.text_input("Statute id", placeholder="pdpa-be2562")

    with col2:
        status_label = st.selectbox(
            "Status",
            ["Any"] + [s.value for s in DocumentStatus],
        )

    with col3:
        limit = st.slider("Max results", 1, settings.search_max_limit, settings.search_default_limit)

query = st.text_input("Query", placeholder="personal data consent")

if query:
    try:
        response = search_legislation(
            store,
            SearchLegislationInput(
                query=query,
                document_id=document_id.strip() or None,
                status=None if status_label == "Any" else DocumentStatus(status_label),
                limit=limit,
            ),
        )
    except ThaiLawError as e:
        st.error(f"❌ {e.message}")
        st.stop()

    hits = response.results
    st.caption(response.metadata.data_freshness)

    if not hits:
        st.info("No matching provisions.")
    else:
        st.success(f"✅ {len(hits)} provisions found")

        view_mode = st.radio("View mode", ["Snippets", "Table"], horizontal=True)

        if view_mode == "Table":
            df = pd.DataFrame([
                {
                    "Statute": h.document_title or h.document_id,
                    "Ref": h.provision_ref,
                    "Title": h.title or "-",
                    "Relevance": round(h.relevance, 3),
                }
                for h in hits
            ])
            st.dataframe(df, use_container_width=True, hide_index=True)

            csv = df.to_csv(index=False)
            st.download_button(
                "📥 Download CSV",
                csv,
                "search_results.csv",
                "text/csv",
            )
        else:
            for i, hit in enumerate(hits):
                snippet = hit.snippet.replace(">>>", "**").replace("<<<", "**")
                st.markdown(f"**[{i+1}] {hit.document_title or hit.document_id}**, {hit.provision_ref}"
                            + (f" ({hit.title})" if hit.title else ""))
                st.markdown(snippet)
                st.divider()

    with st.expander("ℹ️ Source"):
        st.markdown(response.metadata.disclaimer)
        st.caption(response.metadata.source_authority)
