"""Thai Law Lite - Streamlit UI

Citation checking and full-text search over Thai statutes.
"""

import streamlit as st
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from thailaw import __version__
from thailaw.core.config import settings

# Page configuration
st.set_page_config(
    page_title="Thai Law Lite",
    page_icon="⚖️",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: 700;
        color: #1a2744;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)

# Header
st.markdown('<p class="main-header">⚖️ Thai Law Lite</p>', unsafe_allow_html=True)
st.markdown('<p class="sub-header">Thai Statute Citations & Search</p>', unsafe_allow_html=True)

st.markdown("""
**Thai Law Lite** checks Thai legal citations against a local snapshot of statutes
from the Office of the Council of State (krisdika.go.th):

- **Citation parsing** - Thai and English forms, Buddhist Era or Common Era years
- **Citation validation** - does the statute and section actually exist?
- **Full-text search** - Thai and English provision text
""")

st.divider()

col1, col2, col3 = st.columns(3)

with col1:
    st.markdown("### 📜 Citations")
    st.markdown("""
    Supported forms:
    - มาตรา 3 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562
    - Section 3, Personal Data Protection Act B.E. 2562
    - s. 3 PDPA 2019
    """)

with col2:
    st.markdown("### 🔍 Search")
    st.markdown("""
    Search provisions:
    - Natural language or FTS5 syntax
    - Filter by statute and status
    - Highlighted snippets
    """)

with col3:
    st.markdown("### 📅 Calendar")
    st.markdown("""
    Thai legislation is dated in the Buddhist Era:
    - B.E. = C.E. + 543
    - B.E. 2562 = 2019
    """)

st.divider()

# Sidebar - Database status
with st.sidebar:
    st.markdown("### 📊 Database")

    db_path = Path(settings.database_path)

    if db_path.exists():
        from thailaw.store import SqlLegalStore
        from thailaw.tools import list_sources

        store = SqlLegalStore(db_path)
        database = list_sources(store).results.database

        col1, col2 = st.columns(2)
        col1.metric("Statutes", database.document_count)
        col2.metric("Provisions", database.provision_count)

        st.caption(f"Built: {database.built_at}")
        st.caption(f"Schema: v{database.schema_version} | Tier: {database.tier}")
    else:
        st.warning("Database not built yet.")
        st.code("python scripts/build_db.py")

# Footer
st.divider()
st.markdown(f"""
<div style="text-align: center; color: #888; font-size: 0.9rem;">
    Thai Law Lite v{__version__} | Built with Streamlit, SQLite FTS5
</div>
""", unsafe_allow_html=True)
