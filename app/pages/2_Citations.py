"""Citations Page - Parse, format and validate Thai legal citations."""

import streamlit as st
from pathlib import Path
import sys
import pandas as pd

# Add parent directory for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from thailaw.citations import format_citation, parse_citation
from thailaw.core.config import settings
from thailaw.core.models import CitationFormat
from thailaw.store import SqlLegalStore
from thailaw.tools import ValidateCitationInput, validate_citation_tool

st.set_page_config(page_title="Citations | Thai Law Lite", page_icon="📜", layout="wide")

st.markdown("## 📜 Citation Checker")
st.markdown("Paste one citation per line. Each is parsed, rendered in every format and checked against the database.")

db_path = Path(settings.database_path)
store = SqlLegalStore(db_path) if db_path.exists() else None

if store is None:
    st.warning("⚠️ Database not built. Citations will be parsed and formatted but not validated.")

text = st.text_area(
    "Citations",
    value="Section 3, Personal Data Protection Act B.E. 2562\ns. 5 CCA 2007",
    height=150,
)

if st.button("🔍 Check Citations", type="primary", use_container_width=True):
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    st.session_state.citation_rows = []

    for line in lines:
        parsed = parse_citation(line)
        row = {
            "Input": line,
            "Parsed": "✅" if parsed.valid else "❌",
            "Section": parsed.pinpoint or "-",
            "B.E.": parsed.era_year or "-",
            "C.E.": parsed.western_year or "-",
        }
        for fmt in CitationFormat:
            row[fmt.value] = format_citation(parsed, fmt) or "-"

        if store is not None:
            result = validate_citation_tool(store, ValidateCitationInput(citation=line)).results
            row["Valid"] = "✅" if result.valid else "❌"
            row["Statute"] = result.document_title or "-"
            row["Warnings"] = "; ".join(result.warnings) or "-"
        elif not parsed.valid:
            row["Warnings"] = parsed.error

        st.session_state.citation_rows.append(row)

# Display results
if st.session_state.get("citation_rows"):
    rows = st.session_state.citation_rows
    st.divider()

    col1, col2, col3 = st.columns(3)
    col1.metric("Citations", len(rows))
    col2.metric("Parsed", sum(1 for r in rows if r["Parsed"] == "✅"))
    col3.metric("Valid", sum(1 for r in rows if r.get("Valid") == "✅"))

    df = pd.DataFrame(rows)
    st.dataframe(df, use_container_width=True, hide_index=True)

    csv = df.to_csv(index=False)
    st.download_button(
        "📥 Download CSV",
        csv,
        "citations.csv",
        "text/csv",
    )
else:
    st.info("👆 Click 'Check Citations' to analyse the citations above.")

# Sidebar
with st.sidebar:
    st.markdown("### 📚 Supported Formats")
    st.markdown("""
    - มาตรา 3 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562
    - Section 3, Personal Data Protection Act B.E. 2562
    - Personal Data Protection Act B.E. 2562, s. 3
    - s. 3 PDPA 2019
    - pdpa-be2562, s. 3
    - Section 3, Personal Data Protection Act 2019
    - Personal Data Protection Act 2019, s. 3
    """)
