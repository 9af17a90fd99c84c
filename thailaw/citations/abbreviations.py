"""Thai statute abbreviations and short titles.

Maps common English abbreviations and Thai short titles to the canonical
English act name used in the document store. Lookups that fail return the
input unchanged.
"""

from typing import Final, Optional

# =============================================================================
# Act Abbreviation Mappings
# =============================================================================

# Key: lowercase abbreviation
# Value: canonical English title (without year)
#
# Note: `Final` provides static type-checker enforcement only.
# Do not modify these dictionaries after module load.
ACT_ABBREVIATIONS: Final[dict[str, str]] = {
    "pdpa": "Personal Data Protection Act",
    "cca": "Computer Crime Act",
    "csa": "Cybersecurity Act",
    "eta": "Electronic Transactions Act",
    "ccc": "Civil and Commercial Code",
}

# Key: distinctive subject phrase of the Thai title. Matching is by
# containment so both "พ.ร.บ." and "พระราชบัญญัติ" prefixes resolve.
THAI_SHORT_TITLES: Final[dict[str, str]] = {
    "คุ้มครองข้อมูลส่วนบุคคล": "Personal Data Protection Act",
    "ว่าด้วยการกระทำความผิดเกี่ยวกับคอมพิวเตอร์": "Computer Crime Act",
    "การรักษาความมั่นคงปลอดภัยไซเบอร์": "Cybersecurity Act",
    "ว่าด้วยธุรกรรมทางอิเล็กทรอนิกส์": "Electronic Transactions Act",
    "ประมวลกฎหมายแพ่งและพาณิชย์": "Civil and Commercial Code",
}


def resolve_abbreviation(name: str) -> str:
    """Resolve an act abbreviation to its canonical name.

    Args:
        name: Act name or abbreviation

    Returns:
        Canonical act name (or original if not found)
    """
    return ACT_ABBREVIATIONS.get(name.strip().lower(), name)


def resolve_thai_title(title: str) -> str:
    """Resolve a Thai title to its canonical English name.

    Args:
        title: Thai title as written in the citation

    Returns:
        Canonical English act name (or original if not found)
    """
    for phrase, canonical in THAI_SHORT_TITLES.items():
        if phrase in title:
            return canonical
    return title


def get_abbreviation(canonical_name: str) -> Optional[str]:
    """Get the common abbreviation for an act, upper-cased.

    Args:
        canonical_name: Full English act name

    Returns:
        Abbreviation such as "PDPA", or None
    """
    for abbr, name in ACT_ABBREVIATIONS.items():
        if name.lower() == canonical_name.strip().lower():
            return abbr.upper()
    return None


def expand_title(raw_title: str) -> tuple[str, Optional[str]]:
    """Expand a cited title to its canonical English form.

    Returns:
        ``(title, abbreviation)``; abbreviation is set only when the raw
        title was itself a known abbreviation.
    """
    title = raw_title.strip()

    expanded = resolve_abbreviation(title)
    if expanded != title:
        return expanded, title

    return resolve_thai_title(title), None
