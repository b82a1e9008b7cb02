from typing import Optional

LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """ILIKE pattern matching ``term`` anywhere, with %, _ and \\ taken literally."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def clean_search(term: Optional[str]) -> Optional[str]:
    # recherche vide ou blanche => pas de filtre
    if term is None:
        return None
    term = term.strip()
    return term or None


def offset_for(page: int, page_size: int) -> int:
    return (page - 1) * page_size
