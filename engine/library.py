"""Search, filtering and bookmarks over the reference library."""

from typing import Iterable, List, Optional

from models.reference import Reference


def _matches_query(ref: Reference, query: str) -> bool:
    q = query.lower()
    haystack = [ref.title, ref.description, ref.content] + list(ref.tags)
    return any(q in text.lower() for text in haystack if text)


def search_references(
    references: List[Reference],
    query: str = "",
    category: Optional[str] = None,
    ref_type: Optional[str] = None,
    bookmarks: Optional[Iterable[str]] = None,
) -> List[Reference]:
    """Filter references; a blank query matches everything."""
    query = (query or "").strip()
    bookmark_ids = set(bookmarks) if bookmarks is not None else None

    results = []
    for ref in references:
        if query and not _matches_query(ref, query):
            continue
        if category and ref.category != category:
            continue
        if ref_type and ref.ref_type != ref_type:
            continue
        if bookmark_ids is not None and ref.reference_id not in bookmark_ids:
            continue
        results.append(ref)
    return results


def list_categories(references: List[Reference]) -> List[str]:
    return sorted({r.category for r in references})


def toggle_bookmark(bookmarks: List[str], reference_id: str) -> List[str]:
    if reference_id in bookmarks:
        return [b for b in bookmarks if b != reference_id]
    return list(bookmarks) + [reference_id]
