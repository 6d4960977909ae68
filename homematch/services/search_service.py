from typing import List, Sequence

from homematch.schemas.property import Property

SORT_OPTIONS = ("newest", "price-asc", "price-desc", "bedrooms")


class LatestRequestGuard:
    """Hands out increasing tickets so only the newest in-flight request is applied"""

    def __init__(self):
        self._latest = 0

    def issue(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest


def sort_properties(properties: Sequence[Property], sort_by: str = "newest") -> List[Property]:
    """
    Sort listings for display

    "newest" keeps the backend order, which is already newest first.
    Unknown keys behave like "newest".
    """
    if sort_by == "price-asc":
        return sorted(properties, key=lambda p: p.price)
    if sort_by == "price-desc":
        return sorted(properties, key=lambda p: p.price, reverse=True)
    if sort_by == "bedrooms":
        return sorted(properties, key=lambda p: p.bedrooms, reverse=True)
    return list(properties)


def filter_by_text(properties: Sequence[Property], query: str) -> List[Property]:
    """Case-insensitive match on title, location or description"""
    query = query.strip().lower()
    if not query:
        return list(properties)
    return [
        p for p in properties
        if query in p.title.lower()
        or query in p.location.lower()
        or query in p.description.lower()
    ]
