"""
Weighted library search.

Weights: core insight (3) > any tag (2) > keywords (1), additive.
A single linear scan per call; the library is small enough that no
index is kept.
"""

from coremint.models.knowledge import KnowledgeItem, LibraryStorage

CORE_INSIGHT_WEIGHT = 3
TAG_WEIGHT = 2
KEYWORDS_WEIGHT = 1


def score_item(query: str, item: KnowledgeItem) -> int:
    """
    Relevance of one item for a case-insensitive substring query.

    Args:
        query: Non-empty search text
        item: Item to score

    Returns:
        Sum of the weights of every matching field
    """
    needle = query.lower()
    score = 0
    if needle in item.core_insight.lower():
        score += CORE_INSIGHT_WEIGHT
    if any(needle in tag.lower() for tag in item.tags):
        score += TAG_WEIGHT
    if needle in item.keywords.lower():
        score += KEYWORDS_WEIGHT
    return score


def search(query: str, items: LibraryStorage) -> LibraryStorage:
    """
    Rank items by weighted relevance.

    A blank query returns items unchanged. Otherwise items scoring zero
    are dropped and the rest are ordered by descending score; equal
    scores keep their collection order.

    Args:
        query: Free-text query
        items: Collection to search

    Returns:
        Matching items, most relevant first
    """
    if not query.strip():
        return items

    scored = [(score_item(query, item), item) for item in items]
    matches = [pair for pair in scored if pair[0] > 0]
    matches.sort(key=lambda pair: pair[0], reverse=True)
    return [item for _, item in matches]
