from rapidfuzz.distance import Levenshtein


def levenshtein_distance(first: str, second: str) -> int:
    """Unit-cost edit distance (insertions, deletions, substitutions)."""
    return Levenshtein.distance(first, second)


def similarity(first: str, second: str) -> float:
    """Edit-distance similarity in [0, 1]; two empty strings score 0.0."""
    max_length = max(len(first), len(second))
    if max_length == 0:
        return 0.0
    return 1 - levenshtein_distance(first, second) / max_length
