from typing import Dict, Mapping


def rank_word_counts(counts: Mapping[str, int], limit: int) -> Dict[str, int]:
    """Return the `limit` most frequent words of `counts`, most frequent first.

    Ties keep the iteration order of `counts` (the sort is stable), so for a
    counter built in first-seen order the word seen first ranks first.
    A non-positive `limit` yields an empty mapping.
    """
    if limit <= 0:
        return {}
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return dict(ranked[:limit])
