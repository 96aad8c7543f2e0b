from typing import Dict, List, Mapping, Optional, Tuple


def top_n(table: Mapping[str, int], n: Optional[int] = 10) -> List[Tuple[str, int]]:
    """
    Return the n highest-count (key, count) pairs, descending.

    Ties keep the table's insertion order (sorted() is stable), so the
    key seen first ranks first.

    Args:
        table: Frequency table (Counter or dict)
        n: Number of entries to return; None returns all of them
    """
    ranked = sorted(table.items(), key=lambda item: item[1], reverse=True)
    if n is None:
        return ranked
    if n <= 0:
        return []
    return ranked[:n]


def ranked_dict(table: Mapping[str, int], n: Optional[int] = None) -> Dict[str, int]:
    """top_n() as an ordered dict for JSON responses."""
    return dict(top_n(table, n))
