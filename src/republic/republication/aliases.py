"""Alias extraction: symbol list -> parallel (original, local) name lists."""

from typing import Iterable, List, Tuple

from ..shared.clauses import ItemLike, as_import_item


def extract_names(entries: Iterable[ItemLike]) -> Tuple[List[str], List[str]]:
    """
    Normalize `a, b as c` into (['a', 'b'], ['a', 'c']).

    Order and duplicates are preserved; no name is resolved or checked.
    """
    orig_names: List[str] = []
    local_names: List[str] = []
    for entry in entries:
        item = as_import_item(entry)
        orig_names.append(item.name)
        local_names.append(item.local_name)
    return orig_names, local_names
