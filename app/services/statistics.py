from enum import Enum
from typing import Dict, Iterable, Mapping, Tuple, Type


def count_by_name(enum_cls: Type[Enum], rows: Iterable[Tuple[object, int]]) -> Dict[str, int]:
    """Turn GROUP BY (value, count) rows into {enum name: count}, zero-filled."""
    counts = {member.name: 0 for member in enum_cls}
    for value, count in rows:
        if value is None:
            continue
        counts[enum_cls(value).name] = int(count or 0)
    return counts


def count_by_key(keys: Mapping[Enum, str], rows: Iterable[Tuple[object, int]]) -> Dict[str, int]:
    """Like count_by_name, but with an explicit enum -> output key mapping."""
    enum_cls = type(next(iter(keys)))
    by_name = count_by_name(enum_cls, rows)
    return {key: by_name[member.name] for member, key in keys.items()}
