from pathlib import Path
from typing import Sequence, TypeVar

T = TypeVar("T")


def read_text(p: Path) -> str:
    return p.read_text(encoding="utf-8") if p.exists() else ""


def uniq(xs):
    seen, out = set(), []
    for x in xs:
        if x and x not in seen:
            out.append(x)
            seen.add(x)
    return out


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split items into consecutive lists of `size`; the last one may be shorter."""
    return [list(items[i: i + size]) for i in range(0, len(items), size)]
