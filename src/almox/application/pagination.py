"""Pagination helpers for list screens and CLI listings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

GAP = "..."
MAX_PAGES_SHOWN = 5


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    per_page: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.per_page) if self.per_page else 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def paginate(seq: Sequence[T], page: int, per_page: int) -> Page[T]:
    """Slice out 1-based *page*; out-of-range pages are clamped."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    total_pages = max(1, math.ceil(len(seq) / per_page))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * per_page
    return Page(
        items=list(seq[start:start + per_page]),
        page=page,
        per_page=per_page,
        total_items=len(seq),
    )


def page_numbers(current: int, total: int) -> list[int | str]:
    """Page links to show, with ``"..."`` where a run of pages is elided.

    Everything is shown when there are at most seven pages.  Otherwise the
    first and last pages are always present, around a five-page window
    centred on *current*.
    """
    half = MAX_PAGES_SHOWN // 2

    if total <= MAX_PAGES_SHOWN + 2:
        return list(range(1, total + 1))

    start = max(2, current - half)
    end = min(total - 1, current + half)
    if current - half <= 2:
        end = MAX_PAGES_SHOWN
    if current + half >= total - 1:
        start = total - (MAX_PAGES_SHOWN - 1)

    numbers: list[int | str] = [1]
    if start > 2:
        numbers.append(GAP)
    numbers.extend(range(start, end + 1))
    if end < total - 1:
        numbers.append(GAP)
    numbers.append(total)
    return numbers
