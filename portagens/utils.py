"""Sorting, string comparison and paged listing helpers."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")

Compare = Callable[[T, T], int]


def merge_sort(items: Iterable[T], compare: Compare) -> list[T]:
    """Return the items stably sorted by a three-way ``compare`` function."""
    return sorted(items, key=cmp_to_key(compare))


def comparar_strings(a: str, b: str) -> int:
    """Three-way comparison of two strings: negative, zero or positive."""
    return (a > b) - (a < b)


def paginar(
    items: Sequence[T],
    page_size: int,
    show: Callable[[T], object],
    ask: Callable[[str], str] = input,
) -> None:
    """Show ``items`` one page at a time until the user answers -1.

    ``show`` is called for every item on the current page. ``ask`` receives
    the prompt and returns the user's answer; end of input also stops.
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    total_pages = (len(items) + page_size - 1) // page_size
    page = 0
    while True:
        print("\n\n\n", end="")
        start = page * page_size
        print(f"Página {page + 1} de {total_pages}")
        print("=====================")
        for item in items[start:start + page_size]:
            show(item)
        try:
            answer = ask(f"\nEscolha a página (1 a {total_pages}), ou -1 para sair: ")
        except EOFError:
            return
        try:
            choice = int(answer.strip())
        except ValueError:
            continue
        if choice == -1:
            return
        if 1 <= choice <= total_pages:
            page = choice - 1