"""Ordering functions applied to each directory listing before it is enumerated."""

from collections.abc import Callable

from treefind.walker.filesystem import FileInfo

SortFn = Callable[[list[FileInfo]], list[FileInfo]]


def sort_by_name(infos: list[FileInfo]) -> list[FileInfo]:
    return sorted(infos, key=lambda info: info.name)


def sort_by_name_casefold(infos: list[FileInfo]) -> list[FileInfo]:
    # Ties between names differing only in case fall back to ordinal order
    return sorted(infos, key=lambda info: (info.name.casefold(), info.name))


def no_sort(infos: list[FileInfo]) -> list[FileInfo]:
    return list(infos)


SORT_FUNCTIONS: dict[str, SortFn] = {
    "name": sort_by_name,
    "casefold": sort_by_name_casefold,
    "none": no_sort,
}


def get_sort_fn(name: str) -> SortFn:
    """Get sort function by name."""
    if name not in SORT_FUNCTIONS:
        raise ValueError(f"Unknown sort function: {name}. Available: {list(SORT_FUNCTIONS.keys())}")
    return SORT_FUNCTIONS[name]
