from __future__ import annotations

from collections.abc import Iterable, Iterator


class HeaderIndex:
    """
    Header name to value mapping built from delivered header pairs.

    Names are kept exactly as delivered and lookups are case-sensitive.
    Duplicate names collapse to the last value seen.
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        self._values: dict[str, str] = {}
        for name, value in pairs:
            self._values[name] = value

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def find(self, name: str) -> str | None:
        """Case-insensitive lookup for internal protocol checks."""
        key = name.lower()
        found = None
        for header, value in self._values.items():
            if header.lower() == key:
                found = value
        return found

    def as_fields(self) -> dict[str, list[str]]:
        # Ordered by name; each value wrapped in a single-element list.
        return {name: [self._values[name]] for name in sorted(self._values)}

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return repr(self._values)
