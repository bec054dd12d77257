"""The shell's environment: an ordered list of ``NAME=value`` entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _key_of(name: str) -> str:
    """Strip one trailing ``=`` from a lookup name."""
    return name[:-1] if name.endswith("=") else name


class Environment:
    """Ordered environment entries, each ``NAME=value`` or a bare ``NAME``.

    A name given with a trailing ``=`` asks for the entry to carry a value;
    a bare name only declares the variable, as ``export NAME`` does.
    """

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def index(self, name: str) -> int | None:
        """Return the position of the entry for ``name``, or None if absent."""
        key = _key_of(name)
        for position, entry in enumerate(self._entries):
            if entry.startswith(key) and entry[len(key):len(key) + 1] in ("", "="):
                return position
        return None

    def get(self, name: str | None) -> str | None:
        """Return the value of ``name``; None if unset or declared without a value."""
        if name is None:
            return None
        position = self.index(name)
        if position is None:
            return None
        _, sep, value = self._entries[position].partition("=")
        return value if sep else None

    def update(self, name: str, value: str | None) -> str | None:
        """Replace an existing entry and return it; None if ``name`` is not set.

        Only a name ending in ``=`` rewrites the entry; a bare name leaves the
        entry as it is and returns it.
        """
        position = self.index(name)
        if position is None:
            return None
        if name.endswith("="):
            self._entries[position] = name + (value or "")
        return self._entries[position]

    def add(self, name: str, value: str | None) -> None:
        """Update the entry for ``name`` or append a new one."""
        if self.update(name, value) is not None:
            return
        if name.endswith("="):
            self._entries.append(name + (value or ""))
        else:
            self._entries.append(name)

    def append(self, name: str, suffix: str) -> None:
        """Append ``suffix`` to the current value of ``name`` (as ``+=`` does)."""
        current = self.get(name) or ""
        self.add(name, current + suffix)

    def delete(self, name: str) -> None:
        """Remove the entry for ``name``; an unknown name is ignored."""
        position = self.index(name)
        if position is not None:
            del self._entries[position]

    def visible(self) -> list[str]:
        """Return the entries that carry a value, as ``env`` prints them."""
        return [entry for entry in self._entries if "=" in entry]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"