"""Registry of the files and source code handed to the compiler."""

from __future__ import annotations


class Sources:
    """Maps file ids to their filename and source code; id 0 is the builtins."""

    def __init__(self) -> None:
        self._last_id = 0
        self.map: dict[int, tuple[str, str]] = {0: ("<BUILTIN>", "<SEE NONAME CODE>")}

    def add(self, filename: str, source: str) -> int:
        """Store a file and return the id it was given."""
        self._last_id += 1
        self.map[self._last_id] = (filename, source)
        return self._last_id

    def get(self, filename_id: int) -> tuple[str, str] | None:
        """Return the filename and source of an id, or None if unknown."""
        return self.map.get(filename_id)