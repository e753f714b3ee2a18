from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

logger = logging.getLogger(__name__)


class DocumentStore(Mapping[str, str]):
    """Read-only name -> text mapping, built once at startup.

    Iteration follows the order the documents were supplied in.
    """

    def __init__(self, documents: Mapping[str, str] | None = None) -> None:
        self._documents: Mapping[str, str] = MappingProxyType(dict(documents or {}))

    @classmethod
    def from_directory(cls, path: Path | str, *, suffix: str = ".md") -> "DocumentStore":
        root = Path(path)
        if not root.exists():
            raise FileNotFoundError(f"Documentation directory '{root}' does not exist.")
        if not root.is_dir():
            raise NotADirectoryError(f"Documentation path '{root}' is not a directory.")

        documents: dict[str, str] = {}
        for file_path in sorted(root.glob(f"*{suffix}")):
            if not file_path.is_file():
                continue
            documents[file_path.stem] = file_path.read_text(encoding="utf-8")
        logger.info("Loaded %d documents from %s", len(documents), root)
        return cls(documents)

    def names(self) -> list[str]:
        return list(self._documents.keys())

    def __getitem__(self, name: str) -> str:
        return self._documents[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __repr__(self) -> str:
        return f"DocumentStore(documents={self.names()!r})"
