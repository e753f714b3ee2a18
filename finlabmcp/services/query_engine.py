from __future__ import annotations

import re
from dataclasses import dataclass

from finlabmcp.services.document_store import DocumentStore

MAX_SEARCH_RESULTS = 10
CONTEXT_LINES_BEFORE = 2
CONTEXT_LINES_AFTER = 5
ALL_FACTORS = "all"
SUGGESTED_FACTOR_TYPES = ("value", "momentum", "technical", "quality", "ml")
SECTION_DELIMITER = "\n## "

_HEADING_MARKER_RE = re.compile(r"^#+\s*")


@dataclass(frozen=True)
class SearchHit:
    document: str
    line: int
    context: list[str]

    @property
    def text(self) -> str:
        return "\n".join(self.context)


class DocumentQueryEngine:
    def __init__(
        self,
        store: DocumentStore,
        *,
        title: str = "FinLab",
        factor_examples_doc: str = "factor-examples",
    ) -> None:
        self._store = store
        self._title = title
        self._factor_examples_doc = factor_examples_doc

    @property
    def store(self) -> DocumentStore:
        return self._store

    def list_documents(self) -> str:
        entries = [
            f"- **{name}**: {_synopsis(content)}" for name, content in self._store.items()
        ]
        return f"## Available {self._title} Documents\n\n" + "\n".join(entries)

    def get_document(self, name: str) -> str:
        if name in self._store:
            return self._store[name]
        available = ", ".join(self._store.names())
        return f"Document '{name}' not found.\n\nAvailable documents: {available}"

    def find_hits(self, query: str, *, limit: int = MAX_SEARCH_RESULTS) -> list[SearchHit]:
        if not query:
            return []
        needle = query.lower()
        hits: list[SearchHit] = []
        for name, content in self._store.items():
            if needle not in content.lower():
                continue
            lines = content.split("\n")
            for index, line in enumerate(lines):
                if needle not in line.lower():
                    continue
                start = max(0, index - CONTEXT_LINES_BEFORE)
                end = min(len(lines), index + CONTEXT_LINES_AFTER + 1)
                hits.append(SearchHit(document=name, line=index + 1, context=lines[start:end]))
                if len(hits) >= limit:
                    return hits
        return hits

    def search(self, query: str) -> str:
        hits = self.find_hits(query)
        if not hits:
            return f"No results found for '{query}'"

        output = f"## Search Results: {query}\n\n"
        for hit in hits:
            output += f"### {hit.document} (line {hit.line})\n```\n{hit.text}\n```\n\n"
        return output

    def extract_examples(self, factor_type: str = ALL_FACTORS) -> str:
        content = self._store.get(self._factor_examples_doc)
        if content is None:
            return f"{self._factor_examples_doc} not found"

        factor_type = factor_type or ALL_FACTORS
        if factor_type == ALL_FACTORS:
            return content

        needle = factor_type.lower()
        matching = [
            section
            for section in content.split(SECTION_DELIMITER)
            if needle in section.lower()
        ]
        if not matching:
            suggestions = ", ".join(SUGGESTED_FACTOR_TYPES)
            return f"No examples found for factor type '{factor_type}'. Try: {suggestions}"
        return "\n\n".join(f"## {section}" for section in matching)


def _synopsis(content: str) -> str:
    for line in content.split("\n"):
        if line.strip():
            return _HEADING_MARKER_RE.sub("", line).strip()
    return ""
