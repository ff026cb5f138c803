"""Tag-based operation filtering.

A filter expression is a comma-separated tag list. Plain entries select
operations carrying that tag, entries prefixed with ``!`` reject them.
Rejection wins over selection.
"""

import logging

from pydantic import BaseModel

from swagger_doc.parser.base import Document

logger = logging.getLogger(__name__)

EXCLUDE_PREFIX = "!"


class TagFilter(BaseModel):
    """Parsed include/exclude tag sets."""

    include: frozenset[str] = frozenset()
    exclude: frozenset[str] = frozenset()

    @classmethod
    def parse(cls, expression: str) -> "TagFilter":
        include: set[str] = set()
        exclude: set[str] = set()
        for entry in expression.split(","):
            entry = entry.strip()
            if entry.startswith(EXCLUDE_PREFIX):
                name = entry[len(EXCLUDE_PREFIX):].strip()
                if name:
                    exclude.add(name)
            elif entry:
                include.add(entry)
        return cls(include=frozenset(include), exclude=frozenset(exclude))

    def is_empty(self) -> bool:
        return not self.include and not self.exclude

    def matches(self, tags: list[str]) -> bool:
        """Return True if an operation with ``tags`` should be kept."""
        if any(tag in self.exclude for tag in tags):
            return False
        if not self.include:
            return True
        return any(tag in self.include for tag in tags)


def filter_operations(document: Document, tag_filter: TagFilter) -> int:
    """Remove operations rejected by ``tag_filter`` from the document.

    Paths emptied by the filter are dropped; path items that never held an
    operation (``$ref`` or ``parameters`` only) are kept. Returns the number
    of operations removed.
    """
    if tag_filter.is_empty():
        return 0

    removed = 0
    for path in list(document.paths):
        item = document.paths[path]
        removed_here = 0
        for method, operation in list(item.operations()):
            if not tag_filter.matches(operation.tags or []):
                logger.debug("Filtered out %s [%s]", path, method.value)
                item.set_operation(method, None)
                removed_here += 1
        if removed_here and item.is_empty():
            del document.paths[path]
        removed += removed_here
    return removed
