"""Operation annotator - attaches tag badges and collapses tag lists."""

import logging

from swagger_doc.parser.base import Badge, Document, Operation

logger = logging.getLogger(__name__)


def annotate_operation(operation: Operation, badges: dict[str, str], first_tag_only: bool = False) -> None:
    """Annotate a single operation in place.

    Tagless operations are left untouched.
    """
    if not operation.tags:
        return

    found = [Badge(label=tag, color=badges[tag]) for tag in operation.tags if tag in badges]
    if found:
        operation.set_badges(found)

    if first_tag_only:
        operation.tags = operation.tags[:1]


def annotate_operations(document: Document, badges: dict[str, str], first_tag_only: bool = False) -> None:
    """Annotate every operation of the document in place."""
    for path, method, operation in document.iter_operations():
        if not operation.tags:
            continue
        logger.debug("Processing %s [%s]: tags %s", path, method.value, operation.tags)
        annotate_operation(operation, badges, first_tag_only)
