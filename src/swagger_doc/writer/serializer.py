"""Document serializer.

Renders a Document as indented JSON or block-style YAML. Keys keep the
model's declaration order followed by extension keys in insertion order, so
the same document always produces the same bytes.
"""

import yaml

from swagger_doc.errors import EncodingError
from swagger_doc.parser.base import Document

FILE_EXTENSIONS = {"json": "json", "yaml": "yaml"}
INDENT = 2


def _dump_json(document: Document) -> str:
    return document.model_dump_json(indent=INDENT, by_alias=True, exclude_none=True)


def _dump_yaml(document: Document) -> str:
    data = document.model_dump(mode="json", by_alias=True, exclude_none=True)
    return yaml.safe_dump(
        data,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        indent=INDENT,
    )


def serialize(document: Document, fmt: str = "json") -> str:
    """Serialize a document to text in the given format ('json' or 'yaml')."""
    if fmt not in FILE_EXTENSIONS:
        raise EncodingError(f"Unsupported output format: {fmt}")

    try:
        if fmt == "yaml":
            return _dump_yaml(document)
        return _dump_json(document)
    except (ValueError, RecursionError, yaml.YAMLError) as e:
        raise EncodingError(f"Cannot encode document as {fmt}: {e}") from e
