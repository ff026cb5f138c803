"""Swagger / OpenAPI document loader.

Reads the specification emitted by the annotation extractor. JSON input is
parsed by the YAML loader as well, since JSON is valid YAML.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from swagger_doc.errors import LoadError
from swagger_doc.parser.base import Document

logger = logging.getLogger(__name__)


def _read_mapping(file_path: Path) -> dict[str, Any]:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"Cannot read {file_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LoadError(f"Cannot parse {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise LoadError(f"{file_path} does not contain a specification object")
    return data


def detect_format(file_path: Path, data: dict[str, Any] | None = None) -> str:
    """Detect the specification family of a document file.

    ``data`` is the already-parsed file content; it is read from
    ``file_path`` when omitted.

    Returns: 'swagger' (2.0) or 'openapi' (3.x).
    """
    if data is None:
        data = _read_mapping(file_path)
    if "openapi" in data:
        return "openapi"
    if "swagger" in data:
        return "swagger"
    raise LoadError(f"{file_path} is not a Swagger or OpenAPI document")


def load_document(file_path: Path) -> Document:
    """Load a Swagger/OpenAPI file into a Document."""
    data = _read_mapping(file_path)
    fmt = detect_format(file_path, data)

    # versions such as `swagger: 2.0` arrive as floats
    for key in ("swagger", "openapi"):
        if key in data and not isinstance(data[key], str):
            data[key] = str(data[key])

    try:
        document = Document.model_validate(data)
    except ValidationError as e:
        raise LoadError(f"Invalid {fmt} document {file_path}: {e}") from e

    logger.debug("Loaded %s document %s with %d paths", fmt, file_path, len(document.paths))
    return document
