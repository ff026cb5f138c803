"""Generation pipeline: load -> filter -> annotate -> serialize -> write."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, model_validator

from swagger_doc.errors import OutputError
from swagger_doc.parser.loader import load_document
from swagger_doc.processor.annotator import annotate_operations
from swagger_doc.processor.badges import parse_badges
from swagger_doc.processor.tags import TagFilter, filter_operations
from swagger_doc.writer.html import render_viewer
from swagger_doc.writer.serializer import FILE_EXTENSIONS, serialize

logger = logging.getLogger(__name__)

VIEWER_FILENAME = "index.html"


class GenerateOptions(BaseModel):
    """Settings for one generation run."""

    spec_path: Path
    output_dir: Path = Path("docs")
    api_dir: str = "api"
    base_name: str = "swagger"
    title: str = ""
    server_url: str = ""
    tags: str = ""
    badges: str = ""
    first_tag_only: bool = False
    embedded: bool = False
    generate_html: bool = True
    output_format: Literal["json", "yaml"] = "json"

    @model_validator(mode="after")
    def _default_title(self) -> "GenerateOptions":
        if not self.title:
            self.title = self.base_name
        return self

    @property
    def destination(self) -> Path:
        return self.output_dir / self.api_dir

    @property
    def spec_filename(self) -> str:
        return f"{self.base_name}.{FILE_EXTENSIONS[self.output_format]}"


class GenerateResult(BaseModel):
    """Files written and counts from one generation run."""

    spec_file: Path
    viewer_file: Path | None = None
    operations: int
    removed_operations: int


def _write(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Cannot write {path}: {e}") from e
    logger.debug("Wrote %s (%d bytes)", path, len(content))


def generate(options: GenerateOptions) -> GenerateResult:
    """Run the full pipeline and write the spec (and viewer) to disk."""
    destination = options.destination
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Cannot create {destination}: {e}") from e

    document = load_document(options.spec_path)

    removed = filter_operations(document, TagFilter.parse(options.tags))
    if removed:
        logger.info("Tag filter removed %d operations", removed)

    badges = parse_badges(options.badges)
    annotate_operations(document, badges, first_tag_only=options.first_tag_only)

    content = serialize(document, options.output_format)
    spec_file = destination / options.spec_filename
    _write(spec_file, content)

    viewer_file = None
    if options.generate_html:
        if options.embedded:
            embedded = content if options.output_format == "json" else serialize(document, "json")
            page = render_viewer(options.title, server_url=options.server_url, embedded_spec=embedded)
        else:
            page = render_viewer(options.title, spec_url=options.spec_filename, server_url=options.server_url)
        viewer_file = destination / VIEWER_FILENAME
        _write(viewer_file, page)

    return GenerateResult(
        spec_file=spec_file,
        viewer_file=viewer_file,
        operations=sum(1 for _ in document.iter_operations()),
        removed_operations=removed,
    )
