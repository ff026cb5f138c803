import json

import pytest
import yaml

from swagger_doc.errors import EncodingError
from swagger_doc.parser.base import Badge, Document, HttpMethod
from swagger_doc.writer.serializer import serialize


def _make_document() -> Document:
    return Document.model_validate({
        "paths": {
            "/pets": {
                "get": {
                    "x-rate-limit": 100,
                    "responses": {"200": {"description": "OK"}},
                    "summary": "List pets",
                    "tags": ["pets"],
                },
            },
        },
        "info": {"title": "Petstore", "version": "1.0.0"},
        "swagger": "2.0",
    })


class TestSerializeJson:
    def test_field_order_follows_declaration(self):
        text = serialize(_make_document())
        data = json.loads(text)
        assert list(data) == ["swagger", "info", "paths"]
        op = data["paths"]["/pets"]["get"]
        assert list(op) == ["tags", "summary", "responses", "x-rate-limit"]

    def test_two_space_indent(self):
        text = serialize(_make_document())
        assert text.startswith('{\n  "swagger": "2.0",')
        assert not text.endswith("\n")

    def test_badges_serialized_inline(self):
        doc = _make_document()
        doc.paths["/pets"].get_operation(HttpMethod.GET).set_badges([Badge(label="pets", color="red")])
        op = json.loads(serialize(doc))["paths"]["/pets"]["get"]
        assert op["x-badges"] == [{"label": "pets", "color": "red"}]
        assert list(op)[-2:] == ["x-rate-limit", "x-badges"]

    def test_deterministic(self):
        doc = _make_document()
        assert serialize(doc) == serialize(doc)

    def test_cyclic_value_raises(self):
        doc = _make_document()
        loop: dict = {}
        loop["self"] = loop
        doc.paths["/pets"].get_operation(HttpMethod.GET).extensions["x-loop"] = loop
        with pytest.raises(EncodingError):
            serialize(doc)

    def test_unsupported_format(self):
        with pytest.raises(EncodingError, match="Unsupported output format"):
            serialize(_make_document(), "xml")


class TestSerializeYaml:
    def test_yaml_keeps_order(self):
        text = serialize(_make_document(), "yaml")
        assert text.startswith("swagger: '2.0'\ninfo:\n")
        assert list(yaml.safe_load(text)) == ["swagger", "info", "paths"]

    def test_yaml_deterministic(self):
        doc = _make_document()
        assert serialize(doc, "yaml") == serialize(doc, "yaml")
