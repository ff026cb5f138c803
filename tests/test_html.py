from swagger_doc.writer.html import render_viewer


class TestRenderViewer:
    def test_references_spec_file(self):
        page = render_viewer("Petstore", spec_url="swagger.json")
        assert 'spec-url="swagger.json"' in page
        assert "<title>Petstore</title>" in page
        assert "loadSpec" not in page
        assert "server-url" not in page

    def test_server_url(self):
        page = render_viewer("Petstore", spec_url="swagger.json", server_url="https://api.example.com")
        assert 'server-url="https://api.example.com"' in page

    def test_embedded_spec(self):
        page = render_viewer("Petstore", spec_url="swagger.json", embedded_spec='{"swagger": "2.0"}')
        assert 'rapidocEl.loadSpec({"swagger": "2.0"})' in page
        assert "spec-url" not in page

    def test_embedded_spec_cannot_close_script(self):
        page = render_viewer("Petstore", embedded_spec='{"description": "</script><b>"}')
        assert "</script><b>" not in page
        assert "<\\/script><b>" in page

    def test_title_escaped(self):
        page = render_viewer("Pets & <Friends>", spec_url="swagger.json")
        assert "<title>Pets &amp; &lt;Friends&gt;</title>" in page
