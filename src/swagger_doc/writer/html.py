"""Static RapiDoc viewer page for a generated specification."""

from html import escape

RAPIDOC_SCRIPT = "https://cdnjs.cloudflare.com/ajax/libs/rapidoc/9.3.8/rapidoc-min.js"
RAPIDOC_INTEGRITY = (
    "sha512-0ES6eX4K9J1PrIEjIizv79dTlN5HwI2GW9Ku6ymb8dijMHF5CIplkS8N0iFJ/wl3GybCSqBJu8HDhiFkZRAf0g=="
)


def _render_loader(spec_json: str) -> str:
    # "</" inside a JSON string must not terminate the script element
    safe_json = spec_json.replace("</", "<\\/")
    return f'''
<script>
    window.addEventListener("DOMContentLoaded", (event) => {{
        const rapidocEl = document.getElementById("rapidoc");
        rapidocEl.loadSpec({safe_json})
    }})
</script>'''


def render_viewer(
    title: str,
    spec_url: str | None = None,
    server_url: str = "",
    embedded_spec: str | None = None,
) -> str:
    """Render the viewer page.

    The page either points RapiDoc at ``spec_url`` or, when ``embedded_spec``
    (a JSON document) is given, loads the spec inline once the DOM is ready.
    """
    spec_attr = ""
    if embedded_spec is None and spec_url:
        spec_attr = f'\n          spec-url="{escape(spec_url)}"'

    server_attr = ""
    if server_url:
        server_attr = f'\n          server-url="{escape(server_url)}"'

    loader = _render_loader(embedded_spec) if embedded_spec is not None else ""

    return f'''<!doctype html>
<html>
<head>
    <meta charset="utf-8">
    <title>{escape(title)}</title>
    <script src="{RAPIDOC_SCRIPT}"
            integrity="{RAPIDOC_INTEGRITY}"
            crossorigin="anonymous"
            referrerpolicy="no-referrer">
    </script>
</head>
<body>
<rapi-doc id="rapidoc"
          theme="dark"
          render-style="read"
          schema-style="table"
          schema-description-expanded="true"{spec_attr}
          allow-spec-file-download="true"{server_attr}
>
</rapi-doc>{loader}
</body>
</html>'''
