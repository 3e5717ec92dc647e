"""
HTML pages for the interactive documentation UIs.

Pages load their renderer from a CDN and point it at the served document.
"""

import html
import json
import logging
from typing import Any

logger = logging.getLogger("schemabind.server")

UI_RAPIDOC = "rapidoc"
UI_REDOC = "redoc"

_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
"""

SWAGGER_UI_TEMPLATE = _HEAD + """<link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist/swagger-ui.css">
</head>
<body>
<div id="swagger-ui"></div>
<script src="https://unpkg.com/swagger-ui-dist/swagger-ui-bundle.js"></script>
<script>
SwaggerUIBundle({{url: {spec_url}, dom_id: "#swagger-ui"{extra}}});
</script>
</body>
</html>"""

RAPIDOC_TEMPLATE = _HEAD + """<script type="module" src="https://unpkg.com/rapidoc/dist/rapidoc-min.js"></script>
</head>
<body>
<rapi-doc spec-url={spec_url}></rapi-doc>
</body>
</html>"""

REDOC_TEMPLATE = _HEAD + """</head>
<body>
<redoc spec-url={spec_url}></redoc>
<script src="https://cdn.redoc.ly/redoc/latest/bundles/redoc.standalone.js"></script>
</body>
</html>"""


def swagger_ui_options(config: dict[str, Any] | None) -> str:
    """
    Extra SwaggerUIBundle options, sorted by key.

    Values that cannot be encoded as JSON are left out.
    """
    extra = []
    for key in sorted(config or {}):
        try:
            value = json.dumps(config[key])
        except (TypeError, ValueError):
            logger.debug("Dropping Swagger UI option %r: not JSON encodable", key)
            continue
        extra.append(f", {json.dumps(key)}: {value}")
    return "".join(extra)


def render_docs_page(
    ui: str, title: str, spec_url: str, swagger_config: dict[str, Any] | None = None
) -> str:
    """
    Render the documentation page.

    Args:
        ui: One of "swagger", "rapidoc" or "redoc". Anything else renders
            Swagger UI.
        title: Page title, HTML-escaped.
        spec_url: URL of the served document.
        swagger_config: Extra Swagger UI options.
    """
    values = {"title": html.escape(title), "spec_url": json.dumps(spec_url)}
    if ui == UI_RAPIDOC:
        return RAPIDOC_TEMPLATE.format(**values)
    if ui == UI_REDOC:
        return REDOC_TEMPLATE.format(**values)
    return SWAGGER_UI_TEMPLATE.format(extra=swagger_ui_options(swagger_config), **values)
