"""Standalone HTML page for an entry rendered with HTML_STYLE."""

from jasssearch.rendering.detail import DetailPayload

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{ font-family: Arial, sans-serif; padding: 20px; }}
        pre {{ padding: 10px; border-radius: 5px; overflow-x: auto; background: #f4f4f4; }}
        .function {{ color: #795e26; font-weight: bold; }}
        .type {{ color: #267f99; }}
        .annotation {{ color: #af00db; }}
    </style>
</head>
<body>
    <h2>{title}</h2>
    <pre><code>{signature}</code></pre>
    <h3>Description</h3>
    <pre>{description}</pre>
</body>
</html>
"""


def render_html_document(payload: DetailPayload) -> str:
    """Wrap an HTML-styled payload in a script-free page.

    Raises:
        ValueError: If the payload was rendered for another markup style
    """
    if payload.style != "html":
        raise ValueError(f"Expected an html payload, got '{payload.style}'")

    return PAGE_TEMPLATE.format(
        title=payload.title,
        signature=payload.signature,
        description=payload.description,
    )
