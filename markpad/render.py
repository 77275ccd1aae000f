"""Markdown to HTML rendering for previews and HTML export."""

import html

import markdown2

MARKDOWN_EXTRAS = ["fenced-code-blocks", "tables", "strike", "task_list"]

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif; padding: 20px; color: #333; }}
        code {{ background-color: #f4f4f4; padding: 2px 4px; border-radius: 3px; }}
        pre {{ background-color: #f4f4f4; padding: 10px; border-radius: 5px; }}
        table {{ border-collapse: collapse; }}
        th, td {{ border: 1px solid #ddd; padding: 4px 8px; }}
        blockquote {{ color: #666; border-left: 4px solid #ddd; margin-left: 0; padding-left: 12px; }}
    </style>
</head>
<body>
<div id="content">
{body}
</div>
</body>
</html>
"""


def render_markdown(text: str) -> str:
    """Render markdown text to an HTML fragment."""
    return str(markdown2.markdown(text, extras=MARKDOWN_EXTRAS))


def render_page(text: str, title: str = "Markdown") -> str:
    """Render markdown text to a standalone HTML page."""
    return PAGE_TEMPLATE.format(title=html.escape(title), body=render_markdown(text))


def render_error_page(message: str) -> str:
    """Page shown in place of a document that could not be read."""
    body = f"<h1>Error reading file</h1>\n<p>{html.escape(message)}</p>"
    return PAGE_TEMPLATE.format(title="Error", body=body)
