"""Root landing page naming the service and linking to the API docs."""

from html import escape

_STYLE = """
body { font-family: system-ui, sans-serif; max-width: 40rem; margin: 3rem auto;
       padding: 0 1rem; color: #1f2328; line-height: 1.5; }
h1 { margin-bottom: 0.25rem; }
.sub { color: #656d76; margin-top: 0; }
table { border-collapse: collapse; width: 100%; margin: 1.5rem 0; }
td { border-top: 1px solid #d0d7de; padding: 0.4rem 0.5rem; vertical-align: top; }
code { background: #f6f8fa; padding: 0.1rem 0.3rem; border-radius: 4px; }
nav a { margin-right: 1rem; }
"""


def render_root_page(app_name: str, api_prefix: str = "") -> str:
    """Return HTML for GET /: resource paths under api_prefix plus docs links."""
    name = escape(app_name)
    base = escape(api_prefix or "")
    rows = "\n".join(
        f"<tr><td><code>{base}{path}</code></td><td>{label}</td></tr>"
        for path, label in (
            ("/organizations", "Organizations; detail includes their events"),
            ("/events", "Events; detail includes their tickets"),
            ("/events/search?category=&amp;location=", "Search by category and/or location"),
            ("/tickets", "Tickets"),
        )
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>{name}</title>
<style>{_STYLE}</style>
</head>
<body>
<h1>{name}</h1>
<p class="sub">Organizations, their events, and the tickets on sale.</p>
<table>
{rows}
</table>
<nav><a href="/docs">Swagger UI</a><a href="/redoc">ReDoc</a><a href="/health">Health</a></nav>
</body>
</html>"""
