from pathlib import Path

SAMPLE_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta name="google-signin-client_id" content="placeholder.apps.googleusercontent.com">
    <title>Test</title>
</head>
<body></body>
</html>
"""


def write_sample_page(directory: Path, html: str = SAMPLE_HTML) -> Path:
    """Write a minimal sign-in page under ``directory`` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    source = directory / "index.html"
    source.write_text(html, encoding="utf-8")
    return source
