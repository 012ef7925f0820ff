"""Inject build settings into the static frontend document."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from textwrap import dedent
from typing import Tuple

from sitebuild.env_config import BuildSettings, get_build_settings

logger = logging.getLogger(__name__)

CLIENT_ID_PATTERN = re.compile(r'content="[^"]*\.apps\.googleusercontent\.com"')
HEAD_CLOSE = "</head>"


def _js_literal(value) -> str:
    # JSON is valid JS; "</" is escaped so a value cannot close the script element.
    return json.dumps(value).replace("</", "<\\/")


def replace_client_id(html: str, client_id: str) -> Tuple[str, int]:
    """Swap the first Google client id attribute value for ``client_id``."""
    replacement = f'content="{client_id}"'
    return CLIENT_ID_PATTERN.subn(lambda _match: replacement, html, count=1)


def render_env_script(settings: BuildSettings) -> str:
    script = dedent(
        f"""
        <script>
            window.ENV = {{
                GOOGLE_CLIENT_ID: {_js_literal(settings.google_client_id)},
                BACKEND_URL: {_js_literal(settings.backend_url)},
                AUTHORIZED_DOMAINS: {_js_literal(list(settings.authorized_domains))}
            }};
        </script>
        """
    )
    return "\n".join(f"    {line}" if line else line for line in script.split("\n"))


def inject_env_script(html: str, script: str) -> Tuple[str, int]:
    """Insert ``script`` right before the first closing head tag."""
    if HEAD_CLOSE not in html:
        return html, 0
    return html.replace(HEAD_CLOSE, f"{script}\n{HEAD_CLOSE}", 1), 1


def build_html(html: str, settings: BuildSettings) -> str:
    html, replaced = replace_client_id(html, settings.google_client_id)
    if replaced == 0:
        logger.warning(
            "Client id attribute not found; attribute not replaced",
            extra={"marker": CLIENT_ID_PATTERN.pattern},
        )
    html, inserted = inject_env_script(html, render_env_script(settings))
    if inserted == 0:
        logger.warning(
            "Closing head tag not found; env script not injected",
            extra={"marker": HEAD_CLOSE},
        )
    return html


def build_site(
    source_path: Path,
    output_dir: Path,
    settings: BuildSettings | None = None,
) -> Path:
    """
    Read ``source_path``, inject ``settings`` (defaults to the environment) and
    write the result under ``output_dir`` with the same file name.

    The output directory is created when missing. File-system errors propagate.
    """
    if settings is None:
        settings = get_build_settings()
    source_path = Path(source_path)
    output_dir = Path(output_dir)

    html = source_path.read_text(encoding="utf-8")
    updated_html = build_html(html, settings)

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / source_path.name
    output_path.write_text(updated_html, encoding="utf-8")
    logger.info(
        "Wrote built page",
        extra={
            "source": str(source_path),
            "output": str(output_path),
            "bytes_written": len(updated_html.encode("utf-8")),
        },
    )
    return output_path
