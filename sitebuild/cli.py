"""Command-line entrypoint for building the static frontend."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from sitebuild.env_config import get_build_settings, preview
from sitebuild.injector import build_site
from sitebuild.logging_setup import setup_logging

DEFAULT_SOURCE = Path("frontend") / "index.html"
DEFAULT_OUTPUT_DIR = Path("public")

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Inject GOOGLE_CLIENT_ID, BACKEND_URL and AUTHORIZED_DOMAINS into the static frontend."
    )
    parser.add_argument(
        "--source",
        dest="source_path",
        default=str(DEFAULT_SOURCE),
        help="HTML document to read (default: frontend/index.html in the working directory).",
    )
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        default=str(DEFAULT_OUTPUT_DIR),
        help="Directory the built page is written to; created if missing (default: public/ in the working directory).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    source_path = Path(args.source_path)
    if not source_path.exists():
        raise SystemExit(f"Cannot find index file at {source_path}")

    setup_logging()

    settings = get_build_settings()
    logger.info("Building with environment variables...")
    logger.info("GOOGLE_CLIENT_ID: %s", preview(settings.google_client_id, 20))
    logger.info("BACKEND_URL: %s", preview(settings.backend_url, 50))
    logger.info("AUTHORIZED_DOMAINS: %s", ",".join(settings.authorized_domains))

    output_path = build_site(source_path, Path(args.output_dir), settings)
    print(f"Build complete! Output written to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
