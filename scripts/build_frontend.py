#!/usr/bin/env python3
"""
Build the deployable sign-in page.

Reads frontend/index.html, injects GOOGLE_CLIENT_ID, BACKEND_URL and
AUTHORIZED_DOMAINS from the environment, and writes public/index.html.
Paths default to this repository regardless of the working directory;
--source/--output-dir still override them.
"""

from __future__ import annotations

import os
import sys

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from sitebuild.cli import main


def repo_defaults() -> list:
    return [
        "--source",
        os.path.join(PROJECT_ROOT, "frontend", "index.html"),
        "--output-dir",
        os.path.join(PROJECT_ROOT, "public"),
    ]


if __name__ == "__main__":
    # Later flags win, so user-supplied paths override the repo defaults.
    raise SystemExit(main(repo_defaults() + sys.argv[1:]))
