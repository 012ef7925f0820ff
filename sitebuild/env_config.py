"""
Build-time settings read from the environment for the static frontend.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Mapping, Tuple

DEFAULT_GOOGLE_CLIENT_ID = "YOUR_GOOGLE_CLIENT_ID.apps.googleusercontent.com"
DEFAULT_BACKEND_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbz2dlQNwe56QsRgTUEQcqaCelX1DvfOucaTeVbGSwIK0YCC9Gor55q41a2gAGq5aBUwRQ/exec"
)
DEFAULT_AUTHORIZED_DOMAINS = "yourdomain.com"

ENV_GOOGLE_CLIENT_ID = "GOOGLE_CLIENT_ID"
ENV_BACKEND_URL = "BACKEND_URL"
ENV_AUTHORIZED_DOMAINS = "AUTHORIZED_DOMAINS"


@dataclass(frozen=True)
class BuildSettings:
    google_client_id: str = DEFAULT_GOOGLE_CLIENT_ID
    backend_url: str = DEFAULT_BACKEND_URL
    authorized_domains: Tuple[str, ...] = (DEFAULT_AUTHORIZED_DOMAINS,)


def split_domains(raw_value: str) -> List[str]:
    """Split a comma-separated domain list, trimming each entry and keeping order."""
    return [entry.strip() for entry in raw_value.split(",")]


def _env_or_default(environ: Mapping[str, str], name: str, default: str) -> str:
    # Blank values count as unset.
    return environ.get(name) or default


def get_build_settings(environ: Mapping[str, str] | None = None) -> BuildSettings:
    """
    Returns the settings injected into the page. Each variable falls back to
    its default when unset or empty:

    * GOOGLE_CLIENT_ID is the OAuth client identifier.
    * BACKEND_URL is the endpoint the page calls.
    * AUTHORIZED_DOMAINS is a comma-separated domain list.
    """
    if environ is None:
        environ = os.environ
    return BuildSettings(
        google_client_id=_env_or_default(environ, ENV_GOOGLE_CLIENT_ID, DEFAULT_GOOGLE_CLIENT_ID),
        backend_url=_env_or_default(environ, ENV_BACKEND_URL, DEFAULT_BACKEND_URL),
        authorized_domains=tuple(
            split_domains(
                _env_or_default(environ, ENV_AUTHORIZED_DOMAINS, DEFAULT_AUTHORIZED_DOMAINS)
            )
        ),
    )


def preview(value: str, width: int) -> str:
    """Truncated form of ``value`` for log output."""
    return value[:width] + "..."
