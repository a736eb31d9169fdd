"""Configuration loader – reads .env and environment variables with secret redaction."""

from __future__ import annotations

import os
import re
from pathlib import Path

from dotenv import load_dotenv


# Patterns that should NEVER be printed/logged
_SECRET_PATTERNS = [
    re.compile(r"(\w+://[^/\s:@]+:)[^@\s/]+(?=@)"),
    re.compile(r"((?:Bearer|Basic)\s+)[A-Za-z0-9._~+/=-]{8,}", re.IGNORECASE),
    re.compile(r"(api[_-]?key[\"']?\s*[:=]\s*[\"']?)[A-Za-z0-9_-]{16,}", re.IGNORECASE),
]

_TRUTHY = {"1", "true", "yes", "on"}


def redact_secrets(text: str) -> str:
    """Mask anything that looks like a secret in *text*."""
    result = text
    for pat in _SECRET_PATTERNS:
        result = pat.sub(lambda m: m.group(1) + "***REDACTED***", result)
    return result


def is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def load_config(env_path: str | None = None) -> dict[str, str | None]:
    """Load configuration from .env file and environment variables.

    Returns a dict of the config keys this tool cares about. Variables
    already set in the environment take precedence over the .env file.
    """
    if env_path:
        load_dotenv(env_path)
    else:
        # Walk up to find .env
        cwd = Path.cwd()
        for d in [cwd, *cwd.parents]:
            candidate = d / ".env"
            if candidate.exists():
                load_dotenv(candidate)
                break

    return {
        # Fallback service URL when nothing has been saved with --url
        "OLLAMA_HOST": os.environ.get("OLLAMA_HOST", "http://localhost:11434"),
        # Where --url is persisted (defaults to $XDG_CONFIG_HOME/eo/config.txt)
        "EO_CONFIG_FILE": os.environ.get("EO_CONFIG_FILE"),
        # Color overrides
        "FORCE_COLOR": os.environ.get("FORCE_COLOR"),
        "NO_COLOR": os.environ.get("NO_COLOR"),
        "EO_VERBOSE": os.environ.get("EO_VERBOSE"),
    }
