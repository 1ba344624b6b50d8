"""Kubernetes Secret key validation."""

from __future__ import annotations

import re

# https://kubernetes.io/docs/concepts/configuration/secret/#restriction-names-data
_VALID_SECRET_KEY_RE: re.Pattern[str] = re.compile(r"[A-Za-z0-9\-_.]+")


def is_valid_secret_key(key: str) -> bool:
    """Return True if *key* is a valid Kubernetes Secret data key.

    Keys are alphanumerics, ``-``, ``_`` and ``.``; the path components
    ``.`` and ``..`` are rejected.
    """
    if key in (".", ".."):
        return False
    return _VALID_SECRET_KEY_RE.fullmatch(key) is not None
