from __future__ import annotations

from typing import Any, Optional
from urllib.parse import urlparse

from jobboard.core.auth.passwords import MAX_PASSWORD_BYTES


def check_url(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    parsed = urlparse(v)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be an http(s) URL")
    return v


def check_password(v: Optional[str]) -> Optional[str]:
    # bcrypt only looks at the first 72 bytes
    if v is not None and len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes in UTF-8")
    return v


def reject_null(v: Any) -> Any:
    """Optional only so the field may be left out; the column is NOT NULL."""
    if v is None:
        raise ValueError("may not be null")
    return v
