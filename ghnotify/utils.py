"""the beautiful world start from here."""

from __future__ import annotations

import hashlib
import hmac
import json
from pathlib import Path
from typing import Any

HELP_TEXT = """Render GitHub webhook deliveries as Telegram HTML messages.
- POST the raw GitHub delivery to /wh with its X-GitHub-Event header.
- The response carries the rendered text and the optional button.
- Nothing is forwarded; delivery belongs to the caller.
- Serve with: uvicorn ghnotify.app:app --host 127.0.0.1 --port 8000"""


def gh_verify(secret: str, body: bytes, signature_header: str | None) -> bool:
    """
    Verify GitHub webhook HMAC signature (X-Hub-Signature-256).

    Returns
    -------
    bool
        True if valid, False otherwise.
    """
    if not signature_header or not signature_header.startswith("sha256="):
        return False
    sig = signature_header.split("=", 1)[1]
    mac = hmac.new(secret.encode(), msg=body, digestmod=hashlib.sha256).hexdigest()
    return hmac.compare_digest(mac, sig)


def gh_sign(secret: str, body: bytes) -> str:
    """Return the ``X-Hub-Signature-256`` header value GitHub would send for ``body``."""
    mac = hmac.new(secret.encode(), msg=body, digestmod=hashlib.sha256).hexdigest()
    return f"sha256={mac}"


def load_event_file(path: str | Path) -> dict[str, Any]:
    """
    Read a webhook payload from disk, as written by GitHub Actions at
    ``GITHUB_EVENT_PATH``.

    Raises
    ------
    OSError
        The file cannot be read.
    ValueError
        The file is not a JSON object.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"event payload in {path} is not a JSON object")
    return data
