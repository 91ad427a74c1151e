"""Turn Stockroom API error bodies into one-line messages for Locust."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Compact error text for failure messages and log lines.

    Request-schema rejections (422) arrive as ``{"detail": [{"loc", "msg"}]}``;
    domain rejections (400/404) as ``{"error": ...}``, where the payload is
    either a string or a ``{field: [messages]}`` mapping.
    """
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:300]

    detail = body.get("detail")
    if isinstance(detail, list):
        parts = []
        for err in detail:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    error = body.get("error", detail)
    if isinstance(error, dict):
        return " | ".join(
            f"{field}: {'; '.join(map(str, msgs)) if isinstance(msgs, list) else msgs}" for field, msgs in error.items()
        )
    if error is not None:
        return str(error)

    return str(body)[:300]
