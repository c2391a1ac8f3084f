from typing import Any, Iterable
from urllib.parse import urlencode

def qs(params: dict[str, Any] | Iterable[tuple[str, Any]]) -> str:
    """Form-encode params in insertion order, skipping None and empty values."""
    items = params.items() if isinstance(params, dict) else params
    clean = []
    for k, v in items:
        if v is None or v == "":
            continue
        if isinstance(v, list) and len(v) == 0:
            continue
        if isinstance(v, bool):
            v = "true" if v else "false"
        clean.append((k, v))
    return urlencode(clean, doseq=True)

def join_url(base: str, path: str, query: str) -> str:
    base = (base or "").rstrip("/")
    path = path if path.startswith("/") else f"/{path}"
    return f"{base}{path}?{query}" if query else f"{base}{path}"
