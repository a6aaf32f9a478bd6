from __future__ import annotations

import json
from pathlib import Path
from typing import List

_URL_KEY = "url"


def _normalize_url(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def parse_text_file(path: Path) -> List[str]:
    urls: List[str] = []
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            urls.append(line)
    return urls


def parse_jsonl(path: Path) -> List[str]:
    urls: List[str] = []
    with path.open("r", encoding="utf-8") as fh:
        for line_num, raw in enumerate(fh, 1):
            raw = raw.strip()
            if not raw:
                continue
            try:
                payload = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise ValueError(
                    f"Invalid JSON on line {line_num}: {exc}"
                ) from exc
            url = _normalize_url(payload.get(_URL_KEY)) if isinstance(payload, dict) else None
            if url is None:
                raise ValueError(f"Record on line {line_num} lacks a url")
            urls.append(url)
    return urls


def validate_urls(urls: List[str]) -> List[str]:
    validated = []
    for url in urls:
        normalized = _normalize_url(url)
        if normalized is None:
            raise ValueError("Each input must be a non-empty URL string.")
        validated.append(normalized)
    return validated
