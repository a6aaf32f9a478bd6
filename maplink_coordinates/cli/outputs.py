from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, TextIO

from maplink_coordinates.types import LocateResult


def format_result(result: LocateResult) -> str:
    return json.dumps(result.to_record(), ensure_ascii=False)


def write_results(results: Iterable[LocateResult], stream: TextIO) -> int:
    count = 0
    for result in results:
        stream.write(format_result(result) + "\n")
        count += 1
    return count


def write_results_file(results: Iterable[LocateResult], target: Path) -> Path:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as fh:
        write_results(results, fh)
    return target


def summarize(results: Iterable[LocateResult]) -> dict[str, int]:
    stats = {"located": 0, "missing": 0}
    for result in results:
        stats["located" if result.located else "missing"] += 1
    return stats
