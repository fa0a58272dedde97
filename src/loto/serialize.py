from __future__ import annotations

import json
import platform
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .layout import Card
from .uniqueness import cards_hash, matrix_hash


def ensure_parent(path: Path, *, mkdirs: bool) -> None:
    parent = path.parent
    if not parent.exists() and mkdirs:
        parent.mkdir(parents=True, exist_ok=True)


def write_json(path: Path, data: object, *, mkdirs: bool, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise FileExistsError(
            f"Refusing to overwrite existing file without --force: {path}"
        )
    ensure_parent(path, mkdirs=mkdirs)
    text = json.dumps(data, ensure_ascii=True, sort_keys=True, indent=2)
    path.write_text(text + "\n", encoding="utf-8")


def build_run_meta(
    *,
    app_version: str,
    params_hash: str,
    seed: Optional[int],
) -> Dict[str, object]:
    return {
        "app_version": app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python_version": sys.version.split()[0],
        "platform": platform.system().lower(),
        "params_hash": params_hash,
        "seed": seed,
        "rng_engine": "system" if seed is None else "lcg",
        "hash_algorithm": "sha256",
    }


def emit_cards_json(
    path: Path,
    *,
    cards: Sequence[Card],
    run_meta: Dict[str, object],
    mkdirs: bool,
    overwrite: bool,
) -> None:
    entries: List[Dict[str, object]] = []
    for idx, matrix in enumerate(cards, start=1):
        entries.append(
            {"id": str(idx), "matrix": matrix, "matrix_hash": matrix_hash(matrix)}
        )
    data = {
        "run_meta": run_meta,
        "cards": entries,
        "cards_hash": cards_hash(cards),
    }
    write_json(path, data, mkdirs=mkdirs, overwrite=overwrite)


def emit_report_json(
    path: Path, *, report: Dict[str, object], mkdirs: bool, overwrite: bool
) -> None:
    write_json(path, report, mkdirs=mkdirs, overwrite=overwrite)


def load_cards_json(path: Path) -> List[Any]:
    """Read the matrices back from a cards.json file.

    Accepts the ``{"cards": [{"matrix": ...}]}`` layout written by
    ``emit_cards_json`` as well as a bare list of matrices.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("cards", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of cards")
    return [entry["matrix"] if isinstance(entry, dict) else entry for entry in data]
