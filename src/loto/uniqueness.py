from __future__ import annotations

import hashlib
import json
from typing import Iterable, Optional, Sequence


def matrix_hash(matrix: Sequence[Sequence[Optional[int]]]) -> str:
    # blanks serialize as null so layout, not just values, feeds the digest
    payload = json.dumps(matrix, ensure_ascii=True, separators=(",", ":"))
    return "sha256:" + hashlib.sha256(payload.encode("utf-8")).hexdigest()


def cards_hash(matrices: Iterable[Sequence[Sequence[Optional[int]]]]) -> str:
    hashes = [matrix_hash(m) for m in matrices]
    payload = json.dumps(hashes, ensure_ascii=True, separators=(",", ":"))
    return "sha256:" + hashlib.sha256(payload.encode("utf-8")).hexdigest()
