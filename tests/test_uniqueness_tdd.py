from __future__ import annotations

from loto.uniqueness import cards_hash, matrix_hash


def test_hashes_stable_and_distinct():
    a = [[1, None], [None, 4]]
    b = [[None, 1], [None, 4]]
    h_a = matrix_hash(a)
    assert h_a.startswith("sha256:")
    assert h_a == matrix_hash([[1, None], [None, 4]])
    assert h_a == matrix_hash(((1, None), (None, 4)))
    assert h_a != matrix_hash(b)
    agg = cards_hash([a, b])
    assert agg.startswith("sha256:")
    assert agg != cards_hash([b, a])
