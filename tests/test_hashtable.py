import io

import pytest

from probetable.hashtable import (
    CAPACITIES,
    DoubleHashProber,
    HashTable,
    LinearProber,
)
from probetable.strhash import StringHash


def _zero_hash(key):
    return 0


def test_linear_sequence_covers_every_slot():
    seq = list(LinearProber().sequence(3, 11, "k"))
    assert seq[0] == 3
    assert sorted(seq) == list(range(11))


def test_double_hash_step_uses_modulus_below_size():
    prober = DoubleHashProber(_zero_hash)
    assert prober.step_for(11, "x") == 7
    assert prober.step_for(23, "x") == 19


def test_double_hash_step_in_range():
    prober = DoubleHashProber(StringHash())
    for key in ("a", "hi7", "zz9"):
        step = prober.step_for(47, key)
        assert 1 <= step <= 43


def test_double_hash_sequence_is_permutation():
    prober = DoubleHashProber(StringHash())
    seq = list(prober.sequence(5, 23, "hello"))
    assert seq[0] == 5
    assert sorted(seq) == list(range(23))


def test_insert_find_and_update():
    ht = HashTable()
    ht.insert("a", 1)
    assert ht.find("a") == ("a", 1)
    ht.insert("a", 5)
    assert ht.at("a") == 5
    assert len(ht) == 1


def test_missing_key():
    ht = HashTable()
    assert ht.find("nope") is None
    assert "nope" not in ht
    with pytest.raises(KeyError):
        ht.at("nope")
    with pytest.raises(KeyError):
        ht["nope"]


def test_mapping_operators():
    ht = HashTable(0.7, DoubleHashProber(StringHash()))
    ht["hi1"] = 1
    ht["hi1"] += 1
    assert ht["hi1"] == 2
    del ht["hi1"]
    assert "hi1" not in ht
    with pytest.raises(KeyError):
        del ht["hi1"]


def test_remove_and_empty():
    ht = HashTable()
    assert ht.empty()
    assert not ht
    ht.insert("x", 1)
    assert ht
    ht.remove("x")
    ht.remove("x")
    assert ht.empty()
    assert ht.find("x") is None


def test_resize_keeps_items():
    ht = HashTable(0.4)
    assert ht.capacity == CAPACITIES[0]
    keys = [f"k{i}" for i in range(30)]
    for i, key in enumerate(keys):
        ht.insert(key, i)
    assert ht.capacity > CAPACITIES[0]
    assert ht.capacity in CAPACITIES
    assert len(ht) == len(keys)
    assert all(ht[key] == i for i, key in enumerate(keys))


def test_full_table_raises():
    ht = HashTable(2.0, hash_func=_zero_hash)
    for i in range(CAPACITIES[0]):
        ht.insert(i, i)
    with pytest.raises(RuntimeError):
        ht.insert("extra", 0)
    ht.remove(0)
    with pytest.raises(RuntimeError):
        ht.insert("extra", 0)
    assert len(ht) == CAPACITIES[0] - 1


def test_collisions_with_linear_probing():
    ht = HashTable(0.9, LinearProber(), _zero_hash)
    for ch in "abcde":
        ht.insert(ch, ch.upper())
    buf = io.StringIO()
    ht.report_all(buf)
    assert buf.getvalue() == "".join(
        f"Bucket {i}: {ch} {ch.upper()}\n" for i, ch in enumerate("abcde")
    )


def test_probe_counter():
    ht = HashTable(hash_func=_zero_hash)
    ht.insert("a", 1)
    assert ht.total_probes > 0
    ht.clear_total_probes()
    assert ht.total_probes == 0
    ht.find("a")
    assert ht.total_probes == 1