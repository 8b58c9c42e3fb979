import itertools

import pytest

from knightsquest.rng import TABLE_SIZE, RandomTable


def test_default_table_is_zero():
    table = RandomTable()
    assert [table.next() for _ in range(TABLE_SIZE)] == [0] * TABLE_SIZE


def test_values_in_order_and_wrap():
    values = list(range(TABLE_SIZE))
    table = RandomTable(values)
    drawn = [table.next() for _ in range(TABLE_SIZE + 3)]
    assert drawn[:TABLE_SIZE] == values
    assert drawn[TABLE_SIZE:] == values[:3]


def test_seeded_calls_source_per_entry():
    counter = itertools.count(250)
    table = RandomTable.seeded(lambda: next(counter))
    assert len(table.values) == TABLE_SIZE
    assert table.next() == 250
    assert all(0 <= v <= 0xFF for v in table.values)
    assert table.values[6] == 0


def test_wrong_size_rejected():
    with pytest.raises(ValueError):
        RandomTable([1, 2, 3])


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        RandomTable([256] * TABLE_SIZE)