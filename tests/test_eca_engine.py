import numpy as np

from eca import eca_step, normalize_start, rule_number_to_table


def test_rule90_single_cell():
    x = np.array([0, 0, 0, 1, 0, 0, 0], dtype=np.uint8)
    y = eca_step(x, rule_number_to_table(90))
    assert np.array_equal(y, np.array([0, 0, 1, 0, 1, 0, 0], dtype=np.uint8))


def test_rule90_is_xor_of_neighbors():
    tbl = rule_number_to_table(90)
    x = np.array([1, 0, 1, 1, 0, 0, 1, 0, 1, 1], dtype=np.uint8)
    for _ in range(20):
        y = eca_step(x, tbl)
        padded = np.pad(x, 1)
        assert np.array_equal(y, padded[:-2] ^ padded[2:])
        x = y


def test_edges_read_as_zero_not_wrapped():
    # Rule 8 only maps 011 -> 1. With wrap, position 0 would see 111 -> 0.
    x = np.array([1, 1, 1], dtype=np.uint8)
    y = eca_step(x, rule_number_to_table(8))
    assert np.array_equal(y, np.array([1, 0, 0], dtype=np.uint8))

    # Rule 1 maps only 000 -> 1
    y = eca_step(x, rule_number_to_table(1))
    assert np.array_equal(y, np.zeros(3, dtype=np.uint8))
    y2 = eca_step(y, rule_number_to_table(1))
    assert np.array_equal(y2, np.ones(3, dtype=np.uint8))


def test_step_does_not_mutate_input():
    x = np.array([0, 1, 1, 0, 1, 0, 0, 1], dtype=np.uint8)
    before = x.copy()
    y = eca_step(x, rule_number_to_table(110))
    assert np.array_equal(x, before)
    assert y is not x


def test_step_empty_row():
    y = eca_step(np.zeros(0, dtype=np.uint8), rule_number_to_table(255))
    assert y.shape == (0,)


def test_step_truthy_cells():
    a = eca_step(np.array([0, 3, 0, -1, 0]), rule_number_to_table(30))
    b = eca_step(np.array([0, 1, 0, 1, 0]), rule_number_to_table(30))
    assert np.array_equal(a, b)


def test_normalize_start_pad_and_truncate():
    assert normalize_start([1, 0, 1], 5).tolist() == [1, 0, 1, 0, 0]
    assert normalize_start([1, 1, 1, 1, 1, 1], 3).tolist() == [1, 1, 1]
    assert normalize_start([], 4).tolist() == [0, 0, 0, 0]
    assert normalize_start([2, 0], 2).tolist() == [1, 0]
