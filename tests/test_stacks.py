import pytest

from pushswap.stacks import Stacks


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.sa()
    assert s.a == [2, 1, 3]


def test_swap_needs_two_elements():
    s = Stacks([7], [])
    s.sa()
    s.sb()
    assert s.a == [7]
    assert s.b == []


def test_ss_swaps_both():
    s = Stacks([1, 2], [3, 4])
    s.ss()
    assert s.a == [2, 1]
    assert s.b == [4, 3]


def test_pb_and_pa_move_tops():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    assert s.a == [3]
    assert s.b == [2, 1]
    s.pa()
    assert s.a == [2, 3]
    assert s.b == [1]


def test_push_from_empty_is_noop():
    s = Stacks([5], [])
    s.pa()
    assert s.a == [5] and s.b == []
    s = Stacks([], [6])
    s.pb()
    assert s.a == [] and s.b == [6]


def test_ra_moves_top_to_bottom():
    s = Stacks([1, 2, 3])
    s.ra()
    assert s.a == [2, 3, 1]


def test_rra_moves_bottom_to_top():
    s = Stacks([1, 2, 3])
    s.rra()
    assert s.a == [3, 1, 2]


def test_rotations_are_inverse():
    s = Stacks([4, 8, 1, 9], [3, 2, 5])
    s.rr()
    s.rrr()
    assert s.a == [4, 8, 1, 9]
    assert s.b == [3, 2, 5]


def test_rr_and_rrr_act_on_both():
    s = Stacks([1, 2, 3], [4, 5, 6])
    s.rr()
    assert s.a == [2, 3, 1] and s.b == [5, 6, 4]
    s.rrr()
    s.rrr()
    assert s.a == [3, 1, 2] and s.b == [6, 4, 5]


def test_rotate_single_is_noop():
    s = Stacks([1], [2])
    s.ra()
    s.rrb()
    assert s.a == [1] and s.b == [2]


def test_apply_dispatches_by_name():
    s = Stacks([1, 2, 3])
    s.apply("ra")
    s.apply("pb")
    assert s.a == [3, 1]
    assert s.b == [2]


def test_apply_rejects_unknown():
    with pytest.raises(ValueError):
        Stacks([1]).apply("xx")