import numpy as np
import pytest

from montyhall.doors import DoorSet
from montyhall.errors import InvalidArgument
from montyhall.state import DoorState


def test_new_door_set_is_closed_and_uniform():
    doors = DoorSet(4, prize_door=2)
    assert doors.number_of_doors() == 4
    assert doors.prize_door_id() == 2
    assert doors.selection() is None
    assert not any(doors.is_open(d) for d in range(1, 5))
    np.testing.assert_allclose(doors.all_probabilities(), np.full(4, 0.25))


@pytest.mark.parametrize("n_doors", [1, 0, -3])
def test_fewer_than_two_doors(n_doors):
    with pytest.raises(InvalidArgument):
        DoorSet(n_doors)


@pytest.mark.parametrize("prize", [None, 0, 6, -1, 2.5, 3.0, True])
def test_missing_or_invalid_prize_is_random(prize):
    rng = np.random.default_rng(3)
    placed = {DoorSet(5, prize, rng=rng).prize_door_id() for _ in range(200)}
    assert placed == {1, 2, 3, 4, 5}


def test_seeded_prize_placement_is_reproducible():
    first = DoorSet(10, rng=np.random.default_rng(42)).prize_door_id()
    second = DoorSet(10, rng=np.random.default_rng(42)).prize_door_id()
    assert first == second


def test_open_empty_door_redistributes():
    doors = DoorSet(3, prize_door=1)
    doors.open(3)
    assert doors.is_open(3)
    np.testing.assert_allclose(doors.all_probabilities(), [0.5, 0.5, 0.0])
    assert not doors.has_won(3)


def test_open_prize_door_collapses():
    doors = DoorSet(3, prize_door=2)
    doors.open(2)
    np.testing.assert_array_equal(doors.all_probabilities(), [0.0, 1.0, 0.0])
    assert doors.has_won(2)


def test_open_twice_is_noop():
    doors = DoorSet(4, prize_door=1)
    doors.open(4)
    before = doors.all_probabilities()
    doors.open(4)
    np.testing.assert_array_equal(doors.all_probabilities(), before)


@pytest.mark.parametrize("door", [0, 4, -1, 1.5, 2.7, True])
def test_door_id_out_of_range(door):
    doors = DoorSet(3, prize_door=1)
    for call in (doors.open, doors.is_open, doors.probability_of, doors.select):
        with pytest.raises(InvalidArgument):
            call(door)


def test_has_won_requires_open_prize_door():
    doors = DoorSet(3, prize_door=3)
    assert not doors.has_won(3)
    doors.open(3)
    assert doors.has_won(3)
    assert not doors.has_won(1)


def test_all_probabilities_is_a_copy():
    doors = DoorSet(3, prize_door=1)
    probs = doors.all_probabilities()
    probs[:] = 0.0
    assert doors.probability_of(1) == pytest.approx(1 / 3)


def test_selection_does_not_touch_probabilities():
    doors = DoorSet(3, prize_door=1)
    doors.select(2)
    assert doors.selection() == 2
    np.testing.assert_allclose(doors.all_probabilities(), np.full(3, 1 / 3))
    doors.clear_selection()
    assert doors.selection() is None


def test_reset_all_keeps_prize():
    doors = DoorSet(5, prize_door=4)
    doors.open(1)
    doors.open(4)
    doors.reset_all()
    assert doors.closed_doors() == [1, 2, 3, 4, 5]
    np.testing.assert_allclose(doors.all_probabilities(), np.full(5, 0.2))
    assert doors.prize_door_id() == 4


def test_states_view():
    doors = DoorSet(4, prize_door=2)
    doors.select(1)
    doors.open(3)
    assert doors.states().tolist() == [DoorState.CHOSEN, DoorState.CLOSED, DoorState.EMPTY, DoorState.CLOSED]
    doors.open(2)
    assert doors.states().tolist() == [DoorState.CHOSEN, DoorState.PRIZE, DoorState.EMPTY, DoorState.CLOSED]
    assert doors.closed_doors() == [1, 4]


def test_numpy_integer_door_ids_are_accepted():
    doors = DoorSet(4, prize_door=np.int64(3))
    assert doors.prize_door_id() == 3
    doors.open(np.int64(1))
    assert doors.is_open(1)
