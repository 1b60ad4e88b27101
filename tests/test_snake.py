# tests/test_snake.py
from src.gridsnake.config import UP, DOWN, LEFT, RIGHT
from src.gridsnake.snake import SnakeState, is_opposite


def test_spawn_single_cell():
    s = SnakeState.spawn((10, 10), RIGHT)
    assert len(s) == 1
    assert s.head == s.tail == (10, 10)
    assert s.direction == s.pending == RIGHT

def test_advance_moves_or_grows():
    s = SnakeState(body=[(3, 3), (2, 3)], direction=RIGHT, pending=RIGHT)
    s.advance((4, 3), grow=False)
    assert s.body == [(4, 3), (3, 3)]
    s.advance((5, 3), grow=True)
    assert s.body == [(5, 3), (4, 3), (3, 3)]
    assert (4, 3) in s

def test_steer_rejects_reversal_of_applied_direction():
    s = SnakeState.spawn((10, 10), RIGHT)
    assert not s.steer(LEFT)
    assert s.steer(UP)
    # LEFT is still a reversal of what was applied, even with UP pending
    assert not s.steer(LEFT)
    assert s.pending == UP
    assert s.steer(DOWN)
    assert s.pending == DOWN

def test_next_head_uses_pending():
    s = SnakeState.spawn((10, 10), RIGHT)
    s.steer(DOWN)
    assert s.next_head() == (10, 11)
    s.advance(s.next_head(), grow=False)
    assert s.direction == DOWN

def test_is_opposite():
    assert is_opposite(UP, DOWN)
    assert is_opposite(LEFT, RIGHT)
    assert not is_opposite(UP, LEFT)
