# tests/test_env.py
from dataclasses import replace

import numpy as np
import pytest

from src.gridsnake.config import CFG, DOWN, LEFT, RIGHT, UP, GameStatus, Mode
from src.autoplay.env import ACTIONS, SnakeEnv, left_of, observe, right_of
from src.autoplay.policies import policy_eps_greedy, policy_greedy, policy_random


def _env(mode=Mode.BOUNDED, seed=3, **kwargs):
    return SnakeEnv(cfg=replace(CFG, mode=mode, seed=seed), **kwargs)

def test_turns_on_screen_axes():
    assert left_of(RIGHT) == UP
    assert right_of(RIGHT) == DOWN
    assert left_of(UP) == LEFT
    assert right_of(UP) == RIGHT

def test_reset_and_observation_layout():
    env = _env()
    obs = env.reset()
    assert obs.shape == env.observation_space_shape == (9,)
    assert obs.dtype == np.float32
    hx, hy = env.engine.head
    assert obs[0] == pytest.approx(hx / 19)
    assert obs[1] == pytest.approx(hy / 19)
    assert tuple(obs[4:6]) == (1.0, 0.0)
    assert env.engine.status == GameStatus.PLAYING

def test_danger_flags_at_the_wall():
    env = SnakeEnv(cfg=replace(CFG, start=(19, 0), idle_food=(0, 19), seed=1))
    env.reset()
    obs = observe(env.engine)
    # facing right in the top-right corner: ahead and left are walls
    assert obs[6] == 1.0 and obs[7] == 1.0 and obs[8] == 0.0

    wrapped = SnakeEnv(cfg=replace(CFG, start=(19, 0), mode=Mode.TOROIDAL, seed=1))
    wrapped.reset()
    assert observe(wrapped.engine)[6:].tolist() == [0.0, 0.0, 0.0]

def test_step_before_reset_fails():
    env = _env()
    with pytest.raises(AssertionError):
        env.step(0)

def test_invalid_action_fails():
    env = _env()
    env.reset()
    with pytest.raises(AssertionError):
        env.step(9)

def test_death_reward_and_info():
    env = SnakeEnv(cfg=replace(CFG, start=(19, 10), seed=1))
    env.reset()
    obs, reward, done, info = env.step(3)
    assert done
    assert reward == env.death_reward
    assert info == {"reason": "wall", "score": 0}

def test_reversal_action_keeps_heading():
    env = _env()
    env.reset()
    head = env.engine.head
    env.step(2)  # LEFT while heading RIGHT
    assert env.engine.direction == RIGHT
    assert env.engine.head == (head[0] + 1, head[1])

@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("policy", ["random", "greedy", "eps-greedy"])
def test_policies_play_without_breaking_invariants(mode, policy):
    env = _env(mode=mode, seed=11)
    n = env.engine.grid.size
    snaps = []
    env.engine.subscribe(snaps.append)

    for _ in range(3):
        obs = env.reset()
        for _ in range(400):
            if policy == "random":
                a = policy_random(obs, env)
            elif policy == "greedy":
                a = policy_greedy(obs, env)
            else:
                a = policy_eps_greedy(obs, env, 0.2)
            obs, _, done, _ = env.step(a)
            if done:
                break

    assert snaps
    for s in snaps:
        assert len(set(s.snake)) == len(s.snake)
        assert all(0 <= x < n and 0 <= y < n for x, y in s.snake)
        if s.status == GameStatus.PLAYING:
            assert s.food not in s.snake
        assert s.score == 10 * (len(s.snake) - 1)
        assert s.speed_ms == max(80, 200 - 2 * (len(s.snake) - 1))

def test_greedy_eats_food():
    env = _env(seed=5)
    obs = env.reset()
    for _ in range(200):
        obs, _, done, _ = env.step(policy_greedy(obs, env))
        if done:
            break
    assert env.engine.score > 0

def test_actions_cover_four_directions():
    assert set(ACTIONS.values()) == {UP, DOWN, LEFT, RIGHT}

def test_legal_actions_exclude_reversal():
    env = _env()
    env.reset()
    assert env.legal_actions() == [0, 1, 3]  # no LEFT while heading RIGHT
    env.step(0)
    assert env.legal_actions() == [0, 2, 3]  # no DOWN while heading UP

def test_random_policy_never_reverses():
    env = _env(mode=Mode.TOROIDAL, seed=8)
    obs = env.reset()
    for _ in range(300):
        a = policy_random(obs, env)
        dx, dy = env.engine.direction
        assert ACTIONS[a] != (-dx, -dy)
        obs, _, done, _ = env.step(a)
        if done:
            obs = env.reset()

def test_seeded_env_replays_same_game():
    def play(seed):
        env = _env(seed=seed)
        obs = env.reset()
        actions = []
        for _ in range(150):
            a = policy_eps_greedy(obs, env, 0.5)
            actions.append(a)
            obs, _, done, _ = env.step(a)
            if done:
                break
        return actions, env.engine.snake

    assert play(21) == play(21)

def test_eps_greedy_rejects_bad_epsilon():
    env = _env()
    obs = env.reset()
    with pytest.raises(ValueError):
        policy_eps_greedy(obs, env, 1.5)
