# src/autoplay/policies/greedy.py
import numpy as np # type: ignore
from src.gridsnake.config import UP, DOWN, LEFT, RIGHT, Mode
from src.autoplay.env import ACTIONS, left_of, right_of


def _axis_step(h: int, f: int, n: int, wrap: bool) -> int:
    """-1, 0 or +1: which way along one axis gets closer to the food."""
    if h == f:
        return 0
    ahead = 1 if f > h else -1
    if wrap and abs(f - h) > n // 2:
        return -ahead
    return ahead


def best_move_toward_food(hx: int, hy: int, fx: int, fy: int, n: int, wrap: bool = False):
    """
    Returns a preference ordering of moves, those that shorten the distance to food first.
    Does NOT check collisions; caller should filter unsafe moves.
    """
    prefs = []
    sx = _axis_step(hx, fx, n, wrap)
    sy = _axis_step(hy, fy, n, wrap)
    if sx:
        prefs.append(RIGHT if sx > 0 else LEFT)
    if sy:
        prefs.append(DOWN if sy > 0 else UP)
    # Remaining directions go last so the caller still has options when the
    # preferred axis is blocked.
    for d in (UP, DOWN, LEFT, RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def dir_to_action(direction) -> int:
    """Map (dx, dy) to the env action id."""
    for a, d in ACTIONS.items():
        if d == direction:
            return a
    raise ValueError(f"Not a grid direction: {direction}")


def decode_obs(obs: np.ndarray):
    """
    Matches env.observe() layout (9 dims):
    [hx_n, hy_n, fx_n, fy_n, dx, dy, danger_ahead, danger_left, danger_right]
    """
    hx_n, hy_n, fx_n, fy_n, dx, dy, dan_f, dan_l, dan_r = obs.tolist()
    return hx_n, hy_n, fx_n, fy_n, int(dx), int(dy), bool(dan_f), bool(dan_l), bool(dan_r)


def policy_greedy(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Greedy on food distance with simple safety:
    - walk the preference order, food-ward moves first, and take the first safe one
    - if every move looks dangerous, fall back to random
    """
    hx_n, hy_n, fx_n, fy_n, dx, dy, dan_f, dan_l, dan_r = decode_obs(obs)

    n = env.engine.grid.size
    wrap = env.engine.mode == Mode.TOROIDAL
    hx = int(round(hx_n * (n - 1)))
    hy = int(round(hy_n * (n - 1)))
    fx = int(round(fx_n * (n - 1)))
    fy = int(round(fy_n * (n - 1)))

    forward = (dx, dy)
    danger_map = {
        dir_to_action(forward): dan_f,
        dir_to_action(left_of(forward)): dan_l,
        dir_to_action(right_of(forward)): dan_r,
    }
    # The fourth action is a reversal, which the engine ignores; never pick it on purpose.
    all_actions = list(range(env.action_space_n))
    for a in all_actions:
        danger_map.setdefault(a, True)

    prefs = best_move_toward_food(hx, hy, fx, fy, n, wrap)
    pref_actions = [dir_to_action(d) for d in prefs]

    # 1) try safe preferred actions in order
    for a in pref_actions:
        if not danger_map[a]:
            return a

    # 2) boxed in: any legal action, the episode ends next step anyway
    return int(env.rng.choice(env.legal_actions()))
