# src/autoplay/policies/random.py
import numpy as np # type: ignore


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """Uniform pick among the three directions that are not a reversal."""
    return int(env.rng.choice(env.legal_actions()))
