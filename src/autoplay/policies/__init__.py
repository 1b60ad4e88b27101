"""Scripted policies that play the autoplay environment."""

from src.autoplay.policies.random import policy_random
from src.autoplay.policies.greedy import policy_greedy
from src.autoplay.policies.eps_greedy import policy_eps_greedy

__all__ = ["policy_random", "policy_greedy", "policy_eps_greedy"]
