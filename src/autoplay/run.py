# src/autoplay/run.py
from __future__ import annotations
import argparse
import csv
import os
from dataclasses import replace
from typing import Tuple

from src.gridsnake.config import CFG, Mode
from src.autoplay.env import SnakeEnv
from src.autoplay.policies import policy_random, policy_greedy, policy_eps_greedy

MAX_STEPS = 10_000


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: SnakeEnv, policy: str, epsilon: float, render: bool = False) -> Tuple[int, float, int, str]:
    """
    Play one game with a scripted policy:
    - random
    - greedy
    - eps-greedy

    Returns:
        steps: number of ticks played
        total: total return (sum of rewards)
        score: final game score
        reason: why the game ended ("wall", "self", "full" or "limit")
    """
    obs = env.reset()
    total = 0.0
    steps = 0

    while True:
        if policy == "random":
            a = policy_random(obs, env)
        elif policy == "greedy":
            a = policy_greedy(obs, env)
        elif policy in ("eps-greedy", "epsilon-greedy"):
            a = policy_eps_greedy(obs, env, epsilon)
        else:
            raise ValueError(f"Unknown policy: {policy}")

        obs, r, done, info = env.step(a)
        total += r
        steps += 1
        if render:
            env.render()

        if done:
            return steps, total, info["score"], info["reason"]
        if steps >= MAX_STEPS:
            return steps, total, info["score"], "limit"


# --------------------------
# Main
# --------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Let a scripted policy play snake headless.")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument(
        "--policy",
        type=str,
        default="greedy",
        choices=["random", "greedy", "eps-greedy"],
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy",
    )
    parser.add_argument("--wrap", action="store_true", help="play in wall pass (toroidal) mode")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV is saved here",
    )
    parser.add_argument("--render", action="store_true", help="watch the games in a window")
    args = parser.parse_args(argv)

    os.makedirs(args.outdir, exist_ok=True)
    mode = Mode.TOROIDAL if args.wrap else Mode.BOUNDED
    out_csv = os.path.join(args.outdir, f"autoplay_{args.policy}_{mode.value}.csv")

    env = SnakeEnv(cfg=replace(CFG, mode=mode, seed=args.seed), render_enabled=args.render)

    print(
        f"[RUN] {args.episodes} episode(s) with "
        f"policy={args.policy} ε={args.epsilon} mode={mode.value}"
    )
    print("ep,steps,return,score,reason")

    rows = [("ep", "steps", "return", "score", "reason")]
    for ep in range(1, args.episodes + 1):
        steps, ret, score, reason = run_episode(env, args.policy, args.epsilon, args.render)
        print(f"{ep},{steps},{ret:.3f},{score},{reason}")
        rows.append((ep, steps, float(f"{ret:.6f}"), score, reason))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    print(f"\n[RUN] best score {env.high_scores.read()}, saved results → {out_csv}")
    env.close()
    return out_csv


if __name__ == "__main__":
    main()
