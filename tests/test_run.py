# tests/test_run.py
import csv

import pytest

from src.autoplay.env import SnakeEnv
from src.autoplay.run import main, run_episode


def test_unknown_policy_raises():
    with pytest.raises(ValueError):
        run_episode(SnakeEnv(), "telepathy", 0.0)

def test_main_writes_csv(tmp_path, capsys):
    out = main(["--episodes", "3", "--policy", "greedy", "--wrap", "--outdir", str(tmp_path)])
    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["ep", "steps", "return", "score", "reason"]
    assert len(rows) == 4
    assert all(r[4] in {"wall", "self", "full", "limit"} for r in rows[1:])
    assert "[RUN]" in capsys.readouterr().out
