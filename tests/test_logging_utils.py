import json
from pathlib import Path

import numpy as np

from spgram import JsonlLogger, log_steps_jsonl


def test_jsonl_logger_converts_numpy_values(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "run.jsonl"
    logger = JsonlLogger(path)
    logger.write(
        {
            "chunk": np.int64(3),
            "peak_db": np.float64(-12.5),
            "floor_db": -np.inf,
            "bins": np.array([1, 2]),
        }
    )

    rows = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert rows == [{"chunk": 3, "peak_db": -12.5, "floor_db": None, "bins": [1, 2]}]


def test_log_steps_jsonl_appends_each_step(tmp_path: Path) -> None:
    path = tmp_path / "steps.jsonl"
    log_steps_jsonl(path, [{"step": 0}, {"step": 1}])
    log_steps_jsonl(path, [{"step": 2}])
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["step"] for line in lines] == [0, 1, 2]
