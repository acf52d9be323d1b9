"""Shared utilities for the engine, API and relay"""

import time
import uuid
from typing import Iterable

import numpy as np


def gen_id(prefix: str = "id") -> str:
    """Generate unique ID"""
    return f"{prefix}_{int(time.time()*1000)}_{uuid.uuid4().hex[:8]}"


def now_ms() -> float:
    """Wall clock in milliseconds"""
    return time.time() * 1000.0


def clip_confidence(value: float) -> float:
    """Clamp a heuristic score into [0, 1] and round for stable output"""
    if value is None or np.isnan(value):
        return 0.0
    return round(float(np.clip(value, 0.0, 1.0)), 4)


def latency_summary(samples: Iterable[float]) -> dict:
    """Mean / p95 / max of latency samples in ms"""
    arr = np.asarray(list(samples), dtype=np.float64)
    if arr.size == 0:
        return {"count": 0, "avg_ms": 0.0, "p95_ms": 0.0, "max_ms": 0.0}
    return {
        "count": int(arr.size),
        "avg_ms": float(np.mean(arr)),
        "p95_ms": float(np.percentile(arr, 95)),
        "max_ms": float(np.max(arr)),
    }


