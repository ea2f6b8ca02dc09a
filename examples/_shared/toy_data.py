"""
Toy data generation helpers for examples.
"""
from typing import Any, Dict, List, Optional
import numpy as np

def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Create a fresh numpy Generator from a seed."""
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(seed)

def build_numerical_dataset(
    n: int,
    loc: float = 0.0,
    scale: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Generate normally distributed values.

    Args:
        n: Number of samples.
        loc: Mean of the distribution.
        scale: Standard deviation.
        rng: Random number generator.

    Returns:
        Numpy array.
    """
    if rng is None:
        rng = np.random.default_rng()
    return rng.normal(loc, scale, size=n)

def build_request_log(
    n: int,
    rng: Optional[np.random.Generator] = None,
    missing_rate: float = 0.05,
) -> List[Dict[str, Any]]:
    """
    Generate request records with a latency field and a hit-count weight.

    A fraction of records carries a missing latency and some carry zero
    hits, so the extraction step has something to drop.
    """
    if rng is None:
        rng = np.random.default_rng()

    latencies = rng.lognormal(mean=3.0, sigma=0.6, size=n)
    hits = rng.integers(0, 5, size=n)
    missing = rng.random(n) < missing_rate
    records = []
    for i in range(n):
        records.append({
            "route": f"/api/{i % 7}",
            "latency_ms": None if missing[i] else float(latencies[i]),
            "hits": int(hits[i]),
        })
    return records
