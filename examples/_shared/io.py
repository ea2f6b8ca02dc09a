"""
Input/Output helpers for examples.
"""
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from histlib.core.utils import serialize_to_json

def ensure_outdir(path: Union[str, Path]) -> Path:
    """Ensure the output directory exists."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p

def write_json(
    data: Any,
    path: Union[str, Path],
    exclude_fields: Optional[Sequence[str]] = None,
) -> Path:
    """Write a result (or any JSON-able payload) to a file."""
    p = Path(path)
    ensure_outdir(p.parent)
    p.write_text(serialize_to_json(data, exclude_fields=exclude_fields, version="1"), encoding="utf-8")
    return p

def print_summary(result: Dict[str, Any]) -> None:
    """
    Print a summary of the example result to stdout.

    Expects result dict to have keys: 'name', 'config', 'metrics', 'artifacts'.
    """
    print("=" * 60)
    print(f"EXAMPLE: {result.get('name', 'Unknown')}")
    print("-" * 60)

    if "config" in result:
        print("Config:")
        for k, v in result["config"].items():
            print(f"  {k}: {v}")

    if "bins" in result and result["bins"]:
        print("-" * 60)
        print("Bins:")
        for line in result["bins"]:
            print(f"  {line}")

    if "metrics" in result and result["metrics"]:
        print("-" * 60)
        print("Metrics:")
        for k, v in result["metrics"].items():
            print(f"  {k}: {v}")

    if "artifacts" in result and result["artifacts"]:
        print("-" * 60)
        print("Artifacts:")
        for k, v in result["artifacts"].items():
            print(f"  {k}: {v}")

    print("=" * 60)

def format_bin(b: Any) -> str:
    """One-line rendering of a HistogramBin."""
    return f"[{b.start:>10.4g}, {b.end:>10.4g})  count={b.count:<10.4g} percent={b.percent:6.2f}%"
