"""
Example 02: Edge Rules and Out-of-Domain Capture.

Goal:
    Show how closed-left / closed-right change where the domain maximum
    lands, and how enabling underflow/overflow slots keeps values outside
    the domain instead of dropping them.

Usage:
    python examples/basic/02_edge_rules.py
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io
from histlib.core.utils import configure
from histlib.histogram import FixedWidthBinning, compute_histogram

DATA = [-2, 1, 2, 2, 3, 4, 6, 9, 9, 10, 14]

def main(argv=None):
    args = cli.parse_args("Edge Rules", argv)
    if args.log_level:
        configure(log_level=args.log_level)

    runs = {}
    for rule in ("closed-right", "closed-left"):
        for overflow in (False, True):
            hist = compute_histogram(
                DATA,
                domain=(1, 10),
                binning=FixedWidthBinning(3),
                edge_rule=rule,
                overflow=overflow,
            )
            runs[f"{rule}/overflow={overflow}"] = hist

    result = {
        "name": "basic/02_edge_rules",
        "config": {"data": DATA, "domain": (1, 10), "bin_width": 3},
        "bins": [
            f"{label}: {[b.count for b in hist.bins]} (sum percent {sum(b.percent for b in hist.bins):.1f}%)"
            for label, hist in runs.items()
        ],
        "metrics": {},
        "artifacts": {},
    }

    out_path = io.write_json(
        {label: hist for label, hist in runs.items()},
        Path(args.outdir) / "02_edge_rules.json",
    )
    result["artifacts"]["json"] = str(out_path)

    return result

if __name__ == "__main__":
    res = main()
    io.print_summary(res)
