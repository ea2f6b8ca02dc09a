"""
Example 00: Histogram Quickstart.

Goal:
    Compute an auto-binned histogram over plain numbers and inspect the
    summary statistics and warnings.

Usage:
    python examples/basic/00_quickstart.py --seed 123 --quick
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io, toy_data
from histlib.core.utils import configure
from histlib.histogram import compute_histogram

def main(argv=None):
    args = cli.parse_args("Histogram Quickstart", argv)
    if args.log_level:
        configure(log_level=args.log_level)
    generator = toy_data.make_rng(args.seed)

    n = 200 if args.quick else 5000
    data = toy_data.build_numerical_dataset(n, loc=10.0, scale=2.5, rng=generator)

    # 1. 默认 auto(fd) 分箱
    hist = compute_histogram(data)

    # 2. 同一数据改用 sturges
    sturges = compute_histogram(data, binning="sturges")

    result = {
        "name": "basic/00_quickstart",
        "config": {
            "seed": args.seed,
            "n": n,
        },
        "bins": [io.format_bin(b) for b in hist.bins],
        "metrics": {
            "fd_bins": len(hist.bins),
            "fd_bin_width": hist.bin_width,
            "sturges_bins": len(sturges.bins),
            "mean": hist.stats.mean,
            "sd": hist.stats.sd,
            "iqr": hist.stats.iqr,
            "warnings": list(hist.warnings),
        },
        "artifacts": {},
    }

    out_path = io.write_json(hist, Path(args.outdir) / "00_quickstart.json", exclude_fields=["items"])
    result["artifacts"]["json"] = str(out_path)

    return result

if __name__ == "__main__":
    res = main()
    io.print_summary(res)
