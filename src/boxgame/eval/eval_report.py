from __future__ import annotations
import argparse
import glob
import logging
from pathlib import Path
import pandas as pd
import matplotlib.pyplot as plt

from boxgame.eval.metrics import box_usage, check_columns, cumulative_scores, player_totals, score_share

logger = logging.getLogger(__name__)

def latest_transcript(run_dir: str = "runs") -> str:
    """Newest-named transcript*.csv / transcript*.parquet in run_dir, or ""."""
    found = sorted(glob.glob(f"{run_dir}/transcript*.csv") + glob.glob(f"{run_dir}/transcript*.parquet"))
    return found[-1] if found else ""

def read_transcript(path: str) -> pd.DataFrame:
    df = pd.read_parquet(path) if str(path).endswith(".parquet") else pd.read_csv(path)
    check_columns(df)
    return df

def plot_cumulative(df: pd.DataFrame, out_png: Path) -> None:
    cum = cumulative_scores(df)
    plt.figure(figsize=(6,4))
    for p in cum.columns:
        plt.step(cum.index, cum[p], where="post", label=f"player {p}")
    plt.xlabel("turn"); plt.ylabel("score"); plt.title("Cumulative score"); plt.legend()
    plt.tight_layout(); plt.savefig(out_png); plt.close()

def write_report(df: pd.DataFrame, out: str, plot: bool = True, source: str = "") -> Path:
    check_columns(df)
    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    totals = player_totals(df)
    shares = score_share(df)
    usage = box_usage(df)
    a, b = float(totals["A"]), float(totals["B"])
    winner = "A" if a > b else ("B" if b > a else "tie")

    plot_png = out_path.parent / (out_path.stem + "_scores.png")
    plotted = False
    if plot and len(df) > 0:
        plot_cumulative(df, plot_png)
        plotted = True

    with open(out_path, "w") as f:
        f.write("# Box Game Report\n\n")
        if source:
            f.write(f"- Transcript: `{source}`\n")
        f.write(f"- Turns: **{len(df)}**\n")
        f.write(f"- Final scores: A = **{a:g}**, B = **{b:g}**\n")
        f.write(f"- Winner: **{winner}**\n\n")

        f.write("## Players\n\n")
        tbl = pd.DataFrame({"score": totals, "share": pd.Series(shares)}).round(3)
        f.write(tbl.to_string() + "\n\n")

        f.write("## Boxes\n\n")
        f.write(usage.round(3).to_string() + "\n\n")

        if plotted:
            f.write("## Cumulative score\n\n")
            f.write(f"![Cumulative score]({plot_png.name})\n")
    logger.info("wrote report %s", out_path)
    return out_path

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument('--transcript', required=True)
    ap.add_argument('--out', default='runs/report.md')
    ap.add_argument('--no-plot', action='store_true')
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    df = read_transcript(args.transcript)
    write_report(df, args.out, plot=not args.no_plot, source=args.transcript)
    print("Wrote", args.out)

if __name__ == "__main__":
    main()
