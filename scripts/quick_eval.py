from __future__ import annotations

import argparse
import sys

from boxgame.eval.eval_report import latest_transcript, read_transcript
from boxgame.eval.metrics import box_usage, player_totals, score_share


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--transcript", default="")
    args = ap.parse_args()

    path = args.transcript or latest_transcript("runs")
    if not path:
        print("No transcript found in runs/ (expected runs/transcript*.csv or .parquet)")
        sys.exit(1)

    print(f"\n== Quick Eval ==\nTRANSCRIPT: {path}\n")
    df = read_transcript(path)

    totals = player_totals(df)
    shares = score_share(df)
    print("-- Player totals --")
    for p, v in totals.items():
        print(f"player {p}: {v:g} ({shares[p]:.1%})")
    print()

    print("-- Box usage --")
    print(box_usage(df).round(3).to_string())
    print()
    sys.stdout.flush()


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        import traceback

        print("quick_eval error:", e)
        traceback.print_exc()
        sys.exit(1)
