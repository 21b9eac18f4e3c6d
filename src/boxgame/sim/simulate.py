from __future__ import annotations

import argparse
import logging
from pathlib import Path

from boxgame.config import FullConfig, load_config
from boxgame.eval.eval_report import write_report
from boxgame.eval.metrics import transcript_frame
from boxgame.rules.fsm import play_game
from boxgame.state import GameResult

logger = logging.getLogger(__name__)


def format_scores(result: GameResult) -> str:
    return f"Scores: player A {result.score_a:g}, player B {result.score_b:g}"


def save_transcript(result: GameResult, out: str) -> Path:
    path = Path(out)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = transcript_frame(result)
    if path.suffix == ".parquet":
        df.to_parquet(path, index=False)
    else:
        df.to_csv(path, index=False)
    return path


def main(argv=None):
    ap = argparse.ArgumentParser(description="Play one box game and report the scores.")
    ap.add_argument("--tokens", type=int, nargs="*", default=None)
    ap.add_argument("--config", type=str, default=None)
    ap.add_argument("--out", type=str, default=None, help="transcript path (.csv or .parquet)")
    ap.add_argument("--report", type=str, default=None, help="markdown report path")
    ap.add_argument("--log-level", type=str, default=None)
    args = ap.parse_args(argv)

    cfg = load_config(args.config) if args.config else FullConfig()
    level = (args.log_level or cfg.logging.level).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    tokens = args.tokens if args.tokens is not None else cfg.game.tokens
    result = play_game(tokens)
    print(format_scores(result))

    if result.winner is None:
        logger.info("game tied")
    else:
        logger.info("player %s wins", result.winner)

    out = args.out or cfg.output.transcript
    if out:
        path = save_transcript(result, out)
        logger.info("saved transcript %s", path)

    report = args.report or cfg.output.report
    if report:
        write_report(transcript_frame(result), report, plot=cfg.output.plot)
    return result


if __name__ == "__main__":
    main()
