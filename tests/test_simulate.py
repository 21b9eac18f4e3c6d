import pandas as pd

from boxgame.sim.simulate import format_scores, main
from boxgame.rules.fsm import play_game


def test_format_scores_like_console_output():
    assert format_scores(play_game([1, 1, 2, 3])) == "Scores: player A 13, player B 25"
    assert format_scores(play_game([1, 1, 2, 3, 5, 8, 13, 21])) == "Scores: player A 155, player B 366.25"


def test_cli_tokens_and_transcript(tmp_path, capsys):
    out = tmp_path / "runs" / "t.csv"
    res = main(["--tokens", "1", "1", "2", "3", "--out", str(out)])
    assert res.as_pair() == (13.0, 25.0)
    assert "Scores: player A 13, player B 25" in capsys.readouterr().out
    df = pd.read_csv(out)
    assert df["result"].tolist() == [1.0, 1.0, 12.0, 24.0]
    assert df["player"].tolist() == ["A", "B", "A", "B"]


def test_cli_uses_config_tokens(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("game:\n  tokens: [1, 1, 2, 3, 5, 8, 13, 21]\n")
    res = main(["--config", str(cfg)])
    assert res.as_pair() == (155.0, 366.25)
    assert "player B 366.25" in capsys.readouterr().out


def test_cli_empty_token_list(capsys):
    res = main(["--tokens"])
    assert res.as_pair() == (0.0, 0.0)
    assert "Scores: player A 0, player B 0" in capsys.readouterr().out


def test_cli_report_from_config(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(
        "game:\n  tokens: [1, 1, 2, 3]\n"
        f"output:\n  report: {tmp_path / 'rep.md'}\n  plot: false\n"
    )
    main(["--config", str(cfg)])
    text = (tmp_path / "rep.md").read_text()
    assert "Winner: **B**" in text
    assert not (tmp_path / "rep_scores.png").exists()


def test_cli_parquet_transcript(tmp_path, capsys):
    out = tmp_path / "t.parquet"
    main(["--tokens", "1", "-2", "3", "--out", str(out)])
    df = pd.read_parquet(out)
    assert len(df) == 3
    assert df["player"].tolist() == ["A", "B", "A"]
    assert df["token"].tolist() == [1, -2, 3]
