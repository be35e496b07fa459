import json
import sys

from scripts import evaluate_ai


def test_evaluate_ai_reports_json(monkeypatch, capsys):
    monkeypatch.setattr(
        sys,
        "argv",
        ["evaluate_ai.py", "--episodes", "1", "--max-ply", "60", "--seed", "0"],
    )
    evaluate_ai.main()

    output = json.loads(capsys.readouterr().out)
    assert output["games"] == 1
    assert output["player_a_wins"] + output["player_b_wins"] + output["draws"] == 1
    assert set(output) == {
        "games",
        "player_a_wins",
        "player_b_wins",
        "draws",
        "average_length",
        "player_a_winrate",
        "player_b_winrate",
    }
