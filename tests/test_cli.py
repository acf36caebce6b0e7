import argparse
from pathlib import Path

import pytest

from leadgen.cli import cmd_email, cmd_score

CONFIG_PATH = str(Path(__file__).resolve().parents[1] / "config" / "leadgen.yaml")


@pytest.mark.parametrize("command", [cmd_score, cmd_email])
def test_unknown_lead_id_prints_error(command, capsys) -> None:
    args = argparse.Namespace(config=CONFIG_PATH, lead_id="99", template_type=None, tone="professional")

    assert command(args) == 1
    assert "No lead with id '99'" in capsys.readouterr().out


def test_score_known_lead(capsys) -> None:
    args = argparse.Namespace(config=CONFIG_PATH, lead_id="1")

    assert cmd_score(args) == 0
    assert "company size" in capsys.readouterr().out
