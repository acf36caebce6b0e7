from pathlib import Path

import pytest

from leadgen.config import (
    ApiKeys,
    api_keys_from_config,
    default_config,
    enrichment_options_from_config,
    load_config,
    persona_from_config,
)


def test_load_config_valid(tmp_path: Path) -> None:
    cfg_path = tmp_path / "leadgen.yaml"
    cfg_path.write_text(
        """
api_keys:
  clearbit: "cb-123"
  hunter: ""
enrichment:
  validate_emails: false
  delay_seconds: 0
persona:
  sender_name: Alex Morgan
  sender_company: Caprae Capital
  sender_role: Partner
  value_proposition: grow revenue
scoring:
  weights:
    company_size: 0.4
    tech_stack_match: 0.15
    domain_authority: 0.15
    social_presence: 0.1
    market_timing: 0.2
""",
        encoding="utf-8",
    )

    config = load_config(str(cfg_path))

    assert api_keys_from_config(config) == ApiKeys(clearbit="cb-123", hunter="", builtwith="")
    options = enrichment_options_from_config(config)
    assert options.validate_emails is False
    assert options.get_tech_stack is True
    assert config["enrichment"]["delay_seconds"] == 0
    persona = persona_from_config(config)
    assert persona.sender_name == "Alex Morgan"
    assert persona.industry == ""
    assert config["http"]["timeout_seconds"] == 10
    assert config["output"]["dir"] == "output"


@pytest.mark.parametrize("bad_value", ["'0.25'", "null", "true"])
def test_load_config_rejects_non_numeric_weights(tmp_path: Path, bad_value: str) -> None:
    cfg_path = tmp_path / "weights.yaml"
    cfg_path.write_text(
        "scoring:\n"
        "  weights:\n"
        f"    company_size: {bad_value}\n"
        "    tech_stack_match: 0.20\n"
        "    domain_authority: 0.20\n"
        "    social_presence: 0.15\n"
        "    market_timing: 0.20\n",
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="scoring.weights.company_size must be a number"):
        load_config(str(cfg_path))


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


@pytest.mark.parametrize(
    "body",
    [
        "- just\n- a list\n",
        "api_keys: [clearbit]\n",
        "api_keys:\n  zoominfo: abc\n",
        "enrichment:\n  validate_emails: 'yes'\n",
        "enrichment:\n  delay_seconds: -1\n",
        "persona:\n  nickname: Al\n",
        "scoring:\n  weights:\n    company_size: 1.0\n",
        (
            "scoring:\n  weights:\n    company_size: 0.5\n    tech_stack_match: 0.5\n"
            "    domain_authority: 0.5\n    social_presence: 0.0\n    market_timing: 0.0\n"
        ),
    ],
)
def test_load_config_invalid(tmp_path: Path, body: str) -> None:
    cfg_path = tmp_path / "bad.yaml"
    cfg_path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(cfg_path))


def test_empty_file_gets_defaults(tmp_path: Path) -> None:
    cfg_path = tmp_path / "empty.yaml"
    cfg_path.write_text("", encoding="utf-8")

    assert load_config(str(cfg_path)) == default_config()


def test_api_keys_set_and_get() -> None:
    keys = ApiKeys()
    assert not keys.any_configured()
    keys.set("hunter", "h-1")
    assert keys.get("hunter") == "h-1"
    assert keys.any_configured()
    with pytest.raises(ValueError):
        keys.get("zoominfo")


def test_bundled_config_loads() -> None:
    config = load_config(str(Path(__file__).resolve().parents[1] / "config" / "leadgen.yaml"))
    assert persona_from_config(config).missing_fields() == []
