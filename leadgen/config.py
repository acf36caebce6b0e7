from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

import yaml

from leadgen.models import EnrichmentOptions, PersonaContext

API_KEY_SERVICES = ("clearbit", "hunter", "builtwith")
ENRICHMENT_FLAGS = ("validate_emails", "enrich_company_data", "find_social_profiles", "get_tech_stack")
PERSONA_FIELDS = ("sender_name", "sender_company", "sender_role", "value_proposition", "industry")
WEIGHT_KEYS = {"company_size", "tech_stack_match", "domain_authority", "social_presence", "market_timing"}


@dataclass
class ApiKeys:
    """Credentials for the enrichment services. Empty means use mock data."""

    clearbit: str = ""
    hunter: str = ""
    builtwith: str = ""

    def get(self, service: str) -> str:
        if service not in API_KEY_SERVICES:
            raise ValueError(f"Unknown enrichment service '{service}'")
        return getattr(self, service) or ""

    def set(self, service: str, key: str) -> None:
        if service not in API_KEY_SERVICES:
            raise ValueError(f"Unknown enrichment service '{service}'")
        setattr(self, service, key or "")

    def any_configured(self) -> bool:
        return any(getattr(self, service) for service in API_KEY_SERVICES)


def _ensure_mapping(config: dict, key: str) -> dict:
    section = config.get(key)
    if section is None:
        section = config[key] = {}
    if not isinstance(section, dict):
        raise ValueError(f"{key} must be a mapping")
    return section


def _ensure_bool(section: dict, key: str, section_name: str) -> None:
    if key in section and not isinstance(section[key], bool):
        raise ValueError(f"Field '{section_name}.{key}' must be a boolean")


def _validate(config: dict) -> None:
    api_keys = _ensure_mapping(config, "api_keys")
    unknown = set(api_keys) - set(API_KEY_SERVICES)
    if unknown:
        raise ValueError(f"api_keys has unknown services: {', '.join(sorted(unknown))}")
    for service, key in api_keys.items():
        if key is not None and not isinstance(key, str):
            raise ValueError(f"api_keys.{service} must be a string")

    enrichment = _ensure_mapping(config, "enrichment")
    for flag in ENRICHMENT_FLAGS:
        _ensure_bool(enrichment, flag, "enrichment")
    if "delay_seconds" in enrichment:
        delay = enrichment["delay_seconds"]
        if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
            raise ValueError("enrichment.delay_seconds must be a non-negative number")

    persona = _ensure_mapping(config, "persona")
    for key, value in persona.items():
        if key not in PERSONA_FIELDS:
            raise ValueError(f"Unknown persona field 'persona.{key}'")
        if value is not None and not isinstance(value, str):
            raise ValueError(f"persona.{key} must be a string")

    scoring = _ensure_mapping(config, "scoring")
    if "weights" in scoring:
        weights = scoring["weights"]
        if not isinstance(weights, dict):
            raise ValueError("scoring.weights must be a mapping")
        if set(weights) != WEIGHT_KEYS:
            raise ValueError(f"scoring.weights must define exactly: {', '.join(sorted(WEIGHT_KEYS))}")
        for name, value in weights.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"scoring.weights.{name} must be a number")
        if not math.isclose(sum(weights.values()), 1.0, abs_tol=1e-9):
            raise ValueError("scoring.weights must sum to 1.0")

    _ensure_mapping(config, "http")
    _ensure_mapping(config, "output")


def _apply_defaults(config: dict) -> dict:
    for service in API_KEY_SERVICES:
        config["api_keys"].setdefault(service, "")
        if config["api_keys"][service] is None:
            config["api_keys"][service] = ""

    enrichment = config["enrichment"]
    for flag in ENRICHMENT_FLAGS:
        enrichment.setdefault(flag, True)
    enrichment.setdefault("delay_seconds", 0.3)

    for key in PERSONA_FIELDS:
        config["persona"].setdefault(key, "")

    config["http"].setdefault("timeout_seconds", 10)
    config["output"].setdefault("dir", "output")
    config["output"].setdefault("webhook_url", "")

    return config


def load_config(path: str = "config/leadgen.yaml") -> dict:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with config_path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}

    if not isinstance(loaded, dict):
        raise ValueError("Top-level config must be a YAML mapping")

    _validate(loaded)
    return _apply_defaults(loaded)


def default_config() -> dict:
    config: dict = {}
    _validate(config)
    return _apply_defaults(config)


def api_keys_from_config(config: dict) -> ApiKeys:
    return ApiKeys(**{service: config["api_keys"].get(service) or "" for service in API_KEY_SERVICES})


def enrichment_options_from_config(config: dict) -> EnrichmentOptions:
    return EnrichmentOptions(**{flag: config["enrichment"][flag] for flag in ENRICHMENT_FLAGS})


def persona_from_config(config: dict) -> PersonaContext:
    return PersonaContext(**{key: config["persona"].get(key) or "" for key in PERSONA_FIELDS})
