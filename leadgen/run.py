from __future__ import annotations

import logging

from rich.progress import Progress, SpinnerColumn, TextColumn

from leadgen.config import api_keys_from_config, default_config, enrichment_options_from_config, load_config
from leadgen.enricher import Enricher, enrich_leads
from leadgen.http import RequestManager
from leadgen.models import Lead, ScoredLead, SearchFilters
from leadgen.scorer import Scorer
from leadgen.sources import FixtureSource

logger = logging.getLogger("leadgen.run")


def build_scorer(config: dict) -> Scorer:
    return Scorer(config.get("scoring", {}).get("weights"))


def build_enricher(config: dict) -> Enricher:
    request_manager = RequestManager(timeout_seconds=int(config["http"]["timeout_seconds"]))
    return Enricher(request_manager, api_keys_from_config(config))


def score_leads(leads: list[Lead], scorer: Scorer | None = None) -> list[ScoredLead]:
    scorer = scorer or Scorer()
    scored = [ScoredLead(lead=lead, score=scorer.score(lead)) for lead in leads]
    scored.sort(key=lambda item: item.score.overall, reverse=True)
    return scored


def run_pipeline(
    config_path: str | None = None,
    filters: SearchFilters | None = None,
    enrich: bool = False,
    source: FixtureSource | None = None,
) -> dict:
    config = load_config(config_path) if config_path else default_config()
    filters = filters or SearchFilters()
    source = source or FixtureSource()

    leads = source.safe_fetch(filters)
    counts = {"processed": 0, "enriched": 0, "failed": 0}

    if enrich and leads:
        enricher = build_enricher(config)
        if not enricher.api_keys.any_configured():
            logger.info("No enrichment API keys configured, using mock data")
        with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), transient=True) as progress:
            task = progress.add_task("Enriching leads", total=len(leads))
            leads, counts = enrich_leads(
                enricher,
                leads,
                options=enrichment_options_from_config(config),
                delay_seconds=float(config["enrichment"]["delay_seconds"]),
                on_progress=lambda done, total: progress.update(task, completed=done),
            )
        logger.info("Processed %d leads, %d enriched, %d failed", counts["processed"], counts["enriched"], counts["failed"])

    return {
        "config": config,
        "leads": score_leads(leads, build_scorer(config)),
        "enrichment": counts,
    }
