from __future__ import annotations

import logging
import math
import time
from dataclasses import replace
from typing import Any, Callable, Optional

from leadgen.config import ApiKeys
from leadgen.http import RequestManager
from leadgen.models import EnrichmentData, EnrichmentOptions, EnrichmentResult, Lead, SocialProfiles
from leadgen.utils import domain_from_url, is_valid_email, simple_hash, strip_scheme

logger = logging.getLogger("leadgen.enricher")

HUNTER_URL = "https://api.hunter.io/v2/email-verifier"
CLEARBIT_URL = "https://company-stream.clearbit.com/v2/companies/find"
BUILTWITH_URL = "https://api.builtwith.com/v20/api.json"

EMPLOYEE_RANGES = ["1-10", "11-50", "51-200", "201-500", "501-1000", "1000+"]
TECH_CATALOG = [
    "React", "Angular", "Vue.js", "Node.js", "Python", "AWS", "Google Cloud",
    "Salesforce", "HubSpot", "Stripe", "Slack", "Zoom", "Shopify", "WordPress",
    "PostgreSQL", "MongoDB", "Redis", "Docker", "Kubernetes",
]
EMAIL_STATUSES = {"valid", "invalid", "catch-all", "unknown"}
HUNTER_RESULTS = {"deliverable": "valid", "undeliverable": "invalid", "risky": "catch-all", "accept_all": "catch-all"}


def map_employee_count(count: Optional[int]) -> str:
    if not count:
        return "11-50"
    if count <= 10:
        return "1-10"
    if count <= 50:
        return "11-50"
    if count <= 200:
        return "51-200"
    if count <= 500:
        return "201-500"
    if count <= 1000:
        return "501-1000"
    return "1000+"


def mock_company_data(domain: str) -> EnrichmentData:
    h = simple_hash(domain)
    sector = "technology" if "tech" in domain else "business"
    return EnrichmentData(
        company_size=EMPLOYEE_RANGES[h % len(EMPLOYEE_RANGES)],
        founded_year=2010 + h % 14,
        funding=f"${h % 50 + 1}M" if h % 3 == 0 else None,
        domain_authority=float(30 + h % 60),
        employee_count=2 ** (h % 10) * 10,
        description=f"Innovative company in the {sector} sector.",
    )


def mock_tech_stack(domain: str) -> list[str]:
    h = simple_hash(domain)
    count = 3 + h % 5
    return [TECH_CATALOG[(h + i) % len(TECH_CATALOG)] for i in range(count)]


def social_profiles_for(domain: str) -> SocialProfiles:
    name = strip_scheme(domain).rstrip("/").split(".")[0]
    return SocialProfiles(
        linkedin=f"https://linkedin.com/company/{name}",
        twitter=f"https://twitter.com/{name}",
        facebook=f"https://facebook.com/{name}",
    )


class Enricher:
    """Firmographic, technographic and email enrichment.

    Each lookup uses the live service when its key is configured and falls
    back to deterministic mock data otherwise, or when the call fails, so
    callers always get the same result shape.
    """

    def __init__(self, request_manager: RequestManager, api_keys: ApiKeys | None = None) -> None:
        self.request_manager = request_manager
        self.api_keys = api_keys or ApiKeys()

    def enrich(self, domain: str, email: str | None = None, options: EnrichmentOptions | None = None) -> EnrichmentResult:
        options = options or EnrichmentOptions()
        data = EnrichmentData()
        try:
            if email and options.validate_emails:
                data.email_status = self.validate_email(email)

            if options.enrich_company_data:
                company = self.company_data(domain)
                data.company_size = company.company_size
                data.founded_year = company.founded_year
                data.funding = company.funding
                data.domain_authority = company.domain_authority
                data.employee_count = company.employee_count
                data.description = company.description

            if options.get_tech_stack:
                data.tech_stack = self.tech_stack(domain)

            if options.find_social_profiles:
                data.social_profiles = social_profiles_for(domain)
        except (RuntimeError, ValueError, TypeError, KeyError) as exc:
            logger.warning("Enrichment failed for %s: %s", domain, exc)
            return EnrichmentResult(success=False, error=str(exc) or "Enrichment failed")

        return EnrichmentResult(success=True, data=data)

    def validate_email(self, email: str) -> str:
        key = self.api_keys.get("hunter")
        if not key:
            return "valid" if is_valid_email(email) else "invalid"

        try:
            payload = self.request_manager.get_json(HUNTER_URL, params={"email": email, "api_key": key})
            status = (payload.get("data") or {}).get("result") or "unknown"
        except (RuntimeError, ValueError, AttributeError) as exc:
            logger.warning("Email validation failed for %s: %s", email, exc)
            return "unknown"
        status = HUNTER_RESULTS.get(status, status)
        return status if status in EMAIL_STATUSES else "unknown"

    def company_data(self, domain: str) -> EnrichmentData:
        key = self.api_keys.get("clearbit")
        if not key:
            return mock_company_data(domain)

        try:
            payload = self.request_manager.get_json(
                CLEARBIT_URL,
                params={"domain": domain_from_url(domain)},
                headers={"Authorization": f"Bearer {key}"},
            )
            return self._map_clearbit(payload)
        except (RuntimeError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("Company enrichment failed for %s, using mock data: %s", domain, exc)
            return mock_company_data(domain)

    def tech_stack(self, domain: str) -> list[str]:
        key = self.api_keys.get("builtwith")
        if not key:
            return mock_tech_stack(domain)

        try:
            payload = self.request_manager.get_json(BUILTWITH_URL, params={"KEY": key, "LOOKUP": domain_from_url(domain)})
            paths = payload["Results"][0]["Result"]["Paths"]
            return [tech["Name"] for tech in paths[0]["Technologies"]]
        except (LookupError, TypeError):
            return []
        except (RuntimeError, ValueError) as exc:
            logger.warning("Tech stack detection failed for %s, using mock data: %s", domain, exc)
            return mock_tech_stack(domain)

    @staticmethod
    def _map_clearbit(payload: dict[str, Any]) -> EnrichmentData:
        metrics = payload.get("metrics") or {}
        employees = metrics.get("employees")
        raised = metrics.get("raised")
        rank = metrics.get("alexaUsRank")
        return EnrichmentData(
            company_size=map_employee_count(employees),
            founded_year=payload.get("foundedYear"),
            funding=f"${raised}" if raised else None,
            domain_authority=max(0.0, 100 - math.log10(rank) * 10) if rank else None,
            employee_count=employees,
            description=payload.get("description"),
        )


def apply_enrichment(lead: Lead, result: EnrichmentResult) -> Lead:
    """Patch a lead with the populated values of a successful enrichment."""
    if not result.success or result.data is None:
        return lead

    data = result.data
    changes: dict[str, Any] = {}
    if data.company_size:
        changes["company_size"] = data.company_size
    if data.tech_stack is not None:
        changes["tech_stack"] = tuple(data.tech_stack)
    if data.domain_authority:
        changes["domain_authority"] = data.domain_authority
    if data.employee_count:
        # headcount stands in for follower count
        changes["linkedin_followers"] = data.employee_count
    if data.social_profiles and data.social_profiles.linkedin:
        changes["linkedin_url"] = data.social_profiles.linkedin
    return replace(lead, **changes)


def enrich_leads(
    enricher: Enricher,
    leads: list[Lead],
    options: EnrichmentOptions | None = None,
    delay_seconds: float = 0.0,
    on_progress: Callable[[int, int], None] | None = None,
) -> tuple[list[Lead], dict[str, int]]:
    """Enrich leads one at a time, pausing ``delay_seconds`` between items."""
    enriched: list[Lead] = []
    counts = {"processed": 0, "enriched": 0, "failed": 0}

    for index, lead in enumerate(leads):
        result = enricher.enrich(lead.website, lead.email, options)
        if result.success:
            counts["enriched"] += 1
        else:
            counts["failed"] += 1
        enriched.append(apply_enrichment(lead, result))
        counts["processed"] += 1

        if on_progress is not None:
            on_progress(counts["processed"], len(leads))
        if delay_seconds and index < len(leads) - 1:
            time.sleep(delay_seconds)

    return enriched, counts
