from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from leadgen.http import RequestManager
from leadgen.models import ScoredLead

logger = logging.getLogger("leadgen.outputs.webhook")


def webhook_payload(leads: list[ScoredLead], now: datetime | None = None) -> dict[str, Any]:
    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    return {
        "leads": [
            {
                "companyName": item.lead.company_name,
                "website": item.lead.website,
                "industry": item.lead.industry,
                "companySize": item.lead.company_size,
                "country": item.lead.country,
                "email": item.lead.email,
                "linkedinUrl": item.lead.linkedin_url,
                "leadScore": item.score.display_score,
                "scoreCategory": item.score.category,
                "techStack": list(item.lead.tech_stack),
                "tags": list(item.lead.tags),
                "status": item.lead.status,
                "timestamp": timestamp,
            }
            for item in leads
        ]
    }


def sync_webhook(url: str, leads: list[ScoredLead], request_manager: RequestManager | None = None) -> bool:
    """POST leads to an automation webhook (Zapier, Make, ...)."""
    if not url:
        raise ValueError("Webhook URL is required")

    manager = request_manager or RequestManager(max_retries=1)
    try:
        manager.post_json(url, webhook_payload(leads))
    except RuntimeError as exc:
        logger.warning("Webhook sync failed: %s", exc)
        return False
    logger.info("Synced %d leads to webhook", len(leads))
    return True
