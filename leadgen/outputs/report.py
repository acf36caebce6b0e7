from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from leadgen.models import ScoredLead

CATEGORY_ORDER = ("High Potential", "Warm", "Cold", "Early-Stage")


def _cell(value: str) -> str:
    return (value or "").replace("|", " ")


def render_markdown_report(leads: list[ScoredLead], generated_at: datetime | None = None) -> str:
    generated_at = generated_at or datetime.now(timezone.utc)
    ranked = sorted(leads, key=lambda item: item.score.overall, reverse=True)

    lines = [
        "# Lead Report",
        "",
        f"Generated: {generated_at.astimezone(timezone.utc).isoformat()}",
        f"Total leads: {len(leads)}",
        "",
        "## Score Distribution",
        "",
    ]
    for category in CATEGORY_ORDER:
        count = sum(1 for item in leads if item.score.category == category)
        lines.append(f"- {category}: {count}")

    lines.extend(
        [
            "",
            "## Leads",
            "",
            "| Company | Industry | Size | Score | Category | Reasoning |",
            "|---|---|---|---:|---|---|",
        ]
    )
    for item in ranked:
        lead, score = item.lead, item.score
        lines.append(
            f"| {_cell(lead.company_name)} | {_cell(lead.industry)} | {_cell(lead.company_size)} "
            f"| {score.display_score} | {score.category} | {_cell('; '.join(score.reasoning))} |"
        )

    return "\n".join(lines) + "\n"


def write_markdown_report(output_path: str, leads: list[ScoredLead]) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_markdown_report(leads), encoding="utf-8")
    return path
