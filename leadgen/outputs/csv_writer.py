from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, Sequence

from leadgen.models import ScoredLead
from leadgen.utils import split_contact_name, strip_scheme

CSV_HEADERS = [
    "Company Name",
    "Website",
    "Industry",
    "Company Size",
    "Country",
    "Key Contact",
    "Email",
    "LinkedIn",
    "Lead Score",
    "Score Category",
    "Tech Stack",
    "Tags",
    "Status",
    "Notes",
    "Domain Authority",
    "Social Followers",
    "Last Contacted",
]

EXCEL_HEADERS = CSV_HEADERS[:14]

HUBSPOT_HEADERS = [
    "Company name",
    "Company domain name",
    "Industry",
    "Number of employees",
    "Country/Region",
    "First name",
    "Last name",
    "Email",
    "LinkedIn URL",
    "Lead score",
    "Lead status",
    "Technology",
    "Notes",
]

SALESFORCE_HEADERS = [
    "Account Name",
    "Website",
    "Industry",
    "NumberOfEmployees",
    "BillingCountry",
    "FirstName",
    "LastName",
    "Email",
    "LeadSource",
    "Lead_Score__c",
    "Status",
    "Description",
]

LEAD_SOURCE = "Caprae Leads"

EXPORT_FILENAMES = {
    "csv": "caprae-leads-export.csv",
    "excel": "caprae-leads-export.tsv",
    "hubspot": "hubspot-import-ready.csv",
    "salesforce": "salesforce-import-ready.csv",
}


def _base_row(item: ScoredLead) -> list[str | int]:
    lead, score = item.lead, item.score
    return [
        lead.company_name,
        lead.website,
        lead.industry,
        lead.company_size,
        lead.country,
        lead.key_person or lead.email or "",
        lead.email or "",
        lead.linkedin_url or "",
        score.display_score,
        score.category,
        "; ".join(lead.tech_stack),
        "; ".join(lead.tags),
        lead.status or "New",
        lead.notes,
    ]


def csv_row(item: ScoredLead) -> list[str | int | float]:
    lead = item.lead
    return _base_row(item) + [
        lead.domain_authority or 0,
        lead.linkedin_followers or 0,
        lead.last_contacted.isoformat() if lead.last_contacted else "",
    ]


def hubspot_row(item: ScoredLead) -> list[str | int]:
    lead, score = item.lead, item.score
    first_name, last_name = split_contact_name(lead.email)
    return [
        lead.company_name,
        strip_scheme(lead.website),
        lead.industry,
        lead.company_size,
        lead.country,
        first_name,
        last_name,
        lead.email or "",
        lead.linkedin_url or "",
        score.display_score,
        lead.status or "New",
        "; ".join(lead.tech_stack),
        lead.notes,
    ]


def salesforce_row(item: ScoredLead) -> list[str | int]:
    lead, score = item.lead, item.score
    first_name, last_name = split_contact_name(lead.email)
    description = f"{'. '.join(score.reasoning)} Tech: {', '.join(lead.tech_stack)}"
    return [
        lead.company_name,
        lead.website,
        lead.industry,
        (lead.company_size or "").split("-")[0],
        lead.country,
        first_name,
        last_name,
        lead.email or "",
        LEAD_SOURCE,
        score.display_score,
        lead.status or "New",
        description,
    ]


def _render(headers: Sequence[str], rows: Iterable[Sequence[str | int]], delimiter: str = ",") -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return buffer.getvalue()


def render_csv(leads: list[ScoredLead]) -> str:
    return _render(CSV_HEADERS, (csv_row(item) for item in leads))


def render_excel(leads: list[ScoredLead]) -> str:
    """Tab-separated variant that spreadsheet apps open directly."""
    return _render(EXCEL_HEADERS, (_base_row(item) for item in leads), delimiter="\t")


def render_hubspot(leads: list[ScoredLead]) -> str:
    return _render(HUBSPOT_HEADERS, (hubspot_row(item) for item in leads))


def render_salesforce(leads: list[ScoredLead]) -> str:
    return _render(SALESFORCE_HEADERS, (salesforce_row(item) for item in leads))


RENDERERS = {
    "csv": render_csv,
    "excel": render_excel,
    "hubspot": render_hubspot,
    "salesforce": render_salesforce,
}


def write_export(fmt: str, path: str, leads: list[ScoredLead]) -> Path:
    if fmt not in RENDERERS:
        raise ValueError(f"Unknown export format '{fmt}'")
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(RENDERERS[fmt](leads))
    return out_path


def read_export_csv(path: str) -> list[dict[str, str]]:
    csv_path = Path(path)
    if not csv_path.exists():
        return []
    with csv_path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        return list(reader)
