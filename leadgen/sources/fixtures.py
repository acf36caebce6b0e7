from __future__ import annotations

from leadgen.models import Lead, SearchFilters
from leadgen.sources.base import Source

INDUSTRIES = [
    "SaaS", "FinTech", "E-commerce", "Healthcare", "EdTech",
    "MarTech", "PropTech", "InsurTech", "HRTech", "LogTech",
]
COMPANY_SIZES = ["1-10", "11-50", "51-200", "201-500", "501-1000", "1000+"]
COUNTRIES = [
    "United States", "Canada", "United Kingdom", "Germany",
    "France", "Netherlands", "Australia", "Singapore",
]
TECHNOLOGIES = [
    "React", "Node.js", "Python", "AWS", "Salesforce",
    "HubSpot", "Stripe", "Shopify", "WordPress", "Slack",
]

SAMPLE_LEADS = (
    Lead(
        id="1",
        company_name="TechFlow Solutions",
        website="https://techflow.com",
        linkedin_url="https://linkedin.com/company/techflow",
        industry="SaaS",
        company_size="51-200",
        country="United States",
        key_person="Sarah Johnson, VP Sales",
        email="sarah.johnson@techflow.com",
        tech_stack=("React", "AWS", "Salesforce", "HubSpot"),
        description="B2B productivity software for remote teams",
    ),
    Lead(
        id="2",
        company_name="DataVault Inc",
        website="https://datavault.com",
        linkedin_url="https://linkedin.com/company/datavault",
        industry="FinTech",
        company_size="101-500",
        country="Canada",
        key_person="Michael Chen, CEO",
        email="m.chen@datavault.com",
        tech_stack=("Python", "AWS", "Stripe", "Slack"),
        description="Enterprise data analytics platform",
    ),
    Lead(
        id="3",
        company_name="GrowthTech",
        website="https://growthtech.io",
        linkedin_url="https://linkedin.com/company/growthtech",
        industry="MarTech",
        company_size="11-50",
        country="United Kingdom",
        key_person="Emma Wilson, Head of Growth",
        email="emma@growthtech.io",
        tech_stack=("Node.js", "MongoDB", "HubSpot"),
        description="Marketing automation for e-commerce",
    ),
    Lead(
        id="4",
        company_name="CloudSecure",
        website="https://cloudsecure.com",
        linkedin_url="https://linkedin.com/company/cloudsecure",
        industry="Cybersecurity",
        company_size="201-500",
        country="Germany",
        key_person="Hans Mueller, CTO",
        email="h.mueller@cloudsecure.com",
        tech_stack=("Java", "AWS", "Kubernetes"),
        description="Cloud security solutions for enterprises",
    ),
)


class FixtureSource(Source):
    """Search over a fixed set of demo leads."""

    def __init__(self, leads: tuple[Lead, ...] | list[Lead] = SAMPLE_LEADS) -> None:
        super().__init__("fixtures")
        self.leads = list(leads)

    def fetch(self, filters: SearchFilters) -> list[Lead]:
        matches = [lead for lead in self.leads if self._matches(lead, filters)]
        self.logger.info("%d of %d leads match", len(matches), len(self.leads))
        return matches

    def get(self, lead_id: str) -> Lead:
        for lead in self.leads:
            if lead.id == lead_id:
                return lead
        raise KeyError(f"Unknown lead id '{lead_id}'")

    @staticmethod
    def _matches(lead: Lead, filters: SearchFilters) -> bool:
        keywords = filters.keywords.strip().lower()
        if keywords:
            haystack = f"{lead.company_name} {lead.description} {lead.industry}".lower()
            if keywords not in haystack:
                return False
        if filters.industry and lead.industry != filters.industry:
            return False
        if filters.company_size and lead.company_size != filters.company_size:
            return False
        if filters.country and lead.country != filters.country:
            return False
        if filters.tech_stack and not set(filters.tech_stack).issubset(lead.tech_stack):
            return False
        return True
