from __future__ import annotations

import logging
import re
from datetime import date, timedelta

from leadgen.models import EmailTemplate, Lead, PersonaContext
from leadgen.templates import resolve_template
from leadgen.utils import contact_first_name, pick

logger = logging.getLogger("leadgen.email_builder")

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
ALL_TONES = ("professional", "friendly", "corporate")

PAIN_POINTS = {
    "SaaS": "customer acquisition costs",
    "FinTech": "regulatory compliance",
    "E-commerce": "conversion optimization",
    "Healthcare": "patient data management",
    "EdTech": "student engagement",
    "MarTech": "lead attribution",
}
EXAMPLE_RESULTS = {
    "SaaS": "one client reduced churn by 40% in 6 months",
    "FinTech": "a fintech startup improved compliance efficiency by 60%",
    "E-commerce": "an e-commerce company increased conversions by 25%",
}
EXAMPLE_COMPANIES = {
    "SaaS": "TechFlow Solutions",
    "FinTech": "PaymentCorp",
    "E-commerce": "ShopFast",
}
BUSINESS_OBJECTIVES = {
    "SaaS": "growth and customer retention goals",
    "FinTech": "compliance and risk management objectives",
    "E-commerce": "conversion and revenue targets",
}


def fill_template(template: str, context: dict[str, str]) -> str:
    """Replace ``{{name}}`` markers; unknown or empty values keep the marker."""

    def _replace(match: re.Match) -> str:
        return context.get(match.group(1)) or match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def availability(today: date | None = None) -> str:
    next_week = (today or date.today()) + timedelta(days=7)
    day_after = next_week + timedelta(days=1)
    return f"{WEEKDAYS[next_week.weekday()]} or {WEEKDAYS[day_after.weekday()]}"


class EmailBuilder:
    def __init__(self, today: date | None = None) -> None:
        self.today = today

    def generate(
        self,
        lead: Lead,
        persona: PersonaContext,
        template_type: str = "cold_outreach",
        tone: str = "professional",
    ) -> EmailTemplate:
        (used_type, used_tone), raw = resolve_template(template_type, tone)
        if (used_type, used_tone) != (template_type, tone):
            logger.debug("no %s/%s template, using %s/%s", template_type, tone, used_type, used_tone)

        context = self.build_context(lead, persona)
        return EmailTemplate(
            subject=fill_template(raw.subject, context),
            body=fill_template(raw.body, context),
            tone=used_tone,
            template_type=used_type,
        )

    def generate_all_tones(self, lead: Lead, persona: PersonaContext) -> list[EmailTemplate]:
        return [self.generate(lead, persona, "cold_outreach", tone) for tone in ALL_TONES]

    def build_context(self, lead: Lead, persona: PersonaContext) -> dict[str, str]:
        industry = lead.industry or ""
        sender_industry = persona.industry or ""
        return {
            "company": lead.company_name,
            "contact_name": contact_first_name(lead.email),
            "industry": industry,
            "company_context": self._company_context(lead),
            "value_prop_context": self._value_prop_context(lead, sender_industry),
            "value_proposition": persona.value_proposition,
            "sender_name": persona.sender_name,
            "sender_company": persona.sender_company,
            "sender_role": persona.sender_role,
            "sender_title": persona.sender_role,
            "pain_point": PAIN_POINTS.get(industry, "operational efficiency"),
            "specific_benefit": f"reduce operational costs by 30% while improving {industry} performance",
            "example_result": EXAMPLE_RESULTS.get(industry, "clients typically see 30% efficiency improvements"),
            "example_company": EXAMPLE_COMPANIES.get(industry, "InnovateCorp"),
            "main_benefit": f"scale their {industry} operations more efficiently",
            "key_metrics": "up to 40% cost reduction and 60% faster implementation",
            "business_objective": BUSINESS_OBJECTIVES.get(industry, "strategic business objectives"),
            "case_study_headline": f"How a {industry} company improved efficiency by 45% in 3 months",
            "specific_result_detail": (
                f"They were able to streamline their {industry} processes and achieve significant "
                "cost savings while improving team productivity."
            ),
            "business_focus": f"{industry} innovation and growth",
            "benefit_1": f"{industry}-specific optimization strategies",
            "benefit_2": "Real-time performance analytics",
            "benefit_3": "Seamless integration with existing tools",
            "availability": availability(self.today),
        }

    @staticmethod
    def _company_context(lead: Lead) -> str:
        contexts = [
            f"growing rapidly in the {lead.industry} space",
            f"leading innovation in {lead.industry}",
            f"scaling operations in {lead.country}",
            f"expanding their {lead.industry} solutions",
            f"building impressive {lead.industry} capabilities",
        ]
        return pick(contexts, lead.company_name)

    @staticmethod
    def _value_prop_context(lead: Lead, sender_industry: str) -> str:
        props = [
            f"streamline their {lead.industry} operations",
            f"accelerate growth in {lead.industry}",
            "optimize their technology stack",
            "improve operational efficiency",
            "scale their business more effectively",
        ]
        return pick(props, lead.company_name + sender_industry)
