from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Optional

Tone = Literal["professional", "friendly", "casual", "corporate"]
TemplateType = Literal["cold_outreach", "follow_up", "demo_request", "introduction"]
Category = Literal["High Potential", "Warm", "Cold", "Early-Stage"]
EmailStatus = Literal["valid", "invalid", "catch-all", "unknown"]


@dataclass(frozen=True)
class Lead:
    id: str
    company_name: str
    website: str
    industry: str
    company_size: str
    country: str
    tech_stack: tuple[str, ...] = ()
    email: Optional[str] = None
    linkedin_url: Optional[str] = None
    domain_authority: Optional[float] = None
    linkedin_followers: Optional[int] = None
    growth_rate: Optional[float] = None
    funding_stage: Optional[str] = None
    recent_news: bool = False
    key_person: str = ""
    description: str = ""
    tags: tuple[str, ...] = ()
    status: str = "New"
    notes: str = ""
    last_contacted: Optional[date] = None
    assigned_to: str = ""


@dataclass(frozen=True)
class ScoreFactors:
    company_size: float
    tech_stack_match: float
    domain_authority: float
    social_presence: float
    market_timing: float

    def as_dict(self) -> dict[str, float]:
        return {
            "company_size": self.company_size,
            "tech_stack_match": self.tech_stack_match,
            "domain_authority": self.domain_authority,
            "social_presence": self.social_presence,
            "market_timing": self.market_timing,
        }


@dataclass(frozen=True)
class LeadScore:
    overall: float
    category: Category
    factors: ScoreFactors
    reasoning: tuple[str, ...]

    @property
    def display_score(self) -> int:
        # half-up: 86.5 displays as 87, not round()'s 86
        return int(self.overall + 0.5)


@dataclass(frozen=True)
class ScoredLead:
    lead: Lead
    score: LeadScore


@dataclass
class PersonaContext:
    sender_name: str
    sender_company: str
    sender_role: str
    value_proposition: str
    industry: str = ""

    def missing_fields(self) -> list[str]:
        required = {
            "sender_name": self.sender_name,
            "sender_company": self.sender_company,
            "value_proposition": self.value_proposition,
        }
        return [name for name, value in required.items() if not (value or "").strip()]


@dataclass(frozen=True)
class EmailTemplate:
    subject: str
    body: str
    tone: Tone
    template_type: TemplateType


@dataclass
class SocialProfiles:
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None


@dataclass
class EnrichmentData:
    company_size: Optional[str] = None
    founded_year: Optional[int] = None
    funding: Optional[str] = None
    tech_stack: Optional[list[str]] = None
    social_profiles: Optional[SocialProfiles] = None
    email_status: Optional[EmailStatus] = None
    domain_authority: Optional[float] = None
    employee_count: Optional[int] = None
    description: Optional[str] = None


@dataclass
class EnrichmentResult:
    success: bool
    data: Optional[EnrichmentData] = None
    error: Optional[str] = None


@dataclass
class EnrichmentOptions:
    validate_emails: bool = True
    enrich_company_data: bool = True
    find_social_profiles: bool = True
    get_tech_stack: bool = True


@dataclass
class SearchFilters:
    keywords: str = ""
    industry: str = ""
    company_size: str = ""
    country: str = ""
    tech_stack: list[str] = field(default_factory=list)
