from __future__ import annotations

from leadgen.models import Category, Lead, LeadScore, ScoreFactors

WEIGHTS = {
    "company_size": 0.25,
    "tech_stack_match": 0.20,
    "domain_authority": 0.20,
    "social_presence": 0.15,
    "market_timing": 0.20,
}

TARGET_TECH_STACK = frozenset(
    ["Salesforce", "HubSpot", "React", "AWS", "Stripe", "Slack", "Zoom", "Shopify", "WordPress"]
)

COMPANY_SIZE_SCORES = {
    "1-10": 20,
    "11-50": 60,
    "51-200": 85,
    "201-500": 95,
    "501-1000": 90,
    "1000+": 75,
}

FUNDED_STAGES = {"Series A", "Series B"}

REASONS = {
    "company_size": "Optimal company size for our solution",
    "tech_stack_match": "Strong technology stack alignment",
    "domain_authority": "High domain authority indicates established presence",
    "social_presence": "Strong social media presence",
    "market_timing": "Excellent market timing indicators",
}
FALLBACK_REASON = "Standard lead profile, requires nurturing"
REASON_THRESHOLD = 70


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


class Scorer:
    """Weighted multi-factor ICP scoring.

    Every lead gets a score; missing optional fields fall back to neutral
    factor values instead of raising.
    """

    def __init__(self, weights: dict[str, float] | None = None) -> None:
        self.weights = dict(weights or WEIGHTS)

    def score(self, lead: Lead) -> LeadScore:
        factors = self.factors(lead)
        overall = _clamp(sum(value * self.weights[name] for name, value in factors.as_dict().items()))
        return LeadScore(
            overall=overall,
            category=self.category(overall),
            factors=factors,
            reasoning=self.reasoning(factors),
        )

    def factors(self, lead: Lead) -> ScoreFactors:
        return ScoreFactors(
            company_size=self.score_company_size(lead.company_size),
            tech_stack_match=self.score_tech_stack(lead.tech_stack),
            domain_authority=self.score_domain_authority(lead.domain_authority),
            social_presence=self.score_social_presence(lead.linkedin_followers),
            market_timing=self.score_market_timing(lead),
        )

    @staticmethod
    def score_company_size(size: str | None) -> float:
        return float(COMPANY_SIZE_SCORES.get(size or "", 50))

    @staticmethod
    def score_tech_stack(tech_stack: tuple[str, ...] | list[str] | None) -> float:
        if not tech_stack:
            return 30.0
        matches = len(TARGET_TECH_STACK.intersection(tech_stack))
        return _clamp(40 + 60 * (matches / len(TARGET_TECH_STACK)))

    @staticmethod
    def score_domain_authority(authority: float | None) -> float:
        da = _clamp(authority or 0)
        if da == 0:
            return 40.0  # unknown
        if da < 20:
            return 20.0
        if da < 40:
            return 50.0
        if da < 60:
            return 70.0
        if da < 80:
            return 85.0
        return 95.0

    @staticmethod
    def score_social_presence(followers: int | None) -> float:
        count = max(0, followers or 0)
        if count == 0:
            return 30.0
        if count < 1000:
            return 40.0
        if count < 5000:
            return 60.0
        if count < 25000:
            return 80.0
        return 95.0

    @staticmethod
    def score_market_timing(lead: Lead) -> float:
        score = 50
        if lead.recent_news:
            score += 20
        if lead.funding_stage in FUNDED_STAGES:
            score += 25
        if lead.growth_rate is not None and lead.growth_rate > 50:
            score += 20
        # cap applies to the sum, not to each bonus
        return _clamp(score)

    @staticmethod
    def category(overall: float) -> Category:
        if overall >= 80:
            return "High Potential"
        if overall >= 60:
            return "Warm"
        if overall >= 40:
            return "Cold"
        return "Early-Stage"

    @staticmethod
    def reasoning(factors: ScoreFactors) -> tuple[str, ...]:
        reasons = [REASONS[name] for name, value in factors.as_dict().items() if value >= REASON_THRESHOLD]
        return tuple(reasons) or (FALLBACK_REASON,)
