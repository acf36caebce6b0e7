import pytest

from leadgen.models import Lead
from leadgen.scorer import FALLBACK_REASON, TARGET_TECH_STACK, Scorer


def make_lead(**overrides) -> Lead:
    fields = dict(
        id="1",
        company_name="Acme",
        website="https://acme.com",
        industry="SaaS",
        company_size="1-10",
        country="United States",
    )
    fields.update(overrides)
    return Lead(**fields)


def test_scorer_example_lead() -> None:
    lead = make_lead(
        company_size="201-500",
        tech_stack=("React", "AWS", "Salesforce", "HubSpot"),
        domain_authority=70,
        linkedin_followers=30000,
        funding_stage="Series A",
        recent_news=True,
    )
    score = Scorer().score(lead)

    assert score.factors.company_size == 95
    assert score.factors.tech_stack_match == pytest.approx(40 + 60 * 4 / 9)
    assert score.factors.domain_authority == 85
    assert score.factors.social_presence == 95
    assert score.factors.market_timing == 95
    assert score.overall == pytest.approx(87.3333, abs=1e-3)
    assert score.display_score == 87
    assert score.category == "High Potential"
    assert score.reasoning == (
        "Optimal company size for our solution",
        "High domain authority indicates established presence",
        "Strong social media presence",
        "Excellent market timing indicators",
    )


def test_scorer_sparse_lead_uses_neutral_defaults() -> None:
    score = Scorer().score(make_lead(company_size="1-10"))

    assert score.factors.company_size == 20
    assert score.factors.tech_stack_match == 30
    assert score.factors.domain_authority == 40
    assert score.factors.social_presence == 30
    assert score.factors.market_timing == 50
    assert score.overall == pytest.approx(33.5)
    assert score.category == "Early-Stage"
    assert score.reasoning == (FALLBACK_REASON,)


def test_overall_is_weighted_sum_of_factors() -> None:
    scorer = Scorer()
    score = scorer.score(make_lead(company_size="51-200", domain_authority=45, linkedin_followers=2000, growth_rate=80))
    expected = sum(value * scorer.weights[name] for name, value in score.factors.as_dict().items())
    assert score.overall == pytest.approx(expected)
    assert sum(scorer.weights.values()) == pytest.approx(1.0)


def test_unknown_company_size_is_neutral() -> None:
    assert Scorer.score_company_size("101-500") == 50
    assert Scorer.score_company_size("") == 50
    assert Scorer.score_company_size("201-500") == 95
    assert Scorer.score_company_size("1000+") == 75


@pytest.mark.parametrize(
    "overall,category",
    [
        (100, "High Potential"),
        (80, "High Potential"),
        (79.9, "Warm"),
        (79, "Warm"),
        (60, "Warm"),
        (59, "Cold"),
        (40, "Cold"),
        (39.99, "Early-Stage"),
        (39, "Early-Stage"),
        (0, "Early-Stage"),
    ],
)
def test_category_thresholds(overall: float, category: str) -> None:
    assert Scorer.category(overall) == category


def test_tech_stack_factor_is_monotonic() -> None:
    stack: list[str] = ["Java"]
    previous = Scorer.score_tech_stack(stack)
    for tech in sorted(TARGET_TECH_STACK):
        stack.append(tech)
        current = Scorer.score_tech_stack(stack)
        assert current >= previous
        previous = current
    assert previous == 100


def test_tech_stack_counts_distinct_matches() -> None:
    assert Scorer.score_tech_stack(["React", "React"]) == Scorer.score_tech_stack(["React"])
    assert Scorer.score_tech_stack(["Java", "Go"]) == 40
    assert Scorer.score_tech_stack([]) == 30


@pytest.mark.parametrize(
    "authority,expected",
    [(None, 40), (0, 40), (-5, 40), (10, 20), (20, 50), (39, 50), (40, 70), (60, 85), (79, 85), (80, 95), (150, 95)],
)
def test_domain_authority_bands(authority, expected) -> None:
    assert Scorer.score_domain_authority(authority) == expected


@pytest.mark.parametrize(
    "followers,expected",
    [(None, 30), (0, 30), (-10, 30), (999, 40), (1000, 60), (4999, 60), (5000, 80), (24999, 80), (25000, 95)],
)
def test_social_presence_bands(followers, expected) -> None:
    assert Scorer.score_social_presence(followers) == expected


def test_market_timing_caps_only_the_sum() -> None:
    everything = make_lead(recent_news=True, funding_stage="Series B", growth_rate=51)
    assert Scorer.score_market_timing(everything) == 100

    assert Scorer.score_market_timing(make_lead(growth_rate=50)) == 50
    assert Scorer.score_market_timing(make_lead(funding_stage="series a")) == 50
    assert Scorer.score_market_timing(make_lead(funding_stage="Seed", recent_news=True)) == 70


def test_scores_always_within_bounds() -> None:
    extreme = make_lead(
        company_size="201-500",
        tech_stack=tuple(TARGET_TECH_STACK) * 2,
        domain_authority=1000,
        linkedin_followers=10**9,
        growth_rate=10**6,
        funding_stage="Series A",
        recent_news=True,
    )
    for lead in (extreme, make_lead(domain_authority=-100, linkedin_followers=-1, growth_rate=-50)):
        score = Scorer().score(lead)
        assert 0 <= score.overall <= 100
        assert all(0 <= value <= 100 for value in score.factors.as_dict().values())


def test_scoring_is_deterministic() -> None:
    lead = make_lead(company_size="501-1000", tech_stack=("Stripe", "Zoom"), domain_authority=55, recent_news=True)
    assert Scorer().score(lead) == Scorer().score(lead)


def test_custom_weights() -> None:
    weights = {
        "company_size": 1.0,
        "tech_stack_match": 0.0,
        "domain_authority": 0.0,
        "social_presence": 0.0,
        "market_timing": 0.0,
    }
    score = Scorer(weights).score(make_lead(company_size="201-500"))
    assert score.overall == pytest.approx(95)
