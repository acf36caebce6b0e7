from __future__ import annotations

from dataclasses import dataclass

TONES = ("professional", "friendly", "casual", "corporate")
TEMPLATE_TYPES = ("cold_outreach", "follow_up", "demo_request", "introduction")
DEFAULT_KEY = ("cold_outreach", "professional")


@dataclass(frozen=True)
class RawTemplate:
    subject: str
    body: str


TEMPLATES: dict[tuple[str, str], RawTemplate] = {
    ("cold_outreach", "professional"): RawTemplate(
        subject="Quick question about {{company}}'s {{pain_point}}",
        body="""Hi {{contact_name}},

I noticed {{company}} is {{company_context}}. Many {{industry}} companies like yours are looking to {{value_prop_context}}.

We've helped similar companies {{specific_benefit}}. For example, {{example_result}}.

Would you be open to a 15-minute conversation to explore how this could apply to {{company}}?

Best regards,
{{sender_name}}
{{sender_role}} at {{sender_company}}""",
    ),
    ("cold_outreach", "friendly"): RawTemplate(
        subject="Love what {{company}} is doing in {{industry}}!",
        body="""Hi {{contact_name}},

Hope you're having a great week! I came across {{company}} and was really impressed by {{company_context}}.

I work with {{industry}} companies to {{value_proposition}}, and I think there might be a great fit here. We've helped companies like {{example_company}} achieve {{specific_benefit}}.

Would love to chat for 10 minutes about how we could help {{company}} {{main_benefit}}.

When works best for you?

Cheers,
{{sender_name}}""",
    ),
    ("cold_outreach", "corporate"): RawTemplate(
        subject="Partnership opportunity for {{company}}",
        body="""Dear {{contact_name}},

I am reaching out regarding a potential partnership opportunity that could benefit {{company}}.

Our platform has demonstrated significant value for {{industry}} organizations, delivering {{key_metrics}}. Given {{company}}'s position in the market and {{company_context}}, I believe there is strong alignment.

I would welcome the opportunity to discuss how our solution could support {{company}}'s {{business_objective}}.

Would you be available for a brief call next week?

Sincerely,
{{sender_name}}
{{sender_title}}
{{sender_company}}""",
    ),
    ("follow_up", "professional"): RawTemplate(
        subject="Following up on our {{company}} conversation",
        body="""Hi {{contact_name}},

I wanted to follow up on my previous email about {{value_proposition}} for {{company}}.

I understand you're likely busy, but I thought you might be interested in this quick case study: {{case_study_headline}}.

{{specific_result_detail}}

Happy to share more details if this resonates. Would a brief 10-minute call work for you this week?

Best,
{{sender_name}}""",
    ),
    ("demo_request", "professional"): RawTemplate(
        subject="{{company}} + {{sender_company}}: 15-minute demo",
        body="""Hi {{contact_name}},

Based on our previous conversation and {{company}}'s focus on {{business_focus}}, I'd love to show you exactly how {{sender_company}} could help {{main_benefit}}.

The demo takes just 15 minutes and covers:
• {{benefit_1}}
• {{benefit_2}}
• {{benefit_3}}

I have availability {{availability}}. What works best for you?

Looking forward to connecting,
{{sender_name}}""",
    ),
}


def resolve_template(template_type: str, tone: str) -> tuple[tuple[str, str], RawTemplate]:
    """Return the (type, tone) key actually used and its template.

    Pairs missing from the table resolve to cold outreach / professional.
    """
    key = (template_type, tone)
    if key in TEMPLATES:
        return key, TEMPLATES[key]
    return DEFAULT_KEY, TEMPLATES[DEFAULT_KEY]
