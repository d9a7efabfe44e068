"""Business-Model Type Detector.

Priority-ranked classifier over the 11 business-model archetypes that
drive pivot selection. Every archetype is scored in parallel from a
weighted indicator table; a few ordered special rules then adjust the
totals before ranking.

Special rules
-------------
1. Physical-intent pre-pass: tangible accessory nouns together with
   sell/make verbs, shipping terms, unit-cost or price patterns seed
   Physical-Product with a large bonus.
2. Food-Service above 10 discounts any DTC-Subscription score to 10%.
3. Physical-Product indicators are scaled to 30% when any subscription
   signal is present (the reverse direction is not applied).
4. A SaaS-B2B winner becomes Enterprise-SaaS when enterprise language is
   present and the enterprise score is >= 12 or within 2 of SaaS.

Rules
-----
- NO API calls
- Pure deterministic matching
- Ties keep the declaration order of ``_RANK_ORDER``
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from ..schemas.pivot_schema import BusinessModelClassification, BusinessModelType
from .pattern_matcher import MatchResult, PatternIndicator, rx, score_text

T = BusinessModelType

# Ranking order for equal scores
_RANK_ORDER = (
    T.ENTERPRISE_SAAS,
    T.FOOD_SERVICE,
    T.DTC_SUBSCRIPTION,
    T.PHYSICAL_PRODUCT,
    T.MARKETPLACE,
    T.SAAS_B2B,
    T.SERVICES,
    T.FINTECH,
    T.HEALTHCARE,
    T.EDTECH,
    T.MOBILE_APP,
)

I = PatternIndicator

# =============================================================================
# Indicator tables
# =============================================================================

MOBILE_APP_INDICATORS = [
    I(rx(r"\bmobile app\b|\bios\b|\bandroid\b"), 8, "mobile platform keywords", "mobile app"),
    I(rx(r"app store|play store"), 6, "distribution via app stores", "app store"),
    I("fitness", 8, "consumer fitness vertical"),
    I("workout", 7, "consumer fitness vertical"),
    I("nutrition", 7, "consumer wellness vertical"),
    I("meal planning", 7, "consumer wellness vertical"),
    I("personal trainer", 7, "consumer wellness vertical"),
    I("dating", 8, "consumer dating vertical"),
    I("social", 7, "consumer social vertical"),
    I("gaming", 8, "consumer gaming vertical"),
    I("productivity", 6, "consumer productivity"),
    I("meditation", 7, "consumer mental wellness"),
    I("mental health", 7, "consumer mental wellness"),
    I("budgeting", 7, "consumer finance"),
    I("photo", 6, "consumer creative tools"),
    I("music", 6, "consumer creative tools"),
    I("video", 6, "consumer creative tools"),
    I("$9.99", 8, "consumer pricing"),
    I("$19/month", 8, "consumer pricing"),
    I("$4.99", 8, "consumer pricing"),
    I("freemium", 8, "consumer pricing model"),
    I("in-app purchase", 7, "IAP monetization"),
    I("ads", 6, "ad-supported monetization"),
    I("people", 5, "consumer audience"),
    I("users", 5, "consumer audience"),
    I("individuals", 6, "consumer audience"),
    I("consumers", 8, "consumer audience"),
    I("helping people", 6, "consumer framing"),
    I("app for", 6, "consumer app framing"),
    # anti-indicators
    I("enterprise", -10, "enterprise (non-consumer) signal"),
    I("fortune 500", -10, "enterprise (non-consumer) signal"),
    I("b2b", -8, "business audience (non-consumer)"),
    I("businesses", -5, "business audience (non-consumer)"),
    I("companies", -5, "business audience (non-consumer)"),
    I("teams", -4, "business audience (non-consumer)"),
    I("employees", -4, "business audience (non-consumer)"),
    I("workplace", -6, "business context (non-consumer)"),
]

ENTERPRISE_SAAS_INDICATORS = [
    I("fortune 500", 10, "Fortune 500 targeting"),
    I("fortune 1000", 10, "Fortune 1000 targeting"),
    I("enterprise", 8, "enterprise focus"),
    I("custom implementation", 8, "custom implementation services"),
    I("custom implementations", 8, "custom implementation services"),
    I("ongoing support", 7, "enterprise support"),
    I("training services", 7, "customer training services"),
    I("ai platform", 9, "AI platform positioning"),
    I("platform", 6, "platform model"),
    I("solution", 5, "solution language"),
    I("software", 6, "software product"),
    I("saas", 8, "SaaS delivery"),
    I("$100k", 9, "enterprise pricing"),
    I("$1m", 9, "enterprise pricing"),
    I("$2m", 9, "enterprise pricing"),
    I("annually", 5, "annual contracts"),
    I("b2b", 7, "B2B focus"),
    I("companies", 4, "company customers"),
    I("businesses", 4, "business customers"),
]

FOOD_SERVICE_INDICATORS = [
    I("ghost kitchen", 10, "ghost kitchen business model"),
    I("cloud kitchen", 10, "cloud kitchen operations"),
    I("meal delivery", 9, "meal delivery service"),
    I("meal prep", 8, "meal preparation service"),
    I("food delivery", 8, "food delivery business"),
    I("commercial kitchen", 9, "commercial kitchen operations"),
    I("prepare meals", 8, "meal preparation"),
    I("doordash", 7, "delivery platform distribution"),
    I("uber eats", 7, "delivery platform distribution"),
    I("grubhub", 7, "delivery platform distribution"),
    I("restaurant", 6, "restaurant operations"),
    I("catering", 7, "catering service"),
    I("meal kit", 8, "meal kit service"),
    I("healthy meal", 6, "meal service focus"),
    I("nutrition", 5, "nutrition focus"),
    I("chef", 5, "culinary operations"),
]

DTC_SUBSCRIPTION_INDICATORS = [
    I("subscription box", 8, "explicit subscription box model"),
    I("monthly subscription", 7, "recurring subscription model"),
    I("subscribers pay", 6, "subscription-based revenue"),
    I("deliver", 3, "delivery component"),
    I("/month", 4, "monthly pricing"),
    I("receive", 2, "recurring delivery"),
    I("coffee beans", 3, "consumable product delivery"),
    I("artisanal", 2, "curated product selection"),
]

PHYSICAL_PRODUCT_INDICATORS = [
    I(rx(r"\bhand\s*-?made\b"), 6, "artisan manufacturing", "handmade"),
    I(rx(r"\bhand\s*-?crafted\b"), 5, "artisan manufacturing", "handcrafted"),
    I(rx(r"\bhand\s*-?stitched|hand\s*-?stitch(ed|ing)?\b"), 4, "artisan creation", "hand-stitched"),
    I(rx(r"\bcraft(s|ing)?\b"), 3, "artisan creation", "craft"),
    I(rx(r"\bmanufactur(ing|e)\b"), 4, "production process", "manufacturing"),
    I(rx(r"\bleather\b"), 6, "physical material production", "leather"),
    I(rx(r"\bleather\s+goods\b"), 6, "leather goods category", "leather goods"),
    I(
        rx(r"\b(bag|bags|handbag|handbags|purse|purses|tote|totes|wallet|wallets|belt|belts)\b"),
        5,
        "physical product category",
        "accessories",
    ),
    I(rx(r"\baccessor(y|ies)\b"), 3, "physical goods", "accessories"),
    I(rx(r"\betsy\b"), 4, "ecommerce marketplace (Etsy)", "etsy"),
    I(rx(r"\bshopify\b"), 4, "DTC ecommerce platform", "shopify"),
    I(rx(r"\bonline store|storefront|webshop|e-?commerce\b"), 3, "online retail channel", "online store"),
    I(rx(r"\bretail|wholesale\b"), 3, "retail/wholesale channel", "retail/wholesale"),
    I(rx(r"\binventory|sku(s)?\b"), 3, "inventory-managed goods", "inventory"),
    I(rx(r"\bshipping|ship\b"), 3, "physical logistics", "shipping"),
    I(rx(r"\$\s?\d{2,4}(?:[-–]\$?\d{2,4})?"), 3, "priced physical goods", "price mention"),
    I(rx(r"\bunit\s*cost|cogs\b"), 3, "unit economics for goods", "unit cost/COGS"),
]

MARKETPLACE_INDICATORS = [
    I("freelance", 6, "freelancer platform"),
    I("commission", 5, "marketplace revenue model"),
    I("bid", 4, "bidding mechanism"),
    I("platform", 3, "platform business model"),
    I("take %", 5, "percentage-based revenue"),
]

SAAS_B2B_INDICATORS = [
    I("software", 6, "software product"),
    I("saas", 8, "explicit SaaS model"),
    I("teams", 4, "team-based usage"),
    I("cloud-based", 5, "cloud delivery"),
    I("integration", 3, "software integrations"),
]

FINTECH_INDICATORS = [
    I("fintech", 10, "explicit fintech mention"),
    I("credit score", 9, "credit score focus"),
    I("credit building", 9, "credit building service"),
    I("investment", 7, "investment tools"),
    I("micro-investment", 8, "micro-investment feature"),
    I("savings", 5, "savings features"),
    I("budgeting", 5, "budgeting tools"),
    I("bill payment", 6, "bill payment tracking"),
    I("debt", 6, "debt management"),
    I("payment", 6, "payment processing"),
    I("lending", 7, "financial lending"),
    I("banking", 6, "banking services"),
    I("financial", 4, "financial services"),
]

HEALTHCARE_INDICATORS = [
    I("telemedicine", 10, "explicit telemedicine platform"),
    I("telehealth", 10, "telehealth service"),
    I("therapist", 9, "mental health therapy"),
    I("therapists", 9, "mental health therapy"),
    I("mental health", 10, "mental health focus"),
    I("counseling", 8, "counseling services"),
    I("therapy", 7, "therapy services"),
    I("hipaa", 9, "HIPAA compliance requirement"),
    I("patient", 8, "patient-focused healthcare"),
    I("patients", 8, "patient-focused healthcare"),
    I("medical", 7, "medical services"),
    I("clinical", 7, "clinical services"),
    I("doctor", 7, "physician services"),
    I("physician", 7, "physician services"),
    I("healthcare", 8, "healthcare focus"),
    I("health care", 8, "healthcare focus"),
    I("licensed therapist", 10, "licensed healthcare provider"),
    I("behavioral health", 9, "behavioral health services"),
    I("wellness", 5, "wellness services"),
]

EDTECH_INDICATORS = [
    I("learning", 6, "educational focus"),
    I("course", 5, "course delivery"),
    I("instructor", 5, "instructor-based model"),
    I("student", 4, "student-focused"),
    I("tutor", 5, "tutoring services"),
    I("tutoring", 6, "tutoring services"),
    I("certification", 5, "professional certification/credentialing"),
    I("curriculum", 5, "curriculum development"),
    I(rx(r"lms\b"), 6, "learning management system context", "LMS"),
    I(rx(r"scorm|xapi|lti"), 4, "learning standards/integrations", "SCORM/XAPI/LTI"),
]

# ── Physical intent pre-pass ──
_PHYSICAL_CATEGORY = re.compile(
    r"(bag|bags|handbag|handbags|purse|purses|tote|totes|wallet|wallets|belt|belts"
    r"|accessor(?:y|ies)|leather|leather\s+goods)",
    re.IGNORECASE,
)
_SELL_OR_MAKE = re.compile(
    r"\b(sell|selling|make|making|manufactur(?:e|ing)|produce|producing)\b", re.IGNORECASE
)
_SHIPPING = re.compile(r"\b(ship|shipping|deliver|fulfillment|worldwide)\b", re.IGNORECASE)
_COGS = re.compile(r"\b(cogs|unit\s*cost|cost\s*to\s*make|costs?\s*\$?\d)", re.IGNORECASE)
_PRICE_RANGE = re.compile(r"\$?\s?\d{2,4}\s*[-–]\s*\$?\s?\d{2,4}")
_PRICE = re.compile(r"\$\s?\d{2,4}")

PHYSICAL_INTENT_BONUS = 18
FOOD_DOMINANCE_THRESHOLD = 10
FOOD_DTC_DISCOUNT = 0.1
SUBSCRIPTION_PHYSICAL_MULTIPLIER = 0.3

_ENTERPRISE_PRICE = re.compile(r"\$\d{2,3}k|\$\d+m")

# =============================================================================
# Constraints and labels
# =============================================================================

MODEL_CONSTRAINTS: Dict[BusinessModelType, List[str]] = {
    T.ENTERPRISE_SAAS: ["long sales cycles", "enterprise compliance", "security reviews", "integration complexity"],
    T.MOBILE_APP: ["app store policies", "retention/DAU", "acquisition costs"],
    T.FOOD_SERVICE: ["food safety regulations", "delivery/logistics", "platform commission costs"],
    T.PHYSICAL_PRODUCT: ["inventory management", "shipping costs", "material sourcing", "seasonal demand"],
    T.MARKETPLACE: ["chicken-egg problem", "disintermediation risk", "platform network effects"],
    T.SAAS_B2B: ["customer acquisition cost", "feature parity", "switching costs"],
    T.DTC_SUBSCRIPTION: ["churn rates", "shipping costs", "inventory management"],
    T.FINTECH: ["compliance/licensing", "fraud risk", "capital constraints"],
    T.HEALTHCARE: ["HIPAA/PHI", "clinical validation", "integration with EHR"],
    T.EDTECH: ["district procurement", "engagement/retention", "seasonality"],
}
_DEFAULT_CONSTRAINTS = ["market saturation", "competitive pressure"]

_DISPLAY_LABELS: Dict[BusinessModelType, str] = {
    T.MOBILE_APP: "CONSUMER MOBILE APP",
    T.DTC_SUBSCRIPTION: "DTC SUBSCRIPTION",
    T.SAAS_B2B: "SAAS B2B",
    T.ENTERPRISE_SAAS: "ENTERPRISE SAAS",
    T.PHYSICAL_PRODUCT: "PHYSICAL PRODUCT",
    T.FOOD_SERVICE: "FOOD SERVICE",
}


def constraints_for_model(model: BusinessModelType) -> List[str]:
    return list(MODEL_CONSTRAINTS.get(model, _DEFAULT_CONSTRAINTS))


def business_model_display_label(model: BusinessModelType) -> str:
    """Upper-case label used when presenting a business model."""
    model = BusinessModelType(model)
    return _DISPLAY_LABELS.get(model, model.value.replace("-", " ").upper())


# =============================================================================
# Detection
# =============================================================================

def has_strong_physical_intent(text: str) -> bool:
    if not _PHYSICAL_CATEGORY.search(text):
        return False
    return bool(
        _SELL_OR_MAKE.search(text)
        or _SHIPPING.search(text)
        or _COGS.search(text)
        or _PRICE_RANGE.search(text)
        or _PRICE.search(text)
    )


def has_enterprise_signal(text: str) -> bool:
    return "fortune" in text or "enterprise" in text or bool(_ENTERPRISE_PRICE.search(text))


def _infer_sub_type(winner: BusinessModelType, text: str) -> Optional[str]:
    def has(*terms: str) -> bool:
        return any(term in text for term in terms)

    if winner == T.HEALTHCARE:
        if has("mental health", "therapist", "counseling"):
            return "mental-health"
        if has("telemedicine", "telehealth"):
            return "telehealth"
        if has("clinical", "medical"):
            return "clinical-services"
        return None
    if winner == T.FOOD_SERVICE:
        if has("ghost kitchen", "cloud kitchen"):
            return "ghost-kitchen"
        if has("meal prep", "subscription"):
            return "meal-prep-subscription"
        if has("catering", "corporate"):
            return "corporate-catering"
        return "meal-delivery"
    if winner == T.MOBILE_APP:
        if has("fitness", "workout", "nutrition"):
            return "fitness-wellness"
        if has("dating", "relationship"):
            return "dating-social"
        if has("meditation", "mental health", "therapy"):
            return "mental-wellness"
        if has("budgeting", "finance", "money"):
            return "personal-finance"
        if has("productivity", "task", "todo"):
            return "productivity"
        if has("gaming", "game"):
            return "gaming"
        return "general-consumer"
    return None


def _score_archetypes(text: str) -> Dict[BusinessModelType, MatchResult]:
    scores: Dict[BusinessModelType, MatchResult] = {t: MatchResult() for t in _RANK_ORDER}

    score_text(text, MOBILE_APP_INDICATORS, result=scores[T.MOBILE_APP])
    score_text(text, ENTERPRISE_SAAS_INDICATORS, result=scores[T.ENTERPRISE_SAAS])
    score_text(text, FOOD_SERVICE_INDICATORS, result=scores[T.FOOD_SERVICE])

    dtc = score_text(text, DTC_SUBSCRIPTION_INDICATORS, result=scores[T.DTC_SUBSCRIPTION])
    food = scores[T.FOOD_SERVICE]
    if food.score > FOOD_DOMINANCE_THRESHOLD and dtc.score > 0:
        dtc.score *= FOOD_DTC_DISCOUNT
        dtc.reasons.append("subscription indicators discounted due to Food Service context")

    physical = scores[T.PHYSICAL_PRODUCT]
    multiplier = SUBSCRIPTION_PHYSICAL_MULTIPLIER if dtc.score > 0 else 1.0
    if has_strong_physical_intent(text):
        physical.score += PHYSICAL_INTENT_BONUS
        physical.evidence.append("explicit-physical-intent")
        physical.reasons.append("explicit selling/making tangible goods with price/shipping signals")
    score_text(text, PHYSICAL_PRODUCT_INDICATORS, multiplier=multiplier, result=physical)

    score_text(text, MARKETPLACE_INDICATORS, result=scores[T.MARKETPLACE])
    score_text(text, SAAS_B2B_INDICATORS, result=scores[T.SAAS_B2B])
    score_text(text, FINTECH_INDICATORS, result=scores[T.FINTECH])
    score_text(text, HEALTHCARE_INDICATORS, result=scores[T.HEALTHCARE])
    score_text(text, EDTECH_INDICATORS, result=scores[T.EDTECH])
    return scores


def detect_business_model_type(idea_text: str) -> BusinessModelClassification:
    """Classify *idea_text* into one of the 11 business-model archetypes.

    Always resolves: text with no positive indicator defaults to
    Services with confidence 0.3.
    """
    text = (idea_text or "").lower()
    scores = _score_archetypes(text)

    ranked = sorted(
        ((t, r) for t, r in scores.items() if r.score > 0),
        key=lambda item: item[1].score,
        reverse=True,
    )
    if not ranked:
        return BusinessModelClassification(
            primary_type=T.SERVICES,
            confidence=0.3,
            indicators=["fallback classification"],
            constraints=constraints_for_model(T.SERVICES),
            reasoning_chain=["No strong indicators found, defaulting to services"],
        )

    winner, data = ranked[0]
    if winner == T.SAAS_B2B and has_enterprise_signal(text):
        enterprise = scores[T.ENTERPRISE_SAAS].score
        if enterprise >= 12 or enterprise >= scores[T.SAAS_B2B].score - 2:
            winner, data = T.ENTERPRISE_SAAS, scores[T.ENTERPRISE_SAAS]

    share = data.score / (data.score + ranked[1][1].score) if len(ranked) > 1 else 1.0
    confidence = min(0.95, max(0.4, (data.score / 20) * share))

    return BusinessModelClassification(
        primary_type=winner,
        sub_type=_infer_sub_type(winner, text),
        confidence=confidence,
        indicators=list(data.evidence),
        constraints=constraints_for_model(winner),
        reasoning_chain=list(data.reasons),
    )
