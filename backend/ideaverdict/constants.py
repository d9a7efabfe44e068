"""
Static lookup tables shared by the validation pipeline.

Dictionaries are ordered: where a table is scanned for the best match,
the first-declared entry wins ties.
"""

from typing import Dict, List, Tuple

# =============================================================================
# Business DNA keyword tables
# =============================================================================

DEFAULT_INDUSTRY = "technology"
DEFAULT_SUB_INDUSTRY = "general"
DEFAULT_BUSINESS_MODEL = "direct-sales"

INDUSTRY_KEYWORDS: Dict[str, List[str]] = {
    "fintech": ["payment", "banking", "finance", "lending", "crypto", "wallet", "trading"],
    "healthtech": ["health", "medical", "therapy", "wellness", "fitness", "telemedicine"],
    "edtech": ["education", "learning", "course", "training", "school", "student"],
    "ecommerce": [
        "shop", "store", "retail", "marketplace", "buy", "sell", "product",
        "shipping", "fulfillment", "inventory", "warehouse", "3pl", "box", "crate", "bag",
    ],
    "saas": ["software", "platform", "tool", "dashboard", "api", "service", "management"],
    "beauty": ["skincare", "makeup", "cosmetics", "beauty", "hair", "nail"],
    "food": [
        "restaurant", "food", "delivery", "meal", "recipe", "cooking",
        "coffee", "beverage", "roast", "roastery", "beans",
    ],
    "travel": ["travel", "booking", "hotel", "flight", "vacation", "trip"],
    "real-estate": ["property", "real estate", "housing", "rent", "buy home"],
    "entertainment": ["game", "music", "video", "streaming", "content", "media"],
}

SUB_INDUSTRY_KEYWORDS: Dict[str, Dict[str, List[str]]] = {
    "beauty": {
        "skincare": ["skin", "face", "moisturizer", "serum", "cleanser"],
        "makeup": ["lipstick", "foundation", "mascara", "eyeshadow"],
        "haircare": ["shampoo", "conditioner", "hair treatment"],
    },
    "fintech": {
        "payments": ["payment", "pay", "transaction", "checkout"],
        "lending": ["loan", "credit", "lending", "borrow"],
        "investing": ["invest", "trading", "portfolio", "stocks"],
    },
    "saas": {
        "productivity": ["productivity", "task", "project", "management"],
        "communication": ["chat", "video", "messaging", "collaboration"],
        "analytics": ["analytics", "data", "dashboard", "reporting"],
    },
}

RECURRING_TERMS = ["subscription", "subscribe", "recurring", "monthly", "quarterly"]
FULFILLMENT_TERMS = [
    "ship", "shipping", "box", "crate", "bag", "inventory", "warehouse",
    "3pl", "fulfillment", "packaging", "beans", "coffee",
]

BUSINESS_MODEL_KEYWORDS: Dict[str, List[str]] = {
    "physical-subscription": [
        "subscription", "monthly", "recurring", "ship", "shipping", "box", "crate",
        "bag", "inventory", "warehouse", "3pl", "fulfillment", "packaging", "coffee", "beans",
    ],
    "subscription": ["subscription", "monthly", "recurring", "saas"],
    "marketplace": ["marketplace", "platform", "connect", "two-sided"],
    "ecommerce": ["sell", "product", "inventory", "shipping"],
    "freemium": ["free", "premium", "upgrade", "basic plan"],
    "advertising": ["ads", "advertising", "sponsored", "free app"],
    "transaction": ["commission", "transaction fee", "per transaction"],
    "service": ["service", "consulting", "done for you"],
}

# Customer type is decided by the first group with any hit.
CUSTOMER_TYPE_KEYWORDS: List[Tuple[str, List[str]]] = [
    ("marketplace", ["marketplace", "platform", "connect", "buyers and sellers"]),
    ("b2b2c", ["white label", "partner", "reseller"]),
    ("b2b", ["business", "company", "enterprise", "team", "organization", "saas"]),
]
DEFAULT_CUSTOMER_TYPE = "b2c"

STAGE_KEYWORDS: List[Tuple[str, List[str]]] = [
    ("launched", ["launched", "selling", "customers"]),
    ("prototype", ["prototype", "beta", "testing"]),
    ("mvp", ["mvp", "minimum viable"]),
]
DEFAULT_STAGE = "idea"

SCALE_KEYWORDS: List[Tuple[str, List[str]]] = [
    ("global", ["global", "worldwide", "international"]),
    ("national", ["national", "country"]),
    ("regional", ["regional", "state"]),
]
DEFAULT_SCALE = "local"

HIGH_CAPITAL_INDUSTRIES = frozenset({"manufacturing", "hardware", "biotech", "real-estate"})
HIGH_CAPITAL_TERMS = ["manufacturing", "hardware"]
LOW_CAPITAL_TERMS = ["software", "app", "digital", "online", "service"]

HIGH_REGULATORY_INDUSTRIES = frozenset({"fintech", "healthtech", "pharmaceuticals", "banking"})
MEDIUM_REGULATORY_INDUSTRIES = frozenset({"food", "beauty", "real-estate"})

NETWORK_STRONG_TERMS = ["network", "viral"]
NETWORK_WEAK_TERMS = ["community", "sharing"]

DNA_BASE_CONFIDENCE = 0.5
DNA_MAX_CONFIDENCE = 0.95
MIN_CLASSIFICATION_CONFIDENCE = 0.4

# =============================================================================
# Market intelligence datasets
# =============================================================================

INTERNAL_MARKET_DATA: Dict[str, Dict] = {
    "beauty": {
        "tam_usd": 189e9,
        "growth_rate": 0.055,
        "competition_level": 4,
        "typical_margins": 0.70,
        "customer_acquisition_difficulty": 6,
    },
    "fintech": {
        "tam_usd": 124e9,
        "growth_rate": 0.15,
        "competition_level": 3,
        "typical_margins": 0.80,
        "customer_acquisition_difficulty": 8,
    },
    "saas": {
        "tam_usd": 195e9,
        "growth_rate": 0.18,
        "competition_level": 2,
        "typical_margins": 0.75,
        "customer_acquisition_difficulty": 7,
    },
}
DEFAULT_INTERNAL_MARKET_DATA: Dict = {
    "tam_usd": 50e9,
    "growth_rate": 0.08,
    "competition_level": 5,
    "typical_margins": 0.40,
    "customer_acquisition_difficulty": 6,
}
INTERNAL_DATA_CONFIDENCE = 0.8

INDUSTRY_TRENDS: Dict[str, List[str]] = {
    "beauty": ["Clean beauty movement", "Personalization trend", "Social commerce growth"],
    "fintech": ["Embedded finance", "Open banking", "Crypto adoption"],
    "saas": ["AI integration", "Vertical specialization", "Usage-based pricing"],
}
DEFAULT_TRENDS = ["Digital transformation", "Mobile-first approach"]

REGULATORY_BARRIERS: Dict[str, List[str]] = {
    "fintech": ["PCI compliance", "Banking regulations", "AML/KYC requirements"],
    "healthtech": ["HIPAA compliance", "FDA approval", "Medical device regulations"],
    "beauty": ["FDA cosmetic regulations", "Ingredient safety requirements"],
}
DEFAULT_BARRIERS = ["General business regulations"]

FALLBACK_MARKET_DATA: Dict = {
    "tam_usd": 10e9,
    "growth_rate": 0.08,
    "competition_level": 5,
    "key_trends": ["Market growth", "Digital adoption"],
    "regulatory_barriers": ["Standard business requirements"],
    "typical_margins": 0.4,
    "customer_acquisition_difficulty": 5,
    "confidence": 0.3,
    "notable_competitors": [],
}

# Competitive density overlay: (terms, competition level, incumbents)
COMPETITIVE_DENSITY: List[Tuple[List[str], int, List[str]]] = [
    (
        ["project management", "kanban", "task tracking"],
        2,
        ["Monday.com", "Asana", "Notion", "Trello", "Jira"],
    ),
    (
        ["crm", "customer relationship"],
        3,
        ["Salesforce", "HubSpot", "Pipedrive"],
    ),
]
CROWDED_INDUSTRIES = frozenset({"beauty", "ecommerce"})
CROWDED_INDUSTRY_LEVEL = 4
DEFAULT_DENSITY_LEVEL = 5

# =============================================================================
# Weighting
# =============================================================================

BASE_WEIGHTS: Dict[str, float] = {
    "problem": 12,
    "underserved": 10,
    "feasibility": 12,
    "differentiation": 10,
    "demand_signals": 14,
    "wtp": 8,
    "market_quality": 10,
    "gtm": 10,
    "execution": 8,
    "risk": 6,
}

MARKETPLACE_WEIGHTS: Dict[str, float] = {
    "supply_demand_balance": 15,
    "network_effects": 18,
    "demand_signals": 18,
    "market_quality": 15,
    "problem": 8,
    "gtm": 8,
}
REGULATED_WEIGHTS: Dict[str, float] = {
    "regulatory_compliance": 15,
    "execution": 15,
    "risk": 12,
    "feasibility": 8,
}
SAAS_WEIGHTS: Dict[str, float] = {
    "wtp": 12,
    "demand_signals": 16,
    "market_quality": 12,
    "differentiation": 12,
    "gtm": 12,
}
PHYSICAL_SUBSCRIPTION_WEIGHTS: Dict[str, float] = {
    "wtp": 10,
    "demand_signals": 15,
    "market_quality": 12,
    "feasibility": 14,
    "gtm": 12,
    "risk": 8,
}
NETWORK_EFFECT_WEIGHTS: Dict[str, float] = {
    "network_effects": 20,
    "viral_potential": 15,
    "demand_signals": 15,
    "differentiation": 15,
    "problem": 8,
}

DIMENSION_LABELS: Dict[str, str] = {
    "market_quality": "Market Opportunity",
    "differentiation": "Competitive Advantage",
    "demand_signals": "Demand Validation",
    "wtp": "Willingness to Pay",
    "gtm": "Go-To-Market Fit",
    "feasibility": "Technical/Operational Feasibility",
    "execution": "Team & Execution Readiness",
    "risk": "Risk Profile",
    "network_effects": "Network Effects",
    "supply_demand_balance": "Supply/Demand Balance",
    "regulatory_compliance": "Regulatory Compliance",
    "viral_potential": "Viral Potential",
}

CONDITIONAL_DIMENSION_REASONS: Dict[str, str] = {
    "network_effects": "Platform growth depends on user-to-user value transfer and liquidity.",
    "supply_demand_balance": "Marketplaces require balanced acquisition and retention on both sides.",
    "regulatory_compliance": "Highly regulated categories need early compliance feasibility.",
    "viral_potential": "Platforms/products with sharing loops benefit from viral growth.",
}

# =============================================================================
# Scoring
# =============================================================================

BASE_DIMENSIONS = (
    "problem",
    "underserved",
    "feasibility",
    "differentiation",
    "demand_signals",
    "wtp",
    "market_quality",
    "gtm",
    "execution",
    "risk",
)
CONDITIONAL_DIMENSIONS = (
    "network_effects",
    "regulatory_compliance",
    "supply_demand_balance",
    "viral_potential",
)

GENERIC_FEATURES = [
    "task tracking",
    "deadlines",
    "team collaboration",
    "slack integration",
    "google workspace",
    "kanban",
    "gantt",
    "templates",
]
NOVELTY_TERMS = ["novel", "unique", "proprietary"]

# (term, saturation level, incumbents, red flags)
SATURATED_CATEGORIES: List[Tuple[str, int, List[str], List[str]]] = [
    (
        "project management",
        95,
        ["Monday.com ($7B)", "Asana ($1.5B)", "Notion ($10B)", "Atlassian ($50B)"],
        [
            "Extreme incumbent advantage",
            "High switching costs",
            "Network effects favor existing players",
        ],
    ),
    (
        "crm",
        92,
        ["Salesforce", "HubSpot", "Pipedrive", "Zoho"],
        [
            "Dominated by entrenched platforms",
            "Expensive acquisition channels",
            "High feature parity expectations",
        ],
    ),
    (
        "email marketing",
        90,
        ["Mailchimp", "Klaviyo", "Campaign Monitor", "Constant Contact"],
        ["Commoditized category", "Price wars", "Deliverability arms race"],
    ),
]
SAAS_PRODUCTIVITY_SATURATION = 75
DEFAULT_SATURATION = 30

REAL_OPPORTUNITY_CAPS: List[Tuple[str, float]] = [
    ("project management", 2),
    ("crm", 3),
    ("email marketing", 3),
]
DEFAULT_REAL_OPPORTUNITY = 5

INCUMBENT_DOMINATED_TERMS = ["project management", "crm", "email marketing"]

# =============================================================================
# Decision thresholds: industry -> (GO, REVIEW)
# =============================================================================

DECISION_THRESHOLDS: Dict[str, Tuple[int, int]] = {
    "fintech": (75, 60),
    "healthtech": (75, 60),
    "marketplace": (70, 55),
    "saas": (70, 55),
    "beauty": (65, 50),
    "ecommerce": (65, 50),
}
DEFAULT_DECISION_THRESHOLDS = (70, 55)

# =============================================================================
# Edge cases
# =============================================================================

ILLEGAL_CONTENT_PATTERN = r"illegal|prohibited|adult|weapon|fraud"
MIN_IDEA_LENGTH = 15
