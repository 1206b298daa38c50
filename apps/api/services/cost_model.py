"""Credit pricing and per-feature profitability.

1 credit is sold at $0.01. Feature prices are set so every operation keeps
a margin of at least 80% over its operational cost.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

CREDIT_PRICE = 0.01
MIN_MARGIN_PERCENT = 80.0

DEFAULT_POST_TARGETS = ("tiktok", "youtube_shorts")

CREDIT_COSTS: Dict[str, int] = {
    "video_generation": 120,
    "market_brain_crawl": 50,
    "caption_rerender": 25,
    "autoposter_platform": 10,
}

# USD per operation.
OPERATION_COSTS: Dict[str, Dict[str, float]] = {
    "video_generation": {
        "script": 0.002,
        "render": 0.04,
        "compliance": 0.002,
        "storage": 0.01,
        "autoposter": 0.005,
        "misc": 0.01,
    },
    "market_brain_crawl": {
        "llm_extraction": 0.02,
        "scraping": 0.005,
        "storage": 0.005,
    },
    "caption_rerender": {
        "llm_generation": 0.01,
        "processing": 0.01,
    },
    "autoposter_platform": {
        "api_cost": 0.005,
    },
}

CREDIT_PACKAGES: List[Dict[str, Any]] = [
    {"name": "Mini", "credits": 500, "price": 5},
    {"name": "Power", "credits": 2000, "price": 20},
    {"name": "Agency", "credits": 5000, "price": 50},
]

# Monthly plans; `price` and `retail_value` in USD.
SUBSCRIPTION_TIERS: List[Dict[str, Any]] = [
    {
        "name": "Starter",
        "price": 9,
        "credits": 900,
        "retail_value": 9,
        "approx_videos": 7,
        "features": ["7 viral videos/month", "Market Brain access", "Basic support"],
    },
    {
        "name": "Growth",
        "price": 29,
        "credits": 3000,
        "retail_value": 30,
        "approx_videos": 25,
        "features": ["25 viral videos/month", "Market Brain unlimited", "Priority support", "AutoPoster included"],
    },
    {
        "name": "Pro",
        "price": 79,
        "credits": 9000,
        "retail_value": 90,
        "approx_videos": 75,
        "features": [
            "75 viral videos/month",
            "Multi-vertical targeting",
            "White-label options",
            "Dedicated account manager",
        ],
    },
    {
        "name": "Elite",
        "price": 199,
        "credits": 25000,
        "retail_value": 250,
        "approx_videos": 210,
        "features": [
            "210 viral videos/month",
            "Unlimited everything",
            "Custom integrations",
            "API access",
            "24/7 priority support",
        ],
    },
]


def resolve_post_targets(post_targets: Optional[Sequence[str]]) -> List[str]:
    if post_targets is None:
        return list(DEFAULT_POST_TARGETS)
    return [str(target) for target in post_targets]


def recreate_cost(post_targets: Optional[Sequence[str]]) -> int:
    """Credits charged to recreate a trend: one render plus one upload per platform."""
    platform_count = max(1, len(resolve_post_targets(post_targets)))
    return CREDIT_COSTS["video_generation"] + CREDIT_COSTS["autoposter_platform"] * platform_count


def operation_cost(feature: str) -> float:
    if feature not in OPERATION_COSTS:
        raise KeyError(f"Unknown feature: {feature}")
    return round(sum(OPERATION_COSTS[feature].values()), 6)


def profitability(feature: str) -> Dict[str, float]:
    credits = CREDIT_COSTS[feature]
    revenue = credits * CREDIT_PRICE
    cost = operation_cost(feature)
    profit = revenue - cost
    return {
        "credits": credits,
        "revenue": round(revenue, 6),
        "cost": cost,
        "profit": round(profit, 6),
        "margin": round((profit / revenue) * 100, 2) if revenue else 0.0,
    }


def validate_margins(min_margin: float = MIN_MARGIN_PERCENT) -> Dict[str, Any]:
    issues: List[str] = []
    for feature in CREDIT_COSTS:
        metrics = profitability(feature)
        if metrics["margin"] < min_margin:
            issues.append(f"{feature}: {metrics['margin']:.1f}% margin (below {min_margin:.0f}% target)")
    return {"valid": not issues, "issues": issues}
