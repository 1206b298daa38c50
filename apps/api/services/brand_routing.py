"""Brand routing for multi-vertical video generation.

Maps a free-text target vertical ("Real Estate Agent", "Septic Pumping")
to the brand label and domain the video is published under.
"""

import re

REALTOR_BRAND = "AIRealtors247.ca"
LAWYER_BRAND = "AILawyers247.ca"
DEFAULT_BRAND = "AIAgents247.ca"

_REALTOR_KEYWORDS = ("realtor", "real estate")
_LAWYER_KEYWORDS = ("lawyer", "legal", "attorney")


def get_brand_label_for_vertical(vertical: str) -> str:
    normalized = (vertical or "").lower().strip()
    if any(keyword in normalized for keyword in _REALTOR_KEYWORDS):
        return REALTOR_BRAND
    if any(keyword in normalized for keyword in _LAWYER_KEYWORDS):
        return LAWYER_BRAND
    # Trades, home services, towing, septic and everything else.
    return DEFAULT_BRAND


def get_default_domain_for_vertical(vertical: str) -> str:
    return get_brand_label_for_vertical(vertical)


def normalize_vertical_slug(vertical: str) -> str:
    """Convert "Garage Door Repair" to "garage-door-repair"."""
    slug = re.sub(r"\s+", "-", (vertical or "").lower().strip())
    return re.sub(r"[^a-z0-9-]", "", slug)


def get_vertical_display_name(slug: str) -> str:
    """Convert "garage-door-repair" to "Garage Door Repair"."""
    return " ".join(word[:1].upper() + word[1:] for word in (slug or "").split("-"))
