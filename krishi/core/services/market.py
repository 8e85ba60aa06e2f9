"""Price negotiation, mock bidding and export guidance."""
from __future__ import annotations

import math
from typing import Dict, Mapping


DEFAULT_BASE_PRICE = 32

# Rupees per kg, keyed by Hindi and English crop names.
BASE_PRICES: Mapping[str, int] = {
    "गेहूं": 30, "wheat": 30,
    "धान": 25, "rice": 25,
    "टमाटर": 45, "tomato": 45,
    "प्याज": 35, "onion": 35,
    "कपास": 55, "cotton": 55,
}

QUALITY_MULTIPLIERS: Mapping[str, float] = {"premium": 1.15, "basic": 0.9}

NEGOTIATION_TACTICS = (
    "Emphasize high market demand and limited supply",
    "Set a firm price with minimal negotiation room",
    "Highlight upward price trend and future price predictions",
    "Create urgency by mentioning potential price increases",
    "Prepare alternative buyers and competitive offers",
    "Use market intelligence and price comparison data",
    "Maintain flexibility while protecting minimum profit margins",
)
MARKET_ADVANTAGES = (
    "High market confidence and stable demand patterns",
    "Direct farmer-to-buyer connection eliminates middleman costs",
    "Flexible payment terms and delivery options available",
)
BEST_TIMING = (
    "Current timing is optimal - prices are trending upward. "
    "Consider holding for 1-2 weeks if possible."
)
ALTERNATIVE_MARKETS = (
    "Local mandis and agricultural markets",
    "Direct consumer sales and farmer markets",
    "National commodity exchanges (NCDEX, MCX)",
    "Online agricultural trading platforms",
    "Food processing companies and mills",
    "Contract farming with agribusiness companies",
    "Government procurement schemes (MSP rates)",
)

# (buyer, fraction of the farmer's max price, terms)
BUYERS = (
    ("Adani Agri Fresh", 0.95, "Payment in 15 days, pickup from farm"),
    ("ITC Agri Business", 1.02, "Immediate payment, quality bonus included"),
    ("Local Cooperative Society", 0.98, "Payment on delivery, transportation provided"),
)
BIDDING_RECOMMENDATIONS = (
    "ITC Agri Business offers best price with immediate payment",
    "Consider negotiating pickup costs with Adani Agri Fresh",
    "Local cooperative provides good backup option",
    "Monitor bids for next 2 hours before final decision",
)

EXPORT_REQUIREMENTS = (
    "Export license and registration",
    "Quality certifications and lab reports",
    "Phytosanitary certificates",
    "Origin certificates",
    "International shipping arrangements",
    "Foreign exchange documentation",
    "Compliance with importing country regulations",
)


def base_price(crop: str) -> int:
    return BASE_PRICES.get(crop) or BASE_PRICES.get(crop.lower()) or DEFAULT_BASE_PRICE


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def negotiation_strategy(
    crop: str,
    quantity: float,
    quality: str = "standard",
    market_type: str = "local",
) -> Dict[str, object]:
    """Price band and talking points for selling ``quantity`` kg of ``crop``."""
    multiplier = QUALITY_MULTIPLIERS.get(quality, 1.0)
    recommended = _round_half_up(base_price(crop) * multiplier)
    return {
        "negotiationStrategy": {
            "recommendedPrice": recommended,
            "minAcceptablePrice": _round_half_up(recommended * 0.88),
            "maxNegotiationPrice": _round_half_up(recommended * 1.1),
            "negotiationTactics": list(NEGOTIATION_TACTICS),
            "marketAdvantages": list(MARKET_ADVANTAGES),
            "bestTiming": BEST_TIMING,
            "alternativeMarkets": list(ALTERNATIVE_MARKETS),
        },
        "marketAnalysis": {
            "crop": crop,
            "requestedQuantity": quantity,
            "estimatedValue": recommended * quantity,
            "qualityGrade": quality,
            "marketType": market_type,
        },
    }


def simulate_bidding(max_price: float) -> Dict[str, object]:
    return {
        "status": "Active bidding in progress",
        "currentBids": [
            {"buyer": buyer, "price": max_price * factor, "terms": terms}
            for buyer, factor, terms in BUYERS
        ],
        "recommendations": list(BIDDING_RECOMMENDATIONS),
    }


def international_opportunities() -> Dict[str, object]:
    return {
        "markets": [],
        "estimatedReturns": [],
        "requirements": list(EXPORT_REQUIREMENTS),
    }


__all__ = [
    "BASE_PRICES",
    "base_price",
    "international_opportunities",
    "negotiation_strategy",
    "simulate_bidding",
]
