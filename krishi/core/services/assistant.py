"""Canned farmer Q&A, mock crop scans and mock voice synthesis."""
from __future__ import annotations

import base64
import math
import random
import string
from datetime import datetime, timezone
from typing import Callable, Dict, Mapping, Optional, Tuple


QA_ANSWERS: Mapping[str, Mapping[str, str]] = {
    "hindi": {
        "pest": "कीट नियंत्रण के लिए नीम का तेल या बायो-पेस्टिसाइड का उपयोग करें। रासायनिक दवा से बचें।",
        "irrigation": "दिन में दो बार पानी दें - सुबह और शाम। मिट्टी की नमी चेक करते रहें।",
        "market": "आज गेहूं का भाव ₹2,850 प्रति क्विंटल है। अगले महीने कीमत बढ़ने की संभावना है।",
        "general": "आपके प्रश्न के अनुसार, वर्तमान मौसम में धान की खेती अच्छी होगी। उचित खाद और सिंचाई का ध्यान रखें।",
    },
    "english": {
        "pest": "Use neem oil or bio-pesticides for pest control. Avoid chemical pesticides when possible.",
        "irrigation": "Water twice daily - morning and evening. Monitor soil moisture regularly.",
        "market": "Today's wheat price is ₹2,850 per quintal. Prices expected to rise next month.",
        "general": (
            "Based on your question, paddy cultivation will be good this season. "
            "Maintain proper fertilizer and irrigation."
        ),
    },
}

RELATED_QUESTIONS: Mapping[str, Tuple[str, ...]] = {
    "hindi": ("मिट्टी की जांच कैसे करें?", "बीज का चुनाव कैसे करें?", "खाद कब डालें?"),
    "english": ("How to test soil?", "How to select seeds?", "When to apply fertilizer?"),
}

ACTION_ITEMS: Mapping[str, Tuple[str, ...]] = {
    "hindi": ("मिट्टी की नमी चेक करें", "मौसम का पूर्वानुमान देखें", "बाज़ार भाव की जानकारी लें"),
    "english": ("Check soil moisture", "Monitor weather forecast", "Track market prices"),
}

QA_SOURCES = ("Agricultural Extension Services", "Weather Department", "Market Intelligence")
GOVERNMENT_SCHEMES = ("PM-KISAN", "Crop Insurance Scheme", "KCC - Kisan Credit Card")
QA_CONFIDENCE = 0.85


def answer_question(question: str, language: str = "hindi", category: Optional[str] = None) -> Dict[str, object]:
    """Look up the canned answer for ``category``; unknown categories get the general one."""
    lang = "hindi" if language == "hindi" else "english"
    answers = QA_ANSWERS[lang]
    return {
        "answer": answers.get(category or "general", answers["general"]),
        "confidence": QA_CONFIDENCE,
        "sources": list(QA_SOURCES),
        "relatedQuestions": list(RELATED_QUESTIONS[lang]),
        "actionItems": list(ACTION_ITEMS[lang]),
        "governmentSchemes": list(GOVERNMENT_SCHEMES),
    }


PLACEHOLDER_IMAGE = "/placeholder-crop.jpg"
SUSPECTED_DISEASES = ("Leaf Spot", "Early Blight")
PREMIUM_TREATMENT = (
    "Week 1: Apply organic fungicide",
    "Week 2: Foliar nutrition spray",
    "Week 3: Monitor and adjust irrigation",
)
BASIC_TREATMENT = ("Apply standard treatment", "Regular monitoring required")
_HASH_ALPHABET = string.ascii_lowercase + string.digits


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class CropScanner:
    """Produces a mock diagnosis for an uploaded crop photo."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.rng = rng or random.Random()
        self.now = now

    def scan(
        self,
        crop_type: str = "Unknown",
        location: str = "India",
        premium: bool = False,
        image: Optional[bytes] = None,
        content_type: str = "image/jpeg",
    ) -> Dict[str, object]:
        rng = self.rng
        if image is not None:
            image_url = f"data:{content_type};base64,{base64.b64encode(image).decode('ascii')}"
        else:
            image_url = PLACEHOLDER_IMAGE
        return {
            "id": rng.randrange(10000),
            "cropType": crop_type,
            "healthStatus": "healthy" if rng.random() > 0.3 else "diseased",
            "confidence": round(0.75 + rng.random() * 0.2, 2),
            "diseases": list(SUSPECTED_DISEASES) if rng.random() > 0.5 else [],
            "recommendations": [
                f"Apply balanced NPK fertilizer for {crop_type}",
                "Maintain proper irrigation schedule",
                "Monitor for pest activity regularly",
                "Premium: Use organic pesticides for better yield" if premium else "Basic treatment sufficient",
            ],
            "treatmentPlan": list(PREMIUM_TREATMENT if premium else BASIC_TREATMENT),
            "imageUrl": image_url,
            "ipfsHash": "Qm" + "".join(rng.choice(_HASH_ALPHABET) for _ in range(10)),
            "createdAt": self.now().isoformat().replace("+00:00", "Z"),
            "location": location,
            "weatherConditions": {
                "temperature": round(25 + rng.random() * 10, 1),
                "humidity": round(60 + rng.random() * 20, 1),
                "description": "Partly cloudy",
            },
        }


def synthesize_voice(
    text: str,
    language: str = "hi",
    now: Callable[[], datetime] = _utcnow,
) -> Dict[str, object]:
    """Stand-in for a TTS call: a file name and a rough duration in seconds."""
    millis = int(now().timestamp() * 1000)
    return {
        "audioUrl": f"mock-audio-{millis}.mp3",
        "language": language,
        "duration": math.ceil(len(text) / 10),
    }


__all__ = ["CropScanner", "QA_ANSWERS", "answer_question", "synthesize_voice"]
