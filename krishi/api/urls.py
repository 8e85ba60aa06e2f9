"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from krishi.api.views import SoilAnalysisView, WeatherView
from krishi.api.views_assist import CropScanView, FarmerQAView, VoiceSynthesisView
from krishi.api.views_market import AutomatedBiddingView, InternationalMarketsView, PriceNegotiationView

urlpatterns = [
    path("weather/<str:location>", WeatherView.as_view(), name="weather"),
    path("soil-analysis", SoilAnalysisView.as_view(), name="soil-analysis"),
    path("farmer-qa", FarmerQAView.as_view(), name="farmer-qa"),
    path("scan", CropScanView.as_view(), name="scan"),
    path("voice/synthesize", VoiceSynthesisView.as_view(), name="voice-synthesize"),
    path("price-negotiation", PriceNegotiationView.as_view(), name="price-negotiation"),
    path("automated-bidding", AutomatedBiddingView.as_view(), name="automated-bidding"),
    path("international-markets", InternationalMarketsView.as_view(), name="international-markets"),
]
