"""Request body validation for the API views."""
from __future__ import annotations

from rest_framework import serializers


class SoilAnalysisSerializer(serializers.Serializer):
    # Gaps are resolved later by the configured missing-value policy.
    pH = serializers.FloatField(required=False, allow_null=True)
    nitrogen = serializers.FloatField(required=False, allow_null=True)
    phosphorus = serializers.FloatField(required=False, allow_null=True)
    potassium = serializers.FloatField(required=False, allow_null=True)
    organicMatter = serializers.FloatField(required=False, allow_null=True)
    moisture = serializers.FloatField(required=False, allow_null=True)
    temperature = serializers.FloatField(required=False, allow_null=True)
    region = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class FarmerQuestionSerializer(serializers.Serializer):
    question = serializers.CharField(error_messages={"required": "Question is required"})
    language = serializers.CharField(required=False, default="hindi")
    category = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    context = serializers.JSONField(required=False)


class PriceNegotiationSerializer(serializers.Serializer):
    crop = serializers.CharField()
    quantity = serializers.FloatField()
    quality = serializers.CharField(required=False, default="standard")
    location = serializers.CharField(required=False, allow_blank=True)
    marketType = serializers.CharField(required=False, default="local")

    def validate_quantity(self, value: float) -> float:
        if not value:
            raise serializers.ValidationError("Quantity is required")
        return value


class BiddingSerializer(serializers.Serializer):
    crop = serializers.CharField(required=False, allow_blank=True)
    quantity = serializers.FloatField(required=False)
    maxPrice = serializers.FloatField(min_value=0)
    duration = serializers.CharField(required=False, allow_blank=True)


class MarketQuerySerializer(serializers.Serializer):
    crop = serializers.CharField(required=False, allow_blank=True)
    quantity = serializers.FloatField(required=False)


class VoiceSynthesisSerializer(serializers.Serializer):
    text = serializers.CharField(error_messages={"required": "Text is required for synthesis"})
    language = serializers.CharField(required=False, default="hi")


class CropScanSerializer(serializers.Serializer):
    image = serializers.FileField(required=False)
    cropType = serializers.CharField(required=False, default="Unknown")
    location = serializers.CharField(required=False, default="India")
    premium = serializers.BooleanField(required=False, default=False)
