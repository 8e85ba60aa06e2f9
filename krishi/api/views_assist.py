"""Views for the farmer assistant: Q&A, crop scans and voice output."""
from __future__ import annotations

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from krishi.api.serializers import CropScanSerializer, FarmerQuestionSerializer, VoiceSynthesisSerializer
from krishi.api.views import invalid_request
from krishi.core.services.assistant import CropScanner, answer_question, synthesize_voice


logger = logging.getLogger(__name__)


def _first_error(errors) -> str:
    for messages in errors.values():
        if messages:
            return str(messages[0])
    return "Invalid request"


class FarmerQAView(APIView):
    def post(self, request, *args, **kwargs):
        serializer = FarmerQuestionSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request(_first_error(serializer.errors), serializer.errors)
        data = serializer.validated_data
        answer = answer_question(data["question"], data["language"], data.get("category"))
        return Response({"success": True, "answer": answer}, status=status.HTTP_200_OK)


class CropScanView(APIView):
    """Accept a crop photo and return a mock diagnosis."""

    parser_classes = [MultiPartParser, FormParser]
    scanner = CropScanner()

    def post(self, request, *args, **kwargs):
        upload = request.FILES.get("image")
        if upload is not None and upload.size > settings.SCAN_MAX_UPLOAD_BYTES:
            return invalid_request(
                f"Image exceeds {settings.SCAN_MAX_UPLOAD_BYTES} bytes",
                code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            )
        serializer = CropScanSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request("Invalid scan request", serializer.errors)
        data = serializer.validated_data

        image = data.get("image")
        scan = self.scanner.scan(
            crop_type=data["cropType"],
            location=data["location"],
            premium=data["premium"],
            image=image.read() if image is not None else None,
            content_type=getattr(image, "content_type", None) or "image/jpeg",
        )
        logger.info("Crop scan %s for %s: %s", scan["id"], scan["cropType"], scan["healthStatus"])
        message = "Premium analysis completed" if data["premium"] else "Basic analysis completed"
        return Response({"success": True, "scan": scan, "message": message}, status=status.HTTP_200_OK)


class VoiceSynthesisView(APIView):
    def post(self, request, *args, **kwargs):
        serializer = VoiceSynthesisSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request(_first_error(serializer.errors), serializer.errors)
        data = serializer.validated_data
        return Response(synthesize_voice(data["text"], data["language"]), status=status.HTTP_200_OK)
