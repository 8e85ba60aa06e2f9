"""Views for price negotiation, mock bidding and export markets."""
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from krishi.api.serializers import BiddingSerializer, MarketQuerySerializer, PriceNegotiationSerializer
from krishi.api.views import invalid_request
from krishi.core.services import market


class PriceNegotiationView(APIView):
    def post(self, request, *args, **kwargs):
        serializer = PriceNegotiationSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request("Crop type and quantity are required", serializer.errors)
        data = serializer.validated_data
        strategy = market.negotiation_strategy(
            crop=data["crop"],
            quantity=data["quantity"],
            quality=data["quality"],
            market_type=data["marketType"],
        )
        return Response({"success": True, **strategy}, status=status.HTTP_200_OK)


class AutomatedBiddingView(APIView):
    def post(self, request, *args, **kwargs):
        serializer = BiddingSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request("maxPrice is required", serializer.errors)
        results = market.simulate_bidding(serializer.validated_data["maxPrice"])
        return Response({"success": True, "biddingResults": results}, status=status.HTTP_200_OK)


class InternationalMarketsView(APIView):
    def post(self, request, *args, **kwargs):
        serializer = MarketQuerySerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request("Invalid market query", serializer.errors)
        return Response(
            {"success": True, "internationalOpportunities": market.international_opportunities()},
            status=status.HTTP_200_OK,
        )
