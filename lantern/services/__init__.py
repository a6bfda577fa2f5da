"""Business logic services for Lantern."""

from lantern.services.recommendation_service import (
    RecommendationService,
    build_recommendation_service,
)

__all__ = ["RecommendationService", "build_recommendation_service"]
