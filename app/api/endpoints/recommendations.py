from fastapi import APIRouter, Depends
from loguru import logger

from app.models.recommendation import Rail, RecommendationResult
from app.services.recommendation.engine import RecommendationEngine
from app.services.recommendation_service import build_rails, get_recommendation_engine

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


async def _load_or_empty(engine: RecommendationEngine, user_id: str) -> RecommendationResult:
    """A failed build shows no recommendations instead of breaking the home screen."""
    try:
        return await engine.build_recommendations(user_id)
    except Exception as e:
        logger.exception(f"[{user_id}] Error building recommendations: {e}")
        return RecommendationResult.empty()


@router.get("/{user_id}", response_model=RecommendationResult)
async def get_recommendations(user_id: str, engine: RecommendationEngine = Depends(get_recommendation_engine)):
    """Ranked movies, series and combined lists for a user."""
    return await _load_or_empty(engine, user_id)


@router.get("/{user_id}/rails", response_model=list[Rail])
async def get_recommendation_rails(
    user_id: str, engine: RecommendationEngine = Depends(get_recommendation_engine)
):
    """The same lists as titled home screen rails."""
    result = await _load_or_empty(engine, user_id)
    return build_rails(result)
