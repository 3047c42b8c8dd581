from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.models.recommendations import Recommendation as RecommendationRecord
from wellbeing.schemas.recommendations import Recommendation
from wellbeing.services.data_source import FallbackRepository
from wellbeing.utils.constants import RECOMMENDATION_CATALOG


def static_catalog() -> List[Recommendation]:
    return [Recommendation(**item) for item in RECOMMENDATION_CATALOG]


class RecommendationCatalog(FallbackRepository):

    async def get_all(self) -> List[Recommendation]:
        async def query(db: AsyncSession):
            result = await db.execute(
                select(RecommendationRecord).order_by(RecommendationRecord.id.asc())
            )
            return [Recommendation.model_validate(r) for r in result.scalars().all()]

        return await self._with_fallback("Loading recommendations", query, static_catalog)
