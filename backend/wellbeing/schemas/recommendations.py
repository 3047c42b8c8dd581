from pydantic import BaseModel, ConfigDict


class Recommendation(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    category: str  # e.g. "Exercise", "Mindfulness", "Social", "Work-Life Balance", "Overview"


class PersonalizedRecommendationResponse(BaseModel):
    recommendation: str
