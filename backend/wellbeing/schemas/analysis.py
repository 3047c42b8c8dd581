from pydantic import BaseModel
from typing import List, Optional


class MoodAnalysis(BaseModel):
    sentiment: Optional[str] = None  # positive | neutral | negative
    themes: Optional[List[str]] = None
    insights: Optional[str] = None
    activities: Optional[List[str]] = None
