from pydantic import BaseModel
from datetime import datetime


class DashboardStats(BaseModel):
    total_users: int
    active_users: int
    total_mood_entries: int
    average_mood: float
    total_recommendations: int
    database_status: str  # Connected | Disconnected
    data_source: str
    last_updated: datetime
