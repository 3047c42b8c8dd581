from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, func
from wellbeing.database import Base

class MoodRecord(Base):
    __tablename__ = "mood_records"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    mood_score = Column(Integer, nullable=False)  # 1~5
    notes = Column(Text, nullable=True)

    recorded_at = Column(DateTime, server_default=func.now())
