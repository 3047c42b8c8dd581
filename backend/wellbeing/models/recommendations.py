from sqlalchemy import Column, Integer, String, Text
from wellbeing.database import Base

class Recommendation(Base):
    __tablename__ = "recommendations"

    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)  # Exercise, Mindfulness, Social, Work-Life Balance
