# wellbeing/models/__init__.py
from wellbeing.models.users import User
from wellbeing.models.mood_records import MoodRecord
from wellbeing.models.recommendations import Recommendation
