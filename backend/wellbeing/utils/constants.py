# Static seed data
# DB 가 비어 있을 때 시드로, DB 를 쓸 수 없을 때 fallback 으로 사용

CATEGORY_MINDFULNESS = "Mindfulness"
CATEGORY_EXERCISE = "Exercise"
CATEGORY_SOCIAL = "Social"
CATEGORY_WORK_LIFE = "Work-Life Balance"
CATEGORY_OVERVIEW = "Overview"

# (id, user_id, score, notes, days_ago)
SEED_MOOD_RECORDS = [
    (1, 1, 3, "Feeling okay today", 6),
    (2, 1, 4, "Good progress on project", 5),
    (3, 1, 2, "Stressed with deadlines", 4),
    (4, 1, 3, "Better than yesterday", 3),
    (5, 1, 5, "Great day, finished major task", 2),
    (6, 1, 4, "Still feeling good", 1),
    (7, 1, 4, "Looking forward to the weekend", 0),
]

# 다른 사용자 기록 (관리자 대시보드용)
SEED_OTHER_MOOD_RECORDS = [
    (8, 2, 3, "Average day", 5),
    (9, 2, 2, "Difficult meeting", 3),
    (10, 3, 5, "Great progress on project", 2),
]

SEED_PASSWORD = "Password@123"

# (id, name, email, username, department, is_admin, role, days_since_join, days_since_login)
SEED_USERS = [
    (1, "Admin User", "admin@example.com", "admin", "IT", True, "Administrator", 30, 0),
    (2, "John Smith", "john.smith@example.com", "john", "Marketing", False, "Employee", 20, 1),
    (3, "Emily Johnson", "emily.johnson@example.com", "emily", "HR", False, "Employee", 15, 2),
]

RECOMMENDATION_CATALOG = [
    {"id": 1, "title": "Take a short walk",
     "description": "Taking a 10-minute walk can boost your mood and energy levels.",
     "category": CATEGORY_EXERCISE},
    {"id": 2, "title": "Practice mindfulness",
     "description": "Spend 5 minutes practicing mindful breathing to reduce stress.",
     "category": CATEGORY_MINDFULNESS},
    {"id": 3, "title": "Connect with a colleague",
     "description": "Reach out to a team member for a quick virtual coffee chat.",
     "category": CATEGORY_SOCIAL},
    {"id": 4, "title": "Desk stretches",
     "description": "Try these 3 simple stretches to relieve tension while sitting at your desk.",
     "category": CATEGORY_EXERCISE},
    {"id": 5, "title": "Set work boundaries",
     "description": "Try setting specific work hours and take regular breaks to maintain work-life balance.",
     "category": CATEGORY_WORK_LIFE},
    {"id": 6, "title": "Digital detox",
     "description": "Take a 30-minute break from all digital devices to reduce eye strain and mental fatigue.",
     "category": CATEGORY_WORK_LIFE},
    {"id": 7, "title": "Gratitude journaling",
     "description": "Write down three things you're grateful for today to improve your perspective.",
     "category": CATEGORY_MINDFULNESS},
    {"id": 8, "title": "Lunch with colleagues",
     "description": "Plan a lunch with teammates to strengthen your workplace connections.",
     "category": CATEGORY_SOCIAL},
    {"id": 9, "title": "Posture check",
     "description": "Take a moment to check and correct your sitting posture to prevent back pain.",
     "category": CATEGORY_EXERCISE},
    {"id": 10, "title": "Organize your workspace",
     "description": "A tidy workspace can reduce stress and improve focus. Take 10 minutes to organize.",
     "category": CATEGORY_WORK_LIFE},
    {"id": 11, "title": "Take the stairs",
     "description": "Skip the elevator and take the stairs for a quick cardio boost during your workday.",
     "category": CATEGORY_EXERCISE},
    {"id": 12, "title": "5-4-3-2-1 grounding",
     "description": "Notice 5 things you see, 4 you feel, 3 you hear, 2 you smell, and 1 you taste to reduce anxiety.",
     "category": CATEGORY_MINDFULNESS},
    {"id": 13, "title": "Virtual coffee break",
     "description": "Schedule a short virtual coffee break with a colleague you haven't spoken to in a while.",
     "category": CATEGORY_SOCIAL},
    {"id": 14, "title": "Wrist and hand stretches",
     "description": "Relieve tension from typing with simple wrist rotations and finger stretches.",
     "category": CATEGORY_EXERCISE},
    {"id": 15, "title": "Email boundaries",
     "description": "Set specific times to check emails rather than responding to each notification.",
     "category": CATEGORY_WORK_LIFE},
    {"id": 16, "title": "Standing desk",
     "description": "If possible, switch to a standing desk for part of your day to improve circulation.",
     "category": CATEGORY_EXERCISE},
    {"id": 17, "title": "Box breathing",
     "description": "Practice box breathing: inhale for 4 seconds, hold for 4, exhale for 4, hold for 4, repeat.",
     "category": CATEGORY_MINDFULNESS},
    {"id": 18, "title": "Join a workplace group",
     "description": "Consider joining a workplace interest group to connect with colleagues with similar interests.",
     "category": CATEGORY_SOCIAL},
    {"id": 19, "title": "Neck rolls",
     "description": "Gently roll your neck in circles to release tension from long periods of computer work.",
     "category": CATEGORY_EXERCISE},
    {"id": 20, "title": "Meeting-free block",
     "description": "Block out time in your calendar for focused work without meetings or interruptions.",
     "category": CATEGORY_WORK_LIFE},
    {"id": 21, "title": "Lunchtime walk",
     "description": "Use part of your lunch break for a quick walk to get fresh air and movement.",
     "category": CATEGORY_EXERCISE},
    {"id": 22, "title": "Progressive muscle relaxation",
     "description": "Tense and then release each muscle group in your body to release physical tension.",
     "category": CATEGORY_MINDFULNESS},
    {"id": 23, "title": "Mentorship opportunity",
     "description": "Consider becoming a mentor or finding a mentor to enhance your professional connections.",
     "category": CATEGORY_SOCIAL},
    {"id": 24, "title": "Eye exercises",
     "description": "Follow the 20-20-20 rule: every 20 minutes, look at something 20 feet away for 20 seconds.",
     "category": CATEGORY_EXERCISE},
    {"id": 25, "title": "Schedule personal time",
     "description": "Block time in your calendar for personal activities that recharge you.",
     "category": CATEGORY_WORK_LIFE},
]
