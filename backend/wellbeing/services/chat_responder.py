# wellbeing/services/chat_responder.py

import logging
import random
from typing import List, Optional, Sequence

from wellbeing.schemas.chat import ChatMessage
from wellbeing.services.ai_client import AIServiceError, TextGenerator

logger = logging.getLogger(__name__)

RESPONSES = {
    "greeting": [
        "Hello! I'm your wellbeing assistant. How are you feeling today?",
        "Hi there! I'm here to support your wellbeing journey. How can I help?",
        "Welcome! I'm your AI wellbeing companion. What's on your mind today?",
    ],
    "feelingGood": [
        "That's wonderful to hear! What's contributing to your positive mood today?",
        "Great! It's important to recognize what makes us feel good. Anything specific you'd like to share?",
        "Excellent! Would you like some tips to maintain this positive energy?",
    ],
    "feelingBad": [
        "I'm sorry to hear that. Would you like to talk about what's bothering you?",
        "Thank you for sharing. Sometimes acknowledging our feelings is the first step. What do you think might help?",
        "I understand. Would you like me to suggest some simple wellbeing exercises that might help?",
    ],
    "stress": [
        "Stress can be challenging. Have you tried any relaxation techniques recently?",
        "Managing stress is important. Deep breathing, short walks, or even stretching can help in the moment.",
        "I understand. The 5-5-5 technique might help: breathe in for 5 seconds, hold for 5, exhale for 5. Would you like more techniques?",
    ],
    "recommendations": [
        "I can suggest some wellbeing activities based on your mood. Would you like to hear them?",
        "There are several evidence-based practices that might help. Would you like me to share some?",
        "I have some recommendations that might be beneficial for your wellbeing. Would you like to explore them?",
    ],
    "thankYou": [
        "You're welcome! I'm here anytime you need support.",
        "Happy to help! Remember, taking care of your wellbeing is important.",
        "Anytime! Don't hesitate to reach out whenever you need assistance.",
    ],
    "default": [
        "I'm still learning about wellbeing. Could you tell me more about what you're looking for?",
        "That's an interesting point. Would you like me to find some wellbeing resources related to this topic?",
        "I appreciate you sharing that. How else can I support your wellbeing today?",
    ],
}

# 우선순위 순서대로 검사
KEYWORD_CATEGORIES = [
    ("greeting", ("hello", "hi", "hey")),
    ("feelingGood", ("good", "great", "happy", "positive")),
    ("feelingBad", ("bad", "sad", "depressed", "unhappy", "negative")),
    ("stress", ("stress", "anxious", "overwhelm", "worry")),
    ("recommendations", ("recommend", "suggest", "advice")),
    ("thankYou", ("thank",)),
]

CHAT_SYSTEM_PROMPT = (
    "You are a helpful wellbeing assistant for employees. "
    "Your primary goal is to support the user's mental and emotional wellbeing. "
    "Keep responses concise, empathetic, and evidence-based. "
    "When appropriate, suggest specific wellbeing activities or practices. "
    "If the user mentions stress, anxiety, or negative emotions, provide supportive responses. "
    "Do not diagnose medical conditions or provide medical advice. "
    "If the user asks about tracking their mood, suggest using the application's mood tracker feature. "
    "Your responses should be conversational but professional."
)


def classify_message(message: str) -> str:
    text = (message or "").lower()
    for category, keywords in KEYWORD_CATEGORIES:
        if any(k in text for k in keywords):
            return category
    return "default"


def local_response(message: str, rng: Optional[random.Random] = None) -> str:
    choices = RESPONSES.get(classify_message(message), RESPONSES["default"])
    return (rng or random).choice(choices)


def build_chat_prompt(message: str, history: Optional[Sequence[ChatMessage]] = None) -> str:
    lines: List[str] = []
    if history:
        lines.append("Previous conversation:")
        lines.extend(f"{item.role}: {item.content}" for item in history)
    context = "\n".join(lines)
    return f"{context}\n\nUser message: {message}"


class ChatResponder:

    def __init__(self, generator: Optional[TextGenerator] = None, rng: Optional[random.Random] = None):
        self.generator = generator
        self.rng = rng

    def is_available(self) -> bool:
        # 로컬 응답 테이블이 항상 있으므로 항상 사용 가능
        return True

    async def respond(self, message: str, history: Optional[Sequence[ChatMessage]] = None) -> str:
        logger.info(f"Processing message: {message}")

        if self.generator is not None:
            try:
                reply = await self.generator.generate(build_chat_prompt(message, history), CHAT_SYSTEM_PROMPT)
                if reply and reply.strip():
                    logger.info("Successfully received AI response")
                    return reply
            except (AIServiceError, OSError) as e:
                logger.error(f"Error getting AI response, falling back to rule-based responses: {e}")

        logger.info("Using rule-based responses")
        return local_response(message, self.rng)
