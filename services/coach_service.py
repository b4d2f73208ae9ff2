"""
Fitness coach service.

Answers fitness questions with OpenAI chat completions when an API key is
configured, and with keyword rules otherwise (or when the API call fails).
Also turns a finished workout summary into short insights.
"""

import logging
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from models.coach import ChatMessage, ChatResponse, PerformanceSummary

logger = logging.getLogger(__name__)


COACH_SYSTEM_PROMPT = (
    "You are a professional fitness coach. Provide helpful, accurate, and "
    "motivating fitness advice. Keep answers short and practical, and suggest "
    "seeing a professional for injuries or medical conditions."
)

# (keywords, answer) checked in order; first match wins
ADVICE_RULES = [
    (
        ("lose weight", "weight loss"),
        "For effective weight loss, focus on creating a caloric deficit through a "
        "combination of cardio exercises, strength training, and a balanced diet. "
        "Aim for 3-4 workouts per week and track your progress.",
    ),
    (
        ("build muscle", "gain muscle"),
        "To build muscle effectively, prioritize compound exercises like squats, "
        "deadlifts, and bench press. Ensure you're eating adequate protein "
        "(0.8-1g per lb of body weight) and getting enough rest for recovery.",
    ),
    (
        ("beginner", "start"),
        "As a beginner, start with 2-3 workouts per week focusing on basic "
        "movements. Learn proper form before increasing intensity. Include both "
        "cardio and strength training in your routine.",
    ),
    (
        ("diet", "nutrition"),
        "A balanced diet should include lean proteins, complex carbohydrates, "
        "healthy fats, and plenty of vegetables. Stay hydrated and consider meal "
        "timing around your workouts for optimal performance.",
    ),
    (
        ("motivation", "consistent"),
        "Staying motivated requires setting realistic goals, tracking progress, "
        "and celebrating small wins. Find activities you enjoy and consider "
        "working out with a friend for accountability.",
    ),
]

DEFAULT_ADVICE = (
    "That's a great question! Focus on consistency, proper form, and gradual "
    "progression in your fitness journey. Small steps lead to big changes over time."
)


def rule_based_advice(question: str) -> str:
    """Answer from keyword rules."""
    lowered = question.lower()
    for keywords, answer in ADVICE_RULES:
        if any(keyword in lowered for keyword in keywords):
            return answer
    return DEFAULT_ADVICE


def analyze_performance(summary: PerformanceSummary) -> List[str]:
    """Short insights about a finished workout."""
    insights: List[str] = []

    if summary.completion_rate >= 0.9:
        insights.append("Excellent job completing your workout! Your consistency is paying off.")
    elif summary.completion_rate >= 0.7:
        insights.append("Good effort on your workout. Try to push through the full routine next time.")
    else:
        insights.append("Don't worry about not finishing everything. Progress takes time!")

    if summary.duration < 20:
        insights.append("Consider extending your workout time for better results.")
    elif summary.duration > 60:
        insights.append("Great endurance! Make sure you're not overtraining.")

    if summary.intensity > 8:
        insights.append("High intensity workout! Make sure to get adequate rest and recovery.")

    return insights


class CoachService:
    """
    LLM-backed fitness coach with a rule-based fallback.

    Uses gpt-4o-mini by default for cost-effective chat.
    """

    DEFAULT_MODEL = "gpt-4o-mini"
    MAX_TOKENS = 300

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        client: Optional[Any] = None,
    ):
        """
        Initialize the coach.

        Args:
            api_key: OpenAI API key; without one every answer is rule-based
            model: Chat model to use
            client: Pre-built AsyncOpenAI-compatible client (tests)
        """
        self._model = model
        self._client = client
        if self._client is None and api_key:
            self._client = AsyncOpenAI(api_key=api_key)

    @property
    def llm_enabled(self) -> bool:
        return self._client is not None

    async def chat(
        self,
        message: str,
        history: Optional[List[ChatMessage]] = None,
    ) -> ChatResponse:
        """
        Answer a user message.

        Args:
            message: Sanitized user message
            history: Earlier turns, oldest first

        Returns:
            ChatResponse with the reply and whether it came from the LLM
        """
        if not self.llm_enabled:
            return ChatResponse(reply=rule_based_advice(message), source="rules")

        messages: List[Dict[str, str]] = [{"role": "system", "content": COACH_SYSTEM_PROMPT}]
        messages.extend({"role": m.role, "content": m.content} for m in history or [])
        messages.append({"role": "user", "content": message})

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                max_tokens=self.MAX_TOKENS,
                temperature=0.7,
            )
            reply = (response.choices[0].message.content or "").strip()
        except OpenAIError as e:
            logger.warning(f"Coach LLM call failed, using rules: {e}")
            return ChatResponse(reply=rule_based_advice(message), source="rules")

        if not reply:
            logger.warning("Coach LLM returned an empty reply, using rules")
            return ChatResponse(reply=rule_based_advice(message), source="rules")

        return ChatResponse(reply=reply, source="llm")
