from typing import List, Optional

from voice_interview.interview.models import MicroAnswer, MicroQuestion, Question
from voice_interview.storage.kv_store import KeyValueStore

LB_KEYWORDS = [
    "load balancer",
    "availability",
    "health checks",
    "latency",
    "sticky sessions",
    "round robin",
]

LB_ANSWER = "A load balancer distributes traffic across servers. It improves availability."
LB_EXPLANATION = (
    "Health checks remove unhealthy servers from rotation! "
    "Latency drops when load is spread evenly? "
    "Sticky sessions pin a client to one server."
)


def make_question(
    keywords: Optional[List[str]] = None,
    question_id: str = "q1",
    channel: str = "system-design",
    voice_suitable: Optional[bool] = True
) -> Question:
    return Question(
        id=question_id,
        question="What is a load balancer, and why use one?",
        answer=LB_ANSWER,
        explanation=LB_EXPLANATION,
        channel=channel,
        difficulty="intermediate",
        voice_keywords=LB_KEYWORDS if keywords is None else keywords,
        voice_suitable=voice_suitable,
    )


def numbered_keywords(count: int) -> List[str]:
    return [f"concept{i}" for i in range(1, count + 1)]


def make_micro_question(
    keywords: List[str],
    acceptable_phrases: Optional[List[str]] = None,
    expected_answer: str = "a cache keeps frequently read data in fast storage close to the caller.",
) -> MicroQuestion:
    return MicroQuestion(
        id="q1-micro-1",
        question="What is caching?",
        expected_answer=expected_answer,
        keywords=keywords,
        acceptable_phrases=acceptable_phrases or [],
        difficulty="easy",
        order=1,
    )


def make_answer(
    score: int,
    covered: Optional[List[str]] = None,
    missed: Optional[List[str]] = None,
    question_id: str = "q1-micro-1"
) -> MicroAnswer:
    return MicroAnswer(
        question_id=question_id,
        user_answer="answer text",
        score=score,
        keywords_covered=covered or [],
        keywords_missed=missed or [],
        is_correct=score >= 60,
        feedback="feedback",
    )


GOOD_ANSWERS = [
    "a load balancer spreads traffic across servers and raises availability for every user",
    "health checks detect failing nodes so latency stays low under heavy production load",
    "sticky sessions keep a client on one server while round robin rotates new requests",
]


class BrokenStore(KeyValueStore):
    """Backend that fails on every call."""

    def get(self, key):
        raise OSError("storage unavailable")

    def set(self, key, value):
        raise OSError("quota exceeded")

    def remove(self, key):
        raise OSError("storage unavailable")
