"""
Pydantic models for voice practice sessions.

Python attributes are snake_case; serialized JSON uses camelCase aliases
(e.g. ``currentQuestionIndex``) so stored sessions keep a stable shape.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..utils.config import MAX_MICRO_QUESTIONS, MIN_MICRO_QUESTIONS

Difficulty = Literal["easy", "medium", "hard"]
SessionStatus = Literal["intro", "in-progress", "completed"]
Verdict = Literal["excellent", "good", "needs-work", "review-topic"]


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Question(_Record):
    """Source interview question from the content repository."""
    id: str = Field(..., description="Question ID")
    question: str = Field(..., description="Full question text")
    answer: str = Field("", description="Reference answer")
    explanation: str = Field("", description="Longer explanation of the answer")
    channel: str = Field("default", description="Content channel, e.g. system-design")
    difficulty: str = Field("intermediate", description="Difficulty label of the source question")
    voice_keywords: Optional[List[str]] = Field(None, description="Key concepts a spoken answer should mention")
    voice_suitable: Optional[bool] = Field(None, description="Whether the question is flagged for voice practice")


class MicroQuestion(_Record):
    """A short, keyword-scoped sub-question."""
    id: str = Field(..., description="'{questionId}-micro-{n}'")
    question: str = Field(..., description="Prompt shown to the candidate")
    expected_answer: str = Field(..., description="1-2 sentence reference answer")
    keywords: List[str] = Field(default_factory=list, description="Terms the answer must mention")
    acceptable_phrases: List[str] = Field(default_factory=list, description="Alternate forms that count as mentions")
    difficulty: Difficulty
    order: int = Field(..., ge=1, description="1-based position in the session")


class VoiceSession(_Record):
    """Ordered micro-questions generated from one source question."""
    id: str
    topic: str
    channel: str
    difficulty: str
    context_question: str = Field(..., description="Original question, shown first for framing")
    micro_questions: List[MicroQuestion]
    total_questions: int
    source_question_id: Optional[str] = None

    @model_validator(mode="after")
    def _check_question_count(self) -> "VoiceSession":
        count = len(self.micro_questions)
        if not MIN_MICRO_QUESTIONS <= count <= MAX_MICRO_QUESTIONS:
            raise ValueError(
                f"session needs {MIN_MICRO_QUESTIONS}-{MAX_MICRO_QUESTIONS} micro-questions, got {count}"
            )
        if self.total_questions != count:
            raise ValueError(f"total_questions is {self.total_questions} but there are {count} micro-questions")
        return self


class MicroAnswer(_Record):
    """Evaluation of one submitted answer."""
    question_id: str
    user_answer: str
    score: int = Field(..., ge=0, le=100)
    keywords_covered: List[str] = Field(default_factory=list)
    keywords_missed: List[str] = Field(default_factory=list)
    is_correct: bool
    feedback: str


class SessionState(_Record):
    """Progress through a voice session."""
    session: VoiceSession
    current_question_index: int = 0
    answers: List[MicroAnswer] = Field(default_factory=list)
    started_at: str = Field(..., description="ISO-8601 start time")
    status: SessionStatus = "intro"


class SessionResult(_Record):
    """Final outcome of a completed session."""
    session_id: str
    topic: str
    answers: List[MicroAnswer]
    overall_score: int = Field(..., ge=0, le=100)
    verdict: Verdict
    summary: str
    strengths: List[str] = Field(default_factory=list)
    areas_to_improve: List[str] = Field(default_factory=list)
    completed_at: str = Field(..., description="ISO-8601 completion time")
