"""
Session Generator for voice practice.

Breaks one long-form interview question into a short series of focused
micro-questions:
- Keywords are grouped in pairs, one micro-question per group
- Prompts come from channel-specific templates
- Expected answers are pulled from the question's answer and explanation
- Acceptable phrases come from the PhraseExpander

Questions without enough keywords produce no session (None).
"""

from typing import Dict, List, Optional

from .models import Difficulty, MicroQuestion, Question, VoiceSession
from .phrase_expander import PhraseExpander
from .topic_extractor import extract_topic
from ..utils.config import (
    DEFAULT_CHANNEL,
    KEYWORD_GROUP_SIZE,
    MAX_EXPECTED_SENTENCES,
    MAX_MICRO_QUESTIONS,
    MIN_MICRO_QUESTIONS,
    MIN_SENTENCE_LENGTH,
    MIN_VOICE_KEYWORDS,
    QUESTION_TEMPLATES,
)
from ..utils.logger import setup_logger
from ..utils.text_utils import chunk_list, split_sentences

logger = setup_logger("session_generator")


class SessionGenerator:
    """
    Generates voice sessions from source questions.

    Template table and phrase expander are injected at construction.
    """

    def __init__(
        self,
        templates: Optional[Dict[str, List[str]]] = None,
        phrase_expander: Optional[PhraseExpander] = None
    ):
        """
        Initialize session generator.

        Args:
            templates: Channel -> prompt templates containing '{keywords}'.
                Must include a 'default' entry. Default: QUESTION_TEMPLATES
            phrase_expander: Optional PhraseExpander. If None, creates new one.
        """
        if templates is None:
            templates = QUESTION_TEMPLATES
        if DEFAULT_CHANNEL not in templates:
            raise ValueError(f"Template table must define a '{DEFAULT_CHANNEL}' channel")

        self.templates = templates
        self.phrase_expander = phrase_expander or PhraseExpander()

        logger.info("SessionGenerator initialized")

    def generate(self, question: Question) -> Optional[VoiceSession]:
        """
        Generate a voice session from a question.

        Args:
            question: Source question with voice keywords

        Returns:
            VoiceSession with 3-6 micro-questions, or None if the question
            does not have enough keywords
        """
        keywords = question.voice_keywords or []

        if len(keywords) < MIN_VOICE_KEYWORDS:
            logger.debug(f"Question {question.id}: {len(keywords)} keywords, need {MIN_VOICE_KEYWORDS}")
            return None

        groups = chunk_list(keywords, KEYWORD_GROUP_SIZE)
        micro_questions = [
            self._create_micro_question(question, index, group)
            for index, group in enumerate(groups)
        ][:MAX_MICRO_QUESTIONS]

        # 4 keywords make only 2 groups, so they land here too
        if len(micro_questions) < MIN_MICRO_QUESTIONS:
            logger.debug(
                f"Question {question.id}: only {len(micro_questions)} micro-questions, "
                f"need {MIN_MICRO_QUESTIONS}"
            )
            return None

        session = VoiceSession(
            id=f"session-{question.id}",
            topic=extract_topic(question.question),
            channel=question.channel,
            difficulty=question.difficulty,
            context_question=question.question,
            micro_questions=micro_questions,
            total_questions=len(micro_questions),
            source_question_id=question.id,
        )
        logger.info(f"Generated session {session.id} with {session.total_questions} micro-questions")
        return session

    def _create_micro_question(self, question: Question, index: int, keywords: List[str]) -> MicroQuestion:
        """Build the micro-question for one keyword group."""
        templates = self.templates.get(question.channel) or self.templates[DEFAULT_CHANNEL]
        template = templates[index % len(templates)]

        return MicroQuestion(
            id=f"{question.id}-micro-{index + 1}",
            question=template.replace('{keywords}', ' and '.join(keywords)),
            expected_answer=extract_expected_answer(keywords, question.answer, question.explanation),
            keywords=keywords,
            acceptable_phrases=self.phrase_expander.expand(keywords),
            difficulty=difficulty_for_index(index),
            order=index + 1,
        )


def difficulty_for_index(index: int) -> Difficulty:
    """Zero-based position -> micro-question difficulty."""
    if index < 2:
        return "easy"
    if index < 4:
        return "medium"
    return "hard"


def extract_expected_answer(keywords: List[str], answer: str, explanation: str) -> str:
    """
    Pull a 1-2 sentence reference answer for a keyword group.

    Args:
        keywords: Keyword group
        answer: Source answer text
        explanation: Source explanation text

    Returns:
        Up to two lower-cased sentences mentioning any keyword, or the first
        sentence of the answer when none do
    """
    full_text = f"{answer} {explanation}".lower()
    sentences = [s for s in split_sentences(full_text) if len(s.strip()) > MIN_SENTENCE_LENGTH]

    lowered = [kw.lower() for kw in keywords]
    relevant = [s for s in sentences if any(kw in s for kw in lowered)]

    if relevant:
        return '. '.join(relevant[:MAX_EXPECTED_SENTENCES]).strip() + '.'

    return split_sentences(answer)[0].strip() + '.'


# Singleton instance
_session_generator = None


def get_session_generator() -> SessionGenerator:
    """
    Get or create session generator instance (singleton).

    Returns:
        SessionGenerator instance
    """
    global _session_generator
    if _session_generator is None:
        _session_generator = SessionGenerator()
    return _session_generator
