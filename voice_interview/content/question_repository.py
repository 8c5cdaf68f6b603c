"""
Question bank loading for voice practice.

Reads questions from a JSON file, either ``{"questions": [...]}`` or a bare
list of question objects. Records that fail validation are skipped.
"""
import json
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from ..interview.models import Question
from ..utils.config import MIN_VOICE_KEYWORDS, QUESTIONS_FILE
from ..utils.logger import setup_logger

logger = setup_logger("question_repository")


class QuestionRepository:
    """
    Read-only access to interview questions.

    The file is loaded on first access. A missing or unreadable file gives
    an empty bank.
    """

    def __init__(self, questions_file: Optional[Path] = None):
        """
        Initialize question repository.

        Args:
            questions_file: JSON file with questions. Default: QUESTIONS_FILE
        """
        if questions_file is None:
            questions_file = QUESTIONS_FILE

        self.questions_file = Path(questions_file)
        self._questions: Optional[Dict[str, Question]] = None

    def _load(self) -> Dict[str, Question]:
        if self._questions is not None:
            return self._questions

        self._questions = {}
        if not self.questions_file.exists():
            logger.warning(f"Question file not found: {self.questions_file}")
            return self._questions

        try:
            with open(self.questions_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except Exception as e:
            logger.error(f"Error loading questions from {self.questions_file}: {e}")
            return self._questions

        records = data.get("questions", []) if isinstance(data, dict) else data
        for record in records:
            try:
                question = Question.model_validate(record)
            except ValidationError as e:
                logger.warning(f"Skipping invalid question record: {e.error_count()} errors")
                continue
            self._questions[question.id] = question

        logger.info(f"Loaded {len(self._questions)} questions from {self.questions_file.name}")
        return self._questions

    def get_question(self, question_id: str) -> Optional[Question]:
        """Question by ID, or None."""
        return self._load().get(question_id)

    def all_questions(self) -> List[Question]:
        """All questions in file order."""
        return list(self._load().values())

    def suitable_questions(self) -> List[Question]:
        """Questions flagged for voice practice with enough keywords."""
        return [
            q for q in self.all_questions()
            if q.voice_suitable is True and len(q.voice_keywords or []) >= MIN_VOICE_KEYWORDS
        ]


# Singleton instance
_question_repository = None


def get_question_repository(questions_file=None) -> QuestionRepository:
    """
    Get or create question repository instance (singleton).

    Args:
        questions_file: Optional questions file

    Returns:
        QuestionRepository instance
    """
    global _question_repository
    if _question_repository is None:
        _question_repository = QuestionRepository(questions_file=questions_file)
    return _question_repository
