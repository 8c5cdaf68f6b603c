"""
Configuration settings for the Voice Interview Practice Engine.
"""
import os
from pathlib import Path

# Base paths
BASE_DIR = Path(__file__).parent.parent.parent
DATA_DIR = BASE_DIR / "data"
STORAGE_DIR = Path(os.environ.get("VOICE_INTERVIEW_STORAGE_DIR", BASE_DIR / "voice_sessions"))
LOGS_DIR = BASE_DIR / "logs"
QUESTIONS_FILE = Path(os.environ.get("VOICE_INTERVIEW_QUESTIONS_FILE", DATA_DIR / "questions.json"))

LOG_LEVEL = os.environ.get("VOICE_INTERVIEW_LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("VOICE_INTERVIEW_LOG_FILE")  # Relative names go under LOGS_DIR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

# Session generation
MIN_VOICE_KEYWORDS = 4  # Questions with fewer keywords are never offered
KEYWORD_GROUP_SIZE = 2
MIN_MICRO_QUESTIONS = 3
MAX_MICRO_QUESTIONS = 6
MIN_SENTENCE_LENGTH = 10  # Sentences this short are ignored for expected answers
MAX_EXPECTED_SENTENCES = 2
TOPIC_MAX_LENGTH = 50
MAX_CATALOG_SESSIONS = 50

# Answer scoring
CORRECT_THRESHOLD = 60
PHRASE_BONUS = 5  # Points per acceptable phrase found in the answer
LENGTH_PENALTIES = [
    (5, 20),   # fewer than 5 words
    (10, 10),  # fewer than 10 words
]
FEEDBACK_HINT_LIMIT = 2
FEEDBACK_EXCERPT_CHARS = 100

# Score bands, highest first
VERDICT_BANDS = [
    (80, "excellent"),
    (60, "good"),
    (40, "needs-work"),
    (0, "review-topic"),
]

# Result aggregation
STRONG_PERFORMANCE_RATIO = 0.7
COVERAGE_STRENGTH_MIN = 5
COVERAGE_STRENGTH_SHOWN = 3
REVIEW_CONCEPTS_SHOWN = 4
LOW_SCORE_THRESHOLD = 50

# Persistence
SESSION_STATE_KEY = "voice-session-state"
SESSION_HISTORY_KEY = "voice-session-history"
HISTORY_LIMIT = 20

# Micro-question templates per channel
QUESTION_TEMPLATES = {
    "system-design": [
        "What is the purpose of {keywords} in system design?",
        "How does {keywords} help with scalability?",
        "When would you use {keywords}?",
        "What are the trade-offs of {keywords}?",
        "How do {keywords} work together?",
        "What problems does {keywords} solve?",
    ],
    "behavioral": [
        "Describe a situation involving {keywords}.",
        "How did you handle {keywords}?",
        "What was the outcome of {keywords}?",
        "What did you learn about {keywords}?",
        "How would you approach {keywords} differently?",
        "Give an example of {keywords}.",
    ],
    "devops": [
        "What is {keywords} used for?",
        "How do you implement {keywords}?",
        "What are the benefits of {keywords}?",
        "How does {keywords} improve reliability?",
        "When should you use {keywords}?",
        "What tools support {keywords}?",
    ],
    "sre": [
        "How does {keywords} affect reliability?",
        "What metrics relate to {keywords}?",
        "How do you monitor {keywords}?",
        "What's the impact of {keywords} on SLOs?",
        "How do you troubleshoot {keywords}?",
        "What's the relationship between {keywords}?",
    ],
    "default": [
        "What is {keywords}?",
        "How does {keywords} work?",
        "Why is {keywords} important?",
        "When would you use {keywords}?",
        "What are the benefits of {keywords}?",
        "Explain {keywords} briefly.",
    ],
}
DEFAULT_CHANNEL = "default"

# Curated abbreviations and synonyms accepted in place of a keyword
ABBREVIATIONS = {
    "kubernetes": ["k8s", "kube"],
    "continuous integration": ["ci", "ci/cd"],
    "continuous deployment": ["cd", "ci/cd"],
    "load balancer": ["lb", "load balancing"],
    "database": ["db", "data store"],
    "availability": ["uptime", "high availability", "ha"],
    "latency": ["response time", "delay"],
    "throughput": ["bandwidth", "capacity"],
    "microservices": ["micro services", "microservice"],
    "authentication": ["auth", "authn"],
    "authorization": ["authz", "permissions"],
}
