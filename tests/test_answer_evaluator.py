import unittest

from voice_interview.interview.answer_evaluator import AnswerEvaluator, build_feedback
from voice_interview.interview.phrase_expander import PhraseExpander

from tests.helpers import make_micro_question


class AnswerEvaluatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.evaluator = AnswerEvaluator()
        self.lb_question = make_micro_question(
            keywords=["load balancer", "latency"],
            acceptable_phrases=["load balancers", "lb", "load balancing", "latencys", "response time", "delay"],
        )

    def test_full_coverage_with_phrase_credit(self) -> None:
        answer = "a load balancer reduces response time across replicas for distributed traffic"
        result = self.evaluator.evaluate(answer, self.lb_question)

        self.assertEqual(result.question_id, "q1-micro-1")
        self.assertEqual(result.user_answer, answer)
        self.assertEqual(result.keywords_covered, ["load balancer", "latency"])
        self.assertEqual(result.keywords_missed, [])
        self.assertEqual(result.score, 100)
        self.assertTrue(result.is_correct)
        self.assertEqual(result.feedback, "Excellent! You covered the key points well.")

    def test_too_short_answer_shows_expected_excerpt(self) -> None:
        result = self.evaluator.evaluate("idk", self.lb_question)

        self.assertEqual(result.score, 0)
        self.assertFalse(result.is_correct)
        self.assertEqual(result.keywords_covered, [])
        self.assertEqual(result.keywords_missed, ["load balancer", "latency"])
        self.assertEqual(
            result.feedback,
            "The expected answer covers: "
            "a cache keeps frequently read data in fast storage close to the caller....",
        )

    def test_empty_answer(self) -> None:
        result = self.evaluator.evaluate("", self.lb_question)
        self.assertEqual(result.score, 0)
        self.assertEqual(result.user_answer, "")

    def test_partial_coverage(self) -> None:
        question = make_micro_question(
            keywords=["cache", "eviction"],
            acceptable_phrases=PhraseExpander().expand(["cache", "eviction"]),
        )
        answer = "the cache keeps hot data close to the application for faster reads"
        result = self.evaluator.evaluate(answer, question)

        self.assertEqual(result.keywords_covered, ["cache"])
        self.assertEqual(result.keywords_missed, ["eviction"])
        self.assertEqual(result.score, 50)
        self.assertFalse(result.is_correct)
        self.assertEqual(result.feedback, "Partial answer. Key points to include: eviction.")

    def test_good_band_names_missed_keyword(self) -> None:
        question = make_micro_question(keywords=["replication", "sharding", "consensus"])
        answer = "replication copies data between nodes while sharding splits the dataset by key"
        result = self.evaluator.evaluate(answer, question)

        self.assertEqual(result.score, 67)
        self.assertTrue(result.is_correct)
        self.assertEqual(result.feedback, "Good answer! Consider also mentioning: consensus.")

    def test_any_acceptable_phrase_credits_every_keyword(self) -> None:
        question = make_micro_question(
            keywords=["kubernetes", "latency"],
            acceptable_phrases=PhraseExpander().expand(["kubernetes", "latency"]),
        )
        answer = "we run everything on k8s clusters with autoscaling enabled today"
        result = self.evaluator.evaluate(answer, question)

        self.assertEqual(result.keywords_covered, ["kubernetes", "latency"])
        self.assertEqual(result.score, 100)

    def test_phrase_bonus_and_length_penalty_combine(self) -> None:
        question = make_micro_question(keywords=["zebra"], acceptable_phrases=["alpha", "beta", "gamma"])
        result = self.evaluator.evaluate("Alpha beta gamma", question)
        # 100 coverage + 15 bonus - 20 penalty
        self.assertEqual(result.score, 95)

    def test_medium_length_penalty(self) -> None:
        question = make_micro_question(keywords=["cache"])
        result = self.evaluator.evaluate("a cache stores hot data", question)
        self.assertEqual(result.score, 90)

    def test_duplicate_phrases_count_once(self) -> None:
        question = make_micro_question(keywords=[], acceptable_phrases=["lb", "lb", "LB"])
        answer = "we put an lb in front of the web tier for failover"
        result = self.evaluator.evaluate(answer, question)
        self.assertEqual(result.score, 5)

    def test_no_keywords_scores_zero(self) -> None:
        question = make_micro_question(keywords=[])
        answer = "a long enough answer that mentions nothing in particular at all"
        self.assertEqual(self.evaluator.evaluate(answer, question).score, 0)

    def test_rounds_half_up(self) -> None:
        question = make_micro_question(keywords=[f"k{i}" for i in range(1, 9)])
        answer = "k1 appears in this answer along with several other plain words"
        # 1 of 8 keywords is 12.5
        self.assertEqual(self.evaluator.evaluate(answer, question).score, 13)

    def test_matching_ignores_case_and_padding(self) -> None:
        result = self.evaluator.evaluate(
            "   A LOAD BALANCER spreads requests and cuts LATENCY for users worldwide   ",
            self.lb_question,
        )
        self.assertEqual(result.keywords_covered, ["load balancer", "latency"])
        self.assertEqual(result.user_answer[:3], "   ")

    def test_deterministic(self) -> None:
        answer = "load balancing spreads traffic"
        first = self.evaluator.evaluate(answer, self.lb_question)
        second = self.evaluator.evaluate(answer, self.lb_question)
        self.assertEqual(first, second)

    def test_score_bounds(self) -> None:
        answers = [
            "",
            "lb",
            "load balancer latency lb load balancing response time delay load balancers latencys",
            "unrelated words " * 20,
            "?!.,",
        ]
        for answer in answers:
            with self.subTest(answer=answer):
                result = self.evaluator.evaluate(answer, self.lb_question)
                self.assertGreaterEqual(result.score, 0)
                self.assertLessEqual(result.score, 100)
                self.assertEqual(result.is_correct, result.score >= 60)


class FeedbackTests(unittest.TestCase):
    def test_good_band_without_missed(self) -> None:
        self.assertEqual(build_feedback(70, [], "x"), "Good answer with the main concepts covered.")

    def test_hints_are_limited_to_two(self) -> None:
        self.assertEqual(
            build_feedback(45, ["a", "b", "c"], "x"),
            "Partial answer. Key points to include: a, b.",
        )

    def test_excerpt_is_limited(self) -> None:
        feedback = build_feedback(10, [], "x" * 150)
        self.assertEqual(feedback, "The expected answer covers: " + "x" * 100 + "...")


if __name__ == "__main__":
    unittest.main()
