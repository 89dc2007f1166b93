# backend/quiz.py
import logging

from utils.parsing import parse_int

logger = logging.getLogger(__name__)

QUIZ_SIZE = 10


class ClassIdError(ValueError):
    pass


class SubmissionError(ValueError):
    pass


def parse_class_id(raw):
    if not raw:
        raise ClassIdError("Class ID is missing")
    try:
        return parse_int(raw)
    except ValueError:
        raise ClassIdError("Invalid class ID") from None


# =====================================================
# DELIVERY
# =====================================================
def deliver_quiz(store, class_id):
    # correct_answer is part of the payload the quiz page receives
    questions = store.sample(class_id, limit=QUIZ_SIZE)
    return [q.to_dict() for q in questions]


# =====================================================
# SCORING
# =====================================================
def parse_submission(payload):
    if not isinstance(payload, dict):
        raise SubmissionError("Invalid answer format")

    answers = payload.get("answers")
    if answers is None:
        return []
    if not isinstance(answers, list) or not all(isinstance(a, str) for a in answers):
        raise SubmissionError("Invalid answer format")
    return answers


def score_answers(submitted, correct):
    return sum(1 for given, expected in zip(submitted, correct) if given == expected)


def score_submission(store, class_id, submitted):
    """Score positionally against a fresh read of the class's answer key.

    The key is not tied to the sample the student was shown, and ``total``
    is always ``QUIZ_SIZE``.
    """
    correct = store.correct_answers(class_id, limit=QUIZ_SIZE)
    if len(submitted) > len(correct):
        logger.info(
            "Class %d: %d answers submitted, only %d on file",
            class_id, len(submitted), len(correct),
        )
    return {"correct": score_answers(submitted, correct), "total": QUIZ_SIZE}
