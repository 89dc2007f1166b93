# backend/question_store.py
import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError

from models.question import Question

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class StorageError(Exception):
    pass


class QuestionStore:
    """Data access for the ``questions`` table.

    One instance is created per app and handed to the request handlers
    through ``app.extensions["question_store"]``. All calls must run inside
    an application context.
    """

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    def _fail(self, action, err):
        logger.error("Error %s: %s", action, err)
        self.session.rollback()
        raise StorageError(f"failed {action}: {err}") from err

    def insert(self, class_id, text, options, correct, commit=True):
        question = Question(
            class_id=class_id,
            question_text=text,
            options=list(options),
            correct_answer=correct,
        )
        try:
            self.session.add(question)
            if commit:
                self.session.commit()
            else:
                self.session.flush()
        except SQLAlchemyError as e:
            self._fail("inserting question", e)
        return question

    def delete_all(self):
        try:
            result = self.session.execute(delete(Question))
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail("deleting all questions", e)
        return result.rowcount

    def sample(self, class_id, limit=DEFAULT_LIMIT):
        stmt = (
            select(Question)
            .where(Question.class_id == class_id)
            .order_by(func.random())
            .limit(limit)
        )
        logger.debug("Sampling up to %d questions for class %d", limit, class_id)
        try:
            return list(self.session.scalars(stmt))
        except SQLAlchemyError as e:
            self._fail("fetching questions", e)

    def correct_answers(self, class_id, limit=DEFAULT_LIMIT):
        stmt = (
            select(Question.correct_answer)
            .where(Question.class_id == class_id)
            .order_by(Question.question_id)
            .limit(limit)
        )
        try:
            return list(self.session.scalars(stmt))
        except SQLAlchemyError as e:
            self._fail("fetching correct answers", e)

    def commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail("committing", e)

    def rollback(self):
        self.session.rollback()
