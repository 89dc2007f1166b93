# backend/models/question.py
from sqlalchemy.dialects import postgresql

from database import db

# TEXT[] on PostgreSQL, a JSON list on backends without arrays
OptionList = db.JSON().with_variant(postgresql.ARRAY(db.Text), "postgresql")


class Question(db.Model):
    __tablename__ = "questions"

    question_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    class_id = db.Column(db.Integer)
    question_text = db.Column(db.Text, nullable=False)
    options = db.Column(OptionList)
    correct_answer = db.Column(db.Text)

    def to_dict(self):
        return {
            "question_id": self.question_id,
            "question_text": self.question_text,
            "options": list(self.options or []),
            "correct_answer": self.correct_answer,
        }
