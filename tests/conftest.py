import pytest
from sqlalchemy import func, select

from app import create_app
from database import db
from models.question import Question


@pytest.fixture
def app():
    app = create_app({"SQLALCHEMY_DATABASE_URI": "sqlite://", "TESTING": True})
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield app.extensions["question_store"]


@pytest.fixture
def count_questions(app):
    def count(class_id=None):
        with app.app_context():
            stmt = select(func.count()).select_from(Question)
            if class_id is not None:
                stmt = stmt.where(Question.class_id == class_id)
            return db.session.scalar(stmt)
    return count

