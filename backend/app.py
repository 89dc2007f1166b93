import logging
import sys

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS

from cli import register_commands
from config import load_config
from database import db, init_db
from question_store import QuestionStore
from routes.quiz_routes import quiz

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def create_app(config=None):
    settings = load_config(config)

    logging.basicConfig(level=settings["LOG_LEVEL"], format=LOG_FORMAT)

    # =====================================================
    # APP + STATIC FILES (served under /static/)
    # =====================================================
    app = Flask(__name__, static_folder=settings["STATIC_FOLDER"], static_url_path="/static")
    app.config.update(settings)
    CORS(app, origins=settings["CORS_ORIGINS"])

    # =====================================================
    # DATABASE + QUESTION STORE
    # =====================================================
    init_db(app)
    app.extensions["question_store"] = QuestionStore(db)

    # =====================================================
    # BLUEPRINTS + CLI
    # =====================================================
    app.register_blueprint(quiz)
    register_commands(app)

    @app.route("/")
    def index():
        return send_from_directory(app.static_folder, "index.html")

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    return app


# =====================================================
# LOCAL RUN
# =====================================================
def main():
    try:
        app = create_app()
    except RuntimeError as e:  # DatabaseInitError or missing DATABASE_URL
        logger.critical("Failed to initialize the database: %s", e)
        sys.exit(1)

    app.run(host=app.config["HOST"], port=app.config["PORT"])


if __name__ == "__main__":
    main()
