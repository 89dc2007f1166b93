# backend/routes/quiz_routes.py

import logging

from flask import Blueprint, current_app, jsonify, request
from werkzeug.utils import secure_filename

from csv_ingest import CSVIngestError, ingest_csv
from question_store import StorageError
from quiz import (
    ClassIdError,
    SubmissionError,
    deliver_quiz,
    parse_class_id,
    parse_submission,
    score_submission,
)

logger = logging.getLogger(__name__)

quiz = Blueprint("quiz", __name__)


def get_store():
    return current_app.extensions["question_store"]


# =====================================================
# ✅ UPLOAD QUESTIONS CSV
# =====================================================
@quiz.post("/upload-csv")
def upload_csv():
    file = request.files.get("file")
    if file is None:
        logger.error("Error reading file: no 'file' field in upload")
        return jsonify({"error": "Error uploading CSV file"}), 500

    logger.info("Uploading CSV %s", secure_filename(file.filename or "") or "<unnamed>")

    try:
        count = ingest_csv(
            file.stream,
            get_store(),
            atomic=current_app.config["CSV_ATOMIC_UPLOAD"],
        )
    except (CSVIngestError, StorageError) as e:
        logger.error("Error in processing CSV: %s", e)
        return jsonify({"error": "Error uploading CSV file"}), 500

    logger.info("Inserted %d questions", count)
    return "CSV uploaded successfully", 200


# =====================================================
# ✅ DELETE ALL QUESTIONS
# =====================================================
@quiz.post("/delete-all-questions")
def delete_all_questions():
    try:
        count = get_store().delete_all()
    except StorageError as e:
        logger.error("Error in deleting all questions: %s", e)
        return jsonify({"error": "Error deleting all questions"}), 500

    logger.info("Deleted %d questions", count)
    return "All questions deleted successfully", 200


# =====================================================
# ✅ GET TEST QUESTIONS FOR A CLASS
# =====================================================
@quiz.get("/get-test-questions")
def get_test_questions():
    try:
        class_id = parse_class_id(request.args.get("class"))
    except ClassIdError as e:
        return jsonify({"error": str(e)}), 400

    try:
        questions = deliver_quiz(get_store(), class_id)
    except StorageError as e:
        logger.error("Error fetching questions: %s", e)
        return jsonify({"error": "Error fetching questions"}), 500

    if not questions:
        return jsonify({"error": "No questions found for the specified class"}), 404

    return jsonify({"success": True, "questions": questions}), 200


# =====================================================
# ✅ SUBMIT ANSWERS
# =====================================================
@quiz.post("/submit-answers")
def submit_answers():
    try:
        answers = parse_submission(request.get_json(force=True, silent=True))
    except SubmissionError as e:
        return jsonify({"error": str(e)}), 400

    try:
        class_id = parse_class_id(request.args.get("class"))
    except ClassIdError:
        return jsonify({"error": "Invalid class ID"}), 400

    try:
        result = score_submission(get_store(), class_id, answers)
    except StorageError as e:
        logger.error("Error fetching correct answers: %s", e)
        return jsonify({"error": "Error fetching correct answers"}), 500

    return jsonify(result), 200
