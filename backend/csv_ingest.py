# backend/csv_ingest.py
import csv
import io
import logging
from dataclasses import dataclass
from typing import List

from question_store import StorageError
from utils.parsing import parse_int

logger = logging.getLogger(__name__)

# class_id, question_text, option1..option4, correct_answer
EXPECTED_COLUMNS = 7


class CSVIngestError(Exception):
    def __init__(self, message, row=None):
        super().__init__(message)
        self.row = row


@dataclass
class QuestionRow:
    class_id: int
    question_text: str
    options: List[str]
    correct_answer: str


# =====================================================
# PARSING
# =====================================================
def read_records(stream):
    """Return every data record of an uploaded CSV, header dropped."""
    raw = stream.read()
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise CSVIngestError(f"could not read CSV file: {e}") from e

    try:
        records = [r for r in csv.reader(io.StringIO(raw, newline=""), delimiter=",") if r]
    except csv.Error as e:
        raise CSVIngestError(f"could not read CSV file: {e}") from e

    if records:
        records = records[1:]

    logger.info("CSV records read: %d", len(records))
    return records


def parse_record(record):
    if len(record) != EXPECTED_COLUMNS:
        raise ValueError(
            f"invalid CSV format: expected {EXPECTED_COLUMNS} fields, got {len(record)}"
        )

    class_id, text, ans1, ans2, ans3, ans4, correct = record
    try:
        class_id = parse_int(class_id)
    except ValueError as e:
        raise ValueError(f"invalid class_id value: {e}") from e

    return QuestionRow(
        class_id=class_id,
        question_text=text,
        options=[ans1, ans2, ans3, ans4],
        correct_answer=correct,
    )


# =====================================================
# INGESTION
# =====================================================
def ingest_csv(stream, store, atomic=False):
    """Insert every data row of ``stream`` through ``store``.

    Stops at the first bad row. Without ``atomic`` each row is committed as
    it goes, so rows before the failing one stay stored; with ``atomic`` the
    upload is committed once and rolled back on any failure.
    Returns the number of inserted rows.
    """
    records = read_records(stream)

    inserted = 0
    try:
        for i, record in enumerate(records):
            logger.debug("Processing record %d: %s", i, record)
            try:
                row = parse_record(record)
            except ValueError as e:
                logger.warning("Error inserting row %d: %s", i, e)
                raise CSVIngestError(f"row {i}: {e}", row=i) from e

            try:
                store.insert(
                    row.class_id,
                    row.question_text,
                    row.options,
                    row.correct_answer,
                    commit=not atomic,
                )
            except StorageError as e:
                logger.warning("Error inserting row %d: %s", i, e)
                raise CSVIngestError(f"row {i}: {e}", row=i) from e
            inserted += 1

        if atomic:
            store.commit()
    except (CSVIngestError, StorageError):
        if atomic:
            store.rollback()
        raise

    return inserted
