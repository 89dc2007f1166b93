# backend/cli.py
import click
from flask import current_app

from csv_ingest import CSVIngestError, ingest_csv
from database import create_tables
from question_store import StorageError


def register_commands(app):

    @app.cli.command("init-db")
    def init_db_command():
        """Create the students and questions tables if missing."""
        create_tables()
        click.echo("Tables ready")

    @app.cli.command("import-csv")
    @click.argument("path", type=click.Path(exists=True, dir_okay=False))
    @click.option("--atomic", is_flag=True, help="Roll back the whole file on a bad row.")
    def import_csv_command(path, atomic):
        """Load questions from a CSV file (header row is skipped)."""
        store = current_app.extensions["question_store"]
        with open(path, "rb") as f:
            try:
                count = ingest_csv(f, store, atomic=atomic)
            except (CSVIngestError, StorageError) as e:
                raise click.ClickException(str(e))
        click.echo(f"Imported {count} questions")

    @app.cli.command("delete-questions")
    @click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
    def delete_questions_command(yes):
        """Delete every question, for all classes."""
        if not yes:
            click.confirm("Delete ALL questions?", abort=True)
        try:
            count = current_app.extensions["question_store"].delete_all()
        except StorageError as e:
            raise click.ClickException(str(e))
        click.echo(f"Deleted {count} questions")
