from helpers import make_csv


def write_csv(tmp_path, rows):
    path = tmp_path / "questions.csv"
    path.write_text(make_csv(rows), encoding="utf-8")
    return path


def test_init_db(app):
    result = app.test_cli_runner().invoke(args=["init-db"])
    assert result.exit_code == 0
    assert "Tables ready" in result.output


def test_import_csv(app, tmp_path, count_questions):
    path = write_csv(tmp_path, ["1,Q1,a,b,c,d,a", "2,Q2,a,b,c,d,b"])
    result = app.test_cli_runner().invoke(args=["import-csv", str(path)])
    assert result.exit_code == 0, result.output
    assert "Imported 2 questions" in result.output
    assert count_questions() == 2


def test_import_csv_bad_row(app, tmp_path, count_questions):
    path = write_csv(tmp_path, ["1,Q1,a,b,c,d,a", "1,Q2,a,b"])
    result = app.test_cli_runner().invoke(args=["import-csv", str(path)])
    assert result.exit_code != 0
    assert "row 1" in result.output
    assert count_questions() == 1


def test_import_csv_atomic(app, tmp_path, count_questions):
    path = write_csv(tmp_path, ["1,Q1,a,b,c,d,a", "1,Q2,a,b"])
    result = app.test_cli_runner().invoke(args=["import-csv", "--atomic", str(path)])
    assert result.exit_code != 0
    assert count_questions() == 0


def test_delete_questions(app, tmp_path, count_questions):
    runner = app.test_cli_runner()
    runner.invoke(args=["import-csv", str(write_csv(tmp_path, ["1,Q1,a,b,c,d,a"]))])

    result = runner.invoke(args=["delete-questions"], input="n\n")
    assert result.exit_code != 0
    assert count_questions() == 1

    result = runner.invoke(args=["delete-questions", "--yes"])
    assert result.exit_code == 0
    assert "Deleted 1 questions" in result.output
    assert count_questions() == 0
