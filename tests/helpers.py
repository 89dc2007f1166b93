import io

HEADER = "class_id,question_text,option1,option2,option3,option4,correct_answer\n"


def make_csv(rows, header=True):
    body = "\n".join(rows) + ("\n" if rows else "")
    return (HEADER if header else "") + body


def upload(client, text, filename="questions.csv"):
    return client.post(
        "/upload-csv",
        data={"file": (io.BytesIO(text.encode("utf-8")), filename)},
        content_type="multipart/form-data",
    )
