# backend/models/student.py
from database import db


class Student(db.Model):
    __tablename__ = "students"

    student_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.Text)
