"""Text rendering for student records."""

from __future__ import annotations

from typing import Iterable

from rich.markup import escape
from rich.table import Table

from studentstore.models import NAME_MAX, Student


def format_student(student: Student) -> str:
    """Single plain-text line: id, name and age in fixed-width columns."""
    return f"{student.id:<5} | {student.name:<{NAME_MAX}} | {student.age:>3}"


def student_table(students: Iterable[Student] = (), title: str | None = None) -> Table:
    """Build a Rich table with one header and a row per student."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("ID", style="green", justify="right", min_width=5)
    table.add_column("Name", min_width=NAME_MAX)
    table.add_column("Age", justify="right")
    for student in students:
        add_student_row(table, student)
    return table


def add_student_row(table: Table, student: Student) -> None:
    # Names are user input; never let them be read as markup
    table.add_row(str(student.id), escape(student.name), str(student.age))
