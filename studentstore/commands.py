"""The four menu operations: list, create, find, edit.

Each operation is one pass over the store. Store faults are reported on the
console and never escape; InputClosed does escape so the caller can stop the
menu loop.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

from studentstore.models import AGE_MAX, AGE_MIN, NAME_MAX, Student
from studentstore.prompts import LineReader, ask
from studentstore.render import add_student_row, student_table
from studentstore.store import IdSpaceExhaustedError, StoreError, StudentStore
from studentstore.validators import validate_age, validate_id, validate_name

NO_STUDENTS = "No students stored yet."


def _report(console: Console, err: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(str(err))}")


def _not_found(console: Console, student_id: int) -> None:
    console.print(f"[yellow]No student found with ID {student_id}.[/yellow]")


def list_students(store: StudentStore, console: Console) -> int:
    """Print every stored student. Returns the number of rows shown."""
    table = student_table()
    shown = 0
    error: Optional[StoreError] = None
    try:
        for student in store.scan_all():
            add_student_row(table, student)
            shown += 1
    except StoreError as e:
        error = e

    if shown:
        console.print()
        console.print(table)
    elif error is None:
        console.print(NO_STUDENTS)
    if error is not None:
        _report(console, error)
    return shown


def create_student(store: StudentStore, reader: LineReader, console: Console) -> Optional[Student]:
    """Prompt for age and name, then append a student with the next free id.

    Nothing is written until both fields are valid and an id was derived.
    """
    age = ask(reader, console, f"Enter age ({AGE_MIN}-{AGE_MAX}): ", validate_age)
    name = ask(reader, console, f"Enter name (max {NAME_MAX} chars): ", validate_name)

    try:
        student = Student(id=store.next_id(), age=age, name=name)
        store.append(student)
    except IdSpaceExhaustedError:
        console.print("[red]ID limit reached.[/red] No more students can be created.")
        return None
    except StoreError as e:
        _report(console, e)
        return None

    console.print(f"[green]Student created with ID {student.id}.[/green]")
    return student


def find_student(store: StudentStore, reader: LineReader, console: Console) -> Optional[Student]:
    """Prompt for an id and print the matching student."""
    student_id = ask(reader, console, "Enter ID: ", validate_id)
    try:
        if not store.exists():
            console.print(NO_STUDENTS)
            return None
        student = store.find_by_id(student_id)
    except StoreError as e:
        _report(console, e)
        return None
    if student is None:
        _not_found(console, student_id)
        return None

    console.print()
    console.print(student_table([student]))
    return student


def edit_student(store: StudentStore, reader: LineReader, console: Console) -> Optional[Student]:
    """Prompt for an id, then for a new age and name; empty input keeps a field.

    Returns the updated student, or None if nothing was written.
    """
    student_id = ask(reader, console, "Enter ID: ", validate_id)
    try:
        if not store.exists():
            console.print(NO_STUDENTS)
            return None
        student = store.find_by_id(student_id)
    except StoreError as e:
        _report(console, e)
        return None
    if student is None:
        _not_found(console, student_id)
        return None

    console.print(
        f"Editing student {student.id} ({escape(student.name)}, {student.age} years old)"
    )
    new_age = ask(
        reader, console,
        f"Enter new age ({AGE_MIN}-{AGE_MAX}) or press ENTER to keep current: ",
        lambda text: validate_age(text, allow_empty=True),
    )
    new_name = ask(
        reader, console,
        f"Enter new name (max {NAME_MAX} chars) or press ENTER to keep current: ",
        lambda text: validate_name(text, allow_empty=True),
    )

    if new_age is None and new_name is None:
        console.print("No changes entered.")
        return None

    try:
        updated = store.update_in_place(
            student_id, lambda s: s.replace(age=new_age, name=new_name)
        )
    except StoreError as e:
        _report(console, e)
        return None
    if updated is None:
        # Record vanished between lookup and rewrite
        _not_found(console, student_id)
        return None
    if updated == student:
        # Same values re-entered; update_in_place wrote nothing
        console.print("No changes entered.")
        return None

    console.print("[green]Student updated.[/green]")
    return updated
