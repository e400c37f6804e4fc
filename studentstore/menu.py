"""Interactive menu loop."""

from __future__ import annotations

from rich.console import Console

from studentstore.commands import create_student, edit_student, find_student, list_students
from studentstore.prompts import InputClosed, LineReader
from studentstore.store import StudentStore

MENU = """\
A) Print All Students
C) Create A Student
P) Print A Student
E) Edit A Student
Q) Quit
"""


def run_menu(store: StudentStore, reader: LineReader, console: Console) -> None:
    """Dispatch menu choices until Q or end of input."""
    console.print("[bold]Student Records[/bold]")
    actions = {
        "A": lambda: list_students(store, console),
        "C": lambda: create_student(store, reader, console),
        "P": lambda: find_student(store, reader, console),
        "E": lambda: edit_student(store, reader, console),
    }
    while True:
        console.print()
        console.print(MENU)
        console.print("Select an option: ", end="")
        line = reader()
        if line is None:
            console.print("\nInput stream closed. Exiting.")
            return
        if not line:
            console.print("[yellow]Please choose an option.[/yellow]")
            continue

        choice = line[0].upper()
        if choice == "Q":
            console.print("Goodbye!")
            return
        action = actions.get(choice)
        if action is None:
            console.print("[yellow]Invalid option. Please try again.[/yellow]")
            continue
        try:
            action()
        except InputClosed:
            console.print("Input stream closed. Exiting.")
            return
