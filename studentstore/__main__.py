"""CLI for the studentstore record keeper.

Usage:
    python -m studentstore                     # Interactive menu
    python -m studentstore --file other.bin    # Menu over another store file
    python -m studentstore list                # Print all students
    python -m studentstore show 3              # Print one student
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from studentstore.commands import NO_STUDENTS, list_students
from studentstore.config import ENV_VAR, resolve_store_path
from studentstore.menu import run_menu
from studentstore.prompts import stdin_reader
from studentstore.render import format_student, student_table
from studentstore.store import StoreError, StudentStore
from studentstore.validators import ValidationError, validate_id

app = typer.Typer(
    name="studentstore",
    help="Keep student records in a flat binary file",
)
console = Console()


def _store(ctx: typer.Context) -> StudentStore:
    return ctx.obj


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    file: Optional[str] = typer.Option(
        None, "--file", "-f", help=f"Store file (default: ${ENV_VAR} or Students.bin)"
    ),
) -> None:
    """Run the interactive menu when no command is given."""
    ctx.obj = StudentStore(resolve_store_path(file))
    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj, stdin_reader, console)


@app.command("list")
def cmd_list(
    ctx: typer.Context,
    plain: bool = typer.Option(False, "--plain", help="One unformatted line per student"),
) -> None:
    """Print all students."""
    store = _store(ctx)
    if not plain:
        list_students(store, console)
        return
    try:
        found = False
        for student in store.scan_all():
            typer.echo(format_student(student))
            found = True
    except StoreError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    if not found:
        console.print(NO_STUDENTS)


@app.command("show")
def cmd_show(
    ctx: typer.Context,
    student_id: str = typer.Argument(help="Student ID"),
    plain: bool = typer.Option(False, "--plain", help="Unformatted output"),
) -> None:
    """Print one student by ID."""
    store = _store(ctx)
    try:
        sid = validate_id(student_id)
    except ValidationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        if not store.exists():
            console.print(NO_STUDENTS)
            raise typer.Exit(1)
        student = store.find_by_id(sid)
    except StoreError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    if student is None:
        console.print(f"[yellow]No student found with ID {sid}.[/yellow]")
        raise typer.Exit(1)

    if plain:
        typer.echo(format_student(student))
    else:
        console.print(student_table([student]))


if __name__ == "__main__":
    app()
