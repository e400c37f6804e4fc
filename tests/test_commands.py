"""Tests for the list / create / find / edit operations."""

import pytest

from studentstore.commands import create_student, edit_student, find_student, list_students
from studentstore.models import ID_MAX, Student
from studentstore.prompts import InputClosed
from studentstore.store import StudentStore


# --- List ---

def test_list_empty(store, console):
    assert list_students(store, console) == 0
    assert "No students stored yet." in console.text


def test_list_shows_header_once(seeded, console):
    assert list_students(seeded, console) == 2
    out = console.text
    assert out.count("Name") == 1
    assert "Ada" in out and "Bob" in out
    assert "No students" not in out


def test_list_reports_truncation_after_rows(seeded, store_path, console):
    with open(store_path, "ab") as f:
        f.write(b"\x00")
    assert list_students(seeded, console) == 2
    assert "Ada" in console.text
    assert "Error:" in console.text


def test_list_escapes_markup_in_names(store, console):
    store.append(Student(id=1, age=20, name="[bold]x[/bold]"))
    list_students(store, console)
    assert "[bold]x[/bold]" in console.text


# --- Create ---

def test_create_assigns_sequential_ids(store, console, reader):
    ada = create_student(store, reader("20", "Ada"), console)
    bob = create_student(store, reader("30", "Bob"), console)
    assert ada == Student(id=1, age=20, name="Ada")
    assert bob == Student(id=2, age=30, name="Bob")
    assert "Student created with ID 1." in console.text
    assert "Student created with ID 2." in console.text


def test_create_reprompts_until_valid(store, console, reader):
    student = create_student(store, reader("", "4", "abc", "75", "   ", "n" * 33, "  Ada  "), console)
    assert student == Student(id=1, age=75, name="Ada")
    out = console.text
    assert "Age cannot be empty." in out
    assert "Please enter a number between 5 and 75." in out
    assert "Name cannot be empty." in out
    assert "Name must be at most 32 characters." in out


def test_create_aborted_by_end_of_input(store, store_path, console, reader):
    with pytest.raises(InputClosed):
        create_student(store, reader("20"), console)
    assert "Input aborted." in console.text
    assert not store_path.exists()


def test_create_refused_when_ids_exhausted(store, store_path, console, reader):
    store.append(Student(id=ID_MAX, age=20, name="Last"))
    before = store_path.read_bytes()
    assert create_student(store, reader("20", "Ada"), console) is None
    assert "ID limit reached." in console.text
    assert store_path.read_bytes() == before


def test_create_refused_on_truncated_store(seeded, store_path, console, reader):
    with open(store_path, "ab") as f:
        f.write(b"\x00\x00")
    before = store_path.read_bytes()
    assert create_student(seeded, reader("20", "Cy"), console) is None
    assert "Error:" in console.text
    assert store_path.read_bytes() == before


# --- Find ---

def test_find_existing(seeded, console, reader):
    assert find_student(seeded, reader("1"), console) == Student(id=1, age=20, name="Ada")
    assert "Ada" in console.text
    assert console.text.count("Name") == 1


def test_find_missing(seeded, console, reader):
    assert find_student(seeded, reader("99"), console) is None
    assert "No student found with ID 99." in console.text


def test_find_on_empty_store(store, console, reader):
    assert find_student(store, reader("1"), console) is None
    assert "No students stored yet." in console.text


def test_find_reprompts_for_id(seeded, console, reader):
    assert find_student(seeded, reader("", "0", "2"), console).name == "Bob"
    assert "ID cannot be empty." in console.text
    assert "Please enter a positive integer." in console.text


# --- Edit ---

def test_edit_name_keeps_age(seeded, console, reader):
    updated = edit_student(seeded, reader("2", "", "Robert"), console)
    assert updated == Student(id=2, age=30, name="Robert")
    assert seeded.find_by_id(2) == updated
    out = console.text
    assert "Editing student 2 (Bob, 30 years old)" in out
    assert "Student updated." in out


def test_edit_age_keeps_name(seeded, console, reader):
    assert edit_student(seeded, reader("1", "21", ""), console) == Student(id=1, age=21, name="Ada")


def test_edit_no_changes(seeded, store_path, console, reader):
    before = store_path.read_bytes()
    assert edit_student(seeded, reader("1", "", "   "), console) is None
    assert "No changes entered." in console.text
    assert store_path.read_bytes() == before


def test_edit_missing_id(seeded, console, reader):
    assert edit_student(seeded, reader("7"), console) is None
    assert "No student found with ID 7." in console.text


def test_edit_on_empty_store(store, store_path, console, reader):
    assert edit_student(store, reader("1"), console) is None
    assert "No students stored yet." in console.text
    assert not store_path.exists()


def test_edit_aborted_midway(seeded, store_path, console, reader):
    before = store_path.read_bytes()
    with pytest.raises(InputClosed):
        edit_student(seeded, reader("1", "40"), console)
    assert store_path.read_bytes() == before


# --- End-to-end walk through ---

def test_scenario(store, console, reader):
    list_students(store, console)
    assert "No students stored yet." in console.text

    assert create_student(store, reader("20", "Ada"), console).id == 1
    assert create_student(store, reader("30", "Bob"), console).id == 2
    assert find_student(store, reader("1"), console) == Student(id=1, age=20, name="Ada")

    edit_student(store, reader("2", "", "Robert"), console)
    assert find_student(store, reader("2"), console) == Student(id=2, age=30, name="Robert")

    assert find_student(store, reader("99"), console) is None
    assert "No student found with ID 99." in console.text


# --- Input and store faults ---

def test_create_reprompts_after_huge_number(store, console, reader):
    student = create_student(store, reader("9" * 5000, "20", "Ada"), console)
    assert student == Student(id=1, age=20, name="Ada")
    assert "Please enter a number between 5 and 75." in console.text


def test_find_on_directory_reports_error(tmp_path, console, reader):
    store = StudentStore(tmp_path)
    assert find_student(store, reader("1"), console) is None
    assert "Error:" in console.text
    assert "No students stored yet." not in console.text


def test_edit_on_directory_reports_error(tmp_path, console, reader):
    store = StudentStore(tmp_path)
    assert edit_student(store, reader("1"), console) is None
    assert "Error:" in console.text
    assert "No students stored yet." not in console.text


def test_edit_same_values_is_no_change(seeded, store_path, console, reader):
    before = store_path.read_bytes()
    assert edit_student(seeded, reader("1", "20", "Ada"), console) is None
    assert "No changes entered." in console.text
    assert "Student updated." not in console.text
    assert store_path.read_bytes() == before
