"""Shared fixtures: an isolated store file and a captured console per test."""

import io

import pytest
from rich.console import Console

from studentstore.models import Student
from studentstore.prompts import lines_reader
from studentstore.store import StudentStore


class CapturedConsole(Console):
    """Console writing to a buffer, without colour or terminal detection."""

    def __init__(self):
        super().__init__(file=io.StringIO(), width=120, color_system=None, force_terminal=False)

    @property
    def text(self) -> str:
        return self.file.getvalue()


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "Students.bin"


@pytest.fixture
def store(store_path):
    return StudentStore(store_path)


@pytest.fixture
def console():
    return CapturedConsole()


@pytest.fixture
def reader():
    """Factory: reader("20", "Ada") yields those lines, then end of input."""
    return lambda *lines: lines_reader(lines)


@pytest.fixture
def seeded(store):
    """Store holding Ada (1, 20) and Bob (2, 30)."""
    store.append(Student(id=1, age=20, name="Ada"))
    store.append(Student(id=2, age=30, name="Bob"))
    return store
