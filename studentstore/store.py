"""Flat-file student store.

The store is a plain file of back-to-back fixed-size records with no header.
Every operation opens the file, does a linear scan from the start, and closes
it again before returning. A missing file is an empty store.

There is no index; every lookup is a linear scan.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator, Optional, BinaryIO

from studentstore.models import ID_MAX, RECORD_SIZE, Student


class StoreError(Exception):
    """An I/O fault on the backing file (anything other than it being absent)."""


class TruncatedRecordError(StoreError):
    """The file ends with a partial record."""


class IdSpaceExhaustedError(StoreError):
    """The highest stored id is already ID_MAX."""


def _read_records(fp: BinaryIO) -> Iterator[Student]:
    """Yield records from the current position until a clean end of file."""
    while True:
        buf = fp.read(RECORD_SIZE)
        if not buf:
            return
        if len(buf) != RECORD_SIZE:
            raise TruncatedRecordError(
                f"Failed to read student file: trailing partial record ({len(buf)} of {RECORD_SIZE} bytes)"
            )
        yield Student.unpack(buf)


class StudentStore:
    """Sequential record storage backed by one file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"StudentStore({str(self.path)!r})"

    def exists(self) -> bool:
        """False only when the file is absent; other stat failures raise StoreError."""
        try:
            self.path.stat()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StoreError(f"Failed to open student file: {e}") from e
        return True

    def count(self) -> int:
        """Number of complete records in the file."""
        try:
            return self.path.stat().st_size // RECORD_SIZE
        except FileNotFoundError:
            return 0
        except OSError as e:
            raise StoreError(f"Failed to open student file: {e}") from e

    def scan_all(self) -> Iterator[Student]:
        """Yield every record in file order.

        A missing file yields nothing. A partial trailing record raises
        TruncatedRecordError only after all complete records were yielded.
        """
        try:
            fp = open(self.path, "rb")
        except FileNotFoundError:
            return
        except OSError as e:
            raise StoreError(f"Failed to open student file: {e}") from e
        with fp:
            try:
                yield from _read_records(fp)
            except OSError as e:
                raise StoreError(f"Failed to read student file: {e}") from e

    def find_by_id(self, student_id: int) -> Optional[Student]:
        """Return the first record with a matching id, or None."""
        for student in self.scan_all():
            if student.id == student_id:
                return student
        return None

    def next_id(self) -> int:
        """Derive the next free id as max(id) + 1, or 1 for an empty store.

        Raises:
            IdSpaceExhaustedError: the maximum stored id is already ID_MAX.
            StoreError: the file exists but cannot be read completely.
        """
        max_id = 0
        for student in self.scan_all():
            if student.id > max_id:
                max_id = student.id
        if max_id >= ID_MAX:
            raise IdSpaceExhaustedError("ID limit reached.")
        return max_id + 1

    def append(self, student: Student) -> None:
        """Write one record at the end of the file, creating it if needed."""
        # Pack first so an invalid record never opens the file
        buf = student.pack()
        try:
            with open(self.path, "ab") as fp:
                written = fp.write(buf)
                if written != RECORD_SIZE:
                    raise StoreError(f"Failed to write student: short write ({written} of {RECORD_SIZE} bytes)")
        except OSError as e:
            raise StoreError(f"Failed to write student: {e}") from e

    def update_in_place(
        self,
        student_id: int,
        mutator: Callable[[Student], Student],
    ) -> Optional[Student]:
        """Rewrite the record with ``student_id`` using ``mutator``.

        The mutator receives the stored record and returns its replacement,
        which must keep the same id. The record is rewritten at its original
        offset; if the replacement is identical nothing is written.

        Returns:
            The record as stored after the call, or None if no record matched.
        """
        try:
            fp = open(self.path, "r+b")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StoreError(f"Failed to open student file: {e}") from e

        with fp:
            try:
                current = None
                for student in _read_records(fp):
                    if student.id == student_id:
                        current = student
                        break
            except OSError as e:
                raise StoreError(f"Failed to read student file: {e}") from e
            if current is None:
                return None

            updated = mutator(current)
            if updated.id != current.id:
                raise ValueError(f"student id is immutable ({current.id} -> {updated.id})")
            if updated == current:
                return current
            buf = updated.pack()

            try:
                fp.seek(-RECORD_SIZE, os.SEEK_CUR)
            except OSError as e:
                raise StoreError(f"Failed to seek student file: {e}") from e
            try:
                written = fp.write(buf)
                fp.flush()
            except OSError as e:
                raise StoreError(f"Failed to update student: {e}") from e
            if written != RECORD_SIZE:
                raise StoreError(f"Failed to update student: short write ({written} of {RECORD_SIZE} bytes)")
            return updated
