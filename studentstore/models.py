"""Data model for the student store.

Student is the only record type. Each one is persisted as a fixed-width
binary entry: u32 id, u8 age, 33-byte NUL-padded name.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

AGE_MIN = 5
AGE_MAX = 75

ID_MIN = 1
ID_MAX = 2**32 - 1

# 32 usable bytes plus the terminator
NAME_MAX = 32
NAME_FIELD = NAME_MAX + 1

RECORD_FORMAT = "<IB33s"
RECORD_SIZE = struct.calcsize(RECORD_FORMAT)


def name_fits(name: str) -> bool:
    """True if a name can be stored without truncation."""
    if not name or len(name) > NAME_MAX or "\x00" in name:
        return False
    return len(name.encode("utf-8")) <= NAME_MAX


@dataclass(frozen=True)
class Student:
    """One stored student record."""

    id: int
    age: int
    name: str

    def check(self) -> None:
        """Raise ValueError if any field is outside the storable range."""
        if not ID_MIN <= self.id <= ID_MAX:
            raise ValueError(f"id out of range: {self.id}")
        if not AGE_MIN <= self.age <= AGE_MAX:
            raise ValueError(f"age out of range: {self.age}")
        if not name_fits(self.name):
            raise ValueError(f"name cannot be stored: {self.name!r}")

    def pack(self) -> bytes:
        """Encode to exactly RECORD_SIZE bytes."""
        self.check()
        # struct pads the 33s field with NULs, so the terminator is always present
        return struct.pack(RECORD_FORMAT, self.id, self.age, self.name.encode("utf-8"))

    @classmethod
    def unpack(cls, buf: bytes) -> Student:
        """Decode one record read from the store."""
        student_id, age, raw_name = struct.unpack(RECORD_FORMAT, buf)
        name = raw_name.split(b"\x00", 1)[0].decode("utf-8", errors="replace")
        return cls(id=student_id, age=age, name=name)

    def replace(self, age: Optional[int] = None, name: Optional[str] = None) -> Student:
        """Copy with the mutable fields changed. The id never changes."""
        return Student(
            id=self.id,
            age=self.age if age is None else age,
            name=self.name if name is None else name,
        )
