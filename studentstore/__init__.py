"""studentstore: student records in a flat binary file.

Keeps (id, age, name) records as fixed-width entries appended to one file,
with a small interactive menu to list, create, look up and edit them.

Usage:
    python -m studentstore                     # Interactive menu
    python -m studentstore list                # Print all students
    python -m studentstore show 3              # Print one student
"""
