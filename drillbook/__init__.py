"""Classic programming exercises: number drills, sorting, searching, strings, a growable array and linked lists."""

__version__ = "0.1.0"

__all__ = ["arithmetic", "sorting", "searching", "strings", "singly", "doubly", "circular", "vector"]