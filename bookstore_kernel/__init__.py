"""
Bookstore Kernel

A line-oriented command interpreter for a single-operator bookstore:
- Nested login sessions with privilege inheritance
- Per-command privilege gates and field validation
- Book catalog with per-session selection and atomic ISBN rename
- Append-only sales/restock ledger
- Every mutation persisted before the next command is read
"""

__version__ = "0.1.0"
