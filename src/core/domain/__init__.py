"""Domain models shared across API families.

Pure data structures (Pydantic v2); nothing here performs I/O.
"""
