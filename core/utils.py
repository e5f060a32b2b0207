# core/utils.py

"""
Repository for program-wide utilities.
"""


def normalize_id(raw_id: str) -> str:
    """
    Returns the canonical form of a student ID: surrounding whitespace trimmed, upper-cased.
    """
    return str(raw_id).strip().upper()
