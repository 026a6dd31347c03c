#!/usr/bin/env python3
"""
Purpose:
    Collects per-field comment errors during batch processing.
"""

from typing import List, Optional, Tuple


class ValidationResult:
    def __init__(self):
        self.entries: List[Tuple[str, str]] = []

    @property
    def errors(self) -> List[str]:
        """Messages formatted as '<field>: <message>' (or just the message when no field)."""
        return [f"{field}: {msg}" if field else msg for field, msg in self.entries]

    def add(self, field: str, message: str):
        self.entries.append((field, message))

    def report(self, field: str, msg: str, strict: bool = False, exc: Optional[Exception] = None):
        """
        Record an error for `field`, or raise if in strict mode.

        Args:
            field (str): Name of the field the error belongs to.
            msg (str): The error message.
            strict (bool): Whether to raise immediately.
            exc (Exception): Exception to re-raise if strict. Default is ValueError(msg).
        """
        if strict:
            raise exc if exc is not None else ValueError(msg)
        self.add(field, msg)

    def fields(self) -> List[str]:
        return list(dict.fromkeys(field for field, _ in self.entries))

    def is_valid(self) -> bool:
        return not self.entries

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.errors)

    def __repr__(self):
        return f"<ValidationResult valid={self.is_valid()} errors={len(self.entries)}>"
