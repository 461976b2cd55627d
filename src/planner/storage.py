"""
CSV persistence for study plans.

File format (one subject per line, header optional on load):

    name,difficulty,importance,perfScore,allocatedHours
    Math,9,10,80.00,1.50

Blank lines are skipped. Performance history is not stored; loaded subjects
keep the saved score as a standalone value.
"""

from __future__ import annotations

import csv
import io
import math
from pathlib import Path
from typing import Iterable

from loguru import logger

from src.planner.errors import InvalidFormatError, StorageError
from src.planner.subject import DEFAULT_HISTORY_WINDOW, Subject

CSV_HEADER = ("name", "difficulty", "importance", "perfScore", "allocatedHours")
HEADER_MARKER = "name,difficulty,importance"
FIELD_COUNT = len(CSV_HEADER)
FORBIDDEN_NAME_CHARS = (",", "\n", "\r")


def format_number(value: float) -> str:
    """Two decimals when that is exact, otherwise the shortest lossless form."""
    fixed = f"{value:.2f}"
    return fixed if float(fixed) == value else repr(float(value))


def format_row(subject: Subject) -> list[str]:
    return [
        subject.name,
        str(subject.difficulty),
        str(subject.importance),
        format_number(subject.performance_score),
        format_number(subject.allocated_hours),
    ]


def parse_row(
    fields: list[str],
    line_number: int | None = None,
    history_window: int = DEFAULT_HISTORY_WINDOW,
) -> Subject:
    """
    Build a Subject from the five CSV fields.

    Raises:
        InvalidFormatError: Wrong field count or unparsable number
    """
    if len(fields) != FIELD_COUNT:
        raise InvalidFormatError(
            f"expected {FIELD_COUNT} fields, got {len(fields)}", line_number
        )

    name, difficulty, importance, performance, hours = fields
    try:
        difficulty_level = int(difficulty)
        importance_level = int(importance)
        score = float(performance)
        allocated = float(hours)
    except ValueError as e:
        raise InvalidFormatError(f"invalid number: {e}", line_number) from e
    if not (math.isfinite(score) and math.isfinite(allocated)):
        raise InvalidFormatError("numbers must be finite", line_number)

    subject = Subject(
        name=name,
        difficulty=difficulty_level,
        importance=importance_level,
        performance_score=score,
        history_window=history_window,
    )
    subject.allocated_hours = allocated
    return subject


def save_subjects(path: str | Path, subjects: Iterable[Subject]) -> None:
    """
    Write subjects to path, replacing any existing content.

    Raises:
        InvalidFormatError: A subject name contains a comma or line break
        StorageError: The file cannot be written
    """
    path = Path(path)
    subjects = list(subjects)
    for subject in subjects:
        if any(char in subject.name for char in FORBIDDEN_NAME_CHARS):
            raise InvalidFormatError(
                f"subject name cannot contain a comma or line break: {subject.name!r}"
            )

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(format_row(subject) for subject in subjects)

    try:
        path.write_text(buffer.getvalue(), encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Unable to open file for writing: {path}", str(path)) from e

    logger.info(f"Saved {len(subjects)} subjects to {path}")


def load_subjects(
    path: str | Path,
    history_window: int = DEFAULT_HISTORY_WINDOW,
) -> list[Subject]:
    """
    Parse every subject in path.

    The whole file is parsed before anything is returned, so a bad line
    never yields a partial result.

    Raises:
        StorageError: The file cannot be read
        InvalidFormatError: A data line is malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Unable to open file for reading: {path}", str(path)) from e

    subjects: list[Subject] = []
    first = True
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        if first and HEADER_MARKER in line:
            first = False
            continue
        first = False
        fields = next(csv.reader([line]))
        subjects.append(parse_row(fields, line_number, history_window))

    logger.info(f"Loaded {len(subjects)} subjects from {path}")
    return subjects
