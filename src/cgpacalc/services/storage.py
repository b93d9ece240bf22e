from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable, Iterator, List

from cgpacalc.config.settings import Settings, settings
from cgpacalc.core.entities import Semester, Student

logger = logging.getLogger(__name__)


class StorageError(Exception):
    pass


class NoSavedDataError(StorageError):
    pass


class CorruptDataError(StorageError):
    pass


def _format_number(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def serialize(semesters: Iterable[Semester]) -> str:
    """
    One block per semester: the course count on its own line, then one
    "<grade> <credit>" line per course.
    """
    lines: List[str] = []
    for sem in semesters:
        lines.append(str(len(sem.courses)))
        for c in sem.courses:
            lines.append(f"{_format_number(c.grade)} {_format_number(c.credit)}")
    return "".join(f"{line}\n" for line in lines)


def _next_number(tokens: Iterator[str], label: str) -> float:
    try:
        raw = next(tokens)
    except StopIteration:
        raise CorruptDataError(f"Corrupt data in file: missing {label}.") from None
    try:
        value = float(raw)
    except ValueError:
        raise CorruptDataError(f"Corrupt data in file: invalid {label} {raw!r}.") from None
    if not math.isfinite(value):
        raise CorruptDataError(f"Corrupt data in file: invalid {label} {raw!r}.")
    return value


def parse(text: str) -> List[Semester]:
    """
    Builds semesters from the token stream. Running out of tokens, or a token
    that is not an integer, where a course count is expected ends the data.
    Inside a semester either one is corruption.
    """
    semesters: List[Semester] = []
    tokens = iter(text.split())
    for raw_count in tokens:
        try:
            count = int(raw_count)
        except ValueError:
            logger.debug("Stopped reading at non-integer course count %r", raw_count)
            break

        # A negative count reads no courses.
        sem = Semester()
        for _ in range(count):
            grade = _next_number(tokens, "grade")
            credit = _next_number(tokens, "credit")
            sem.add_course(grade, credit)
        semesters.append(sem)
    return semesters


class TextFileStorage:
    def __init__(self, path: str) -> None:
        self.path = Path(path)

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "TextFileStorage":
        return cls(config.data_file)

    def save(self, student: Student) -> None:
        # Truncates the target; a failure mid-write leaves whatever was written.
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(serialize(student.semesters))
        except OSError as exc:
            raise StorageError(f"Failed to write {self.path}: {exc.strerror or exc}") from exc
        logger.debug("Saved %d semester(s) to %s", len(student.semesters), self.path)

    def load_into(self, student: Student) -> None:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError as exc:
            raise NoSavedDataError(f"No saved data at {self.path}") from exc
        except UnicodeDecodeError as exc:
            student.clear()
            raise CorruptDataError(f"Corrupt data in file: {exc.reason}.") from exc
        except OSError as exc:
            raise StorageError(f"Failed to read {self.path}: {exc.strerror or exc}") from exc

        student.clear()
        try:
            semesters = parse(text)
        except CorruptDataError:
            logger.warning("Discarding corrupt data file %s", self.path)
            raise

        for sem in semesters:
            student.add_semester(sem)
        logger.debug("Loaded %d semester(s) from %s", len(semesters), self.path)
