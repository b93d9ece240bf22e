from dataclasses import dataclass, field

from cgpacalc.core.entities import Student


@dataclass
class AppState:
    student: Student = field(default_factory=Student)
