from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from cgpacalc.config.settings import Settings, settings
from cgpacalc.core.entities import Semester
from cgpacalc.core.validation import read_bounded
from cgpacalc.services.storage import NoSavedDataError, StorageError, TextFileStorage
from cgpacalc.state.app_state import AppState
from cgpacalc.ui.console import format_menu, format_results

logger = logging.getLogger(__name__)

ADD_SEMESTER = 1
SHOW_RESULTS = 2
SAVE_FILE = 3
LOAD_FILE = 4
EXIT = 5


class CgpaShell:
    def __init__(
        self,
        app_state: Optional[AppState] = None,
        storage: Optional[TextFileStorage] = None,
        *,
        config: Settings = settings,
        reader: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.app_state = app_state or AppState()
        self.storage = storage or TextFileStorage.from_settings(config)
        self.config = config
        self._reader = reader
        self._out = out or sys.stdout
        self._err = err or sys.stderr

    def say(self, text: str) -> None:
        print(text, file=self._out)

    def report_error(self, text: str) -> None:
        print(text, file=self._err)

    def _read(self, prompt: str, min_value, max_value, cast=float):
        return read_bounded(prompt, min_value, max_value, cast, reader=self._read_line, writer=self.say)

    def _read_line(self, prompt: str) -> str:
        if prompt:
            self._out.write(prompt)
            self._out.flush()
        return self._reader("")

    def run(self) -> None:
        """Menu loop; returns once Exit is chosen or input ends."""
        while True:
            self.say(format_menu())
            try:
                choice = self._read("Enter choice: ", ADD_SEMESTER, EXIT, int)
                if not self.dispatch(choice):
                    return
            except (EOFError, KeyboardInterrupt):
                self.say("")
                self.say("Exiting program.")
                return

    def dispatch(self, choice: int) -> bool:
        """Handles one menu choice. False means the shell should stop."""
        if choice == ADD_SEMESTER:
            self.add_semester()
        elif choice == SHOW_RESULTS:
            self.show_results()
        elif choice == SAVE_FILE:
            self.save()
        elif choice == LOAD_FILE:
            self.load()
        elif choice == EXIT:
            self.say("Exiting program.")
            return False
        return True

    def add_semester(self) -> None:
        cfg = self.config
        sem = Semester()
        count = self._read("Enter number of courses: ", 1, cfg.max_courses, int)
        for _ in range(count):
            grade = self._read(
                f"Enter numeric grade ({cfg.grade_min:g}-{cfg.grade_max:g}): ", cfg.grade_min, cfg.grade_max
            )
            credit = self._read("Enter credit hours (>0): ", cfg.credit_min, cfg.credit_max)
            sem.add_course(grade, credit)
        self.app_state.student.add_semester(sem)
        logger.debug("Added semester with %d course(s)", count)

    def show_results(self) -> None:
        self.say(format_results(self.app_state.student))

    def save(self) -> None:
        try:
            self.storage.save(self.app_state.student)
        except StorageError as exc:
            self.report_error(f"Error saving data: {exc}")
            return
        self.say("Data saved successfully.")

    def load(self) -> None:
        try:
            self.storage.load_into(self.app_state.student)
        except NoSavedDataError:
            self.say("No saved data found.")
            return
        except StorageError as exc:
            self.report_error(f"Error loading data: {exc}")
            return
        self.say("Data loaded successfully.")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    CgpaShell().run()
    return 0
