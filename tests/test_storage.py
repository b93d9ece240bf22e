import os
import tempfile
import unittest
from pathlib import Path

from cgpacalc.config.settings import Settings
from cgpacalc.core.entities import Semester, Student
from cgpacalc.core.gpa import Course
from cgpacalc.services.storage import (
    CorruptDataError,
    NoSavedDataError,
    StorageError,
    TextFileStorage,
    parse,
    serialize,
)


def make_student(*semesters):
    student = Student()
    for courses in semesters:
        sem = Semester()
        for grade, credit in courses:
            sem.add_course(grade, credit)
        student.add_semester(sem)
    return student


def as_pairs(student):
    return [[(c.grade, c.credit) for c in sem.courses] for sem in student.semesters]


class SerializeTests(unittest.TestCase):
    def test_format(self):
        student = make_student([(8.0, 4.0), (7.5, 2.0)], [(9.25, 3.0)])
        self.assertEqual(serialize(student.semesters), "2\n8 4\n7.5 2\n1\n9.25 3\n")

    def test_no_semesters_is_empty(self):
        self.assertEqual(serialize([]), "")

    def test_parse_ignores_line_layout(self):
        semesters = parse("2 8 4\n7.5\n2 0\n")
        self.assertEqual(
            [s.courses for s in semesters],
            [[Course(8.0, 4.0), Course(7.5, 2.0)], []],
        )

    def test_parse_short_read(self):
        with self.assertRaises(CorruptDataError):
            parse("2\n8 4\n")
        with self.assertRaises(CorruptDataError):
            parse("1\n8\n")

    def test_parse_rejects_bad_tokens(self):
        for text in ("1\n8 four\n", "1\nnan 4\n", "1\n8 inf\n", "1\n8 1e400\n", "2\n8 4\nEND\n"):
            with self.subTest(text=text):
                with self.assertRaises(CorruptDataError):
                    parse(text)

    def test_parse_stops_at_non_integer_count(self):
        semesters = parse("1\n8 4\nEND\n")
        self.assertEqual([s.courses for s in semesters], [[Course(8.0, 4.0)]])
        self.assertEqual(parse("x\n1\n8 4\n"), [])
        self.assertEqual(len(parse("1\n8 4\n1.5\n8 4\n")), 1)

    def test_parse_negative_count_is_empty_semester(self):
        semesters = parse("-1\n1\n8 4\n")
        self.assertEqual([s.courses for s in semesters], [[], [Course(8.0, 4.0)]])


class TextFileStorageTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = os.path.join(self._tmp.name, "cgpa_data.txt")
        self.storage = TextFileStorage(self.path)

    def write(self, text):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)

    def test_round_trip(self):
        original = make_student([(8.0, 4.0), (6.0, 2.0)], [(9.1, 3.5), (0.1 + 0.2, 0.01)], [(10.0, 100.0)])
        self.storage.save(original)

        loaded = Student()
        self.storage.load_into(loaded)
        self.assertEqual(as_pairs(loaded), as_pairs(original))

    def test_save_truncates_existing_file(self):
        self.write("5\n1 1\n1 1\n1 1\n1 1\n1 1\n")
        self.storage.save(make_student([(8.0, 4.0)]))
        with open(self.path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "1\n8 4\n")

    def test_save_empty_then_load(self):
        self.storage.save(Student())
        self.assertEqual(os.path.getsize(self.path), 0)

        loaded = make_student([(5.0, 1.0)])
        self.storage.load_into(loaded)
        self.assertEqual(loaded.semesters, [])

    def test_load_replaces_existing_state(self):
        self.write("1\n9 3\n")
        student = make_student([(5.0, 1.0)], [(6.0, 2.0)])
        self.storage.load_into(student)
        self.assertEqual(as_pairs(student), [[(9.0, 3.0)]])

    def test_missing_file_leaves_state_untouched(self):
        student = make_student([(8.0, 4.0)])
        with self.assertRaises(NoSavedDataError):
            self.storage.load_into(student)
        self.assertEqual(as_pairs(student), [[(8.0, 4.0)]])

    def test_truncated_file_leaves_no_semesters(self):
        self.write("2\n8 4\n6 2\n3\n7 3\n")
        student = make_student([(8.0, 4.0)])
        with self.assertRaises(CorruptDataError):
            self.storage.load_into(student)
        self.assertEqual(student.semesters, [])

    def test_trailing_text_after_last_semester_is_ignored(self):
        self.write("1\n8 4\nEND\n")
        student = make_student([(5.0, 1.0)])
        self.storage.load_into(student)
        self.assertEqual(as_pairs(student), [[(8.0, 4.0)]])

    def test_non_finite_values_discard_the_load(self):
        self.write("1\n9 3\n1\nnan 4\n")
        student = make_student([(5.0, 1.0)])
        with self.assertRaises(CorruptDataError):
            self.storage.load_into(student)
        self.assertEqual(student.semesters, [])

    def test_from_settings_uses_configured_path(self):
        storage = TextFileStorage.from_settings(Settings(data_file=self.path))
        self.assertEqual(storage.path, Path(self.path))

    def test_save_to_unwritable_path(self):
        storage = TextFileStorage(os.path.join(self._tmp.name, "missing", "cgpa_data.txt"))
        with self.assertRaises(StorageError):
            storage.save(make_student([(8.0, 4.0)]))

    def test_load_from_directory_leaves_state_untouched(self):
        storage = TextFileStorage(self._tmp.name)
        student = make_student([(8.0, 4.0)])
        with self.assertRaises(StorageError):
            storage.load_into(student)
        self.assertEqual(as_pairs(student), [[(8.0, 4.0)]])


if __name__ == "__main__":
    unittest.main()
