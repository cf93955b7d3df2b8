"""
Gemeinsame Fixtures für die Tests.
"""

import pytest

from student_manager.persistence import CsvStudentRepository


@pytest.fixture
def csv_pfad(tmp_path):
    """Pfad einer CSV-Datei in einem noch nicht existierenden Unterordner."""
    return tmp_path / ".student-manager" / "students.csv"


@pytest.fixture
def repo(csv_pfad):
    """Repository mit angelegter, leerer Datei."""
    r = CsvStudentRepository(csv_pfad)
    r.stelle_sicher()
    return r


@pytest.fixture
def eingaben(monkeypatch):
    """
    Ersetzt input() durch eine feste Liste von Antworten.
    Aufruf: eingaben(["1", "q"])
    """
    def _setze(antworten):
        it = iter(antworten)

        def fake_input(frage=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return _setze

