"""
Tests für die Konsolen-View.

Diese Tests prüfen:
1. Tabellenaufbau und Spaltenbreiten
2. Hinweis bei leerer Liste
3. Menü und Fehlerausgabe
"""

from student_manager.domain import Student
from student_manager.view import ConsoleRosterView


# =============================================================================
# TABLE TESTS
# =============================================================================

class TestTabelle:
    """Test für die Tabellenausgabe."""

    def test_build_tabelle_layout(self):
        """Rahmen, Kopf und linksbündige Zeilen."""
        lines = ConsoleRosterView().build_tabelle([Student(1, "Alice"), Student(12, "Bob")])

        assert lines == [
            "+-----+-------+",
            "| STT | Name  |",
            "+-----+-------+",
            "| 1   | Alice |",
            "| 12  | Bob   |",
            "+-----+-------+",
        ]

    def test_wide_stt_column(self):
        lines = ConsoleRosterView().build_tabelle([Student(123456, "Al")])

        assert lines[1] == "| STT    | Name |"
        assert lines[3] == "| 123456 | Al   |"

    def test_empty_roster_prints_notice_only(self, capsys):
        """Leere Liste: Hinweis, aber kein Rahmen."""
        ConsoleRosterView().render_tabelle([])

        out = capsys.readouterr().out
        assert "(No students yet)" in out
        assert "+" not in out

    def test_render_tabelle_prints_rows(self, capsys):
        ConsoleRosterView().render_tabelle([Student(1, "Alice")])

        out = capsys.readouterr().out
        assert "| 1   | Alice |" in out


# =============================================================================
# MENU / MESSAGE TESTS
# =============================================================================

class TestAusgabe:
    """Test für Menü und Nachrichten."""

    def test_menu_shows_options_and_path(self, capsys, tmp_path):
        pfad = tmp_path / "students.csv"

        ConsoleRosterView().render_menue(pfad)

        out = capsys.readouterr().out
        assert " Student CSV Manager" in out
        assert str(pfad) in out
        for option in ("1) View students", "2) Add student", "3) Delete student (by STT)", "0) Exit", "q) Quit"):
            assert option in out

    def test_show_error_goes_to_stderr(self, capsys):
        ConsoleRosterView().show_error("kaputt")

        captured = capsys.readouterr()
        assert captured.err == "kaputt\n"
        assert captured.out == ""
