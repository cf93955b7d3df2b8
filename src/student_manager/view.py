"""
UI layer für die Console

Diese View zeigt die Studentenliste in der Konsole.
- Text formatieren und ausgeben
- Tabelle als ASCII bauen
- Eingaben und Menü anzeigen
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .domain import Student
from .service import RosterService


class ConsoleRosterView:
    """
    View für die Konsole.

    Normale Ausgaben gehen nach stdout, Fehler nach stderr.
    """

    def __init__(self, service: Optional[RosterService] = None) -> None:
        """
        Erstellt die View.
        - service wird für die Spaltenbreiten genutzt.
        """
        self._service = service or RosterService()

    def render_menue(self, pfad: Path) -> None:
        """Zeigt das Hauptmenü."""
        print("==================================")
        print(" Student CSV Manager")
        print(f" File: {Path(pfad).absolute()}")
        print("==================================")
        print("1) View students")
        print("2) Add student")
        print("3) Delete student (by STT)")
        print("0) Exit")
        print("q) Quit")

    def render_tabelle(self, students: Sequence[Student]) -> None:
        """
        Zeichnet die Tabelle.
        Bei leerer Liste gibt es nur einen Hinweis und keinen Rahmen.
        """
        if not students:
            print("\n(No students yet)\n")
            return

        print()
        print("\n".join(self.build_tabelle(students)))
        print()

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def show_error(self, text: str) -> None:
        """
        Gibt eine Fehlermeldung auf stderr aus.
        """
        print(text, file=sys.stderr)

    def build_tabelle(self, students: Sequence[Student]) -> List[str]:
        """
        Baut die Tabelle als Zeilen.

        Aufbau:
        - Rahmen
        - Kopf (STT, Name)
        - Rahmen
        - eine Zeile pro Student
        - Rahmen
        """
        stt_w, name_w = self._service.spaltenbreiten(students)
        border = "+" + "-" * (stt_w + 2) + "+" + "-" * (name_w + 2) + "+"

        lines = [border, self._row("STT", "Name", stt_w, name_w), border]
        for s in students:
            lines.append(self._row(str(s.stt), s.name, stt_w, name_w))
        lines.append(border)

        return lines

    def _row(self, stt: str, name: str, stt_w: int, name_w: int) -> str:
        """Baut eine Tabellenzeile, beide Spalten linksbündig."""
        return f"| {stt.ljust(stt_w)} | {name.ljust(name_w)} |"
