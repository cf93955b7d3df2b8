"""
Controller layer

Der RosterController steuert die App. Er verbindet Repository, Service und View.

Aufgaben:
- Menü anzeigen und Eingaben verarbeiten
- Studenten anzeigen, hinzufügen, löschen
- Fehler beim Lesen/Schreiben melden, ohne die Schleife zu verlassen
"""

from __future__ import annotations

from typing import List

from .domain import Student
from .persistence import StudentRepository
from .service import RosterService
from .view import ConsoleRosterView


class RosterController:
    """
    Hauptcontroller für die Studentenliste.

    Es gibt keinen Zustand zwischen zwei Menü-Runden.
    Jede Aktion liest die Datei neu.
    """

    def __init__(
        self,
        repo: StudentRepository,
        service: RosterService,
        view: ConsoleRosterView
    ) -> None:
        """
        Erstellt den Controller.

        - repo: Laden/Speichern
        - service: Regeln
        - view: Ein-/Ausgabe
        """
        self._repo = repo
        self._service = service
        self._view = view

    def starte_app(self) -> None:
        """
        Startet die Menü-Schleife.
        Ende bei "0" oder "q"/"Q".
        """
        while True:
            self._view.render_menue(self._repo.pfad)
            choice = self._view.prompt("Choose: ").strip()

            if choice == "0" or choice.lower() == "q":
                self._view.show_message("Bye 👋")
                break

            if choice == "1":
                self.zeige_studenten()
            elif choice == "2":
                self.fuege_student_hinzu()
            elif choice == "3":
                self.loesche_student()
            else:
                self._view.show_message("Invalid choice. Please select 1, 2, 3, 0, or q.\n")

    def zeige_studenten(self) -> None:
        """Zeigt alle Studenten als Tabelle."""
        self._view.render_tabelle(self._lade())

    def fuege_student_hinzu(self) -> None:
        """
        Fügt einen Studenten am Ende an.
        Die STT ist die STT der letzten Zeile + 1.
        """
        raw = self._view.prompt("\nEnter student name: ")
        name = self._service.bereinige_name(raw)
        if name is None:
            self._view.show_message("Name cannot be empty.\n")
            return

        students = self._lade()
        neu = Student(stt=self._service.naechste_stt(students), name=name)

        try:
            self._repo.haenge_an(neu)
        except OSError as e:
            self._view.show_error(f"Failed to append to CSV: {e}")
            return

        self._view.show_message(f"Added: STT={neu.stt}, Name={neu.name}\n")

    def loesche_student(self) -> None:
        """
        Löscht den ersten Studenten mit der eingegebenen STT.
        Die Datei wird danach komplett neu geschrieben.
        """
        students = self._lade()
        if not students:
            self._view.show_message("\n(No students to delete)\n")
            return

        stt = self._service.parse_stt(self._view.prompt("\nEnter STT to delete: "))
        if stt is None:
            self._view.show_message("Invalid STT.\n")
            return

        rest = self._service.entferne_erste(students, stt)
        if rest is None:
            self._view.show_message(f"STT not found: {stt}\n")
            return

        try:
            self._repo.speichere_alle(rest)
        except OSError as e:
            self._view.show_error(f"Failed to write CSV: {e}")
            return

        self._view.show_message(f"Deleted STT: {stt}\n")

    def _lade(self) -> List[Student]:
        """
        Lädt alle Studenten.
        Bei Lesefehlern wird gemeldet und mit leerer Liste weitergemacht.
        """
        try:
            return self._repo.lade_alle()
        except OSError as e:
            self._view.show_error(f"Failed to read CSV: {e}")
            return []
