"""
Entry point für den Student CSV Manager.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import sys
from pathlib import Path

from .persistence import CsvStudentRepository
from .service import RosterService
from .view import ConsoleRosterView
from .controller import RosterController

DATA_DIR_NAME = ".student-manager"
DATA_FILE_NAME = "students.csv"


def standard_pfad() -> Path:
    """Pfad der CSV-Datei: ~/.student-manager/students.csv"""
    return Path.home() / DATA_DIR_NAME / DATA_FILE_NAME


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Datenpfad bestimmen
    - Datei anlegen, falls sie fehlt
    - Komponenten erstellen
    - Controller starten
    """
    # Bausteine der App erstellen.
    service = RosterService()
    view = ConsoleRosterView(service)
    repo = CsvStudentRepository(standard_pfad())

    # Ohne Datei kein Start.
    try:
        repo.stelle_sicher()
    except OSError as e:
        view.show_error(f"Failed to create/open CSV file: {e}")
        sys.exit(1)

    controller = RosterController(repo, service, view)

    try:
        controller.starte_app()
    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Ende der Eingabe.
        view.show_message("\nBye 👋")
    except Exception as e:
        # Unerwarteter Fehler.
        view.show_error(f"\nERROR: {e}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
