"""
Persistence layer (CSV)

Hier liegt die Speicherung in der CSV-Datei. Die Domain selbst bleibt frei von CSV-Details.
- StudentRepository: Schnittstelle (sicherstellen / laden / speichern / anhängen)
- CsvStudentRepository: Datei-Repository
- CsvSerializer: Mapping zwischen Student und Zeile

Format: eine Zeile pro Student, "stt,name", UTF-8.
Fehlerhafte Zeilen werden beim Laden übersprungen.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from .domain import DELIMITER, Student, lies_ganzzahl


class StudentRepository(Protocol):
    """
    Schnittstelle für Persistenz.
    """
    @property
    def pfad(self) -> Path:
        """Pfad der Datei."""
        ...

    def stelle_sicher(self) -> None:
        """Legt Verzeichnis und Datei an, falls sie fehlen."""
        ...

    def lade_alle(self) -> List[Student]:
        """Lädt alle Studenten in Datei-Reihenfolge."""
        ...

    def speichere_alle(self, students: Iterable[Student]) -> None:
        """Überschreibt die Datei mit den Studenten."""
        ...

    def haenge_an(self, student: Student) -> None:
        """Hängt einen Studenten als neue letzte Zeile an."""
        ...


class FileStorage:
    """
    Klasse für Dateihandling beim laden und speichern.
    - Nur lesen/schreiben.
    - UTF-8 wird fest genutzt.
    - Fehler werden als OSError weitergegeben.
    """

    def erzeuge_datei(self, pfad: Path) -> None:
        """
        Legt das Verzeichnis und die leere Datei an.
        Mehrfacher Aufruf ändert nichts.
        """
        pfad.parent.mkdir(parents=True, exist_ok=True)
        if not pfad.exists():
            pfad.touch()

    def lese_text(self, pfad: Path) -> str:
        """
        Liest eine Datei als Text.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError bei Leseproblemen, auch bei ungültigem UTF-8
        """
        try:
            with open(pfad, "r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise OSError(f"{pfad}: {e}") from e

    def schreibe_text(self, pfad: Path, content: str) -> None:
        """
        Schreibt Text in eine Datei. Der alte Inhalt wird abgeschnitten.
        """
        # newline="" damit os.linesep nicht nochmal übersetzt wird
        with open(pfad, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    def haenge_text_an(self, pfad: Path, content: str) -> None:
        """
        Hängt Text an das Dateiende an.
        """
        with open(pfad, "a", encoding="utf-8", newline="") as f:
            f.write(content)


class CsvSerializer:
    """
    Wandelt Student <-> Zeile.
    - Kein Quoting, kein Escaping.
    - Parsing ist tolerant: kaputte Zeilen liefern None.
    """

    def parse_zeile(self, zeile: str) -> Optional[Student]:
        """
        Baut einen Studenten aus einer Zeile.

        Ergebnis ist None, wenn:
        - die Zeile leer ist
        - kein Trennzeichen vorkommt oder es am Anfang steht
        - die STT keine ganze Zahl ist
        """
        s = zeile.strip()
        if not s:
            return None

        pos = s.find(DELIMITER)
        if pos <= 0:
            return None

        stt_text = s[:pos].strip()
        name = s[pos + 1:].strip()

        stt = lies_ganzzahl(stt_text)
        if stt is None:
            return None

        return Student(stt=stt, name=name)

    def parse_text(self, raw: str) -> List[Student]:
        """
        Baut die Liste aus dem Dateiinhalt.
        Zeilen, für die parse_zeile None liefert, werden verworfen.
        Getrennt wird nur an "\n" (die Datei wird mit universal newlines gelesen).
        """
        students = []
        for zeile in raw.split("\n"):
            student = self.parse_zeile(zeile)
            if student is None:
                continue  # fehlerhafte Zeile
            students.append(student)
        return students

    def to_zeile(self, student: Student) -> str:
        """Macht aus dem Studenten eine Zeile (ohne Zeilenende)."""
        return f"{student.stt}{DELIMITER}{student.name}"

    def to_text(self, students: Iterable[Student]) -> str:
        """
        Macht aus der Liste den Dateiinhalt.
        Jede Zeile endet mit dem Zeilenende der Plattform.
        """
        return "".join(self.to_zeile(s) + os.linesep for s in students)


class CsvStudentRepository:
    """
    Repository für eine CSV-Datei.
    - FileStorage für Datei-Zugriff
    - CsvSerializer für Mapping

    Es gibt keinen Cache. Jeder Aufruf liest oder schreibt die Datei neu.
    """

    def __init__(
        self,
        pfad: Path,
        storage: Optional[FileStorage] = None,
        serializer: Optional[CsvSerializer] = None
    ) -> None:
        """
        Erstellt das Repository.
        """
        self._pfad = Path(pfad)
        self._storage = storage or FileStorage()
        self._serializer = serializer or CsvSerializer()

    @property
    def pfad(self) -> Path:
        """Pfad der CSV-Datei."""
        return self._pfad

    def stelle_sicher(self) -> None:
        """
        Legt Verzeichnis und Datei an.
        """
        self._storage.erzeuge_datei(self._pfad)

    def lade_alle(self) -> List[Student]:
        """
        Lädt die Datei und baut die Domain-Objekte.
        """
        raw = self._storage.lese_text(self._pfad)
        return self._serializer.parse_text(raw)

    def speichere_alle(self, students: Iterable[Student]) -> None:
        """
        Serialisiert und überschreibt die Datei.
        Nicht atomar: bei einem Fehler kann die Datei abgeschnitten sein.
        """
        raw = self._serializer.to_text(students)
        self._storage.schreibe_text(self._pfad, raw)

    def haenge_an(self, student: Student) -> None:
        """
        Schreibt genau eine neue Zeile ans Dateiende.
        """
        raw = self._serializer.to_text([student])
        self._storage.haenge_text_an(self._pfad, raw)
