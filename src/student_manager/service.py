"""
Application/Use-Case layer

Der RosterService enthält die Regeln für Hinzufügen und Löschen.
Er nutzt dafür nur Domain-Objekte und arbeitet ohne Datei-Zugriff.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .domain import DELIMITER, Student, lies_ganzzahl

# Mindestbreiten der Tabellenspalten.
MIN_STT_BREITE = 3
MIN_NAME_BREITE = 4


class RosterService:
    """
    Regeln für die Studentenliste.
    """

    def bereinige_name(self, raw: str) -> Optional[str]:
        """
        Prüft und bereinigt einen Namen.
        - Leerzeichen am Rand werden entfernt.
        - Leerer Name -> None.
        - Jedes Komma wird durch ein Leerzeichen ersetzt.
        """
        name = raw.strip()
        if not name:
            return None
        return name.replace(DELIMITER, " ")

    def naechste_stt(self, students: Sequence[Student]) -> int:
        """
        Vergibt die nächste STT.

        Grundlage ist der letzte Eintrag in Datei-Reihenfolge, nicht das Maximum.
        Nach dem Löschen des letzten Eintrags oder bei unsortierter Datei
        kann dadurch eine STT doppelt vergeben werden.
        """
        if not students:
            return 1
        return students[-1].stt + 1

    def parse_stt(self, raw: str) -> Optional[int]:
        """Liest eine STT aus Text. Ungültig -> None."""
        return lies_ganzzahl(raw)

    def entferne_erste(self, students: Sequence[Student], stt: int) -> Optional[List[Student]]:
        """
        Entfernt den ersten Studenten mit dieser STT.
        - Spätere Treffer bleiben erhalten.
        - Kein Treffer -> None.
        - Die übergebene Liste wird nicht verändert.
        """
        for i, s in enumerate(students):
            if s.stt == stt:
                return list(students[:i]) + list(students[i + 1:])
        return None

    def spaltenbreiten(self, students: Sequence[Student]) -> Tuple[int, int]:
        """
        Berechnet die Breite der Spalten STT und Name.
        Mindestens so breit wie die Überschrift.
        """
        stt_breite = max(MIN_STT_BREITE, len("STT"))
        name_breite = max(MIN_NAME_BREITE, len("Name"))

        for s in students:
            stt_breite = max(stt_breite, len(str(s.stt)))
            name_breite = max(name_breite, len(s.name))

        return stt_breite, name_breite
