"""
Domain beinhaltet die Entity Student

Dieses Modul enthält nur die Fachdaten.
Es enthält keine UI- oder CSV-Logik.

- Ein Student besteht nur aus STT (laufende Nummer) und Name.
- Die STT ist nicht eindeutig. Doppelte Werte sind möglich (z.B. bei Handbearbeitung der Datei).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Trennzeichen zwischen STT und Name in der Datei.
DELIMITER = ","


@dataclass(slots=True)
class Student:
    """
    Ein Eintrag in der Liste.
    - stt: laufende Nummer, wird als "STT" angezeigt
    - name: freier Text ohne Trennzeichen
    """
    stt: int
    name: str


# Nur ASCII-Ziffern mit optionalem Vorzeichen. Kein "1_000", keine anderen Schriften.
_GANZZAHL = re.compile(r"[+-]?[0-9]+", re.ASCII)


def lies_ganzzahl(text: str) -> Optional[int]:
    """
    Liest eine STT aus Text.
    - Leerzeichen am Rand werden ignoriert.
    - Ungültig -> None.
    Die Größe ist nicht begrenzt.
    """
    s = text.strip()
    if not _GANZZAHL.fullmatch(s):
        return None
    return int(s)
