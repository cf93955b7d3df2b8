"""
student_manager package

Dieses Paket implementiert einen kleinen Konsolen-Manager für eine Studentenliste.
Die Liste liegt als CSV-Datei im Home-Verzeichnis (~/.student-manager/students.csv).

Schichtenarchitektur:
- domain.py: Entität Student
- persistence.py: CSV-Persistierung
- service.py: Regeln für Namen, STT-Vergabe und Löschen
- view.py: ASCII-Ausgabe
- controller.py: Menü-Orchestrierung
- main.py: Einstiegspunkt
"""
