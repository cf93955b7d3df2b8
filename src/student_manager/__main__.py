"""Erlaubt den Start mit: python -m student_manager"""

from .main import main

if __name__ == "__main__":
    main()
