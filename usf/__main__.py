"""
Entry point for running usf as a module.

Usage:
    python -m usf new timetable.usf
    python -m usf validate timetable.usf
    python -m usf show timetable.usf
"""

from usf.cli import main

if __name__ == "__main__":
    main()
