"""Tether: identifier-based paths that survive renames and moves.

Layout of a managed store:
    ~/Documents/tether/
    ├── 20240101T120000--notes.org           # identifier at the head (default)
    └── 20231215T093000--projects/
        └── 20231215T093512--plan.md
"""
