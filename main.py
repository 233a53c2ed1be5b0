#!/usr/bin/env python3
"""HIIT Timer entry point.

Run with:
    python main.py
    python -m hiittimer
"""

from hiittimer.__main__ import main


if __name__ == "__main__":
    main()
