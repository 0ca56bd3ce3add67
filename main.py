#!/usr/bin/env python3
"""PomoQuest — entry point.

Run with:
    python main.py
    python -m pomoquest
"""

from pomoquest.__main__ import main


if __name__ == "__main__":
    main()
