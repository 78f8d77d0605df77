#!/usr/bin/env python3
"""Lineview - a minimal terminal text viewer.

Usage:
    python main.py filename

Controls:
    l / Right      Move right         j / Left      Move left
    k / Down       Next line          i / Up        Previous line
    L / End        End of line        J / Home      Start of line
    K / PageDown   Page down          I / PageUp    Page up
    >              End of document    <             Start of document
    d              Delete line        q             Quit
"""

from lineview.__main__ import main


if __name__ == "__main__":
    main()
