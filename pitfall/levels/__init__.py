"""
pitfall.levels — Built-in level files for Pitfall.

Each level is a plain-text level_NN.txt file in this directory (see
pitfall.level_manager.parse_level for the format).  LEVEL_FILES lists
them in play order.  To add a new level, drop a level_NN.txt file here
and append its name to LEVEL_FILES below.
"""

from pathlib import Path

LEVELS_DIR = Path(__file__).resolve().parent

LEVEL_FILES = [
    "level_01.txt",
    "level_02.txt",
    "level_03.txt",
]
