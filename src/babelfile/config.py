# Shared library constants

import os

# --- Page geometry ---
LENGTH_OF_PAGE = 3239
PAD_CHAR = "."

# Content alphabet, index order is the base-29 digit value.
PAGE_ALPHABET = "abcdefghijklmnopqrstuvwxyz, ."
PAGE_BASE = len(PAGE_ALPHABET)  # 29

# Babel text uses the first 26 symbols only.
TEXT_ALPHABET = "abcdefghijklmnopqrstuvwxyz"
TEXT_BASE = len(TEXT_ALPHABET)  # 26

BASE36_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# --- Library geometry (location coordinate ranges, exclusive) ---
WALLS = 4
SHELVES = 5
VOLUMES = 32
PAGES = 410

# --- Parallelism ---
# Below these sizes the byte/text transform runs inline.
PARALLEL_BYTES_THRESHOLD = 1024
PARALLEL_CHARS_THRESHOLD = 2048

# These can be overridden through the environment.
# Worker count override, read when a pool is sized (see lib/pool.py).
WORKERS_ENV = "BABELFILE_WORKERS"
LOG_LEVEL = os.getenv("BABELFILE_LOG_LEVEL", "INFO").upper()

# --- Container ---
CONTAINER_SUFFIX = ".babel"
