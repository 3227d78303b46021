# src/threadgrep/config.py

PROGRAM_NAME = "threadgrep"

DEFAULT_THREAD_COUNT = 4

DEFAULT_LOG_FILENAME = f"{PROGRAM_NAME}.log"
DEFAULT_RESULT_FILENAME = f"{PROGRAM_NAME}.txt"

# Anything outside word characters, hyphens, dots and spaces makes a filename invalid
INVALID_FILENAME_PATTERN = r"[^\w\-. ]"

TEXT_ENCODING = "utf-8"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONSOLE_LOG_FORMAT = "  > [%(levelname)s] %(message)s"

# Undecodable bytes in file names come back out as the original bytes
OUTPUT_ERRORS = "surrogateescape"
