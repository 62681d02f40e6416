from logging import DEBUG, FileHandler, Formatter, getLogger
from os import environ
from pathlib import Path

_log_file = Path(environ.get("MONOTYPE_LOG_FILE", "monotype.log")).resolve()
# NOTE: The file is only created once the first record is written.

LOGGER_LEVEL = DEBUG

_handler = FileHandler(_log_file, delay=True, mode="w")
_formatter = Formatter(fmt="[%(levelname)s] %(message)s")
_handler.setFormatter(_formatter)

logger = getLogger("monotype")
logger.addHandler(_handler)
logger.setLevel(LOGGER_LEVEL)
