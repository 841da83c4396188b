"""
Console address book.
Run: python -m cli (from the directory that holds contacts.dat), or the address-book script.
"""
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the current dir (where contacts.dat lives); it only sets log verbosity
_DOTENV = Path.cwd() / ".env"
if _DOTENV.exists():
    load_dotenv(_DOTENV)

from cli.app import run  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> None:
    level = os.environ.get("ADDRESS_BOOK_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )
    logger.info("Address book starting in %s", Path.cwd())
    raise SystemExit(run(sys.stdin, sys.stdout))


if __name__ == "__main__":
    main()
