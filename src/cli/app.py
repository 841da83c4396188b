"""Menu loop: print the menu, read a choice, dispatch to a command."""

import logging
import os
from typing import TextIO

from addressbook.application import ContactDirectory, read_bounded_int
from addressbook.infrastructure import DATA_FILE, FileContactStore
from cli.commands import HANDLERS, Session
from cli.console import Console
from cli.menu_loader import get_menu

logger = logging.getLogger(__name__)


def _print_menu(console: Console, menu: dict) -> None:
    console.say(menu["title"])
    for number, item in enumerate(menu["items"], start=1):
        console.say(f"{number}. {item['label']}")
    console.prompt(menu["choice_prompt"].replace("{count}", str(len(menu["items"]))))


def run_menu(session: Session, menu: dict) -> None:
    """Run until the exit command or end of input. End of input saves like exit."""
    items = menu["items"]
    try:
        while True:
            _print_menu(session.console, menu)
            choice = read_bounded_int(session.console, 1, len(items))
            command = items[choice - 1]["command"]
            logger.debug("Menu choice %d -> %s", choice, command)
            if not HANDLERS[command](session):
                return
    except EOFError:
        logger.info("Input closed; saving and exiting")
        session.console.say("")
        session.directory.save()


def run(
    stdin: TextIO,
    stdout: TextIO,
    data_file: str | os.PathLike = DATA_FILE,
    menu: dict | None = None,
) -> int:
    """Run an interactive session against data_file. Returns the process exit status."""
    console = Console(stdin, stdout)
    if menu is None:
        menu = get_menu()
    directory = ContactDirectory(FileContactStore(data_file), notify=console.say)
    session = Session(directory=directory, console=console, messages=menu["messages"])
    run_menu(session, menu)
    return 0
