"""Menu command handlers. Each takes the session and returns False to end the menu loop."""

from collections.abc import Callable
from dataclasses import dataclass

from addressbook.application import (
    ContactDirectory,
    Duplicate,
    read_email,
    read_non_empty_string,
    read_phone,
)
from addressbook.domain import Contact
from cli.console import Console


@dataclass
class Session:
    directory: ContactDirectory
    console: Console
    messages: dict[str, str]

    def message(self, message_id: str) -> str:
        return self.messages[message_id]


def add_contact(session: Session) -> bool:
    console = session.console
    console.prompt(session.message("full_name_prompt"))
    full_name = read_non_empty_string(console)
    if session.directory.search(full_name) is not None:
        console.say(session.message("contact_duplicate"))
        return True

    console.prompt(session.message("phone_prompt"))
    phone = read_phone(console)
    console.prompt(session.message("email_prompt"))
    email = read_email(console)

    result = session.directory.add(Contact(full_name=full_name, phone=phone, email=email))
    if isinstance(result, Duplicate):
        console.say(session.message("contact_duplicate"))
    else:
        console.say(session.message("contact_added"))
    return True


def remove_contact(session: Session) -> bool:
    console = session.console
    console.prompt(session.message("remove_prompt"))
    full_name = read_non_empty_string(console)
    if session.directory.remove(full_name):
        console.say(session.message("contact_removed"))
    else:
        console.say(session.message("contact_not_found"))
    return True


def search_contact(session: Session) -> bool:
    console = session.console
    console.prompt(session.message("search_prompt"))
    full_name = read_non_empty_string(console)
    contact = session.directory.search(full_name)
    if contact is None:
        console.say(session.message("contact_not_found"))
        return True
    console.say(session.message("contact_found"))
    console.say(str(contact))
    return True


def edit_contact(session: Session) -> bool:
    console = session.console
    console.prompt(session.message("edit_prompt"))
    full_name = read_non_empty_string(console)
    if session.directory.search(full_name) is None:
        console.say(session.message("contact_not_found"))
        return True

    console.prompt(session.message("new_phone_prompt"))
    phone = read_phone(console)
    console.prompt(session.message("new_email_prompt"))
    email = read_email(console)

    if session.directory.edit(full_name, phone, email):
        console.say(session.message("contact_updated"))
    else:
        console.say(session.message("contact_not_found"))
    return True


def display_contacts(session: Session) -> bool:
    contacts = session.directory.list()
    if not contacts:
        session.console.say(session.message("no_contacts"))
        return True
    session.console.say(session.message("all_contacts_header"))
    for contact in contacts:
        session.console.say(str(contact))
    return True


def save_contacts(session: Session) -> bool:
    session.directory.save()
    return True


def exit_menu(session: Session) -> bool:
    session.directory.save()
    return False


HANDLERS: dict[str, Callable[[Session], bool]] = {
    "add": add_contact,
    "remove": remove_contact,
    "search": search_contact,
    "edit": edit_contact,
    "display": display_contacts,
    "save": save_contacts,
    "exit": exit_menu,
}
