"""Load and validate the YAML menu definition. Used by the menu loop."""

from pathlib import Path

import yaml

COMMANDS = ("add", "remove", "search", "edit", "display", "save", "exit")

# Message ids the command handlers print.
MESSAGE_IDS = (
    "full_name_prompt",
    "phone_prompt",
    "email_prompt",
    "remove_prompt",
    "search_prompt",
    "edit_prompt",
    "new_phone_prompt",
    "new_email_prompt",
    "contact_added",
    "contact_duplicate",
    "contact_removed",
    "contact_found",
    "contact_not_found",
    "contact_updated",
    "all_contacts_header",
    "no_contacts",
)


def get_menu_path() -> Path:
    """Return path to the packaged menu YAML."""
    return Path(__file__).resolve().parent / "menu.yaml"


def load_menu(path: Path | None = None) -> dict:
    """Load menu YAML and return the menu dict. Validates minimal structure."""
    if path is None:
        path = get_menu_path()
    raw = path.read_text(encoding="utf-8")
    menu = yaml.safe_load(raw)
    if not isinstance(menu, dict):
        raise ValueError("Menu YAML must be a dict")
    if not menu.get("items"):
        raise ValueError("Menu must have a non-empty 'items' list")
    for key in ("title", "choice_prompt"):
        if not isinstance(menu.get(key), str):
            raise ValueError(f"Menu must have a '{key}' string")
    for item in menu["items"]:
        if not isinstance(item, dict) or not item.get("label"):
            raise ValueError("Every menu item must have a 'label'")
        command = item.get("command")
        if command not in COMMANDS:
            raise ValueError(f"Menu item '{item['label']}' has unknown command '{command}'")
    if "exit" not in {item["command"] for item in menu["items"]}:
        raise ValueError("Menu must offer the 'exit' command")
    if not isinstance(menu.get("messages"), dict):
        raise ValueError("Menu must have a 'messages' mapping")
    missing = [mid for mid in MESSAGE_IDS if not isinstance(menu["messages"].get(mid), str)]
    if missing:
        raise ValueError(f"Menu messages missing: {', '.join(missing)}")
    return menu


# Module-level cache for loaded menu
_menu_cache: dict | None = None


def get_menu(cache: bool = True) -> dict:
    """Load menu (cached by default). Pass cache=False to reload."""
    global _menu_cache
    if cache and _menu_cache is not None:
        return _menu_cache
    _menu_cache = load_menu()
    return _menu_cache
