"""
Terminal address book: read a command per line, print feedback.
Run: python -m cli (from repo root, with .env or env vars set).
"""
import logging
from pathlib import Path

import pydantic

from addressbook.config import load_env_file, load_settings

# Repo root: from src/cli/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
load_env_file(_REPO_ROOT / ".env", Path.cwd() / ".env")

from addressbook.application import ContactService  # noqa: E402
from addressbook.domain import (  # noqa: E402
    InvalidPathError,
    Registry,
    StorageOperationError,
)
from addressbook.infrastructure import XmlContactStore  # noqa: E402
from cli.shell import Shell  # noqa: E402

logger = logging.getLogger(__name__)

PROMPT = "Enter command: "
WELCOME = "Welcome to your address book. Type 'help' for commands."


def _open_service(store: XmlContactStore) -> ContactService:
    """Start empty when the data file does not exist yet; otherwise it must load."""
    if not store.path.exists():
        logger.info("No data file at %s; starting with an empty address book", store.path)
        return ContactService(store, Registry())
    return ContactService(store, store.load())


def main() -> None:
    try:
        settings = load_settings()
    except pydantic.ValidationError as exc:
        raise SystemExit(f"Invalid settings: {exc}")
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level, logging.WARNING),
    )
    try:
        store = XmlContactStore(settings.storage_path, settings.accepted_suffixes)
        service = _open_service(store)
    except (InvalidPathError, StorageOperationError) as exc:
        raise SystemExit(f"Could not open address book: {exc}")

    shell = Shell(service)
    print(WELCOME)
    while True:
        try:
            text = input(PROMPT)
        except EOFError:
            break
        try:
            feedback, should_exit = shell.handle(text)
        except OSError as exc:
            logger.error("Saving to %s failed: %s", store.path, exc)
            print(f"Could not save the address book: {exc}")
            continue
        print(feedback)
        if should_exit:
            break


if __name__ == "__main__":
    main()
