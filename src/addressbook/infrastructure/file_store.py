"""File-backed ContactStore: one binary file rewritten in full on every save."""

import os
import stat
import tempfile
from pathlib import Path

from addressbook.domain import Contact
from addressbook.infrastructure.codec import decode_contacts, encode_contacts

DATA_FILE = "contacts.dat"


class FileContactStore:
    """Stores the contact sequence at path (relative paths resolve against the working directory).
    Saves write a temporary file next to the target and replace it, so readers never see a partial file.
    A symlinked path is followed: the link target is replaced and the link stays. The target keeps
    its permission bits; a new file gets the umask default.
    """

    def __init__(self, path: str | os.PathLike = DATA_FILE) -> None:
        self._path = Path(path)

    @property
    def location(self) -> str:
        return str(self._path)

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> list[Contact]:
        with open(self._path, "rb") as f:
            data = f.read()
        return decode_contacts(data)

    def save(self, contacts: list[Contact]) -> None:
        data = encode_contacts(contacts)
        target = self._path.resolve()
        mode = _file_mode(target)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, target)
        except BaseException:
            try:
                os.remove(tmp_name)
            except FileNotFoundError:
                pass
            raise


def _file_mode(target: Path) -> int:
    """Permission bits of the existing target, or the umask default for a new file."""
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
