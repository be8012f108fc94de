import json
import os
import tempfile
from contextlib import contextmanager
from typing import List
from models.records import FirmContacts
from .base import BaseRepository


class ContactsFileRepository(BaseRepository):
    """Terminal FirmContacts[] output, written all-or-nothing"""

    def __init__(self, path):
        super().__init__(path)
        self.pending: List[FirmContacts] = []

    add = lambda self, firm_contacts: self.pending.append(firm_contacts) or firm_contacts

    def add_all(self, records: List[FirmContacts]) -> List[FirmContacts]:
        return [self.add(record) for record in records]

    def serialize(self) -> str:
        """Pretty-printed JSON array with trailing newline"""
        return json.dumps([r.to_wire() for r in self.pending], indent=2, ensure_ascii=False) + "\n"

    def commit(self):
        """Write to a temp sibling then atomically replace the target"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix='.tmp', dir=self.path.parent)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(self.serialize())
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        print(f"Wrote: {self.path}")

    @classmethod
    @contextmanager
    def transaction(cls, path):
        """Stage records; commit only if the block exits cleanly (SIGINT included)"""
        repo = cls(path)
        try:
            yield repo
        except BaseException:
            repo.pending.clear()
            raise
        repo.commit()
