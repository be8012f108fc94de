import json
from pathlib import Path


class BaseRepository:
    """Base repository bound to one JSON file on disk"""

    def __init__(self, path):
        self.path = Path(path)

    exists = lambda self: self.path.is_file()

    def read_json(self):
        """Parse the whole file (UTF-8)"""
        with open(self.path, 'r', encoding='utf-8') as f:
            return json.load(f)
