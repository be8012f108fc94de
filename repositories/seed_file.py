import json
from typing import List
from models.records import FirmSeed
from .base import BaseRepository


class SeedFileError(ValueError):
    """Seed file missing or not a JSON array; fatal before any network activity"""


class SeedFileRepository(BaseRepository):
    """Firm seeds produced by upstream ingest/exposure steps"""

    def load(self) -> List[FirmSeed]:
        """
        Read and canonicalize every seed record.

        Raises:
            SeedFileError: file missing, unparseable, or not a JSON array

        Returns:
            Usable seeds in file order; unusable records are skipped with a warning
        """
        if not self.exists():
            raise SeedFileError(f"Seed file not found: {self.path}")

        try:
            records = self.read_json()
        except json.JSONDecodeError as e:
            raise SeedFileError(f"{self.path} is not valid JSON: {e}") from e

        if not isinstance(records, list):
            raise SeedFileError(f"{self.path} must be a JSON array.")

        seeds = []
        for idx, record in enumerate(records):
            seed = FirmSeed.from_record(record)
            if seed is None:
                print(f"[SEEDS] Skipping record {idx}: no usable firm name or domain")
                continue
            seeds.append(seed)

        print(f"[SEEDS] Loaded {len(seeds)} of {len(records)} records from {self.path}")
        return seeds
