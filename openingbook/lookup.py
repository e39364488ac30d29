"""
Lookup tables derived from the opening records.

The tables are rebuilt wholesale on every generation run. The position
table is the one the game analyzer needs; the others are written out for
browsing the dataset by ECO code or volume.
"""

import json
import logging
from collections import OrderedDict
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from .records import OpeningRecord

logger = logging.getLogger(__name__)

OPENING_LIST_FILE = 'opening-list.json'
ECO_LOOKUP_FILE = 'eco-lookup.json'
CATEGORY_LOOKUP_FILE = 'category-lookup.json'
EPD_LOOKUP_FILE = 'epd-lookup.json'
ECO_LIST_FILE = 'eco-list.json'


class OpeningIndex(Mapping[str, OpeningRecord]):
    """
    Read-only mapping from position code to opening record.

    Built once and handed to whatever needs to match positions; it is
    never modified afterwards.
    """

    def __init__(self, records: Optional[Mapping[str, OpeningRecord]] = None):
        self._records = MappingProxyType(dict(records or {}))

    def __getitem__(self, epd: str) -> OpeningRecord:
        return self._records[epd]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"OpeningIndex({len(self)} positions)"

    @classmethod
    def from_records(cls, records: Iterable[OpeningRecord]) -> 'OpeningIndex':
        """Index records by position code; later records win on collisions."""
        return cls({record.epd: record for record in records})

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'OpeningIndex':
        """
        Load an index from a generated ``epd-lookup.json`` file.

        Args:
            path: Path to the JSON file

        Returns:
            OpeningIndex over the file's entries
        """
        logger.info(f"Loading opening index from {path}")
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        index = cls({epd: OpeningRecord.from_dict(entry) for epd, entry in data.items()})
        logger.info(f"Loaded {len(index)} opening positions")
        return index


class LookupBuilder:
    """
    Fold opening records into the derived lookup tables.

    Every call to ``add`` updates all tables at once, so the result only
    depends on the order records arrive in.
    """

    def __init__(self):
        self.epd_lookup: Dict[str, OpeningRecord] = {}
        self.eco_lookup: Dict[str, List[OpeningRecord]] = {}
        self.category_lookup: Dict[str, List[OpeningRecord]] = {}
        self.opening_list: List[OpeningRecord] = []

    def add(self, record: OpeningRecord) -> None:
        if record.epd in self.epd_lookup:
            logger.debug(
                f"{record.eco} {record.name} replaces "
                f"{self.epd_lookup[record.epd].name} at {record.epd}"
            )
        self.epd_lookup[record.epd] = record
        self.eco_lookup.setdefault(record.eco, []).append(record)
        self.category_lookup.setdefault(record.category, []).append(record)
        self.opening_list.append(record)

    def extend(self, records: Iterable[OpeningRecord]) -> 'LookupBuilder':
        for record in records:
            self.add(record)
        return self

    @property
    def eco_list(self) -> List[str]:
        """Distinct ECO codes in first-seen order."""
        return list(self.eco_lookup)

    def index(self) -> OpeningIndex:
        return OpeningIndex(self.epd_lookup)

    def outputs(self) -> 'OrderedDict[str, Any]':
        """
        JSON-ready data for each output file, keyed by file name.
        """
        return OrderedDict([
            (OPENING_LIST_FILE, [record.to_dict() for record in self.opening_list]),
            (ECO_LOOKUP_FILE, _group_to_dict(self.eco_lookup)),
            (CATEGORY_LOOKUP_FILE, _group_to_dict(self.category_lookup)),
            (EPD_LOOKUP_FILE, {epd: record.to_dict() for epd, record in self.epd_lookup.items()}),
            (ECO_LIST_FILE, self.eco_list),
        ])


def _group_to_dict(groups: Dict[str, List[OpeningRecord]]) -> Dict[str, List[Dict[str, str]]]:
    return {key: [record.to_dict() for record in records] for key, records in groups.items()}
