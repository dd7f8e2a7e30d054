# src/gedcom_records/tree.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from gedcom_records.records import Family, Header, Individual, Repository, Source, Submitter

Record = Union[Individual, Family, Source, Repository, Submitter]


@dataclass
class GedcomData:
    """
    Container for everything a parse produced.

    The parser only ever appends finished records; lookups by xref go through
    an index that is built lazily and dropped whenever a record is added.

    Attributes:
        header: The HEAD record (an empty Header if the file had none).
        individuals, families, sources, repositories, submitters:
            Level-0 records in file order.
    """

    header: Header = field(default_factory=Header)
    individuals: List[Individual] = field(default_factory=list)
    families: List[Family] = field(default_factory=list)
    sources: List[Source] = field(default_factory=list)
    repositories: List[Repository] = field(default_factory=list)
    submitters: List[Submitter] = field(default_factory=list)

    # Internal index, built lazily
    _xref_index: Dict[str, Record] = field(default_factory=dict, init=False, repr=False)
    _index_built: bool = field(default=False, init=False, repr=False)

    # ------------------------------------------------------------------ #
    # Population (called by the parser)
    # ------------------------------------------------------------------ #

    def add_individual(self, individual: Individual) -> None:
        self.individuals.append(individual)
        self._index_built = False

    def add_family(self, family: Family) -> None:
        self.families.append(family)
        self._index_built = False

    def add_source(self, source: Source) -> None:
        self.sources.append(source)
        self._index_built = False

    def add_repository(self, repository: Repository) -> None:
        self.repositories.append(repository)
        self._index_built = False

    def add_submitter(self, submitter: Submitter) -> None:
        self.submitters.append(submitter)
        self._index_built = False

    # ------------------------------------------------------------------ #
    # Core helpers
    # ------------------------------------------------------------------ #

    def iter_records(self) -> Iterator[Record]:
        """Iterate over every level-0 record except the header."""
        yield from self.individuals
        yield from self.families
        yield from self.sources
        yield from self.repositories
        yield from self.submitters

    def __len__(self) -> int:
        return (
            len(self.individuals)
            + len(self.families)
            + len(self.sources)
            + len(self.repositories)
            + len(self.submitters)
        )

    def stats(self) -> Dict[str, int]:
        return {
            "individuals": len(self.individuals),
            "families": len(self.families),
            "sources": len(self.sources),
            "repositories": len(self.repositories),
            "submitters": len(self.submitters),
        }

    # ------------------------------------------------------------------ #
    # Index construction
    # ------------------------------------------------------------------ #

    def _build_index(self) -> None:
        index: Dict[str, Record] = {}
        for record in self.iter_records():
            if record.xref:
                index[record.xref] = record
        self._xref_index = index
        self._index_built = True

    # ------------------------------------------------------------------ #
    # Public query API
    # ------------------------------------------------------------------ #

    def find_by_xref(self, xref: str) -> Optional[Record]:
        """
        Return the record with the given identifier, if any.

        Args:
            xref: e.g. 'I1' or '@I1@'.
        """
        if not xref:
            return None
        if not self._index_built:
            self._build_index()
        return self._xref_index.get(xref.strip("@"))

    def individual(self, xref: str) -> Optional[Individual]:
        record = self.find_by_xref(xref)
        return record if isinstance(record, Individual) else None

    def family(self, xref: str) -> Optional[Family]:
        record = self.find_by_xref(xref)
        return record if isinstance(record, Family) else None

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<GedcomData records={len(self)}>"
