"""
Batch extraction result models.
"""

from dataclasses import dataclass, field
from typing import List

from .product import ProductRecord


@dataclass
class BatchFailure:
    """A reference that did not produce a record, with the reason."""
    reference: str
    reason: str


@dataclass
class BatchResult:
    """Outcome of processing a list of references."""
    records: List[ProductRecord] = field(default_factory=list)
    found_references: List[str] = field(default_factory=list)
    failures: List[BatchFailure] = field(default_factory=list)
    available_features: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """A batch succeeds if at least one reference produced a record."""
        return bool(self.records)
