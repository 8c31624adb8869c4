"""
List Envelope - pagination wrapper returned by RegisteredType.list().
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

RecordT = TypeVar("RecordT")


@dataclass
class ListEnvelope(Generic[RecordT]):
    """
    One page of records plus the unpaginated total.

    Total and Data come from two separate store reads, so a concurrent write
    between them can make Total disagree with what Data suggests.

    Attributes:
        page: Requested page (echoed, 0 when unset)
        limit: Requested page size (echoed, 0 when unset)
        total: Count of all records, ignoring pagination
        data: Records of this page, in store order
    """

    page: int
    limit: int
    total: int
    data: list[RecordT] = field(default_factory=list)

    def to_dict(self, encode_record) -> dict[str, Any]:
        """Convert to the wire shape, encoding each record with encode_record."""
        return {
            "Page": self.page,
            "Limit": self.limit,
            "Total": self.total,
            "Data": [encode_record(record) for record in self.data],
        }
