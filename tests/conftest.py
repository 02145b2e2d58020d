"""
Shared pytest fixtures and record types for chain traversal tests.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any

import pytest

from chainrange import ChainTraits, register_traits

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)


@dataclass(eq=False)
class ExtensionRecord:
    """Record with the well-known pNext successor field."""

    s_type: int
    pNext: Any = field(default=None, repr=False)
    value: int = 0


@dataclass(eq=False)
class CustomRecord:
    """Record whose successor lives in next_ptr instead of pNext."""

    id: int
    next_ptr: Any = field(default=None, repr=False)
    data: str = ""


@register_traits(CustomRecord)
class CustomRecordTraits(ChainTraits):
    def get_next(self, node: CustomRecord | None) -> Any | None:
        return node.next_ptr if node is not None else None


def link(records: list[Any], attr: str = "pNext") -> list[Any]:
    """Point each record's successor attribute at the one after it."""
    for current, following in zip(records, records[1:]):
        setattr(current, attr, following)
    return records


@pytest.fixture
def records():
    """Provide a three-record default chain: values 100, 200, 300."""
    return link([ExtensionRecord(s_type=i, value=i * 100) for i in (1, 2, 3)])


@pytest.fixture
def custom_records():
    """Provide a three-record custom chain: first, second, third."""
    return link(
        [
            CustomRecord(id=101, data="first"),
            CustomRecord(id=102, data="second"),
            CustomRecord(id=103, data="third"),
        ],
        attr="next_ptr",
    )


@pytest.fixture
def single_record():
    """Provide a record with no successor."""
    return ExtensionRecord(s_type=42, value=999)


@pytest.fixture
def single_custom_record():
    """Provide a custom record with no successor."""
    return CustomRecord(id=201, data="single")


@pytest.fixture
def long_records():
    """Provide a 10,000-record chain with values 0..9999 in link order."""
    return link([ExtensionRecord(s_type=i, value=i) for i in range(10000)])


@pytest.fixture
def make_chain():
    """Provide a factory building linked ExtensionRecords from values."""

    def factory(values: list[int]) -> list[ExtensionRecord]:
        return link([ExtensionRecord(s_type=v, value=v) for v in values])

    return factory
