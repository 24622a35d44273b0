"""Highest-version deduplication transform.

This module folds parsed records into the aggregation table, keeping
one record per (company, user id): the first one seen with the highest
version.
"""

from __future__ import annotations

from typing import Iterable

from core.types import AggregationTable, MergeOutcome, UserRecord


def merge_record(
    table: AggregationTable,
    record: UserRecord,
) -> tuple[MergeOutcome, UserRecord | None]:
    """Merge one record into the table in place.

    A stored record is replaced only by a strictly higher version.

    Args:
        table: Aggregation table to update.
        record: Parsed record to merge.

    Returns:
        The merge outcome and the record it was compared against, if any.
    """
    company_users = table.get(record.insurance_company)
    if company_users is None:
        table[record.insurance_company] = {record.user_id: record}
        return MergeOutcome.COMPANY_ADDED, None
    existing = company_users.get(record.user_id)
    if existing is None:
        company_users[record.user_id] = record
        return MergeOutcome.USER_ADDED, None
    if existing.version < record.version:
        company_users[record.user_id] = record
        return MergeOutcome.USER_REPLACED, existing
    return MergeOutcome.USER_DISCARDED, existing


def build_table(records: Iterable[UserRecord]) -> AggregationTable:
    """Fold records into a fresh aggregation table.

    Args:
        records: Parsed records in processing order.

    Returns:
        Company -> user id -> surviving record.
    """
    table: AggregationTable = {}
    for record in records:
        merge_record(table, record)
    return table
