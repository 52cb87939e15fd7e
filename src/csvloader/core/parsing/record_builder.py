"""
Builds nested records from a header and one row of fields.
"""

from .record_tree import EXTRA_KEY_PREFIX, EXTRAS_KEY, Record, split_path, upsert_path


def build_record(header: list[str], fields: list[str]) -> Record:
    """
    Build one nested record.

    Each header key is expanded on ``.`` into a nested path. Rows shorter
    than the header are padded with empty strings; surplus values are kept
    under ``__extras`` as ``_extra_1``, ``_extra_2``, ...

    Args:
        header: Ordered dot-path keys
        fields: Field values for one data row

    Returns:
        Nested record

    Examples:
        >>> build_record(["address.city", "address.state"], ["Pune", "Maharashtra"])
        {'address': {'city': 'Pune', 'state': 'Maharashtra'}}
    """
    record: Record = {}

    for idx, key in enumerate(header):
        value = fields[idx] if idx < len(fields) else ""
        upsert_path(record, split_path(key), value)

    if len(fields) > len(header):
        record[EXTRAS_KEY] = {
            f"{EXTRA_KEY_PREFIX}{offset}": value
            for offset, value in enumerate(fields[len(header):], start=1)
        }

    return record
