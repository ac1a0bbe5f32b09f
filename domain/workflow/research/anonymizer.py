"""Research record anonymization."""

import hashlib
from typing import Any, Dict, FrozenSet, Mapping

from ..core.value_objects import AnonymizationLevel
from .timestamps import coerce_timestamp

PII_FIELDS: FrozenSet[str] = frozenset(
    {
        "name",
        "student_name",
        "owner_name",
        "parent_name",
        "email",
        "phone",
        "address",
        "school",
        "birth_date",
    }
)
IDENTIFIER_FIELDS: FrozenSet[str] = frozenset({"user_id", "student_id", "owner_id", "animal_id"})
FREE_TEXT_FIELDS: FrozenSet[str] = frozenset({"notes", "comments", "description", "journal"})
TIMESTAMP_FIELDS: FrozenSet[str] = frozenset({"timestamp", "captured_at", "created_at"})


class RecordAnonymizer:
    """De-identifies records according to an anonymization level.

    basic     drop PII fields, replace identifiers with salted SHA-256
              pseudonyms
    advanced  basic + drop free text, truncate timestamps to the day
    complete  advanced + drop identifiers, truncate timestamps to the
              month, round numbers to one decimal
    """

    def __init__(self, level: AnonymizationLevel, salt: str = "") -> None:
        self._level = level
        self._salt = salt

    def pseudonym(self, value: Any) -> str:
        digest = hashlib.sha256(f"{self._salt}:{value}".encode("utf-8")).hexdigest()
        return f"anon_{digest[:16]}"

    def anonymize(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        advanced = self._level in (AnonymizationLevel.ADVANCED, AnonymizationLevel.COMPLETE)
        complete = self._level is AnonymizationLevel.COMPLETE

        result: Dict[str, Any] = {}
        for key, value in record.items():
            if key in PII_FIELDS:
                continue
            if key in IDENTIFIER_FIELDS:
                if not complete and value is not None:
                    result[key] = self.pseudonym(value)
                continue
            if advanced and key in FREE_TEXT_FIELDS:
                continue
            if advanced and key in TIMESTAMP_FIELDS:
                stamp = coerce_timestamp(value)
                if stamp is not None:
                    value = stamp.strftime("%Y-%m" if complete else "%Y-%m-%d")
            if complete and isinstance(value, float):
                value = round(value, 1)
            result[key] = value
        return result

    @staticmethod
    def contains_pii(record: Mapping[str, Any]) -> bool:
        if any(key in PII_FIELDS for key in record):
            return True
        return any(
            key in IDENTIFIER_FIELDS and not str(value).startswith("anon_")
            for key, value in record.items()
            if value is not None
        )
