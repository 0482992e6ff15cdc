"""Enumerations for the TaxBridge tax engine."""

from enum import StrEnum


class VATStatus(StrEnum):
    EXEMPT = "exempt"
    APPROACHING = "approaching"
    MANDATORY = "mandatory"


class CITCategory(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
