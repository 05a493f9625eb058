"""Reference data used to validate locale identifier fields.

Exports:
    LanguageTable, TerritoryTable, CodeSetTable: Default lookup tables
    MappingTable: Table over a fixed mapping
    ReferenceTables: Bundle of the three tables used by the strict tier
    LanguageInfo, TerritoryInfo, CodeSetInfo: Table entries

Python 3.13+.
"""

from .reference import (
    CodeSetInfo,
    CodeSetName,
    CodeSetTable,
    LanguageCode,
    LanguageInfo,
    LanguageTable,
    MappingTable,
    ReferenceTable,
    ReferenceTables,
    TerritoryCode,
    TerritoryInfo,
    TerritoryTable,
    clear_reference_cache,
    default_reference_tables,
    is_known_code_set,
    is_known_language,
    is_known_territory,
)

__all__ = [
    "CodeSetInfo",
    "CodeSetName",
    "CodeSetTable",
    "LanguageCode",
    "LanguageInfo",
    "LanguageTable",
    "MappingTable",
    "ReferenceTable",
    "ReferenceTables",
    "TerritoryCode",
    "TerritoryInfo",
    "TerritoryTable",
    "clear_reference_cache",
    "default_reference_tables",
    "is_known_code_set",
    "is_known_language",
    "is_known_territory",
]
