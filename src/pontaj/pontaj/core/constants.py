"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_SHIFT_SPAN_HOURS = 16

LONG_SHIFT_TYPE = "TURA"
DEFAULT_SHIFT_TYPE = "SCHIMB_I"
DEFAULT_POSITION = "Operator"

# Departments whose employees work on the production floor.
DEFAULT_DIRECT_LABOR_DEPARTMENTS = ("DC", "FA")

# Default shift assigned on import, by department code.
DEFAULT_SHIFT_BY_DEPARTMENT = {
    "FA": "SCHIMB_I",
    "MO": "SCHIMB_I",
    "TE": "TESA1",
    "AM": "TESA1",
}

REPORT_SHEET_NAME = "Foaie de Pontaj"

RO_MONTHS = (
    "Ianuarie",
    "Februarie",
    "Martie",
    "Aprilie",
    "Mai",
    "Iunie",
    "Iulie",
    "August",
    "Septembrie",
    "Octombrie",
    "Noiembrie",
    "Decembrie",
)

RO_MONTHS_SHORT = ("ian", "feb", "mar", "apr", "mai", "iun", "iul", "aug", "sept", "oct", "nov", "dec")
