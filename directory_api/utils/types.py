from typing import Literal

# Literal restricts the accepted values
ResourceType = Literal["departments", "employees"]
AttributeType = Literal["integer", "string"]

# Fields a creation payload must carry, in reporting order
REQUIRED_EMPLOYEE_FIELDS = [
    "first_name",
    "last_name",
    "age",
    "position",
    "department_id",
]

# Standard expected headers for each seed CSV
EXPECTED_HEADERS = {
    "departments": ["name"],
    "employees": [
        "first_name",
        "last_name",
        "age",
        "position",
        "department",
    ],
}

# Largest value a signed 64-bit store INTEGER holds (ids, offsets)
MAX_STORE_INTEGER = 2**63 - 1
