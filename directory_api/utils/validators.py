from typing import Iterable, List, Mapping, Optional


def missing_fields(payload: Mapping, required: Iterable[str]) -> List[str]:
    """
    Returns every required field that is absent, null, or an empty string,
    in the order given by `required`.
    """
    return [f for f in required if payload.get(f) is None or payload.get(f) == ""]


def parse_positive_int(value: Optional[str], name: str, default: int) -> int:
    """
    Parses a query parameter that must be an integer >= 1.
    Falls back to `default` when the parameter is absent.
    Raises ValueError on anything else.
    """
    if value is None or str(value).strip() == "":
        return default
    try:
        n = int(str(value).strip())
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e
    if n <= 0:
        raise ValueError(f"{name} must be greater than 0, got {n}")
    return n
