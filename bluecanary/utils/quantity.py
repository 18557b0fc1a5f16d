import re

_MEMORY_UNITS = {
    "": 1,
    "k": 1000,
    "M": 1000**2,
    "G": 1000**3,
    "T": 1000**4,
    "P": 1000**5,
    "E": 1000**6,
    "Ki": 1024,
    "Mi": 1024**2,
    "Gi": 1024**3,
    "Ti": 1024**4,
    "Pi": 1024**5,
    "Ei": 1024**6,
}

_QUANTITY_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)\s*([A-Za-z]*)$")


def parse_memory(quantity: str | int | float) -> int:
    """Parse a Kubernetes memory quantity such as ``70Mi`` or ``1G`` into bytes."""
    if isinstance(quantity, int | float):
        return int(quantity)

    match = _QUANTITY_PATTERN.match(quantity.strip())
    if not match:
        raise ValueError(f"Invalid memory quantity format: {quantity}")
    number = float(match.group(1))
    unit = match.group(2)
    if unit not in _MEMORY_UNITS:
        raise ValueError(f"Unknown memory unit: {unit}")
    return int(number * _MEMORY_UNITS[unit])


def parse_cpu(quantity: str | int | float) -> float:
    """Parse a Kubernetes CPU quantity into cores: ``50m`` is 0.05, ``2`` is 2.0."""
    if isinstance(quantity, int | float):
        return float(quantity)

    match = _QUANTITY_PATTERN.match(quantity.strip())
    if not match:
        raise ValueError(f"Invalid cpu quantity format: {quantity}")
    number = float(match.group(1))
    unit = match.group(2)
    if unit == "m":
        return number / 1000
    if unit:
        raise ValueError(f"Unknown cpu unit: {unit}")
    return number
