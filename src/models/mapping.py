"""Dictionary field readers shared by the model mappings."""
from typing import Any, Optional


def read_optional_str(data: dict[str, Any], key: str) -> Optional[str]:
    """Read a text field that may be missing or null."""
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key} 必須為字串: {type(value).__name__}")
    return value


def read_optional_int(data: dict[str, Any], key: str) -> Optional[int]:
    """Read an integer field that may be missing or null."""
    value = data.get(key)
    # bool is an int subclass but never a valid identifier
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"{key} 必須為整數: {type(value).__name__}")
    return value
