"""String case formatting."""

from typing import Optional


def format_string(text: str, to_upper: Optional[bool] = None) -> str:
    """
    Convert a string to upper or lower case.

    Only an explicit ``False`` selects lower case; ``True`` and the
    omitted flag both select upper case.
    """
    if to_upper is False:
        return text.lower()
    return text.upper()
