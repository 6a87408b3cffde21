"""
Fallback formatters for numbers that are not abbreviated.
"""


def group_thousands(number: str) -> str:
    """
    Format an integer string with thousand separators.

    Strings that are not plain integers are returned unchanged.

    Examples:
        group_thousands("1234500")   -> '1,234,500'
        group_thousands("1000000.1") -> '1000000.1'
    """
    try:
        return f"{int(number):,}"
    except (TypeError, ValueError):
        return number


def identity(number: str) -> str:
    """Return the number string unchanged."""
    return number
