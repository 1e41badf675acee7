"""Display helpers for prices and dimensions."""

NOT_AVAILABLE = "N/A"


def format_currency(value) -> str:
    """$1,234.56, or N/A when there is no price."""
    if value is None:
        return NOT_AVAILABLE
    return f"${value:,.2f}"


def format_inches(value) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f'{value:g}"'
