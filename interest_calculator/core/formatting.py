"""Display helpers for calculated amounts."""


def format_currency(value: float) -> str:
    """Render an amount as shown on the calculator form, e.g. ``$1102.50``."""
    return f"${value:.2f}"
