"""Sharing with a friend."""


def share_with(name: str = "") -> str:
    """Return the sharing sentence; an empty name means 'you'."""
    return f"One for {name or 'you'}, one for me."