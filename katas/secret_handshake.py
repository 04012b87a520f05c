"""Secret handshake actions encoded as bits."""

_ACTIONS = ((1, "wink"), (2, "double blink"), (4, "close your eyes"), (8, "jump"))
_REVERSE = 16


def handshake(code: int) -> list[str]:
    """Return the handshake actions for code."""
    actions = [action for bit, action in _ACTIONS if code & bit]
    if code & _REVERSE:
        actions.reverse()
    return actions