"""The 'for want of a nail' proverb."""


def proverb(rhymes: list[str]) -> list[str]:
    """Build the proverb lines for the given chain of items."""
    if not rhymes:
        return []
    lines = [
        f"For want of a {want} the {lost} was lost."
        for want, lost in zip(rhymes, rhymes[1:])
    ]
    lines.append(f"And all for the want of a {rhymes[0]}.")
    return lines