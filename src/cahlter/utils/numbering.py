"""Hierarchical chapter numbering."""


def next_chapter_number(number: str) -> str:
    """Increment the last component of a dotted chapter number.

    Args:
        number: Dotted number such as "3" or "1.2.3"

    Returns:
        The number with its final component incremented ("1.2.3" -> "1.2.4")

    Raises:
        ValueError: If the final component is not an integer
    """
    head, _, last = number.rpartition(".")
    incremented = str(int(last) + 1)
    return f"{head}.{incremented}" if head else incremented
