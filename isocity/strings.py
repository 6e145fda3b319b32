"""Small string helpers."""


def remove_substring(text: str, to_remove: str) -> str:
    """Return ``text`` with the first occurrence of ``to_remove`` taken out."""
    return text.replace(to_remove, "", 1)


def ends_with(main: str, to_match: str) -> bool:
    """Whether ``main`` ends with ``to_match``."""
    return main.endswith(to_match)


def starts_with(main: str, to_match: str) -> bool:
    """Whether ``main`` starts with ``to_match``."""
    return main.startswith(to_match)