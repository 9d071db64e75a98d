"""Small string helpers used by the loggers."""


def replace_strings(text: str, old: str, new: str) -> str:
    """Return *text* with every occurrence of *old* replaced by *new*.

    Occurrences are found left to right and do not overlap; text inserted
    by a replacement is never searched again.
    """
    if not old:
        raise ValueError("the string to replace must not be empty")
    return text.replace(old, new)