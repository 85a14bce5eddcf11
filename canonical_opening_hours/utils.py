def padded_number(number, padding=1):
    """Returns a number as a string, zero-padded to the given width.

    >>> padded_number(5, 2)
    '05'
    >>> padded_number(12, 2)
    '12'
    >>> padded_number(5)
    '5'
    """
    return str(number).zfill(padding)


def render_offset(offset: int, space: bool) -> str:
    """Returns a day offset (like in "SH +2 days").

    Parameters
    ----------
    int
        The signed number of days. Nothing is rendered for a null offset.
    bool
        Whether a space must be put before the offset, when something
        has already been written before it.

    Returns
    -------
    str
        The rendered offset, like " +1 day" or "-2 days".
    """
    if offset == 0:
        return ''
    parts = []
    if space:
        parts.append(' ')
    if offset > 0:
        parts.append('+')
    parts.append(str(offset))
    parts.append(" day")
    if abs(offset) > 1:
        parts.append('s')
    return ''.join(parts)


def join_list(items, render_item=str, separator=", "):
    """Returns a string from a list of items.

    The separator can be a string or a function which takes an item
    and returns the separator to put after it.
    """
    if callable(separator):
        get_separator = separator
    else:
        get_separator = lambda item: separator  # noqa
    parts = []
    for i, item in enumerate(items):
        if i:
            parts.append(sep)
        parts.append(render_item(item))
        sep = get_separator(item)
    return ''.join(parts)
