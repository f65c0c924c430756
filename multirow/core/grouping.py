from typing import Optional, Sequence


def insertion_index(existing_keys: Sequence[Optional[str]], new_key: Optional[str]) -> int:
    """
    Find where a new button goes so it sits next to buttons of the same app.
    The new button lands right after the *last* existing member of its group,
    which keeps arrival order inside a group and leaves later groups alone.
    Ungrouped buttons (no key) and buttons of a new group are appended.
    Args:
        existing_keys: Group keys of the current buttons, in visual order.
            Entries may be None.
        new_key: Group key of the button being inserted.
    Returns:
        An index in [0, len(existing_keys)].
    """
    if not new_key:
        return len(existing_keys)
    for index in range(len(existing_keys) - 1, -1, -1):
        if existing_keys[index] == new_key:
            return index + 1
    return len(existing_keys)
