"""
Display and error-message helpers used around name resolution.
"""

REVERT_PREFIX = 'Reverted'


def truncate_str(src: str, side: int) -> str:
    """
    Shorten a string for log output, keeping both ends.
    
    Strings shorter than ``2 * side + 3`` are returned unchanged.
    A negative ``side`` raises ValueError.
    
    Example:
        >>> truncate_str('0x1234567890abcdef', 4)
        '0x12..cdef'
    """
    if side < 0:
        raise ValueError(f"side must not be negative, got {side}")
    if len(src) < side * 2 + 3:
        return src
    return f"{src[:side]}..{src[len(src) - side:]}"


def sanitize_revert_reason(data: str) -> str:
    """
    Strip the 'Reverted' prefix a node puts in front of revert data.
    
    Repeated prefixes are all removed, then surrounding whitespace.
    
    Example:
        >>> sanitize_revert_reason('Reverted 0x556f1830')
        '0x556f1830'
    """
    while data.startswith(REVERT_PREFIX):
        data = data[len(REVERT_PREFIX):]
    return data.strip()
