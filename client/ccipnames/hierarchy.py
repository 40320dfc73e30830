"""
Parent Name Walking

Enumerates the ancestor suffixes of a name, from the full name down to
its last label. Resolvers use this to find the closest name in the
hierarchy that has a resolver set (wildcard resolution).
"""

from typing import Iterator, List


def iter_parent_suffixes(name: str) -> Iterator[str]:
    """
    Yield a name and each of its parent suffixes.
    
    Every step drops everything up to and including the first '.'.
    The walk ends after yielding a suffix with no '.' left in it.
    Empty segments are kept as-is, so 'a..b' yields 'a..b', '.b', 'b'.
    
    Args:
        name: Name to walk
        
    Yields:
        The name itself, then progressively shorter suffixes
    """
    current = name
    while True:
        yield current
        _, dot, rest = current.partition('.')
        if not dot:
            return
        current = rest


def parent_suffixes(name: str) -> List[str]:
    """
    Return a name and all of its parent suffixes.
    
    Args:
        name: Name to walk (e.g. 'sub.tanrikulu.eth')
        
    Returns:
        List starting with the full name and ending with the last label
        
    Example:
        >>> parent_suffixes('tanrikulu.eth')
        ['tanrikulu.eth', 'eth']
        >>> parent_suffixes('')
        ['']
    """
    return list(iter_parent_suffixes(name))
