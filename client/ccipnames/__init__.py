"""
CCIP-Read Name Utilities

This library provides tools for:
- Encoding names into DNS wire format for on-chain resolvers
- Walking a name's parent suffixes for wildcard resolution
- Formatting names and revert reasons for log output
- Building HTTP sessions with a fixed timeout
"""

from .encoder import encode, encode_hex, LabelTooLong, MAX_LABEL_LENGTH
from .hierarchy import parent_suffixes, iter_parent_suffixes
from .utils import truncate_str, sanitize_revert_reason
from .session import build_session, TimeoutSession

__all__ = [
    # Encoder
    'encode',
    'encode_hex',
    'LabelTooLong',
    'MAX_LABEL_LENGTH',
    # Hierarchy
    'parent_suffixes',
    'iter_parent_suffixes',
    # Utils
    'truncate_str',
    'sanitize_revert_reason',
    # Session
    'build_session',
    'TimeoutSession',
]

__version__ = '1.0.0'
