"""
Name Encoder for CCIP-Read Resolution

Encodes human-readable names into the DNS wire format expected by
on-chain resolvers (e.g. ENS wildcard `resolve(bytes name, bytes data)`).

Each label is prefixed with its byte length and the whole name is
terminated by the zero-length root label:

    vitalik.eth -> \\x07vitalik\\x03eth\\x00
"""

MAX_LABEL_LENGTH = 63


class LabelTooLong(ValueError):
    """Raised when a label does not fit in a single length byte."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Label is too long: {label}")


def encode(domain: str) -> bytes:
    """
    Encode a dot-separated name into DNS wire format.
    
    The name is split on every '.', so leading, trailing or repeated
    dots produce empty labels. Those are encoded as zero-length labels
    rather than rejected. No normalization is applied. Lone surrogates
    are encoded as their UTF-8 byte pattern so every str has a length.
    
    Args:
        domain: Name to encode (e.g. 'vitalik.eth')
        
    Returns:
        Length-prefixed labels followed by the root label
        
    Raises:
        LabelTooLong: On the first label longer than 63 bytes; this is
            the only error, any str input is otherwise accepted
        
    Example:
        >>> encode('a.b')
        b'\\x01a\\x01b\\x00'
        >>> encode('')
        b'\\x00\\x00'
    """
    encoded = bytearray()
    
    for label in domain.split('.'):
        raw = label.encode('utf-8', 'surrogatepass')
        if len(raw) > MAX_LABEL_LENGTH:
            raise LabelTooLong(label)
        encoded.append(len(raw))
        encoded += raw
    
    # Root label
    encoded.append(0)
    
    return bytes(encoded)


def encode_hex(domain: str) -> str:
    """
    Encode a name and render it as a 0x-prefixed hex string.
    
    This is the form passed as ABI `bytes` in resolver calls.
    
    Example:
        >>> encode_hex('a.b')
        '0x0161016200'
    """
    return '0x' + encode(domain).hex()
