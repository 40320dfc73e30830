#!/usr/bin/env python3
"""
Name Encoding Script

Encodes names into DNS wire format and shows the parent suffixes a
resolver would walk for each of them.

For every name this script:
1. Encodes it into length-prefixed labels (hex, as passed to resolvers)
2. Lists the parent suffixes from the full name down to the last label
3. Checks the name against DNS limits the encoder leaves to callers
4. Optionally saves all results as JSON
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

import dns.exception
import dns.name

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ccipnames.encoder import encode, LabelTooLong
from ccipnames.hierarchy import parent_suffixes
from ccipnames.utils import truncate_str


def check_dns_name(name: str) -> Optional[str]:
    """
    Check whether a name is also a legal DNS name.
    
    The encoder accepts empty labels and any total length; a DNS
    resolver does not. Problems are reported, not raised.
    
    Args:
        name: The name that was encoded
        
    Returns:
        A description of the problem, or None if dnspython accepts it
    """
    try:
        dns.name.from_text(name)
    except (dns.exception.DNSException, UnicodeError) as e:
        return printable(f"{type(e).__name__}: {e}")
    return None


def printable(text: str) -> str:
    """Escape lone surrogates so the text can be printed as UTF-8."""
    return text.encode('utf-8', 'backslashreplace').decode('utf-8')


def shown(text: str, width: int) -> str:
    """Truncate a value for display."""
    return printable(truncate_str(text, width))


def half_width(value: str) -> int:
    """argparse type for --width: a non-negative integer."""
    width = int(value)
    if width < 0:
        raise argparse.ArgumentTypeError(f"width must not be negative, got {width}")
    return width


def describe_name(name: str, width: int) -> dict:
    """
    Encode one name and collect everything the script reports about it.
    
    Args:
        name: Name to encode
        width: Half-width used when truncating values for display
        
    Returns:
        Result dict with 'success' False when the name cannot be encoded
    """
    result = {
        'name': name,
        'success': False,
        'encoded': None,
        'encoded_length': None,
        'parents': parent_suffixes(name),
        'dns_warning': None,
        'error': None
    }
    
    print(f"[+] Name: {shown(name, width)}")
    
    try:
        encoded = encode(name)
    except LabelTooLong as e:
        result['error'] = str(e)
        label_bytes = len(e.label.encode('utf-8', 'surrogatepass'))
        print(f"    [!] Label is too long ({label_bytes} bytes): "
              f"{shown(e.label, width)}")
        return result
    
    result['success'] = True
    result['encoded'] = '0x' + encoded.hex()
    result['encoded_length'] = len(encoded)
    
    print(f"    -> Encoded: {shown(result['encoded'], width)}")
    print(f"    -> Length:  {len(encoded)} bytes")
    for depth, parent in enumerate(result['parents']):
        print(f"    -> Parent {depth}: {shown(parent, width)}")
    
    warning = check_dns_name(name)
    if warning:
        result['dns_warning'] = warning
        print(f"    [!] Not a valid DNS name: {warning}")
    
    return result


def read_names(names: List[str], names_file: Optional[str]) -> List[str]:
    """Collect names from the command line and an optional file."""
    collected = list(names)
    if names_file:
        for line in Path(names_file).read_text().splitlines():
            line = line.strip()
            if line:
                collected.append(line)
    return collected


def main():
    parser = argparse.ArgumentParser(
        description='Encode names into DNS wire format and list their parents'
    )
    parser.add_argument(
        'names',
        nargs='*',
        help='Names to encode (e.g. vitalik.eth)'
    )
    parser.add_argument(
        '--names-file', '-f',
        default=None,
        help='File with one name per line'
    )
    parser.add_argument(
        '--width', '-w',
        type=half_width,
        default=os.environ.get('DISPLAY_HALF_WIDTH', '16'),
        help='Characters kept on each side when truncating output'
    )
    parser.add_argument(
        '--output', '-o',
        default=None,
        help='Output file for results (JSON)'
    )
    
    args = parser.parse_args()
    
    names = read_names(args.names, args.names_file)
    if not names:
        parser.error('no names given')
    
    print(f"\n{'='*60}")
    print("ENCODING NAMES")
    print(f"{'='*60}")
    print()
    
    results = [describe_name(name, args.width) for name in names]
    failed = sum(1 for r in results if not r['success'])
    
    print(f"\n{'='*60}")
    print(f"Encoded: {len(results) - failed}/{len(results)}")
    print(f"{'='*60}")
    
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps({'results': results}, indent=2))
        print(f"\n[+] Results saved to: {args.output}")
    
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
