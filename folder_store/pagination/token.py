"""Opaque page token codec.

A page token is the standard base64 encoding of a non-negative base-10 offset.
Callers must treat it as opaque and hand it back unmodified.
"""

import base64
import binascii

from ..errors.problem_details import InvalidArgumentError, PageTokenDecodeError


def encode_page_token(index: int) -> str:
    """Encode an offset as a page token.

    Args:
        index: Zero-based offset into the filtered folder sequence

    Returns:
        Base64 encoded page token

    Raises:
        InvalidArgumentError: If index is not a non-negative integer
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError(f"Invalid index: {index!r} (must be an integer)")
    if index < 0:
        raise InvalidArgumentError(f"Invalid index: {index} (must be non-negative)")

    return base64.b64encode(str(index).encode("ascii")).decode("ascii")


def decode_page_token(page_token: str) -> int:
    """Decode a page token back to its offset.

    Args:
        page_token: Token previously produced by :func:`encode_page_token`

    Returns:
        The zero-based offset

    Raises:
        PageTokenDecodeError: If the token is empty, not base64, does not hold
            a non-negative integer, or is not in canonical form
    """
    if not page_token:
        raise PageTokenDecodeError("Empty page token provided")

    try:
        payload = base64.b64decode(page_token.encode("ascii"), validate=True).decode("ascii")
    except (binascii.Error, UnicodeError) as e:
        raise PageTokenDecodeError(f"Invalid page token: {e}") from e

    # str.isdigit() also accepts non-ASCII digits, the payload is ASCII here
    if not payload.isdigit():
        raise PageTokenDecodeError(f"Invalid page token: payload {payload!r} is not an offset")

    try:
        index = int(payload)
    except ValueError as e:
        # interpreter limit on integer string conversion
        raise PageTokenDecodeError(f"Invalid page token: {e}") from e

    if encode_page_token(index) != page_token:
        raise PageTokenDecodeError("Invalid page token: not in canonical form")

    return index
