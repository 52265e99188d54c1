"""JSON encoding helpers backed by msgspec."""

from typing import Any, Literal, overload

import msgspec

from sqlchain.exceptions import SerializationError

__all__ = ("decode_json", "encode_json")

_encoder = msgspec.json.Encoder(enc_hook=str)
_decoder = msgspec.json.Decoder()


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> str | bytes:
    """Encode data to JSON.

    Objects msgspec cannot encode natively are encoded through ``str()``.

    Args:
        data: Data to encode.
        as_bytes: Return bytes instead of a string.

    Raises:
        SerializationError: If the data cannot be encoded.

    Returns:
        JSON string or bytes.
    """
    try:
        encoded = _encoder.encode(data)
    except (TypeError, ValueError, msgspec.EncodeError) as e:
        msg = f"Failed to encode data to JSON: {e}"
        raise SerializationError(msg) from e
    if as_bytes:
        return encoded
    return encoded.decode("utf-8")


def decode_json(data: str | bytes) -> Any:
    """Decode a JSON document.

    Raises:
        SerializationError: If the input is not valid JSON.
    """
    try:
        return _decoder.decode(data)
    except msgspec.DecodeError as e:
        msg = f"Failed to decode JSON: {e}"
        raise SerializationError(msg) from e
