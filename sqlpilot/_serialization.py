"""JSON encoding used by the structured log formatter."""

from typing import Any, Literal, Union, overload

import msgspec

from sqlpilot.exceptions import SerializationError

__all__ = ("decode_json", "encode_json")


def _default_enc_hook(value: Any) -> Any:
    """Fall back to ``repr`` for bound values msgspec cannot encode natively."""
    return repr(value)


_encoder = msgspec.json.Encoder(enc_hook=_default_enc_hook)
_decoder = msgspec.json.Decoder()


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> Union[str, bytes]:
    """Encode data to JSON.

    Args:
        data: Data to encode.
        as_bytes: Return ``bytes`` instead of ``str``.

    Raises:
        SerializationError: If msgspec rejects the payload.

    Returns:
        The JSON document.
    """
    try:
        encoded = _encoder.encode(data)
    except (TypeError, msgspec.EncodeError) as exc:
        msg = f"Unable to encode {type(data).__name__} as JSON"
        raise SerializationError(msg) from exc
    return encoded if as_bytes else encoded.decode("utf-8")


def decode_json(data: Union[str, bytes]) -> Any:
    """Decode a JSON document.

    Raises:
        SerializationError: If the document is not valid JSON.
    """
    try:
        return _decoder.decode(data)
    except msgspec.DecodeError as exc:
        msg = "Unable to decode JSON document"
        raise SerializationError(msg) from exc
