from __future__ import annotations

import codecs
from typing import Protocol

# NBP serves its XML tables in ISO-8859-2, not UTF-8.
NBP_ENCODING = "iso-8859-2"


class DecodeError(RuntimeError):
    def __init__(self, message: str, *, encoding: str) -> None:
        super().__init__(message)
        self.encoding = encoding


class TextDecoder(Protocol):
    def decode(self, data: bytes) -> str: ...


class CodecTextDecoder(TextDecoder):
    """Decodes bytes with a fixed codec.

    Strict by default: any byte sequence invalid for the codec raises
    ``DecodeError``. Pass ``errors="replace"`` to substitute U+FFFD instead.
    """

    def __init__(self, encoding: str = NBP_ENCODING, *, errors: str = "strict") -> None:
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            msg = f"Unknown encoding: {encoding}"
            raise ValueError(msg) from exc
        if errors not in ("strict", "replace"):
            msg = f"errors must be 'strict' or 'replace', got {errors!r}"
            raise ValueError(msg)

        self.encoding = encoding
        self.errors = errors

    def decode(self, data: bytes) -> str:
        return decode(data, self.encoding, errors=self.errors)


def decode(data: bytes, encoding: str = NBP_ENCODING, *, errors: str = "strict") -> str:
    try:
        return data.decode(encoding, errors=errors)
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Byte sequence is not valid {encoding} at position {exc.start}", encoding=encoding) from exc


__all__ = ["NBP_ENCODING", "CodecTextDecoder", "DecodeError", "TextDecoder", "decode"]
