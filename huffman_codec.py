# filename: huffman_codec.py

import logging
from types import MappingProxyType

from huffman_core import HuffmanLogic, Leaf
from huffman_errors import (EmptyInputError, InvalidBitError,
                            TruncatedCodeError, UnknownSymbolError)

logger = logging.getLogger(__name__)

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _as_bytes(data):
    if not isinstance(data, _BYTES_LIKE):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    return bytes(data)


class HuffmanCodec:
    """
    Huffman code derived from the byte frequencies of one input.

    The tree and the code table are built once in the constructor and never
    change afterwards, so a single instance can be shared between threads.
    Bit-strings are plain text made of '0' and '1'.
    """

    def __init__(self, data):
        data = _as_bytes(data)
        if not data:
            raise EmptyInputError()
        self.logic = HuffmanLogic()
        self._setup(self.logic.count_frequencies(data))

    @classmethod
    def from_frequencies(cls, freqs):
        """Build a codec from a symbol -> count mapping instead of sample data."""
        if not freqs:
            raise EmptyInputError()
        for symbol, count in freqs.items():
            if not isinstance(symbol, int) or not 0 <= symbol <= 255:
                raise ValueError(f"symbol must be a byte value in range(256), got {symbol!r}")
            if not isinstance(count, int) or count <= 0:
                raise ValueError(f"count for symbol {symbol} must be a positive int, got {count!r}")

        codec = cls.__new__(cls)
        codec.logic = HuffmanLogic()
        codec._setup(dict(freqs))
        return codec

    def _setup(self, freqs):
        self._freqs = freqs
        self._root = self.logic.build_tree(freqs)
        self._codes = self.logic.generate_codes(self._root)
        logger.debug(
            "built Huffman code: %d symbol(s), %d input byte(s), max code length %d",
            len(freqs), sum(freqs.values()), self.logic.tree_depth(self._root),
        )

    @property
    def frequencies(self):
        return MappingProxyType(self._freqs)

    @property
    def code_table(self):
        return MappingProxyType(self._codes)

    @property
    def symbols(self):
        return frozenset(self._codes)

    def __len__(self):
        return len(self._codes)

    def __contains__(self, symbol):
        return symbol in self._codes

    def __repr__(self):
        return f"<HuffmanCodec symbols={len(self._codes)} weight={self._root.weight}>"

    def _unknown_symbol(self, data):
        for position, symbol in enumerate(data):
            if symbol not in self._codes:
                return UnknownSymbolError(symbol, position)
        raise AssertionError("no unknown symbol in data")

    def encode(self, data):
        data = _as_bytes(data)
        codes = self._codes
        try:
            return "".join([codes[symbol] for symbol in data])
        except KeyError:
            raise self._unknown_symbol(data) from None

    def encoded_length(self, data):
        """Number of bits encode(data) would produce."""
        data = _as_bytes(data)
        codes = self._codes
        try:
            return sum(len(codes[symbol]) for symbol in data)
        except KeyError:
            raise self._unknown_symbol(data) from None

    def decode(self, bits):
        if not isinstance(bits, str):
            raise TypeError(f"expected a str bit-string, got {type(bits).__name__}")

        root = self._root
        if isinstance(root, Leaf):
            for position, bit in enumerate(bits):
                if bit != "0":
                    raise InvalidBitError(bit, position)
            return bytes([root.symbol]) * len(bits)

        decoded = bytearray()
        node = root
        pending = 0
        for position, bit in enumerate(bits):
            if bit == "0":
                node = node.left
            elif bit == "1":
                node = node.right
            else:
                raise InvalidBitError(bit, position)
            pending += 1

            # Reaching a leaf completes one symbol; start over from the root
            if isinstance(node, Leaf):
                decoded.append(node.symbol)
                node = root
                pending = 0

        if pending:
            raise TruncatedCodeError(pending)
        return bytes(decoded)
