# filename: huffman_errors.py


class HuffmanError(ValueError):
    """Base class for every error raised by the Huffman codec."""


class EmptyInputError(HuffmanError):
    def __init__(self, message="cannot build a Huffman code from empty input"):
        super().__init__(message)


class UnknownSymbolError(HuffmanError):
    """Raised by encode when a byte was never seen at construction."""

    def __init__(self, symbol, position):
        self.symbol = symbol
        self.position = position
        super().__init__(f"symbol {symbol!r} at position {position} is not in the code table")


class InvalidBitError(HuffmanError):
    """Raised by decode on a character that does not lead to a node."""

    def __init__(self, bit, position):
        self.bit = bit
        self.position = position
        super().__init__(f"invalid bit {bit!r} at position {position}")


class TruncatedCodeError(HuffmanError):
    """Raised by decode when the bit-string ends in the middle of a code."""

    def __init__(self, pending):
        self.pending = pending
        super().__init__(f"bit-string ends {pending} bit(s) into an incomplete code")
