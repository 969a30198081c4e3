class HuffmanError(ValueError):
    """Base class for errors raised by the Huffman codec."""


class EmptyInputError(HuffmanError):
    """Raised when there are no symbols to build a coding tree from."""


class TruncatedStreamError(HuffmanError):
    """
    Raised when a packed bitstream ends before the end-of-input code.

    Attributes:
        symbols_decoded: Number of symbols emitted before the bits ran out.
    """

    def __init__(self, symbols_decoded: int):
        super().__init__(
            f"Not enough bits: stream ended after {symbols_decoded} symbols "
            "without reaching the end-of-input marker."
        )
        self.symbols_decoded = symbols_decoded


class KeyFormatError(HuffmanError):
    """Raised when a serialized coding tree cannot be loaded."""
