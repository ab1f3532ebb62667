class KeySizeError(ValueError):
    """
    Exception indicating that a cipher key does not have the 10 byte length PRESENT-80 requires.
    Key length is a programming error on the caller's side, so there is nothing to retry.
    """
    EXPECTED = 10

    def __init__(self, length: int) -> None:
        super().__init__(f"Cipher key must be exactly {self.EXPECTED} bytes long, got {length}")
        self.length = length


class BlockSizeError(ValueError):
    """
    Exception indicating that a block passed to the cipher is not exactly 8 bytes long.
    """
    EXPECTED = 8

    def __init__(self, length: int) -> None:
        super().__init__(f"Cipher block must be exactly {self.EXPECTED} bytes long, got {length}")
        self.length = length
