from abc import ABC, abstractmethod


class BlockCipher(ABC):
    """
    A cipher transforming single fixed-size blocks. Modes of operation and padding are left to the caller.
    """

    @property
    @abstractmethod
    def block_size(self) -> int:
        """
        The size in bytes of the blocks accepted by encrypt_block and decrypt_block.
        """
        pass

    @abstractmethod
    def encrypt_block(self, block: bytes) -> bytes:
        """
        Encrypt exactly one block of plaintext.
        """
        pass

    @abstractmethod
    def decrypt_block(self, block: bytes) -> bytes:
        """
        Decrypt exactly one block of ciphertext.
        """
        pass
