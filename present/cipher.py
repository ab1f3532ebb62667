import logging
from typing import Tuple, Union

from present.block import BlockCipher
from present.errors import BlockSizeError, KeySizeError
from present.key_schedule import KEY_SIZE, ROUNDS, generate_round_keys
from present.layers import S_BOX, S_BOX_INV, add_round_key, permute, permute_inverse, substitute

__all__ = ["BLOCK_SIZE", "KEY_SIZE", "ROUNDS", "BlockSizeError", "Cipher", "KeySizeError", "new"]

BLOCK_SIZE = 8

Buffer = Union[bytes, bytearray, memoryview]


class Cipher(BlockCipher):
    """
    The PRESENT lightweight block cipher with an 80 bit key, operating on single 64 bit blocks.
    """
    KEY_LENGTH = KEY_SIZE
    BLOCK_SIZE = BLOCK_SIZE

    def __init__(self, key: Buffer) -> None:
        """
        Initialize a new cipher instance with the given key. All round keys are derived up front.
        :param key: a byte sequence of exactly 10 bytes.
        :raises KeySizeError: if the key given is of incorrect length.
        """
        self.log = logging.getLogger(__name__)
        self._round_keys = generate_round_keys(key)
        self.log.debug(f"Generated {len(self._round_keys)} round keys")

    @property
    def block_size(self) -> int:
        return self.BLOCK_SIZE

    @property
    def round_keys(self) -> Tuple[bytes, ...]:
        return tuple(round_key.to_bytes(self.BLOCK_SIZE, byteorder="big") for round_key in self._round_keys)

    def encrypt_block(self, block: Buffer) -> bytes:
        """
        Encrypt a single block.
        :param block: The 8 byte plaintext block.
        :return: The 8 byte ciphertext block.
        :raises BlockSizeError: If the block is not exactly 8 bytes long.
        """
        state = self._load(block)
        for round_key in self._round_keys[:-1]:
            state = add_round_key(state, round_key)
            state = substitute(state, S_BOX)
            state = permute(state)
        state = add_round_key(state, self._round_keys[-1])
        return state.to_bytes(self.BLOCK_SIZE, byteorder="big")

    def decrypt_block(self, block: Buffer) -> bytes:
        """
        Decrypt a single block.
        :param block: The 8 byte ciphertext block.
        :return: The 8 byte plaintext block.
        :raises BlockSizeError: If the block is not exactly 8 bytes long.
        """
        state = self._load(block)
        for round_key in reversed(self._round_keys[1:]):
            state = add_round_key(state, round_key)
            state = permute_inverse(state)
            state = substitute(state, S_BOX_INV)
        state = add_round_key(state, self._round_keys[0])
        return state.to_bytes(self.BLOCK_SIZE, byteorder="big")

    def encrypt_into(self, dst: Union[bytearray, memoryview], src: Buffer) -> None:
        """
        Encrypt the block in src and write the result to dst. The two may be the same buffer.
        :raises BlockSizeError: If either buffer is not exactly 8 bytes long.
        """
        self._check_length(dst)
        dst[:] = self.encrypt_block(src)

    def decrypt_into(self, dst: Union[bytearray, memoryview], src: Buffer) -> None:
        """
        Decrypt the block in src and write the result to dst. The two may be the same buffer.
        :raises BlockSizeError: If either buffer is not exactly 8 bytes long.
        """
        self._check_length(dst)
        dst[:] = self.decrypt_block(src)

    def _load(self, block: Buffer) -> int:
        self._check_length(block)
        return int.from_bytes(block, byteorder="big")

    def _check_length(self, block: Buffer) -> None:
        if len(block) != self.BLOCK_SIZE:
            self.log.error(f"Rejecting block of {len(block)} bytes")
            raise BlockSizeError(len(block))


def new(key: Buffer) -> Cipher:
    """
    Create a PRESENT-80 cipher for the given 10 byte key.
    :raises KeySizeError: if the key given is of incorrect length.
    """
    return Cipher(key)
