import logging
from typing import Tuple

from present.errors import KeySizeError
from present.layers import S_BOX

KEY_SIZE = 10
ROUNDS = 32

_KEY_BITS = KEY_SIZE * 8
_KEY_MASK = (1 << _KEY_BITS) - 1
_ROTATION = 61

log = logging.getLogger(__name__)


def generate_round_keys(key: bytes) -> Tuple[int, ...]:
    """
    Derive the round keys of PRESENT-80 from the cipher key.
    :param key: a byte sequence of exactly 10 bytes.
    :return: 32 round keys, each the big-endian integer value of 8 round key bytes.
    :raises KeySizeError: if the key given is of incorrect length.
    """
    if len(key) != KEY_SIZE:
        log.error(f"Refusing key schedule for a key of {len(key)} bytes")
        raise KeySizeError(len(key))

    register = int.from_bytes(key, byteorder="big")
    round_keys = [register >> 16]

    for counter in range(1, ROUNDS):
        register = ((register << _ROTATION) | (register >> (_KEY_BITS - _ROTATION))) & _KEY_MASK
        # Only the top nibble goes through the S-box
        register = (S_BOX[register >> 76] << 76) | (register & ((1 << 76) - 1))
        register ^= counter << 15
        round_keys.append(register >> 16)

    return tuple(round_keys)
