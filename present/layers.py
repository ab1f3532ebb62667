from typing import Sequence, Tuple

STATE_BITS = 64
_NIBBLES = STATE_BITS // 4

S_BOX: Tuple[int, ...] = (
    0xc, 0x5, 0x6, 0xb,
    0x9, 0x0, 0xa, 0xd,
    0x3, 0xe, 0xf, 0x8,
    0x4, 0x7, 0x1, 0x2
)

S_BOX_INV: Tuple[int, ...] = (
    0x5, 0xe, 0xf, 0x8,
    0xc, 0x1, 0x2, 0xd,
    0xb, 0x4, 0x6, 0x3,
    0x0, 0x7, 0x9, 0xa
)


def _p_layer_table() -> Tuple[int, ...]:
    # Bit p (counted from the most significant bit of the first byte) moves to 16 * p mod 63.
    # Bit 63 is the only position the formula does not reach, so it stays in place.
    return tuple((16 * p) % (STATE_BITS - 1) for p in range(STATE_BITS - 1)) + (STATE_BITS - 1,)


P_LAYER: Tuple[int, ...] = _p_layer_table()
P_LAYER_INV: Tuple[int, ...] = tuple(P_LAYER.index(p) for p in range(STATE_BITS))


def add_round_key(state: int, round_key: int) -> int:
    return state ^ round_key


def substitute(state: int, s_box: Sequence[int]) -> int:
    """
    Replace every nibble of a 64-bit state with its image under an S-box.
    :param state: The cipher state as a big-endian integer.
    :param s_box: S_BOX when encrypting, S_BOX_INV when decrypting.
    :return: The substituted state.
    """
    result = 0
    for i in range(_NIBBLES):
        result |= s_box[(state >> 4 * i) & 0xf] << (4 * i)
    return result


def _move_bits(state: int, table: Sequence[int]) -> int:
    # Positions in the table count from the most significant bit, the integer shifts count from the least.
    result = 0
    for p in range(STATE_BITS):
        bit = (state >> (STATE_BITS - 1 - p)) & 1
        result |= bit << (STATE_BITS - 1 - table[p])
    return result


def permute(state: int) -> int:
    """
    The P-layer: a fixed bit permutation spreading the output of each S-box over four different S-boxes
    of the next round.
    """
    return _move_bits(state, P_LAYER)


def permute_inverse(state: int) -> int:
    return _move_bits(state, P_LAYER_INV)
