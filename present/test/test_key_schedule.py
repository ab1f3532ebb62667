import os
from unittest import TestCase

from present.errors import KeySizeError
from present.key_schedule import KEY_SIZE, ROUNDS, generate_round_keys


class TestKeySchedule(TestCase):
    def test_round_key_count(self):
        round_keys = generate_round_keys(os.urandom(KEY_SIZE))
        self.assertEqual(ROUNDS, len(round_keys))
        for round_key in round_keys:
            self.assertLess(round_key, 2 ** 64)

    def test_first_round_key_is_top_of_key(self):
        key = bytes.fromhex("0123456789abcdef0011")
        self.assertEqual(0x0123456789abcdef, generate_round_keys(key)[0])

    def test_zero_key(self):
        round_keys = generate_round_keys(b"\0" * KEY_SIZE)
        self.assertEqual(0x0000000000000000, round_keys[0])
        self.assertEqual(0xc000000000000000, round_keys[1])
        self.assertEqual(0x5000180000000001, round_keys[2])

    def test_deterministic(self):
        key = os.urandom(KEY_SIZE)
        self.assertEqual(generate_round_keys(key), generate_round_keys(bytearray(key)))

    def test_key_size_requirement(self):
        for length in (0, 8, 9, 11, 16):
            with self.assertRaises(KeySizeError) as context:
                generate_round_keys(b"\0" * length)
            self.assertEqual(length, context.exception.length)
