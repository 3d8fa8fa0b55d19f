import hashlib
import struct
import unittest

from SHS import Codec
from SHS import Engine
from SHS import SHA1
from SHS import SHA256

ALGORITHMS = [(SHA1, hashlib.sha1), (SHA256, hashlib.sha256)]
BOUNDARY_LENGTHS = [55, 56, 57, 63, 64, 65, 119, 120, 128]

def message(length):
    return bytes([(i*7+3) & 0xFF for i in range(length)])

def final_block(algorithm, state, bit_length):
    padded = state.message_buffer + b"\x80"
    padded += b"\x00" * ((56 - len(padded)) % 64)
    padded += struct.pack(">Q", bit_length)

    chaining = state.hash
    for i in range(0, len(padded), 64):
        chaining = algorithm.compress(chaining, Codec.words_from_bytes(padded[i:i+64]))

    return Codec.bytes_from_words(chaining)

class TestStreaming(unittest.TestCase):

    def test_fixed_output_length(self):
        for length in [0, 1, 55, 56, 64, 100, 200]:
            self.assertEqual(len(SHA1.digest(message(length))), 20)
            self.assertEqual(len(SHA256.digest(message(length))), 32)

    def test_empty_state(self):
        state = SHA256.empty()
        self.assertEqual(state.message_length, 0)
        self.assertEqual(state.message_buffer, b"")
        self.assertEqual(len(state.hash), 8)
        self.assertEqual(len(SHA1.empty().hash), 5)

    def test_block_boundaries(self):
        for algorithm, reference in ALGORITHMS:
            for length in BOUNDARY_LENGTHS:
                data = message(length)
                self.assertEqual(algorithm.digest(data), reference(data).digest(), algorithm.__name__+" at "+str(length)+" bytes")

    def test_every_split_point(self):
        data = message(130)
        for algorithm, reference in ALGORITHMS:
            expected = reference(data).digest()
            for split in range(len(data)+1):
                state = algorithm.update(algorithm.empty(), data[:split])
                state = algorithm.update(state, data[split:])
                self.assertEqual(algorithm.finalize(state), expected, algorithm.__name__+" split at "+str(split))

    def test_bytewise_updates(self):
        data = message(129)
        for algorithm, reference in ALGORITHMS:
            state = algorithm.empty()
            for i in range(len(data)):
                state = algorithm.update(state, data[i:i+1])
                self.assertTrue(0 <= len(state.message_buffer) < 64)
                self.assertEqual(len(state.message_buffer), (i+1) % 64)
            self.assertEqual(state.message_length, len(data))
            self.assertEqual(algorithm.finalize(state), reference(data).digest())

    def test_zero_length_updates(self):
        for algorithm, reference in ALGORITHMS:
            state = algorithm.empty()
            state = algorithm.update(state, b"")
            state = algorithm.update(state, b"abc")
            state = algorithm.update(state, b"")
            self.assertEqual(state.message_length, 3)
            self.assertEqual(algorithm.finalize(state), reference(b"abc").digest())

    def test_bytes_like_input(self):
        data = message(70)
        expected = SHA256.digest(data)
        self.assertEqual(SHA256.digest(bytearray(data)), expected)
        self.assertEqual(SHA256.digest(memoryview(data)), expected)

    def test_rejects_text(self):
        with self.assertRaises(TypeError):
            SHA1.update(SHA1.empty(), "abc")
        with self.assertRaises(TypeError):
            SHA256.new("abc")

    def test_state_isolation(self):
        for algorithm, reference in ALGORITHMS:
            base = algorithm.update(algorithm.empty(), message(60))
            left = algorithm.update(base, b"left branch")
            right = algorithm.update(base, b"right")

            self.assertEqual(base.message_length, 60)
            self.assertEqual(base.message_buffer, message(60))
            self.assertEqual(algorithm.finalize(left), reference(message(60)+b"left branch").digest())
            self.assertEqual(algorithm.finalize(right), reference(message(60)+b"right").digest())
            self.assertEqual(algorithm.finalize(base), reference(message(60)).digest())


class TestLengthField(unittest.TestCase):

    def test_full_64_bit_length(self):
        for algorithm, _ in ALGORITHMS:
            for buffered in [3, 60]:
                length = 2**40 + buffered
                state = Engine.HasherState(algorithm.empty().hash, length, message(buffered))
                self.assertEqual(algorithm.finalize(state), final_block(algorithm, state, length*8))

    def test_length_crosses_32_bits(self):
        for algorithm, _ in ALGORITHMS:
            state = Engine.HasherState(algorithm.empty().hash, 2**29 - 10, b"")
            for chunk in [message(7), message(9), message(4)]:
                state = algorithm.update(state, chunk)

            self.assertEqual(state.message_length, 2**29 + 10)
            self.assertGreater(state.message_length*8, 0xFFFFFFFF)
            self.assertEqual(algorithm.finalize(state), final_block(algorithm, state, (2**29 + 10)*8))

    def test_length_wraps_modulo_2_64(self):
        for algorithm, _ in ALGORITHMS:
            wrapped = Engine.HasherState(algorithm.empty().hash, 2**61 + 5, message(5))
            plain = Engine.HasherState(algorithm.empty().hash, 5, message(5))
            self.assertEqual(algorithm.finalize(wrapped), algorithm.finalize(plain))

            state = Engine.HasherState(algorithm.empty().hash, 2**64 - 1, b"")
            self.assertEqual(algorithm.update(state, b"xy").message_length, 1)


class TestCompression(unittest.TestCase):

    def test_single_block(self):
        block = b"abc" + b"\x80" + b"\x00"*52 + struct.pack(">Q", 24)
        words = Codec.words_from_bytes(block)

        self.assertEqual(
            Codec.bytes_from_words(SHA1.compress(SHA1.empty().hash, words)),
            bytes.fromhex("a9993e364706816aba3e25717850c26c9cd0d89d"))

        self.assertEqual(
            Codec.bytes_from_words(SHA256.compress(SHA256.empty().hash, words)),
            bytes.fromhex("ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"))

    def test_preconditions(self):
        words = (0,)*16
        with self.assertRaises(AssertionError):
            SHA1.compress(SHA256.empty().hash, words)
        with self.assertRaises(AssertionError):
            SHA256.compress(SHA256.empty().hash, words[:15])

    def test_words_stay_32_bit(self):
        words = (0xFFFFFFFF,)*16
        for algorithm, _ in ALGORITHMS:
            result = algorithm.compress((0xFFFFFFFF,)*len(algorithm.empty().hash), words)
            self.assertTrue(all(0 <= w <= 0xFFFFFFFF for w in result))


class TestHasherObject(unittest.TestCase):

    def test_digest_is_repeatable(self):
        h = SHA1.new(b"ab")
        first = h.digest()
        self.assertEqual(h.digest(), first)
        h.update(b"c")
        self.assertEqual(h.hexdigest(), "a9993e364706816aba3e25717850c26c9cd0d89d")

    def test_copy_is_independent(self):
        h = SHA256.new(message(40))
        c = h.copy()
        c.update(b"more")
        self.assertEqual(h.digest(), hashlib.sha256(message(40)).digest())
        self.assertEqual(c.digest(), hashlib.sha256(message(40)+b"more").digest())
        self.assertEqual(h.state.message_length, 40)


class TestCodec(unittest.TestCase):

    def test_big_endian_words(self):
        self.assertEqual(Codec.words_from_bytes(b"\x01\x02\x03\x04\xff\x00\x00\x00"), (0x01020304, 0xff000000))
        self.assertEqual(Codec.bytes_from_words([0x01020304, 0xff000000]), b"\x01\x02\x03\x04\xff\x00\x00\x00")
        self.assertEqual(Codec.uint64_bytes(24), b"\x00"*7+b"\x18")

    def test_partial_word(self):
        with self.assertRaises(ValueError):
            Codec.words_from_bytes(b"\x00"*5)


if __name__ == '__main__':
    unittest.main(verbosity=2)
