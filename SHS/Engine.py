# Reticulum License
#
# Copyright (c) 2016-2025 Mark Qvist
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# - The Software shall not be used in any kind of system which includes amongst
#   its functions the ability to purposefully do harm to human beings.
#
# - The Software shall not be used, directly or indirectly, in the creation of
#   an artificial intelligence, machine learning or language model training
#   dataset, including but not limited to any use that contributes to the
#   training or development of such a model or algorithm.
#
# - The above copyright notice and this permission notice shall be included in
#   all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import collections
from SHS import Codec

BLOCK_SIZE    = 64
LENGTH_OFFSET = 56
LENGTH_MASK   = 0xFFFFFFFFFFFFFFFF

"""
The streaming Merkle-Damgard driver shared by every
hash in the family. A computation is carried in an
immutable HasherState; each call below returns a new
state and never touches the one it was given.

  hash            tuple of chaining words
  message_length  bytes fed so far, modulo 2^64
  message_buffer  unprocessed tail, shorter than a block
"""

HasherState = collections.namedtuple("HasherState", ["hash", "message_length", "message_buffer"])

def as_bytes(data, caller="update"):
    if type(data) is bytes:
        return data
    elif isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    else:
        raise TypeError("%s() argument must be a bytes-like object, not %s" % (caller, type(data).__name__))

def empty(initial_hash):
    return HasherState(tuple(initial_hash), 0, b"")

def absorb(compress, state, data):
    """
    Appends ``data`` to the buffer of ``state``, running
    ``compress`` over every block that fills up on the way.
    The length counter is left alone, so padding can go
    through here too.
    """
    buffer = state.message_buffer + data
    chaining = state.hash
    blocks = len(buffer) // BLOCK_SIZE

    for i in range(blocks):
        block = buffer[i*BLOCK_SIZE:(i+1)*BLOCK_SIZE]
        chaining = compress(chaining, Codec.words_from_bytes(block))

    return HasherState(chaining, state.message_length, buffer[blocks*BLOCK_SIZE:])

def update(compress, state, data):
    data = as_bytes(data)
    absorbed = absorb(compress, state, data)
    return absorbed._replace(message_length=(state.message_length + len(data)) & LENGTH_MASK)

def finalize(compress, state):
    bit_length = Codec.uint64_bytes(state.message_length << 3)

    state = absorb(compress, state, b"\x80")
    state = absorb(compress, state, b"\x00" * ((LENGTH_OFFSET - len(state.message_buffer)) % BLOCK_SIZE))
    state = absorb(compress, state, bit_length)

    assert len(state.message_buffer) == 0, "Padding left "+str(len(state.message_buffer))+" bytes unprocessed"

    return Codec.bytes_from_words(state.hash)


class StreamingHash(object):
    """
    hashlib-style wrapper around a HasherState. Subclasses
    provide ``name``, ``digest_size``, ``_initial_hash`` and
    a ``_compress`` static method.
    """
    name = None
    digest_size = None
    block_size = BLOCK_SIZE
    _initial_hash = ()

    def __init__(self, m=None):
        self._state = empty(self._initial_hash)

        if m is not None:
            self.update(as_bytes(m, caller=self.__class__.__name__))

    @property
    def state(self):
        return self._state

    def update(self, m):
        self._state = update(self._compress, self._state, m)

    def digest(self):
        return finalize(self._compress, self._state)

    def hexdigest(self):
        return self.digest().hex()

    def copy(self):
        c = self.__class__.__new__(self.__class__)
        c._state = self._state
        return c
