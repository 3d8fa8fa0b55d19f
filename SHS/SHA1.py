# MIT License
#
# Copyright (c) 2017 Thomas Dixon
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from SHS import Engine

HASH_WORDS  = 5
BLOCK_WORDS = 16
ROUNDS      = 80

block_size  = Engine.BLOCK_SIZE
digest_size = 20

_h = (0x67452301, 0xefcdab89, 0x98badcfe, 0x10325476, 0xc3d2e1f0)

def _rotl(x, y):
    return ((x << y) | (x >> (32-y))) & 0xFFFFFFFF

def _choose(x, y, z):
    return (x & y) | ((~x) & z)

def _parity(x, y, z):
    return x ^ y ^ z

def _majority(x, y, z):
    return (x & y) ^ (x & z) ^ (y & z)

# One entry per 20-round stage
_f = (_choose, _parity, _majority, _parity)
_k = (0x5a827999, 0x6ed9eba1, 0x8f1bbcdc, 0xca62c1d6)

def compress(hash, block):
    assert len(hash) == HASH_WORDS, "SHA-1 state must hold "+str(HASH_WORDS)+" words"
    assert len(block) == BLOCK_WORDS, "SHA-1 block must hold "+str(BLOCK_WORDS)+" words"

    w = [0]*ROUNDS
    w[0:16] = block

    for t in range(16, ROUNDS):
        w[t] = _rotl(w[t-3] ^ w[t-8] ^ w[t-14] ^ w[t-16], 1)

    a,b,c,d,e = hash

    for t in range(ROUNDS):
        stage = t // 20
        temp = (_rotl(a, 5) + _f[stage](b, c, d) + e + _k[stage] + w[t]) & 0xFFFFFFFF

        e = d
        d = c
        c = _rotl(b, 30)
        b = a
        a = temp

    return tuple((x+y) & 0xFFFFFFFF for x,y in zip(hash, (a,b,c,d,e)))

def empty():
    return Engine.empty(_h)

def update(state, data):
    return Engine.update(compress, state, data)

def finalize(state):
    return Engine.finalize(compress, state)

def digest(data):
    return finalize(update(empty(), data))

def new(m=None):
    return sha1(m)

class sha1(Engine.StreamingHash):
    name = "sha1"
    digest_size = digest_size
    _initial_hash = _h
    _compress = staticmethod(compress)
