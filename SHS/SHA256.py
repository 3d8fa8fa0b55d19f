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

HASH_WORDS  = 8
BLOCK_WORDS = 16
ROUNDS      = 64

block_size  = Engine.BLOCK_SIZE
digest_size = 32

_k = (0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
      0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
      0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
      0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
      0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
      0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
      0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
      0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
      0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
      0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
      0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
      0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
      0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
      0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
      0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
      0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2)

_h = (0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
      0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19)

def _rotr(x, y):
    return ((x >> y) | (x << (32-y))) & 0xFFFFFFFF

def _ch(x, y, z):
    return (x & y) ^ ((~x) & z)

def _maj(x, y, z):
    return (x & y) ^ (x & z) ^ (y & z)

def _sigma0(x):
    return _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)

def _sigma1(x):
    return _rotr(x, 17) ^ _rotr(x, 19) ^ (x >> 10)

def _Sigma0(x):
    return _rotr(x, 2) ^ _rotr(x, 13) ^ _rotr(x, 22)

def _Sigma1(x):
    return _rotr(x, 6) ^ _rotr(x, 11) ^ _rotr(x, 25)

def compress(hash, block):
    assert len(hash) == HASH_WORDS, "SHA-256 state must hold "+str(HASH_WORDS)+" words"
    assert len(block) == BLOCK_WORDS, "SHA-256 block must hold "+str(BLOCK_WORDS)+" words"

    w = [0]*ROUNDS
    w[0:16] = block

    for i in range(16, ROUNDS):
        w[i] = (_sigma1(w[i-2]) + w[i-7] + _sigma0(w[i-15]) + w[i-16]) & 0xFFFFFFFF

    a,b,c,d,e,f,g,h = hash

    for i in range(ROUNDS):
        t1 = h + _Sigma1(e) + _ch(e, f, g) + _k[i] + w[i]
        t2 = _Sigma0(a) + _maj(a, b, c)

        h = g
        g = f
        f = e
        e = (d + t1) & 0xFFFFFFFF
        d = c
        c = b
        b = a
        a = (t1 + t2) & 0xFFFFFFFF

    return tuple((x+y) & 0xFFFFFFFF for x,y in zip(hash, (a,b,c,d,e,f,g,h)))

def empty():
    return Engine.empty(_h)

def update(state, data):
    return Engine.update(compress, state, data)

def finalize(state):
    return Engine.finalize(compress, state)

def digest(data):
    return finalize(update(empty(), data))

def new(m=None):
    return sha256(m)

class sha256(Engine.StreamingHash):
    name = "sha256"
    digest_size = digest_size
    _initial_hash = _h
    _compress = staticmethod(compress)
