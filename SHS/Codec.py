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

import struct

WORD_SIZE = 4
WORD_MASK = 0xFFFFFFFF

"""
Conversion between byte strings and sequences of
32-bit unsigned words in network (big-endian) byte
order. Both hash algorithms read their blocks and
write their digests through here.
"""

def words_from_bytes(data):
    if len(data) % WORD_SIZE != 0:
        raise ValueError("Cannot decode "+str(len(data))+" bytes into whole "+str(WORD_SIZE*8)+"-bit words")

    return struct.unpack("!"+str(len(data)//WORD_SIZE)+"L", data)

def bytes_from_words(words):
    return struct.pack("!"+str(len(words))+"L", *[w & WORD_MASK for w in words])

def uint64_bytes(value):
    return struct.pack("!Q", value & 0xFFFFFFFFFFFFFFFF)
