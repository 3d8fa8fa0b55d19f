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

import hmac as _hmac
from SHS import Engine
from SHS import SHA256

trans_5C = bytes((x ^ 0x5C) for x in range(256))
trans_36 = bytes((x ^ 0x36) for x in range(256))

compare_digest = _hmac.compare_digest

class HMAC:
    """
    RFC 2104 HMAC over any hash module that exposes the
    streaming ``empty``, ``update`` and ``finalize``
    functions along with ``block_size`` and ``digest_size``.
    """

    def __init__(self, key, msg=None, digestmod=SHA256):
        key = Engine.as_bytes(key, caller="HMAC")
        if digestmod is None:
            raise TypeError("Missing required parameter 'digestmod'")

        self._digestmod = digestmod
        self.digest_size = digestmod.digest_size
        self.block_size = digestmod.block_size

        if len(key) > self.block_size:
            key = digestmod.digest(key)

        key = key.ljust(self.block_size, b'\0')
        self._outer = digestmod.update(digestmod.empty(), key.translate(trans_5C))
        self._inner = digestmod.update(digestmod.empty(), key.translate(trans_36))

        if msg is not None:
            self.update(msg)

    @property
    def name(self):
        return "hmac-" + self._digestmod.__name__.split(".")[-1].lower()

    def update(self, msg):
        self._inner = self._digestmod.update(self._inner, msg)

    def copy(self):
        other = self.__class__.__new__(self.__class__)
        other._digestmod = self._digestmod
        other.digest_size = self.digest_size
        other.block_size = self.block_size
        other._inner = self._inner
        other._outer = self._outer
        return other

    def digest(self):
        inner = self._digestmod.finalize(self._inner)
        return self._digestmod.finalize(self._digestmod.update(self._outer, inner))

    def hexdigest(self):
        return self.digest().hex()

def new(key, msg=None, digestmod=SHA256):
    return HMAC(key, msg, digestmod)

def digest(key, msg, digest=SHA256):
    return HMAC(key, msg, digest).digest()
