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

import importlib.util
import SHS

PROVIDER_NONE     = 0x00
PROVIDER_INTERNAL = 0x01
PROVIDER_PYCA     = 0x02

FORCE_INTERNAL = False
PROVIDER = PROVIDER_NONE

pyca_v = None

"""
The hashes in SHS are always computed by the internal
implementation. When PyCA cryptography is installed, the
same digests can also be computed through OpenSSL, which
is used as an independent reference for self-checks.
"""

# Published FIPS 180-4 example values
VECTORS = {
    "sha1": [
        (b"", "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
        (b"abc", "a9993e364706816aba3e25717850c26c9cd0d89d"),
        (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq", "84983e441c3bd26ebaae4aa1f95129e5e54670f1"),
    ],
    "sha256": [
        (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
        (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
        (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq", "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    ],
}

BOUNDARY_LENGTHS = [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000]

def detect():
    global PROVIDER, pyca_v
    use_pyca = False

    try:
        if not FORCE_INTERNAL and importlib.util.find_spec('cryptography') != None:
            import cryptography
            pyca_v = cryptography.__version__
            v = pyca_v.split(".")

            if int(v[0]) == 3:
                if int(v[1]) >= 1:
                    use_pyca = True
            elif int(v[0]) > 3:
                use_pyca = True

    except Exception as e:
        SHS.log("Could not determine PyCA cryptography version: "+str(e), SHS.LOG_DEBUG)

    if use_pyca:
        PROVIDER = PROVIDER_PYCA
    else:
        PROVIDER = PROVIDER_INTERNAL

    return PROVIDER

def backend():
    if PROVIDER == PROVIDER_NONE:
        return "none"
    elif PROVIDER == PROVIDER_INTERNAL:
        return "internal"
    elif PROVIDER == PROVIDER_PYCA:
        return "internal, verified by openssl, PyCA "+str(pyca_v)

def has_reference():
    return PROVIDER == PROVIDER_PYCA

def reference_new(name):
    if not has_reference():
        raise RuntimeError("No reference hash provider is available")

    from cryptography.hazmat.primitives import hashes
    algorithms = {"sha1": hashes.SHA1, "sha256": hashes.SHA256}
    if not name in algorithms:
        raise ValueError("Unsupported hash algorithm "+str(name))

    return hashes.Hash(algorithms[name]())

def reference_digest(name, data):
    digest = reference_new(name)
    digest.update(bytes(data))
    return digest.finalize()

def self_test():
    from SHS import Hashes
    ok = True

    for name in Hashes.algorithms:
        passed = True
        for message, expected in VECTORS[name]:
            result = Hashes.algorithms[name].digest(message).hex()
            if result != expected:
                SHS.log("Known-answer test for "+name+" failed on "+str(len(message))+" byte input", SHS.LOG_ERROR)
                SHS.log("Expected "+expected+", got "+result, SHS.LOG_ERROR)
                passed = False

        if has_reference():
            for length in BOUNDARY_LENGTHS:
                message = bytes([i & 0xFF for i in range(length)])
                if Hashes.algorithms[name].digest(message) != reference_digest(name, message):
                    SHS.log("Reference comparison for "+name+" failed on "+str(length)+" byte input", SHS.LOG_ERROR)
                    passed = False

        if passed:
            SHS.log("Self-test for "+name+" passed", SHS.LOG_VERBOSE)
        else:
            ok = False

    if not has_reference():
        SHS.log("No reference provider available, only known-answer tests were run", SHS.LOG_NOTICE)

    return ok

detect()
