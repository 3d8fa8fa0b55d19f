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

import SHS
import argparse
import time
import sys
import os

APP_NAME = "shsum"

CHUNK_SIZE = 1024*1024

EXIT_OK            = 0
EXIT_FILE_ERROR    = 1
EXIT_NO_REFERENCE  = 2
EXIT_MISMATCH      = 3
EXIT_SELFTEST_FAIL = 4
EXIT_INTERNAL      = 5

def hash_stream(algorithm, stream, reference=None):
    state = algorithm.empty()
    total = 0

    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break

        state = algorithm.update(state, chunk)
        total += len(chunk)
        if reference != None:
            reference.update(chunk)

    return algorithm.finalize(state), total

def hash_file(algorithm, name, path, check=False):
    reference = SHS.Provider.reference_new(name) if check else None
    started = time.time()

    if path == "-":
        digest, total = hash_stream(algorithm, sys.stdin.buffer, reference)
    else:
        with open(path, "rb") as stream:
            digest, total = hash_stream(algorithm, stream, reference)

    elapsed = time.time()-started
    if elapsed > 0:
        SHS.log("Hashed "+SHS.prettysize(total)+" from "+str(path)+" at "+SHS.prettyspeed(total*8/elapsed), SHS.LOG_VERBOSE)
    else:
        SHS.log("Hashed "+SHS.prettysize(total)+" from "+str(path), SHS.LOG_VERBOSE)

    matched = None
    if reference != None:
        matched = reference.finalize() == digest

    return digest, matched

def main():
    try:
        parser = argparse.ArgumentParser(description="Secure Hash Standard digest utility")
        parser.add_argument("files", nargs="*", default=None, help="files to hash, or - for stdin", type=str)
        parser.add_argument("-a", "--algorithm", metavar="name", action="store", default="sha256", choices=sorted(SHS.Hashes.algorithms), help="hash algorithm to use (default: sha256)")
        parser.add_argument("-c", "--check", action="store_true", default=False, help="verify every digest against the reference provider")
        parser.add_argument("--self-test", action="store_true", default=False, help="run known-answer tests and exit")
        parser.add_argument("--logfile", metavar="path", action="store", default=None, help="write log output to file instead of the console", type=str)
        parser.add_argument("-v", "--verbose", action="count", default=0, help="increase verbosity")
        parser.add_argument("-q", "--quiet", action="count", default=0, help="decrease verbosity")
        parser.add_argument("--version", action="version", version="shsum {version}".format(version=SHS.version()))

        args = parser.parse_args()

        targetloglevel = SHS.LOG_NOTICE
        verbosity = args.verbose
        quietness = args.quiet
        if verbosity != 0 or quietness != 0:
            targetloglevel = targetloglevel+verbosity-quietness

        SHS.loglevel = max(targetloglevel, SHS.LOG_NONE)
        SHS.compact_log_fmt = True
        if args.logfile:
            SHS.logdest = SHS.LOG_FILE
            SHS.logfile = args.logfile

        if args.self_test:
            SHS.log("Running self-test with "+SHS.Provider.backend()+" backend", SHS.LOG_INFO)
            if SHS.Provider.self_test():
                SHS.log("Self-test passed")
                sys.exit(EXIT_OK)
            else:
                SHS.log("Self-test failed", SHS.LOG_ERROR)
                sys.exit(EXIT_SELFTEST_FAIL)

        if args.check and not SHS.Provider.has_reference():
            SHS.log("Digest verification requested, but no reference provider is available", SHS.LOG_ERROR)
            SHS.log("Install the PyCA cryptography package to enable verification", SHS.LOG_ERROR)
            sys.exit(EXIT_NO_REFERENCE)

        algorithm = SHS.Hashes.get(args.algorithm)
        files = args.files if args.files else ["-"]
        exit_code = EXIT_OK

        for path in files:
            if path != "-" and not os.path.isfile(path):
                SHS.log("Input file "+str(path)+" not found", SHS.LOG_ERROR)
                exit_code = EXIT_FILE_ERROR
                continue

            try:
                digest, matched = hash_file(algorithm, args.algorithm, path, check=args.check)

            except OSError as e:
                SHS.log("Could not read "+str(path), SHS.LOG_ERROR)
                SHS.log("The contained exception was: "+str(e), SHS.LOG_ERROR)
                exit_code = EXIT_FILE_ERROR
                continue

            print(digest.hex()+"  "+str(path))

            if matched == False:
                SHS.log("Digest of "+str(path)+" does not match reference provider", SHS.LOG_ERROR)
                if exit_code == EXIT_OK:
                    exit_code = EXIT_MISMATCH
            elif matched == True:
                SHS.log("Digest of "+str(path)+" verified", SHS.LOG_VERBOSE)

        sys.exit(exit_code)

    except KeyboardInterrupt:
        print("")
        sys.exit(130)

    except Exception as e:
        SHS.trace_exception(e)
        sys.exit(EXIT_INTERNAL)

if __name__ == "__main__":
    main()
