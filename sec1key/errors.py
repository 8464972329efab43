# =======================================================================================================
# This project, Intel(R) Arria(R) 10 SoC FPGA Authentication Signing Utility (GIT), is Licensed as below
# =======================================================================================================
# 
# SPDX-License-Identifier: MIT-0
# 
# Copyright (c) 2013-2021 Intel Corporation All Right Reserved
# 
# Permission is hereby granted, free of charge, to any person obtaining a copy 
# of this software and associated documentation files (the "Software"), to deal 
# in the Software without restriction, including without limitation the rights 
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell 
# copies of the Software, and to permit persons to whom the Software is furnished 
# to do so.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR 
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, 
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE 
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER 
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING 
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS 
# IN THE SOFTWARE.

class Sec1Error(ValueError):
    """Base class for every failure raised while encoding or decoding a key."""
    pass

class MalformedEncodingError(Sec1Error):
    pass

class WrongFormatError(Sec1Error):
    """The input is a different key container; `suggested_format` names it."""

    def __init__(self, suggested_format):
        self.suggested_format = suggested_format
        super(WrongFormatError, self).__init__(
            "failed to parse private key (use a {} parser instead for this key format)".format(suggested_format))

class UnsupportedVersionError(Sec1Error):
    def __init__(self, version):
        self.version = version
        super(UnsupportedVersionError, self).__init__(
            "unknown EC private key version {}".format(version))

class UnknownCurveError(Sec1Error):
    pass

class InvalidKeyLengthError(Sec1Error):
    pass

class InvalidScalarError(Sec1Error):
    pass

class UnsupportedCurveParamError(Sec1Error):
    pass
