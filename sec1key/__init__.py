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

"""Encoding and decoding of SEC 1 (RFC 5915) elliptic curve private keys."""

from sec1key.curves import (NamedCurve, SUPPORTED_CURVES, FAMILY_NIST, FAMILY_SM2,
                            P224, P256, P384, P521, SM2P256,
                            resolve, identify, by_name, oid_to_name)
from sec1key.errors import (Sec1Error, MalformedEncodingError, WrongFormatError,
                            UnsupportedVersionError, UnknownCurveError, InvalidKeyLengthError,
                            InvalidScalarError, UnsupportedCurveParamError)
from sec1key.keys import PrivateKey, ECDSAPrivateKey, SM2PrivateKey
from sec1key.marshaler import marshal
from sec1key.parser import parse, extract_embedded_public_key

__version__ = '1.0.0'
