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

"""Private key values produced by the parser and consumed by the marshaler.

Exactly two variants exist, one per curve family. Callers tell them apart with
``isinstance`` or the ``family`` class attribute.
"""

from sec1key.curves import FAMILY_NIST, FAMILY_SM2
from sec1key.errors import InvalidScalarError, UnsupportedCurveParamError


class PrivateKey(object):
    family = None

    def __init__(self, curve, d, x, y):
        self.curve = curve
        self.d = d
        self.x = x
        self.y = y

    @classmethod
    def from_secret(cls, curve, d):
        """Build a key from its scalar, deriving the public point."""
        if curve.family != cls.family:
            raise UnsupportedCurveParamError(
                "{} cannot hold a key on {}".format(cls.__name__, curve.name))
        if not 0 <= d < curve.order:
            raise InvalidScalarError("invalid elliptic curve private key value")
        x, y = curve.scalar_base_mult(d)
        return cls(curve, d, x, y)

    def public_bytes(self):
        return self.curve.encode_point(self.x, self.y)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return (self.curve is other.curve and self.d == other.d
                and self.x == other.x and self.y == other.y)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        # never include d
        return '<{} {} x=0x{:x}>'.format(type(self).__name__, self.curve.name, self.x)


class ECDSAPrivateKey(PrivateKey):
    family = FAMILY_NIST


class SM2PrivateKey(PrivateKey):
    family = FAMILY_SM2
