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

"""Registry of the named curves a SEC1 key may refer to.

The registry is a fixed table built at import time. Lookups are exact in both
directions: an object identifier resolves to a :class:`NamedCurve` handle and a
handle identifies back to its object identifier. Adding a curve means adding a
table entry; callers never special-case a curve by OID.
"""

import ecdsa
from ecdsa.curves import Curve
from ecdsa.ellipticcurve import CurveFp, PointJacobi

from pyasn1.error import PyAsn1Error
from pyasn1.type import univ

from sec1key.errors import UnknownCurveError

FAMILY_NIST = 'nist'
FAMILY_SM2 = 'sm2'

# GM/T 0003.5-2012 recommended parameters
_SM2_P = 0xFFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF00000000FFFFFFFFFFFFFFFF
_SM2_A = 0xFFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF00000000FFFFFFFFFFFFFFFC
_SM2_B = 0x28E9FA9E9D9F5E344D5A9E4BCF6509A7F39789F515AB8F92DDBCBD414D940E93
_SM2_N = 0xFFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFF7203DF6B21C6052B53BBF40939D54123
_SM2_GX = 0x32C4AE2C1F1981195F9904466A39C9948FE30BBFF2660BE1715A4589334C74C7
_SM2_GY = 0xBC3736A2F4F6779C59BDCEE36B692153D0A9877CC62A474002DF32E52139F0A0

_sm2_curve = CurveFp(_SM2_P, _SM2_A, _SM2_B, 1)
SM2p256v1 = Curve('SM2p256v1',
                  _sm2_curve,
                  PointJacobi(_sm2_curve, _SM2_GX, _SM2_GY, 1, _SM2_N, generator=True),
                  (1, 2, 156, 10197, 1, 301),
                  'sm2p256v1')


class NamedCurve(object):
    """Immutable handle to one registered curve.

    Group arithmetic is delegated to the wrapped ``ecdsa`` curve.
    """

    __slots__ = ('name', 'family', '_ec')

    def __init__(self, name, family, ec_curve):
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'family', family)
        object.__setattr__(self, '_ec', ec_curve)

    def __setattr__(self, attr, value):
        raise AttributeError("{} is read-only".format(type(self).__name__))

    def __delattr__(self, attr):
        raise AttributeError("{} is read-only".format(type(self).__name__))

    @property
    def openssl_name(self):
        return self._ec.openssl_name

    @property
    def oid(self):
        return tuple(self._ec.oid)

    @property
    def order(self):
        return int(self._ec.order)

    @property
    def bit_size(self):
        return self.order.bit_length()

    @property
    def key_size(self):
        """Byte width of an encoded private scalar."""
        return (self.bit_size + 7) // 8

    @property
    def prime(self):
        return int(self._ec.curve.p())

    @property
    def field_size(self):
        """Byte width of an encoded field element."""
        return (self.prime.bit_length() + 7) // 8

    def scalar_base_mult(self, d):
        """Return the affine coordinates of ``d * G``."""
        # The identity has no affine form; it is reported as (0, 0).
        if d % self.order == 0:
            return 0, 0
        point = self._ec.generator * d
        return int(point.x()), int(point.y())

    def contains_point(self, x, y):
        return self._ec.curve.contains_point(x, y)

    def encode_point(self, x, y):
        """Encode a point in uncompressed form (``04 || X || Y``)."""
        size = self.field_size
        if not (0 <= x < self.prime and 0 <= y < self.prime):
            raise ValueError("point coordinate out of range for {}".format(self.name))
        return b'\x04' + x.to_bytes(size, 'big') + y.to_bytes(size, 'big')

    def __repr__(self):
        return '<NamedCurve {}>'.format(self.name)


P224 = NamedCurve('NIST P-224', FAMILY_NIST, ecdsa.NIST224p)
P256 = NamedCurve('NIST P-256', FAMILY_NIST, ecdsa.NIST256p)
P384 = NamedCurve('NIST P-384', FAMILY_NIST, ecdsa.NIST384p)
P521 = NamedCurve('NIST P-521', FAMILY_NIST, ecdsa.NIST521p)
SM2P256 = NamedCurve('SM2', FAMILY_SM2, SM2p256v1)

SUPPORTED_CURVES = (P224, P256, P384, P521, SM2P256)

_BY_OID = dict((curve.oid, curve) for curve in SUPPORTED_CURVES)


def _normalize_oid(oid):
    return tuple(univ.ObjectIdentifier(oid).asTuple())

def resolve(oid):
    """Map an object identifier to its NamedCurve, or None when unregistered.

    `oid` may be a dotted string, a tuple of ints or a pyasn1 ObjectIdentifier.
    """
    if oid is None:
        return None
    try:
        key = _normalize_oid(oid)
    except PyAsn1Error:
        return None
    return _BY_OID.get(key)

def identify(curve):
    """Return the object identifier of a registered curve, or None."""
    for entry in SUPPORTED_CURVES:
        if entry is curve:
            return entry.oid
    return None

def by_name(name):
    for curve in SUPPORTED_CURVES:
        if name in (curve.name, curve.openssl_name):
            return curve
    raise UnknownCurveError("unknown elliptic curve '{}'".format(name))

def oid_to_name(oid):
    """Map a curve OID to the friendly name string used by OpenSSL."""
    curve = resolve(oid)
    if curve is not None:
        return curve.openssl_name
    else:
        return "unknown"
