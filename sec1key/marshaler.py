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

import logging

from pyasn1.codec.der import encoder as der_encoder
from pyasn1.type import univ

from sec1key.asn1spec import ECPrivateKey, ECPublicKey, EC_PRIVKEY_VERSION, CURVE_OID_TAG, PUBLIC_KEY_TAG
from sec1key.curves import identify
from sec1key.errors import UnknownCurveError, InvalidScalarError
from sec1key.keys import PrivateKey

l = logging.getLogger(__name__)


def marshal(key, named_curve=True):
    """Convert a private key to SEC 1, ASN.1 DER form.

    This kind of key is commonly encoded in PEM blocks of type
    "EC PRIVATE KEY". With `named_curve` false the curve OID is left out, which
    is the form embedded in a PKCS8 container that carries the OID itself.
    """
    if not isinstance(key, PrivateKey):
        raise TypeError("expected an EC private key, got {}".format(type(key).__name__))

    curve = key.curve
    oid = identify(curve)
    if oid is None:
        raise UnknownCurveError("unknown elliptic curve")

    if not 0 <= key.d < curve.order:
        raise InvalidScalarError("invalid elliptic curve private key value")

    record = ECPrivateKey()
    record['version'] = EC_PRIVKEY_VERSION
    record['privateKey'] = key.d.to_bytes(curve.key_size, 'big')
    if named_curve:
        record['parameters'] = univ.ObjectIdentifier(oid).subtype(explicitTag=CURVE_OID_TAG)
    record['publicKey'] = ECPublicKey.fromOctetString(
        curve.encode_point(key.x, key.y)).subtype(explicitTag=PUBLIC_KEY_TAG)

    l.debug('marshaled %s private key (named_curve=%s)', curve.name, named_curve)
    return der_encoder.encode(record)
