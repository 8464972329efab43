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

from pyasn1.codec.der import decoder as der_decoder, encoder as der_encoder
from pyasn1.error import PyAsn1Error

from sec1key.asn1spec import ECPrivateKey, PKCS8PrivateKeyInfo, PKCS1PrivateKey, EC_PRIVKEY_VERSION
from sec1key.curves import resolve, P224, P256, P384, P521, SM2P256
from sec1key.errors import (MalformedEncodingError, WrongFormatError, UnsupportedVersionError,
                            UnknownCurveError, InvalidKeyLengthError, InvalidScalarError,
                            UnsupportedCurveParamError)
from sec1key.keys import ECDSAPrivateKey, SM2PrivateKey

l = logging.getLogger(__name__)

_STANDARD_CURVES = (P224, P256, P384, P521)

# Point forms carrying both coordinates: uncompressed (4) and hybrid (6, 7).
_FULL_POINT_MARKERS = (4, 6, 7)


def _as_bytes(der):
    if isinstance(der, str):
        raise TypeError("DER input must be bytes, not str")
    return bytes(der)

def _matches(der, spec):
    try:
        der_decoder.decode(der, asn1Spec=spec)
    except PyAsn1Error:
        return False
    return True

def _decode_record(der):
    if not der:
        raise MalformedEncodingError("failed to parse EC private key: empty input")
    try:
        record, rest = der_decoder.decode(der, asn1Spec=ECPrivateKey())
    except PyAsn1Error as asn1_err:
        cause, reason = asn1_err, str(asn1_err)
    else:
        if rest:
            cause, reason = None, "{} trailing bytes after structure".format(len(rest))
        elif der_encoder.encode(record) != der:
            # BER forms such as long-form lengths are not DER.
            cause, reason = None, "structure is not in canonical DER form"
        else:
            return record

    # Only probed to give a more useful error.
    if _matches(der, PKCS8PrivateKeyInfo()):
        l.debug('input looks like a PKCS8 container')
        raise WrongFormatError('PKCS8') from cause
    if _matches(der, PKCS1PrivateKey()):
        l.debug('input looks like a PKCS1 RSA private key')
        raise WrongFormatError('PKCS1') from cause

    raise MalformedEncodingError("failed to parse EC private key: " + reason) from cause

def _fixed_width_scalar(private_key, width):
    # Some private keys have leading zero padding. This is invalid according
    # to SEC 1, but it is tolerated as long as only zeros are dropped.
    excess = len(private_key) - width
    if excess > 0:
        if any(private_key[:excess]):
            raise InvalidKeyLengthError("invalid private key length")
        private_key = private_key[excess:]
        l.debug('dropped %d leading zero bytes from the private key', excess)

    # OpenSSL used to drop all leading zeros; pad them back.
    return private_key.rjust(width, b'\0')

def parse(der, curve_oid=None):
    """Parse an EC private key in SEC 1, ASN.1 DER form.

    The OID of the named curve may come from another source, such as the
    PKCS8 container around this structure. When `curve_oid` is given it is
    used instead of any OID embedded in the structure.

    Returns an :class:`ECDSAPrivateKey` for the NIST curves or an
    :class:`SM2PrivateKey` for SM2. The public point is always recomputed
    from the scalar; an embedded public key is ignored.
    """
    der = _as_bytes(der)
    record = _decode_record(der)

    version = int(record['version'])
    if version != EC_PRIVKEY_VERSION:
        raise UnsupportedVersionError(version)

    if curve_oid is not None:
        l.debug('resolving curve from caller-supplied OID')
        curve = resolve(curve_oid)
    elif record['parameters'].isValue:
        curve = resolve(record['parameters'])
    else:
        curve = None
    if curve is None:
        raise UnknownCurveError("unknown elliptic curve")

    scalar = _fixed_width_scalar(record['privateKey'].asOctets(), curve.key_size)
    d = int.from_bytes(scalar, 'big')
    if d >= curve.order:
        raise InvalidScalarError("invalid elliptic curve private key value")

    if curve is SM2P256:
        key_class = SM2PrivateKey
    elif curve in _STANDARD_CURVES:
        key_class = ECDSAPrivateKey
    else:
        raise UnsupportedCurveParamError("invalid private key curve param")

    x, y = curve.scalar_base_mult(d)
    return key_class(curve, d, x, y)

def extract_embedded_public_key(der):
    """Return the public point stored in the structure, if any.

    Only points carrying both coordinates are returned. The value is not
    checked against the private scalar; use :func:`parse` for a trusted key.
    """
    record = _decode_record(_as_bytes(der))

    public_key = record['publicKey']
    if not public_key.isValue:
        return None

    point = public_key.asOctets()
    if not point or point[0] not in _FULL_POINT_MARKERS:
        return None
    return point
