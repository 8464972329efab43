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

from pyasn1.type import univ, namedtype, tag
from pyasn1_modules.rfc3447 import RSAPrivateKey
from pyasn1_modules.rfc5208 import PrivateKeyInfo

EC_PRIVKEY_VERSION = 1

CURVE_OID_TAG = tag.Tag(tag.tagClassContext, tag.tagFormatConstructed, 0)
PUBLIC_KEY_TAG = tag.Tag(tag.tagClassContext, tag.tagFormatConstructed, 1)

class ECVersion(univ.Integer): pass
class ECPublicKey(univ.BitString): pass

# RFC 5915 restricted to named curves
class ECPrivateKey(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType('version', ECVersion()),
        namedtype.NamedType('privateKey', univ.OctetString()),
        namedtype.OptionalNamedType('parameters', univ.ObjectIdentifier().subtype(explicitTag=CURVE_OID_TAG)),
        namedtype.OptionalNamedType('publicKey', ECPublicKey().subtype(explicitTag=PUBLIC_KEY_TAG))
    )

# Shapes only probed to redirect callers to the right parser.
PKCS8PrivateKeyInfo = PrivateKeyInfo
PKCS1PrivateKey = RSAPrivateKey
