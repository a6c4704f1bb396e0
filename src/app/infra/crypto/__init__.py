"""Criptografia de credenciais de curta duração.

- JWT ES256/RS256 (APNs, Google OAuth)
- AWS Signature Version 4 (SES, SNS)
- carregamento de chaves privadas PEM
"""

from .jwt import base64url_encode, build_unsigned_token, encode_signed_jwt, sign_es256, sign_rs256
from .keys import load_ec_private_key, load_private_key, load_rsa_private_key
from .sigv4 import derive_signing_key, sign_aws_request

__all__ = [
    "base64url_encode",
    "build_unsigned_token",
    "derive_signing_key",
    "encode_signed_jwt",
    "load_ec_private_key",
    "load_private_key",
    "load_rsa_private_key",
    "sign_aws_request",
    "sign_es256",
    "sign_rs256",
]
