"""Constantes de assinatura de credenciais."""

JWT_ALG_ES256 = "ES256"
JWT_ALG_RS256 = "RS256"
ES256_COORDINATE_SIZE = 32  # bytes de r e de s na curva P-256
AWS_SIGV4_ALGORITHM = "AWS4-HMAC-SHA256"
AWS_SIGV4_TERMINATOR = "aws4_request"
