import json
import base64
import hmac
import hashlib
import time

from wellbeing.config import JWT_SECRET_KEY, JWT_EXPIRE_MINUTES

ALGORITHM = "HS256"


def base64_url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode()


def base64_url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes) -> bytes:
    return hmac.new(JWT_SECRET_KEY.encode(), message, hashlib.sha256).digest()


def create_access_token(data: dict, expire_minutes: int = JWT_EXPIRE_MINUTES) -> str:
    header = {"alg": ALGORITHM, "typ": "JWT"}
    payload = data.copy()
    payload["exp"] = int(time.time()) + expire_minutes * 60

    header_encoded = base64_url_encode(json.dumps(header).encode())
    payload_encoded = base64_url_encode(json.dumps(payload).encode())

    # Signature = HMACSHA256(header + "." + payload)
    signature = _sign(f"{header_encoded}.{payload_encoded}".encode())

    return f"{header_encoded}.{payload_encoded}.{base64_url_encode(signature)}"


def decode_access_token(token: str) -> dict:
    try:
        header_b64, payload_b64, signature_b64 = token.split(".")
        payload = json.loads(base64_url_decode(payload_b64))
    except ValueError as e:
        raise ValueError("Invalid token") from e

    expected = base64_url_encode(_sign(f"{header_b64}.{payload_b64}".encode()))
    if not hmac.compare_digest(expected, signature_b64):
        raise ValueError("Invalid signature")

    if not isinstance(payload, dict) or payload.get("exp", 0) < int(time.time()):
        raise ValueError("Token expired")

    return payload
