"""
One-time reset codes.

Codes are six decimal digits drawn uniformly from 100000..999999, so the
leading digit is never zero. Only the SHA-256 fingerprint of a code is ever
stored.
"""

import hashlib
import hmac
import secrets

OTP_MIN = 100000
OTP_MAX = 999999


def generate_otp() -> str:
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def fingerprint_otp(otp: str) -> str:
    return hashlib.sha256(otp.encode("utf-8")).hexdigest()


def fingerprint_matches(otp: str, stored_fingerprint: str | None) -> bool:
    if not stored_fingerprint:
        return False
    return hmac.compare_digest(fingerprint_otp(otp), stored_fingerprint)
