"""PIN credential hashing"""

import hashlib
import hmac

from freerider_bank.domain.exceptions import InvalidArgumentError

ALGORITHM = "pbkdf2_sha256"


class PinHasher:
    """
    One-way PIN -> credential transform.

    PBKDF2-HMAC-SHA256 keyed with a service-wide salt. The salt is shared by
    every account, so the output stays deterministic and equal PINs produce
    equal credentials across accounts.

    Credential format: pbkdf2_sha256$<iterations>$<hex digest>
    """

    def __init__(self, salt: str, iterations: int = 100_000):
        if iterations <= 0:
            raise ValueError("iterations must be positive")
        self.salt = salt.encode("utf-8")
        self.iterations = iterations

    def hash(self, pin: str) -> str:
        if not isinstance(pin, str):
            raise InvalidArgumentError("pin invalid")
        digest = hashlib.pbkdf2_hmac("sha256", pin.encode("utf-8"), self.salt, self.iterations)
        return f"{ALGORITHM}${self.iterations}${digest.hex()}"

    def verify(self, pin: str, credential: str) -> bool:
        """Constant-time comparison of hash(pin) against a stored credential"""
        try:
            algorithm, iterations, expected = credential.split("$")
            rounds = int(iterations)
        except (AttributeError, ValueError):
            return False

        if algorithm != ALGORITHM or rounds <= 0 or not isinstance(pin, str):
            return False

        digest = hashlib.pbkdf2_hmac("sha256", pin.encode("utf-8"), self.salt, rounds)
        return hmac.compare_digest(digest.hex(), expected)
