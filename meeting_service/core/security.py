# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Password hashing backed by bcrypt."""
import bcrypt

BCRYPT_ROUNDS = 12
# bcrypt ignores everything past 72 bytes
_MAX_PASSWORD_BYTES = 72


class HashService:
    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self._rounds = rounds

    def convert_to_hash(self, password: str) -> str:
        password_bytes = password.encode("utf-8")[:_MAX_PASSWORD_BYTES]
        return bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        password_bytes = password.encode("utf-8")[:_MAX_PASSWORD_BYTES]
        try:
            return bcrypt.checkpw(password_bytes, hashed.encode("utf-8"))
        except ValueError:
            return False
