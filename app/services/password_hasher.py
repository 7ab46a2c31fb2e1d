# app/services/password_hasher.py
import bcrypt


class PasswordHasher:
    """bcrypt z sola, koszt (rounds) z konfiguracji. bcrypt bierze max 72 bajty hasla."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8")[:72], salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8")[:72], hashed.encode("utf-8"))
        except ValueError:
            #uszkodzony hash w bazie
            return False
