"""Message templates for the composite strong-password rule."""

from dataclasses import dataclass


@dataclass
class PasswordMessages:
    """Failure messages for each step added by ``strong_password``.

    ``min_length`` and ``max_length`` may contain ``{min}`` / ``{max}``
    placeholders that are filled with the configured bounds.
    """
    min_length: str = "Password must be at least {min} characters long"
    max_length: str = "Password must be at maximum {max} characters long"
    uppercase: str = "Password must contain at least one uppercase letter"
    lowercase: str = "Password must contain at least one lowercase letter"
    digit: str = "Password must contain at least one digit"
    special_char: str = "Password must contain at least one special character"

    @classmethod
    def defaults(cls) -> "PasswordMessages":
        return cls()

    def min_length_message(self, minimum: int) -> str:
        return self.min_length.replace("{min}", str(minimum))

    def max_length_message(self, maximum: int) -> str:
        return self.max_length.replace("{max}", str(maximum))
