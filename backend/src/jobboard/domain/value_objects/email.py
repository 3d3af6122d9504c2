"""
Email Value Object
Immutable email with validation
"""
from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Email value object; syntax is checked by email-validator, no DNS lookups"""

    value: str

    def __post_init__(self):
        """Validate and normalize email format"""
        if not self.is_valid(self.value):
            raise ValueError(f"Invalid email format: {self.value}")
        object.__setattr__(self, "value", self.value.strip().lower())

    @staticmethod
    def is_valid(email: str) -> bool:
        if not email:
            return False
        try:
            validate_email(email.strip(), check_deliverability=False)
        except EmailNotValidError:
            return False
        return True

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email({self.value})"
