"""
Salary Range Value Object
Immutable salary range with validation
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SalaryRange:
    """Salary range value object; a single salary has min_salary == max_salary"""

    min_salary: Optional[int] = None
    max_salary: Optional[int] = None

    def __post_init__(self):
        """Validate salary range"""
        if self.min_salary is not None and self.min_salary < 0:
            raise ValueError("Minimum salary cannot be negative")

        if self.max_salary is not None:
            if self.max_salary < 0:
                raise ValueError("Maximum salary cannot be negative")
            if self.min_salary is not None and self.max_salary < self.min_salary:
                raise ValueError("Maximum salary cannot be less than minimum salary")

    @classmethod
    def single(cls, salary: int) -> "SalaryRange":
        return cls(min_salary=salary, max_salary=salary)

    def __str__(self) -> str:
        if self.min_salary is None and self.max_salary is None:
            return "unspecified"
        if self.max_salary is None:
            return f"${self.min_salary:,}+"
        if self.min_salary is None:
            return f"up to ${self.max_salary:,}"
        if self.min_salary == self.max_salary:
            return f"${self.min_salary:,}"
        return f"${self.min_salary:,} - ${self.max_salary:,}"
