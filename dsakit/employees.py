"""Employee records and selection of the best paid."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    name: str
    account_number: str
    salary: int


def highest_paid(employees: Iterable[Employee]) -> Employee:
    """The employee with the highest salary; the first one wins a tie."""
    staff = list(employees)
    if not staff:
        raise ValueError("no employees given")
    return max(staff, key=lambda employee: employee.salary)