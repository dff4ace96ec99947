"""Example records and their positional decoders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .decoding import INT, STR, RecordDecoder, SequenceDecoder


@dataclass(frozen=True)
class Employee:
    name: str
    age: int

    def __str__(self) -> str:
        return f"(name={self.name}, age={self.age})"


@dataclass(frozen=True)
class Company:
    name: str
    employees: List[Employee]

    def __str__(self) -> str:
        members = ", ".join(str(e) for e in self.employees)
        return f"(name={self.name}, employees=[{members}])"


# <name> <age>
EMPLOYEE = RecordDecoder(Employee, name=STR, age=INT)

# <name> <n> <employee>*n
COMPANY = RecordDecoder(Company, name=STR, employees=SequenceDecoder(EMPLOYEE))
