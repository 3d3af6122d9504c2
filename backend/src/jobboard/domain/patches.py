"""
Partial Update Structures
Fields left at UNSET are not supplied and keep their stored value.
An explicit None clears a nullable column; for the other fields it is ignored.
"""
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional
from uuid import UUID


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class Patch:
    """Mixin for patch dataclasses"""

    # fields a None may clear
    clearable: ClassVar[FrozenSet[str]] = frozenset()

    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually supplied"""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is UNSET:
                continue
            if value is None and f.name not in self.clearable:
                continue
            result[f.name] = value
        return result

    def is_empty(self) -> bool:
        return not self.changes()


@dataclass(frozen=True)
class UserPatch(Patch):
    clearable: ClassVar[FrozenSet[str]] = frozenset({"phone"})

    name: Optional[str] = UNSET
    email: Optional[str] = UNSET
    password: Optional[str] = UNSET
    phone: Optional[str] = UNSET


@dataclass(frozen=True)
class CompanyPatch(Patch):
    clearable: ClassVar[FrozenSet[str]] = frozenset({"description", "location"})

    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    location: Optional[str] = UNSET
    employer_id: Optional[UUID] = UNSET


@dataclass(frozen=True)
class VacancyPatch(Patch):
    clearable: ClassVar[FrozenSet[str]] = frozenset(
        {"description", "location", "salary_min", "salary_max"}
    )

    title: Optional[str] = UNSET
    description: Optional[str] = UNSET
    location: Optional[str] = UNSET
    salary_min: Optional[int] = UNSET
    salary_max: Optional[int] = UNSET
    skills: Optional[List[str]] = UNSET
    fulltime: Optional[bool] = UNSET
    parttime: Optional[bool] = UNSET
    remote: Optional[bool] = UNSET


@dataclass(frozen=True)
class ResumePatch(Patch):
    clearable: ClassVar[FrozenSet[str]] = frozenset({"description"})

    title: Optional[str] = UNSET
    description: Optional[str] = UNSET
    skills: Optional[List[str]] = UNSET
