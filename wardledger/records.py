"""Record types and storage keys for the hospital ledger."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyKind(Enum):
    """The kinds of entry held in the ledger's storage."""

    ADMIN = "admin"
    PATIENT = "patient"
    DOCTOR = "doctor"
    MEDICAL_TEST = "medical_test"
    PATIENT_TESTS = "patient_tests"
    DOCTOR_TESTS = "doctor_tests"
    PATIENT_COUNT = "patient_count"
    DOCTOR_COUNT = "doctor_count"
    TEST_COUNT = "test_count"

    @property
    def takes_id(self) -> bool:
        """Whether keys of this kind are qualified by a record id."""
        return self in _ID_KINDS


_ID_KINDS = frozenset(
    {
        KeyKind.PATIENT,
        KeyKind.DOCTOR,
        KeyKind.MEDICAL_TEST,
        KeyKind.PATIENT_TESTS,
        KeyKind.DOCTOR_TESTS,
    }
)


@dataclass(frozen=True)
class DataKey:
    """A storage key: a kind, plus a record id for the kinds that need one."""

    kind: KeyKind
    id: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, KeyKind):
            raise TypeError(f"kind must be a KeyKind, not {type(self.kind).__name__}")
        if self.kind.takes_id:
            if self.id is None:
                raise ValueError(f"{self.kind.name} key needs an id")
            if isinstance(self.id, bool) or not isinstance(self.id, int):
                raise TypeError("key id must be an integer")
            if self.id < 0:
                raise ValueError("key id must not be negative")
        elif self.id is not None:
            raise ValueError(f"{self.kind.name} key takes no id")


@dataclass(frozen=True)
class Patient:
    """A registered patient."""

    id: int
    name: str
    date_of_birth: int
    blood_type: str
    allergies: tuple[str, ...]
    insurance_id: str
    active: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "allergies", tuple(self.allergies))


@dataclass(frozen=True)
class Doctor:
    """A registered doctor."""

    id: int
    name: str
    specialization: str
    license_number: str
    active: bool = True


@dataclass(frozen=True)
class MedicalTest:
    """A medical test ordered for a patient by a doctor."""

    id: int
    patient_id: int
    doctor_id: int
    test_type: str
    test_date: int
    results: str
    notes: str