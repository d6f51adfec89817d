"""The hospital ledger: patients, doctors and the medical tests they share."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Any

from wardledger.records import DataKey, Doctor, KeyKind, MedicalTest, Patient

_ADMIN = DataKey(KeyKind.ADMIN)
_PATIENT_COUNT = DataKey(KeyKind.PATIENT_COUNT)
_DOCTOR_COUNT = DataKey(KeyKind.DOCTOR_COUNT)
_TEST_COUNT = DataKey(KeyKind.TEST_COUNT)


class ContractError(Exception):
    """Raised when a ledger operation cannot be carried out."""


class AuthorizationError(ContractError):
    """Raised when the administrator does not authorize an operation."""


class HospitalContract:
    """A ledger of patients, doctors and medical tests guarded by an administrator.

    ``authorize`` is called with the administrator's address before every
    change and must return true to allow it; when omitted every change is
    allowed.
    """

    def __init__(self, authorize: Callable[[Any], bool] | None = None) -> None:
        self._authorize = authorize
        self._storage: dict[DataKey, Any] = {}

    def stored(self, key: DataKey) -> Any:
        """Return the raw value held under ``key``; raise KeyError if absent."""
        return self._storage[key]

    # -- internals ---------------------------------------------------------

    def _require_admin(self) -> None:
        if _ADMIN not in self._storage:
            raise ContractError("Contract not initialized")
        admin = self._storage[_ADMIN]
        if self._authorize is not None and not self._authorize(admin):
            raise AuthorizationError(f"Authorization required from {admin!r}")

    def _load(self, key: DataKey, message: str) -> Any:
        try:
            return self._storage[key]
        except KeyError:
            raise ContractError(message) from None

    def _tests_by_ids(self, test_ids: Iterable[int]) -> list[MedicalTest]:
        return [
            self._load(DataKey(KeyKind.MEDICAL_TEST, test_id), "Test not found")
            for test_id in test_ids
        ]

    # -- setup -------------------------------------------------------------

    def initialize(self, admin: Any) -> Any:
        """Set the administrator and zero the counters; allowed only once."""
        if _ADMIN in self._storage:
            raise ContractError("Contract already initialized")
        self._storage[_ADMIN] = admin
        self._storage[_PATIENT_COUNT] = 0
        self._storage[_DOCTOR_COUNT] = 0
        self._storage[_TEST_COUNT] = 0
        return admin

    # -- patients ----------------------------------------------------------

    def register_patient(
        self,
        name: str,
        date_of_birth: int,
        blood_type: str,
        allergies: Iterable[str],
        insurance_id: str,
    ) -> int:
        """Register an active patient and return the new patient id."""
        self._require_admin()
        new_id = self._storage.get(_PATIENT_COUNT, 0) + 1
        patient = Patient(
            id=new_id,
            name=name,
            date_of_birth=date_of_birth,
            blood_type=blood_type,
            allergies=tuple(allergies),
            insurance_id=insurance_id,
            active=True,
        )
        self._storage[DataKey(KeyKind.PATIENT, new_id)] = patient
        self._storage[_PATIENT_COUNT] = new_id
        self._storage[DataKey(KeyKind.PATIENT_TESTS, new_id)] = ()
        return new_id

    def get_patient(self, patient_id: int) -> Patient:
        """Return the patient with the given id."""
        return self._load(DataKey(KeyKind.PATIENT, patient_id), "Patient not registered")

    def update_patient(
        self,
        patient_id: int,
        name: str,
        date_of_birth: int,
        blood_type: str,
        allergies: Iterable[str],
        insurance_id: str,
    ) -> Patient:
        """Replace a patient's details, keeping id and status."""
        self._require_admin()
        key = DataKey(KeyKind.PATIENT, patient_id)
        patient = replace(
            self._load(key, "Patient not found"),
            name=name,
            date_of_birth=date_of_birth,
            blood_type=blood_type,
            allergies=tuple(allergies),
            insurance_id=insurance_id,
        )
        self._storage[key] = patient
        return patient

    def set_patient_active(self, patient_id: int, active: bool) -> Patient:
        """Set whether a patient is active."""
        self._require_admin()
        key = DataKey(KeyKind.PATIENT, patient_id)
        patient = replace(self._load(key, "Patient not found"), active=active)
        self._storage[key] = patient
        return patient

    def list_patients(self) -> list[Patient]:
        """Return every patient in order of registration."""
        count = self._storage.get(_PATIENT_COUNT, 0)
        keys = (DataKey(KeyKind.PATIENT, i) for i in range(1, count + 1))
        return [self._storage[key] for key in keys if key in self._storage]

    # -- doctors -----------------------------------------------------------

    def register_doctor(self, name: str, specialization: str, license_number: str) -> int:
        """Register an active doctor and return the new doctor id."""
        self._require_admin()
        new_id = self._storage.get(_DOCTOR_COUNT, 0) + 1
        doctor = Doctor(
            id=new_id,
            name=name,
            specialization=specialization,
            license_number=license_number,
            active=True,
        )
        self._storage[DataKey(KeyKind.DOCTOR, new_id)] = doctor
        self._storage[_DOCTOR_COUNT] = new_id
        self._storage[DataKey(KeyKind.DOCTOR_TESTS, new_id)] = ()
        return new_id

    def get_doctor(self, doctor_id: int) -> Doctor:
        """Return the doctor with the given id."""
        return self._load(DataKey(KeyKind.DOCTOR, doctor_id), "Doctor not found")

    def update_doctor(
        self, doctor_id: int, name: str, specialization: str, license_number: str
    ) -> Doctor:
        """Replace a doctor's details, keeping id and status."""
        self._require_admin()
        key = DataKey(KeyKind.DOCTOR, doctor_id)
        doctor = replace(
            self._load(key, "Doctor not found"),
            name=name,
            specialization=specialization,
            license_number=license_number,
        )
        self._storage[key] = doctor
        return doctor

    def set_doctor_active(self, doctor_id: int, active: bool) -> Doctor:
        """Set whether a doctor is active."""
        self._require_admin()
        key = DataKey(KeyKind.DOCTOR, doctor_id)
        doctor = replace(self._load(key, "Doctor not found"), active=active)
        self._storage[key] = doctor
        return doctor

    def list_doctors(self) -> list[Doctor]:
        """Return every doctor in order of registration."""
        count = self._storage.get(_DOCTOR_COUNT, 0)
        keys = (DataKey(KeyKind.DOCTOR, i) for i in range(1, count + 1))
        return [self._storage[key] for key in keys if key in self._storage]

    # -- medical tests -----------------------------------------------------

    def get_medical_test(self, test_id: int) -> MedicalTest:
        """Return the medical test with the given id."""
        return self._load(DataKey(KeyKind.MEDICAL_TEST, test_id), "Medical test not found")

    def record_medical_test(
        self,
        patient_id: int,
        doctor_id: int,
        test_type: str,
        results: str,
        notes: str,
        test_date: int,
    ) -> int:
        """Record a test for a patient by an active doctor; return its id."""
        self._require_admin()
        if DataKey(KeyKind.PATIENT, patient_id) not in self._storage:
            raise ContractError("Patient not found")
        doctor = self._load(DataKey(KeyKind.DOCTOR, doctor_id), "Doctor not found")
        if not doctor.active:
            raise ContractError("Doctor is inactive")

        new_id = self._storage.get(_TEST_COUNT, 0) + 1
        self._storage[DataKey(KeyKind.MEDICAL_TEST, new_id)] = MedicalTest(
            id=new_id,
            patient_id=patient_id,
            doctor_id=doctor_id,
            test_type=test_type,
            test_date=test_date,
            results=results,
            notes=notes,
        )
        self._storage[_TEST_COUNT] = new_id

        for key in (
            DataKey(KeyKind.PATIENT_TESTS, patient_id),
            DataKey(KeyKind.DOCTOR_TESTS, doctor_id),
        ):
            self._storage[key] = (*self._storage.get(key, ()), new_id)
        return new_id

    def get_tests_for_patient(self, patient_id: int) -> list[MedicalTest]:
        """Return a patient's tests in the order they were recorded."""
        ids = self._load(
            DataKey(KeyKind.PATIENT_TESTS, patient_id), "No tests found for this patient"
        )
        return self._tests_by_ids(ids)

    def get_tests_for_doctor(self, doctor_id: int) -> list[MedicalTest]:
        """Return a doctor's tests in the order they were recorded."""
        ids = self._load(
            DataKey(KeyKind.DOCTOR_TESTS, doctor_id), "No tests found for this doctor"
        )
        return self._tests_by_ids(ids)

    def list_all_medical_tests(self) -> list[MedicalTest]:
        """Return every medical test, most recently recorded first."""
        count = self._storage.get(_TEST_COUNT, 0)
        return self._tests_by_ids(range(count, 0, -1))