import dataclasses

import pytest

from wardledger.records import DataKey, Doctor, KeyKind, MedicalTest, Patient


@pytest.mark.parametrize(
    "kind",
    [
        KeyKind.PATIENT,
        KeyKind.DOCTOR,
        KeyKind.MEDICAL_TEST,
        KeyKind.PATIENT_TESTS,
        KeyKind.DOCTOR_TESTS,
    ],
)
def test_id_kinds_require_an_id(kind):
    assert kind.takes_id is True
    with pytest.raises(ValueError):
        DataKey(kind)
    assert DataKey(kind, 1).id == 1


@pytest.mark.parametrize(
    "kind",
    [KeyKind.ADMIN, KeyKind.PATIENT_COUNT, KeyKind.DOCTOR_COUNT, KeyKind.TEST_COUNT],
)
def test_plain_kinds_reject_an_id(kind):
    assert kind.takes_id is False
    with pytest.raises(ValueError):
        DataKey(kind, 1)
    assert DataKey(kind).id is None


def test_negative_id_rejected():
    with pytest.raises(ValueError):
        DataKey(KeyKind.PATIENT, -1)


def test_non_integer_id_rejected():
    with pytest.raises(TypeError):
        DataKey(KeyKind.DOCTOR, "1")
    with pytest.raises(TypeError):
        DataKey(KeyKind.DOCTOR, True)


def test_kind_must_be_enum():
    with pytest.raises(TypeError):
        DataKey("patient", 1)


def test_keys_compare_and_hash_by_value():
    first = DataKey(KeyKind.PATIENT, 3)
    second = DataKey(KeyKind.PATIENT, 3)
    assert first == second
    assert hash(first) == hash(second)
    assert DataKey(KeyKind.PATIENT, 3) != DataKey(KeyKind.DOCTOR, 3)
    assert {first: "x"}[second] == "x"


def test_patient_allergies_become_tuple():
    patient = Patient(1, "John Doe", 946684800, "O+", ["penicillin", "peanuts"], "INS123456")
    assert patient.allergies == ("penicillin", "peanuts")
    assert patient.active is True


def test_records_are_immutable():
    doctor = Doctor(1, "Dr. Jane Smith", "Cardiology", "MED12345")
    with pytest.raises(dataclasses.FrozenInstanceError):
        doctor.active = False
    changed = dataclasses.replace(doctor, active=False)
    assert changed.active is False
    assert doctor.active is True


def test_medical_test_equality():
    first = MedicalTest(1, 1, 1, "EKG", 1625000000, "Normal sinus rhythm", "No abnormalities detected")
    second = MedicalTest(1, 1, 1, "EKG", 1625000000, "Normal sinus rhythm", "No abnormalities detected")
    assert first == second
    assert dataclasses.replace(first, notes="") != second