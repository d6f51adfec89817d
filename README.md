# wardledger

An in-memory ledger for a small hospital. It keeps patients, doctors and the medical tests that doctors record for patients. One administrator sets the ledger up, and every change must be authorized for that administrator.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Concepts

- `wardledger.contract.HospitalContract` holds all of the state. It takes an optional `authorize` callable. Before every change the ledger calls `authorize(admin)`. If the call returns a false value, the change is refused with `AuthorizationError`. If you give no callable, every change is allowed.
- `initialize(admin)` sets the administrator and sets the patient, doctor and test counters to zero. It returns `admin`. A second call raises `ContractError`. Any change made before `initialize` also raises `ContractError`.
- Patients, doctors and tests get ids counting up from 1. Each kind has its own counter.
- A lookup of an unknown patient, doctor or test raises `ContractError`. `AuthorizationError` is a subclass of `ContractError`.
- The records are frozen dataclasses in `wardledger.records`: `Patient`, `Doctor` and `MedicalTest`. A patient's `allergies` are stored as a tuple. Update methods return a new record and store it in place of the old one.
- `stored(key)` returns the raw value held under a `wardledger.records.DataKey`. This can be a counter or a tuple of test ids for a patient or a doctor. It raises `KeyError` if nothing is held under the key. A `DataKey` is made from a `KeyKind` and, for per-record kinds, an id:

```python
from wardledger.records import DataKey, KeyKind

ledger.stored(DataKey(KeyKind.PATIENT_COUNT))        # e.g. 1
ledger.stored(DataKey(KeyKind.PATIENT_TESTS, 1))     # e.g. (1, 2)
```

`DataKey` raises `ValueError` when an id is missing or negative, and also when an id is given for a kind that takes none. It raises `TypeError` when the kind or the id has the wrong type.

## Example

```python
from wardledger.contract import HospitalContract

ledger = HospitalContract(authorize=lambda admin: admin == "admin-1")
ledger.initialize("admin-1")

patient_id = ledger.register_patient(
    "John Doe", 946684800, "O+", ["penicillin", "peanuts"], "INS123456"
)
doctor_id = ledger.register_doctor("Dr. Jane Smith", "Cardiology", "MED12345")

test_id = ledger.record_medical_test(
    patient_id,
    doctor_id,
    "Blood Test",
    "Normal red and white blood cell count",
    "Patient should return for follow-up in 6 months",
    1620000000,
)

ledger.get_medical_test(test_id).test_type         # "Blood Test"
len(ledger.get_tests_for_patient(patient_id))      # 1
ledger.set_doctor_active(doctor_id, False).active  # False
```

`record_medical_test` raises `ContractError` in these cases:

- the patient is unknown;
- the doctor is unknown;
- the doctor is inactive.

An inactive patient can still have tests recorded.

## Listings

- `list_patients()` and `list_doctors()` return the records in id order.
- `list_all_medical_tests()` returns the tests newest first.
- `get_tests_for_patient(patient_id)` and `get_tests_for_doctor(doctor_id)` return the tests in the order they were recorded. Each raises `ContractError` for a patient or doctor that was never registered.

## What it does not do

The ledger lives only in memory, and nothing is saved to disk or to a database. The package offers no command-line tool and no server. The administrator set by `initialize` cannot be changed later. Records cannot be deleted, only marked inactive.