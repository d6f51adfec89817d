"""In-memory, admin-guarded ledger of patients, doctors and their medical tests."""

__version__ = "0.1.0"
__all__ = ["contract", "records"]