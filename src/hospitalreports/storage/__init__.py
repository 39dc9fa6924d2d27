"""Storage layer for the external hospital store."""

from hospitalreports.storage.hospital_db import HospitalDatabase

__all__ = ["HospitalDatabase"]
