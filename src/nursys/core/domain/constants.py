"""Tablas de constantes del apéndice de la API de Nursys.

Mismo patrón que `Language`: `str, Enum` para que los valores viajen tal cual
en JSON y se puedan comparar con strings planos.
"""

from __future__ import annotations

from enum import Enum


class LicenseType(str, Enum):
    """A.2 License types."""

    RN = "RN"  # Registered Nurse
    PN = "PN"  # Practical Nurse (Vocational Nurse)
    CNM = "CNM"  # Certified Nurse Midwife
    CRNA = "CRNA"  # Certified Registered Nurse Anesthetist
    CNS = "CNS"  # Clinical Nurse Specialist
    CNP = "CNP"  # Certified Nurse Practitioner

    def label(self) -> str:
        """Human readable label for tables and prompts."""

        return _LICENSE_LABELS[self]


_LICENSE_LABELS = {
    LicenseType.RN: "Registered Nurse",
    LicenseType.PN: "Practical Nurse (Vocational Nurse)",
    LicenseType.CNM: "Certified Nurse Midwife",
    LicenseType.CRNA: "Certified Registered Nurse Anesthetist",
    LicenseType.CNS: "Clinical Nurse Specialist",
    LicenseType.CNP: "Certified Nurse Practitioner",
}


class SubmissionActionCode(str, Enum):
    """A.7 Submission action codes."""

    ADD = "A"  # Alta de una enfermera nueva o actualización de una existente
    REMOVE = "R"
