from __future__ import annotations

from enum import Enum


class Env(str, Enum):
    dev = "dev"
    prod = "prod"
    test = "test"


class ObligationStatus(str, Enum):
    """Well-known obligation statuses. Stored status is free text."""

    pending = "Pending"
    in_progress = "In Progress"
    completed = "Completed"
    overdue = "Overdue"
    waived = "Waived"
