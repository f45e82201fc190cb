from decimal import Decimal


class LedgerError(Exception):
    """Base class for ledger engine failures."""
    pass


class EntryNotFound(LedgerError):
    """Raised when a referenced ledger entry does not exist."""

    def __init__(self, reference):
        self.reference = reference
        super().__init__(f"Ledger entry not found: {reference}")


class ARAPNotEnabled(LedgerError):
    """Raised when a payment targets an entry that is not tracked as AR/AP."""

    def __init__(self, reference):
        self.reference = reference
        super().__init__(
            f"Ledger entry {reference} is not tracked as a receivable/payable; "
            "enable AR/AP tracking on the entry before posting payments to it"
        )


class ConcurrentUpdateError(LedgerError):
    """Raised when the optimistic AR/AP update keeps losing to other writers."""

    def __init__(self, reference, attempts):
        self.reference = reference
        self.attempts = attempts
        super().__init__(
            f"Ledger entry {reference} changed concurrently "
            f"{attempts} times in a row; payment was not applied"
        )


class DataIntegrityViolation(LedgerError):
    """
    Raised when a computed quantity ends up negative where that is impossible
    (e.g. reversing a payment that was already reversed).
    Never clamp these values to zero: the negative number is the symptom.
    """

    def __init__(self, message, *, operation, actual_value,
                 expected_value=Decimal("0.00"), entity_id=None,
                 entity_type=None):
        self.operation = operation
        self.actual_value = actual_value
        self.expected_value = expected_value
        self.entity_id = entity_id
        self.entity_type = entity_type
        super().__init__(message)

    def detailed(self):
        entity = ""
        if self.entity_id is not None:
            entity = f" [{self.entity_type or 'entity'}: {self.entity_id}]"
        return (
            f"{self.__class__.__name__}: {self}{entity} | "
            f"operation: {self.operation}, expected: >= {self.expected_value}, "
            f"actual: {self.actual_value}"
        )


def assert_non_negative(value, *, operation, entity_id=None, entity_type=None):
    """Return `value` unchanged, or raise DataIntegrityViolation if < 0."""
    if value < 0:
        target = ""
        if entity_id is not None:
            target = f" for {entity_type or 'entity'} {entity_id}"
        raise DataIntegrityViolation(
            f"{operation} resulted in negative value ({value}){target}",
            operation=operation,
            actual_value=value,
            entity_id=entity_id,
            entity_type=entity_type,
        )
    return value
