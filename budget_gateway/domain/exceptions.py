"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidScheduleError(DomainException):
    """Due date is too stale to catch up within the iteration ceiling"""

    pass


class InvalidInstallmentCountError(DomainException):
    """Installment plan needs at least two legs"""

    pass


class InvalidInstallmentAmountError(DomainException):
    """Installment total must be a positive amount"""

    pass


class InvalidProjectionWindowError(DomainException):
    """Projection or trend window must cover at least one month"""

    pass
