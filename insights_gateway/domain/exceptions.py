"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class TransactionSourceError(DomainException):
    """Transaction store returned an error or is unavailable"""

    pass


class InvalidTransactionDataError(DomainException):
    """Transaction data is malformed or invalid"""

    pass


class InsufficientDataError(DomainException):
    """No transaction history to analyze"""

    pass


class TaxonomyConfigError(DomainException):
    """Category taxonomy file is missing or malformed"""

    pass
