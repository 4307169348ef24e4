class FPGrowthError(ValueError):
    """Base class for errors raised by the miner."""


class InvalidTransactionError(FPGrowthError):
    pass


class InvalidSupportError(FPGrowthError):
    pass


class TransactionFormatError(FPGrowthError):
    """The table a transaction set was loaded from is not usable."""
