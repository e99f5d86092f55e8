"""Exception types raised by the billing domain."""


class MissingItemError(LookupError):
    """A bill line was queried before an item was set on it."""


class ValidationError(ValueError):
    """An entry failed the opt-in strict validation."""


class BillFileError(ValueError):
    """A bill description file is malformed."""
