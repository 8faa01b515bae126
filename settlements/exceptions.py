class SettlementError(Exception):
    """Base for all settlement errors."""


class NotFoundError(SettlementError):
    """No settlement with that id."""


class AuthorizationError(SettlementError):
    """The acting user is not the party allowed to make this transition."""


class StateGuardError(SettlementError):
    """The settlement is not in the status this transition starts from."""


class InvalidSettlementError(SettlementError):
    """Bad amount or parties on creation."""


class DuplicateSettlementError(SettlementError):
    """Settlements already exist for the round."""
