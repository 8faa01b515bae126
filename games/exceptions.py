class GameCalculationError(Exception):
    """Base for all calculation errors."""


class InvalidInputError(GameCalculationError):
    """Malformed holes, players, scores or options. Nothing is computed."""


class SettlementLimitError(GameCalculationError):
    """A planned transfer or round total exceeds the configured maximum."""
