"""Exception hierarchy for the order pipeline."""


class OrderFlowError(Exception):
    """Base class for all errors raised by orderflow components."""


class PersistenceError(OrderFlowError):
    """The order store rejected or failed an update."""


class ClassificationError(OrderFlowError):
    """The remote classification call could not be completed."""


class SinkError(OrderFlowError):
    """An export destination could not be prepared or opened."""
