"""Exception types raised by the analysis engine."""


class MixedInsightsError(ValueError):
    """Base class for all errors raised by mixed_insights."""


class InvalidInputError(MixedInsightsError):
    """A column or document profile is malformed.

    Fatal to the current call. Callers should reject the request upstream
    rather than retry, since the computation is deterministic.
    """


class ConfigurationError(MixedInsightsError):
    """An analysis policy value is out of range."""
