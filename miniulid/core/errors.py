"""Error taxonomy. Every failure is raised to the immediate caller."""

from miniulid.utils.timestamp import format_timestamp


class MiniUlidError(Exception):
    """Base error with context and creation timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class TimeRangeError(MiniUlidError):
    """Time cannot be represented in the 15-bit day field."""

    def __init__(self, message, time=None, **kwargs):
        context = kwargs.pop("context", {})
        if time is not None:
            context["time"] = time.isoformat()
        super().__init__(message, context=context, **kwargs)


class PastEpochError(TimeRangeError):
    """Time precedes 2020-01-01T00:00:00Z."""


class FutureRangeError(TimeRangeError):
    """Time lies beyond the last representable day."""


class DiscriminatorOverflowError(MiniUlidError):
    """Discriminator does not fit in 14 bits."""

    def __init__(self, message, value=None, maximum=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        if maximum is not None:
            context["maximum"] = maximum
        super().__init__(message, context=context, **kwargs)


class CounterOverflowError(DiscriminatorOverflowError):
    """Monotonic counter exhausted every value within one minute."""

    def __init__(self, message, minute=None, **kwargs):
        context = kwargs.pop("context", {})
        if minute is not None:
            context["minute"] = minute.isoformat()
        super().__init__(message, context=context, **kwargs)


class DecodeError(MiniUlidError):
    """Encoded text is malformed."""


class LengthError(DecodeError):
    def __init__(self, message, length=None, **kwargs):
        context = kwargs.pop("context", {})
        if length is not None:
            context["length"] = length
        super().__init__(message, context=context, **kwargs)


class InvalidCharacterError(DecodeError):
    """Character outside the Crockford alphabet and its aliases."""

    def __init__(self, message, character=None, position=None, **kwargs):
        context = kwargs.pop("context", {})
        if character is not None:
            context["character"] = character
        if position is not None:
            context["position"] = position
        super().__init__(message, context=context, **kwargs)
        self.character = character


class ConversionError(MiniUlidError):
    """Integer outside the non-negative 40-bit domain."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)


class NegativeValueError(ConversionError):
    pass


class RangeOverflowError(ConversionError):
    pass


class EntropyError(MiniUlidError):
    """Entropy source failed or returned too few bytes."""

    def __init__(self, message, requested=None, received=None, **kwargs):
        context = kwargs.pop("context", {})
        if requested is not None:
            context["requested"] = requested
        if received is not None:
            context["received"] = received
        super().__init__(message, context=context, **kwargs)


class ConfigError(MiniUlidError):
    """Invalid configuration value."""

    def __init__(self, message, source=None, **kwargs):
        context = kwargs.pop("context", {})
        if source is not None:
            context["source"] = source
        super().__init__(message, context=context, **kwargs)
