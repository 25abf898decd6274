"""Error types raised by the interpolation core."""


class InterpolationConfigError(ValueError):
    """Raised when an interpolation configuration cannot produce valid results."""
