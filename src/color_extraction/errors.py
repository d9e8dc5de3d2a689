"""Exceptions raised by the quantizer.

:created: 2026-10-12
"""


class InvalidArgumentError(ValueError):
    """Exception raised when a pixel buffer or color count cannot be quantized.

    Raised before any histogram work is done. Retrying with the same arguments will
    fail the same way.
    """


class UncuttableBoxError(Exception):
    """Exception raised when a box with more than one sample cannot be split."""

    def __init__(self, message: str = "VBox can't be cut.") -> None:
        self.message = message
        super().__init__(self.message)
