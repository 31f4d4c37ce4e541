"""Core error types shared across the date and label layers.

Data problems (unsupported inputs, NaN amounts, out-of-range results) never
raise; they propagate the invalid-date sentinel instead. The exceptions here
cover caller mistakes only.

Python 3.13+.
"""

__all__ = ["ArgumentCountError"]


class ArgumentCountError(TypeError):
    """Raised when a function receives fewer arguments than it requires.

    Subclasses TypeError so callers catching the interpreter's own
    missing-argument errors keep working.

    Attributes:
        required: Number of arguments the function requires
        present: Number of arguments actually supplied
    """

    def __init__(self, required: int, present: int) -> None:
        """Initialize ArgumentCountError.

        Args:
            required: Number of arguments the function requires
            present: Number of arguments actually supplied
        """
        noun = "argument" if required == 1 else "arguments"
        super().__init__(f"{required} {noun} required, but only {present} present")
        self.required = required
        self.present = present
