"""Error types raised while validating inputs and persisting a schedule."""


class PayrollScheduleError(Exception):
    """Base class for all payroll schedule errors."""


class InvalidYearError(PayrollScheduleError, ValueError):
    """Raised when the requested year is outside the supported window."""

    def __init__(self, year: int, lower: int, upper: int):
        self.year = year
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Provided year value is out of range: {year} "
            f"(expected {lower} < year < {upper})"
        )


class UnwritableDestinationError(PayrollScheduleError, OSError):
    """Raised when the output file's directory cannot be written to."""

    def __init__(self, path, directory):
        self.path = path
        self.directory = directory
        super().__init__(
            f"Destination file and/or folder are not writable: {path}"
        )


class EmptyScheduleError(PayrollScheduleError, RuntimeError):
    """Raised when a schedule is saved before it was generated."""

    pass
