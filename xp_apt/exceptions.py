class AptDatError(Exception):
    """Base class for errors raised by xp_apt."""
    pass


class AptDatFormatError(AptDatError):
    """A file is not an apt.dat file: the "I" or "A" line and the version line are missing."""

    def __init__(self, message: str, file_name: str = None, line_number: int = None):
        self.file_name = file_name
        self.line_number = line_number
        if file_name is not None:
            location = file_name if line_number is None else f"{file_name}:{line_number}"
            message = f"{location}: {message}"
        super().__init__(message)


class StorageError(AptDatError):
    """A storage backend was used after it was closed."""
    pass
