class PathError(Exception):
    pass


class InvalidArgument(PathError, ValueError):
    pass


class OSFailure(PathError, OSError):
    def __init__(self, message: str, path: str | None = None):
        self.path = path

        if path is not None:
            message = f"{message}: {path}"

        super().__init__(message)

    @classmethod
    def from_error(cls, error: OSError, path: str | None = None) -> "OSFailure":
        return cls(error.strerror or str(error), path)
