class GitvizError(Exception):
    """Base class for every failure surfaced to a caller."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def errors(self) -> list[str]:
        return [self.message]


class ValidationError(GitvizError):
    def __init__(self, errors: list[str]) -> None:
        if not errors:
            raise ValueError("ValidationError needs at least one message")
        super().__init__("; ".join(errors))
        self.__errors = list(errors)

    @property
    def errors(self) -> list[str]:
        return list(self.__errors)


class FetchError(GitvizError):
    pass


class UpstreamError(FetchError):
    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class InternalError(GitvizError):
    pass
