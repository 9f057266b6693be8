class ParseError(ValueError):
    """Raised when a string is not a recognized hosted git locator."""

    def __init__(self, message: str, value: str):
        super().__init__(message)
        self.value = value


class UnknownProtocol(ParseError):
    def __init__(self, token: str):
        super().__init__(f"Unknown protocol: {token!r}", token)


class UnknownHost(ParseError):
    def __init__(self, host: str):
        super().__init__(f"Unknown host: {host!r}", host)


class UnparseableUrl(ParseError):
    def __init__(self, url: str, reason: str = ""):
        message = f"Unparseable url: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, url)
        self.reason = reason
