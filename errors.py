class FaysalError(Exception):
    pass


class ParseError(FaysalError):
    def __init__(self, message: str, token=None):
        super().__init__(message)
        self.message = message
        self.token = token

    def __str__(self) -> str:
        if self.token is None:
            return self.message
        return f"{self.message} at line {self.token.line}, col {self.token.column}"


class StepLimitError(FaysalError):
    def __init__(self, max_steps: int):
        super().__init__(f"Step limit exceeded ({max_steps} steps, possible infinite loop)")
        self.max_steps = max_steps
