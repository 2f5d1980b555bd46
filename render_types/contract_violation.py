"""Fatal error raised for declaration graphs that break the converter's contract."""


class ContractViolationError(TypeError):
    """The upstream declaration graph is malformed.

    Raised for inputs that cannot be papered over, such as a signature
    parameter without a type. Unsupported but valid shapes never raise; they
    become the unknown render type instead.
    """

    def __init__(self, message: str, *, declaration: str | None = None) -> None:
        """Store the message and, when known, the offending declaration name."""
        super().__init__(message)
        self.declaration = declaration
