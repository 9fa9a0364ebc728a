from .tokens import Token


class LexerError(Exception):
    """Base class for errors raised while reading tokens"""


class UnexpectedToken(LexerError):
    """The current token is not the one a parser expected"""

    def __init__(
        self, token: Token, expected_group: str, expected_value: str | None = None
    ):
        self.token = token
        self.expected_group = expected_group
        self.expected_value = expected_value
        super().__init__(self._format())

    @property
    def received_group(self) -> str:
        return self.token.group

    @property
    def received_value(self) -> str:
        return self.token.value

    @property
    def received_index(self) -> int:
        return self.token.index

    def _format(self) -> str:
        expected = self.expected_group
        if self.expected_value is not None:
            expected += f' "{self.expected_value}"'

        return "\n".join(
            [
                f"Unexpected token: {self.token.value}",
                f"        expected: {expected}",
                f'    but received: {self.token.group} "{self.token.value}"',
                f"     at position: {self.token.index}",
            ]
        )
