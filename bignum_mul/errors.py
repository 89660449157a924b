from dataclasses import dataclass


@dataclass
class BigNumError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class InvariantError(BigNumError):
    """An internal contract was broken; the numeric result cannot be trusted."""
