"""
Exceptions raised by the kv-store package.
"""
from typing import Sequence, Tuple


class MissingConfiguration(RuntimeError):
    """Raised at startup when required store configuration is absent.

    Attributes:
        missing: Names of the environment variables that were unset or empty.
    """

    def __init__(self, missing: Sequence[str]):
        self.missing: Tuple[str, ...] = tuple(missing)
        super().__init__(
            f"Missing required configuration: {', '.join(self.missing)}"
        )
