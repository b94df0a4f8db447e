"""A server whose computation fails in several ways, and a username check."""

from __future__ import annotations

_MAX_ELEMENTS = 2**61 - 1
MEMORY_LIMIT = 2**31


class BadLengthException(Exception):
    """Raised when a username is shorter than five characters."""

    def __init__(self, length: int) -> None:
        super().__init__(length)
        self.length = length


class Server:
    """Counts every computation it is asked for, successful or not."""

    def __init__(self) -> None:
        self.load = 0

    def compute(self, a: int, b: int) -> int:
        """Compute a - a/b (truncated), failing for negative a, huge a, zero b or b >= a."""
        self.load += 1
        if a < 0:
            raise ValueError("A is negative")
        if a > _MAX_ELEMENTS:
            raise ValueError("cannot create vector larger than max_size()")
        if a > MEMORY_LIMIT:
            raise MemoryError("not enough memory")
        if b == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        if not 0 <= b < a:
            raise IndexError(f"index {b} out of range for size {a}")
        return a - quotient


def run_compute(server: Server, a: int, b: int) -> str:
    """Run a computation and describe its result or failure as one line."""
    try:
        return str(server.compute(a, b))
    except MemoryError:
        return "Not enough memory"
    except (ValueError, IndexError) as error:
        return f"Exception: {error}"
    except Exception:
        return "Other Exception"


def check_username(username: str) -> bool:
    """Tell whether a username avoids "ww"; raise BadLengthException if too short."""
    if len(username) < 5:
        raise BadLengthException(len(username))
    return "ww" not in username


def username_report(username: str) -> str:
    """Return "Valid", "Invalid" or "Too short: n" for a username."""
    try:
        return "Valid" if check_username(username) else "Invalid"
    except BadLengthException as error:
        return f"Too short: {error.length}"