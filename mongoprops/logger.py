"""Logger capability accepted by the resolvers."""

from typing import Protocol


class OptionLogger(Protocol):
    """Anything with ``info`` and ``warning``; ``logging.Logger`` qualifies."""

    def info(self, msg: str) -> None: ...

    def warning(self, msg: str) -> None: ...


class _NullLogger:
    def info(self, msg: str) -> None:
        pass

    def warning(self, msg: str) -> None:
        pass


NULL_LOGGER: OptionLogger = _NullLogger()


def ensure_logger(logger: OptionLogger | None) -> OptionLogger:
    """Return ``logger``, or a no-op logger when none was supplied."""
    return NULL_LOGGER if logger is None else logger
