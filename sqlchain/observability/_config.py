"""Configuration objects for render observability."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlchain.exceptions import ImproperConfigurationError

if TYPE_CHECKING:
    from sqlchain.observability._observer import RenderObserver

__all__ = ("ObservabilityConfig",)

DEFAULT_SQL_TRUNCATION_LENGTH = 2000


@dataclass(slots=True)
class ObservabilityConfig:
    """Controls what happens after a builder renders a statement.

    Attributes:
        print_sql: Log each rendered statement through the default observer.
        statement_observers: Callables receiving a ``RenderEvent`` per render.
        sql_truncation_length: Longest SQL text placed in log output by ``print_sql``.
    """

    print_sql: bool | None = None
    statement_observers: "tuple[RenderObserver, ...] | None" = None
    sql_truncation_length: int = DEFAULT_SQL_TRUNCATION_LENGTH

    def __post_init__(self) -> None:
        if self.statement_observers is not None:
            self.statement_observers = tuple(self.statement_observers)
        if self.sql_truncation_length <= 0:
            msg = f"sql_truncation_length must be positive, got {self.sql_truncation_length}"
            raise ImproperConfigurationError(msg)

    def copy(self) -> "ObservabilityConfig":
        """Return a copy to avoid sharing mutable state."""

        observers = tuple(self.statement_observers) if self.statement_observers else None
        return ObservabilityConfig(
            print_sql=self.print_sql, statement_observers=observers, sql_truncation_length=self.sql_truncation_length
        )

    @property
    def enabled(self) -> bool:
        return bool(self.print_sql or self.statement_observers)

    @classmethod
    def merge(
        cls, base_config: "ObservabilityConfig | None", override_config: "ObservabilityConfig | None"
    ) -> "ObservabilityConfig":
        """Merge an application-wide configuration with a per-builder override."""

        if base_config is None and override_config is None:
            return cls()

        base = base_config.copy() if base_config else cls()
        override = override_config
        if override is None:
            return base

        observers: "tuple[RenderObserver, ...] | None"
        if base.statement_observers and override.statement_observers:
            observers = base.statement_observers + tuple(override.statement_observers)
        elif override.statement_observers:
            observers = tuple(override.statement_observers)
        else:
            observers = base.statement_observers

        print_sql = base.print_sql
        if override.print_sql is not None:
            print_sql = override.print_sql

        truncation = base.sql_truncation_length
        if override.sql_truncation_length != DEFAULT_SQL_TRUNCATION_LENGTH:
            truncation = override.sql_truncation_length

        return ObservabilityConfig(print_sql=print_sql, statement_observers=observers, sql_truncation_length=truncation)
