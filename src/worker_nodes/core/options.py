"""Pool options and the per-worker view derived from them."""

import math
import os
from collections.abc import Mapping
from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from worker_nodes.core.coercion import (
    NAN,
    UNBOUNDED,
    Coercer,
    Number,
    is_nan,
    passthrough,
    to_bool,
    to_number,
)
from worker_nodes.core.config import POOL_DEFAULTS
from worker_nodes.core.exceptions import ConfigurationError
from worker_nodes.core.logging import get_logger

__all__ = [
    "NAN",
    "UNBOUNDED",
    "ResourceLimits",
    "WorkerNodesOptions",
    "WorkerOptions",
    "logical_cpu_count",
]

logger = get_logger(__name__)


class ResourceLimits(TypedDict, total=False):
    """Runtime resource constraints handed to each worker, in megabytes.

    Only documents the keys the worker runtime understands; the options never
    validate or copy what the caller passes.
    """

    maxYoungGenerationSizeMb: float
    maxOldGenerationSizeMb: float
    codeRangeSizeMb: float
    stackSizeMb: float


def logical_cpu_count() -> int:
    """Number of logical CPUs the host reports, or 1 if unknown."""
    return os.cpu_count() or 1


_FIELD_COERCERS: dict[str, Coercer] = {
    "auto_start": to_bool,
    "lazy_start": to_bool,
    "async_worker_initialization": to_bool,
    "min_workers": to_number,
    "max_workers": to_number,
    "max_tasks": to_number,
    "max_tasks_per_worker": to_number,
    "task_timeout": to_number,
    "task_max_retries": to_number,
    "worker_endurance": to_number,
    "worker_stop_timeout": to_number,
    "resource_limits": passthrough,
}

_NUMERIC_FIELDS = tuple(name for name, coerce in _FIELD_COERCERS.items() if coerce is to_number)


class WorkerOptions(BaseModel):
    """Options handed to a single worker when it is spawned.

    ``max_tasks`` is the worker's own concurrency cap, taken from the pool's
    ``max_tasks_per_worker``; it is unrelated to the pool-wide ``max_tasks``.
    Not hashable, since ``resource_limits`` is shared as given.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
    __hash__ = None  # type: ignore[assignment]

    src_file_path: str
    max_tasks: Number
    endurance: Number
    stop_timeout: Number
    async_worker_initialization: bool
    resource_limits: Any

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a camelCase record."""
        return self.model_dump(by_alias=True)


class WorkerNodesOptions(BaseModel):
    """Resolved policy of a worker pool.

    Accepts any subset of the options, by camelCase alias (``maxTasksPerWorker``) or
    attribute name (``max_tasks_per_worker``). Absent options take their defaults,
    present ones go through the coercion table, unknown ones are ignored. Resolution
    never fails on odd values: numbers that cannot be parsed become NaN and are left
    for the consumer to reject, see ``ensure_valid``.

    Frozen but not hashable: ``resource_limits`` is kept as given and may be a dict.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )
    __hash__ = None  # type: ignore[assignment]

    auto_start: bool = Field(
        default=POOL_DEFAULTS["auto_start"],
        description="Start workers before the first task. "
        "Starts min_workers if lazy_start is set, max_workers otherwise",
    )
    lazy_start: bool = Field(
        default=POOL_DEFAULTS["lazy_start"],
        description="Start a new worker only if all the others are busy",
    )
    async_worker_initialization: bool = Field(
        default=POOL_DEFAULTS["async_worker_initialization"],
        description="Worker reports readiness itself instead of being ready once spawned",
    )
    min_workers: Number = Field(
        default=POOL_DEFAULTS["min_workers"],
        description="Workers that must be running to consider the pool operational",
    )
    max_workers: Number = Field(
        default_factory=logical_cpu_count,
        description="Workers that can be running at the same time",
    )
    max_tasks: Number = Field(
        default=POOL_DEFAULTS["max_tasks"],
        description="Tasks that can be in flight across the pool at the same time",
    )
    max_tasks_per_worker: Number = Field(
        default=POOL_DEFAULTS["max_tasks_per_worker"],
        description="Tasks that can be given to a single worker at the same time",
    )
    task_timeout: Number = Field(
        default=POOL_DEFAULTS["task_timeout"],
        description="Milliseconds after which an unanswered task is considered lost",
    )
    task_max_retries: Number = Field(
        default=POOL_DEFAULTS["task_max_retries"],
        description="Retries performed over a task before reporting it as failed",
    )
    worker_endurance: Number = Field(
        default=POOL_DEFAULTS["worker_endurance"],
        description="Tasks a single worker can handle during its whole lifespan",
    )
    worker_stop_timeout: Number = Field(
        default=POOL_DEFAULTS["worker_stop_timeout"],
        description="Milliseconds a worker is given to stop before it is killed",
    )
    resource_limits: Any = Field(
        default_factory=dict,
        description="Resource constraints passed as-is to every worker",
    )

    @model_validator(mode="before")
    @classmethod
    def coerce_options(cls, data: Any) -> Any:
        """Apply the coercion table to the options present in the input."""
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            return data

        resolved: dict[str, Any] = {}
        for name, coerce in _FIELD_COERCERS.items():
            alias = cls.model_fields[name].alias
            for key in (alias, name):
                if key in data:
                    resolved[name] = coerce(data[key])
                    break
        return resolved

    @model_validator(mode="after")
    def report_invalid_numbers(self) -> "WorkerNodesOptions":
        for alias in self.invalid_fields():
            logger.warning(f"Option '{alias}' is not a valid number and resolved to NaN")
        return self

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> "WorkerNodesOptions":
        """Resolve options from an optional mapping."""
        return cls.model_validate(options or {})

    def has_timeout(self) -> bool:
        """Return True if the task timeout has a finite value."""
        return math.isfinite(self.task_timeout)

    def get_worker_options(self, src_file_path: str | os.PathLike[str]) -> WorkerOptions:
        """Return the options of a worker that loads ``src_file_path``."""
        return WorkerOptions(
            src_file_path=os.fspath(src_file_path),
            max_tasks=self.max_tasks_per_worker,
            endurance=self.worker_endurance,
            stop_timeout=self.worker_stop_timeout,
            async_worker_initialization=self.async_worker_initialization,
            resource_limits=self.resource_limits,
        )

    def invalid_fields(self) -> list[str]:
        """Return the aliases of numeric options that resolved to NaN."""
        fields = type(self).model_fields
        return [fields[name].alias for name in _NUMERIC_FIELDS if is_nan(getattr(self, name))]

    def ensure_valid(self) -> "WorkerNodesOptions":
        """Raise ConfigurationError if any numeric option resolved to NaN.

        Returns:
            The options themselves, for chaining.

        Raises:
            ConfigurationError: If one or more options are not valid numbers.

        """
        invalid = self.invalid_fields()
        if invalid:
            msg = f"Options are not valid numbers: {', '.join(invalid)}"
            raise ConfigurationError(msg, details={"fields": invalid})
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the resolved options as a camelCase record."""
        return self.model_dump(by_alias=True)
