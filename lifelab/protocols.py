"""Port interfaces (Protocols) for the analytics engine's collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lifelab.models.experiment import ExperimentRecord, ExperimentStatus


@runtime_checkable
class SnapshotProvider(Protocol):
    """Anything that can hand back the current records synchronously."""

    def snapshot(self) -> list[ExperimentRecord]: ...


@runtime_checkable
class RecordStore(SnapshotProvider, Protocol):
    """Interface for experiment record persistence."""

    def init_schema(self) -> None: ...
    def close(self) -> None: ...
    def save_record(self, record: ExperimentRecord) -> ExperimentRecord: ...
    def get_record(self, record_id: str) -> ExperimentRecord | None: ...
    def list_records(self, status: ExperimentStatus | None = None) -> list[ExperimentRecord]: ...
    def delete_record(self, record_id: str) -> bool: ...
