"""Per-cycle readiness progress models."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from swarmwait.constants.enums import ServiceMode


class ServiceProgress(BaseModel):
    """Expected vs running task counts for one service in one cycle."""

    model_config = ConfigDict(frozen=True)

    mode: ServiceMode = ServiceMode.UNKNOWN
    replicas: str = ""
    expected: int = Field(default=0, ge=0)
    running: int = Field(default=0, ge=0)


class ProgressSummary(BaseModel):
    """Cluster-wide totals across all classified services."""

    model_config = ConfigDict(frozen=True)

    total_expected: int = Field(default=0, ge=0)
    total_running: int = Field(default=0, ge=0)

    def is_complete(self) -> bool:
        """Return True once running tasks cover the expected total.

        The test is over the sums, not per service.
        """
        return self.total_running >= self.total_expected


class CycleSnapshot(BaseModel):
    """Result of one fetch+aggregate cycle handed to the progress sink."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    progress: dict[str, ServiceProgress] = Field(default_factory=dict)
    summary: ProgressSummary = Field(default_factory=ProgressSummary)
    observed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
