"""Swarm object models as seen by the wait loop."""

from pydantic import BaseModel, ConfigDict, Field

from swarmwait.constants.enums import NodeState, ServiceMode, TaskState


class PortConfigInfo(BaseModel):
    """One published port of a service endpoint."""

    model_config = ConfigDict(frozen=True)

    protocol: str = "tcp"
    target_port: int = 0
    published_port: int = 0
    publish_mode: str = "ingress"


class ServiceInfo(BaseModel):
    """Desired state of one swarm service."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    mode: ServiceMode = ServiceMode.UNKNOWN
    replicas: int | None = None
    max_replicas_per_node: int = 0
    image: str = ""
    ports: tuple[PortConfigInfo, ...] = Field(default_factory=tuple)


class NodeInfo(BaseModel):
    """Swarm node; only liveness matters for readiness."""

    model_config = ConfigDict(frozen=True)

    id: str
    hostname: str = ""
    state: NodeState = NodeState.UNKNOWN

    @property
    def is_active(self) -> bool:
        return self.state != NodeState.DOWN


class TaskInfo(BaseModel):
    """One scheduled instance of a service."""

    model_config = ConfigDict(frozen=True)

    id: str
    service_id: str
    node_id: str = ""
    desired_state: TaskState = TaskState.UNKNOWN
    state: TaskState = TaskState.UNKNOWN
