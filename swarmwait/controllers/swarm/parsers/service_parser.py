"""Service parser for swarm controller - parses service data into structured formats."""

from __future__ import annotations

from contextlib import suppress
from typing import Any

from swarmwait.constants.enums import ServiceMode
from swarmwait.models.core.swarm_info import PortConfigInfo, ServiceInfo


class ServiceParser:
    """Parses ``docker service inspect`` objects into ServiceInfo."""

    def __init__(self) -> None:
        """Initialize service parser."""
        pass

    @staticmethod
    def _parse_int(value: Any) -> int | None:
        """Coerce a JSON number to int, returning None when absent or invalid."""
        if value is None or isinstance(value, bool):
            return None
        with suppress(ValueError, TypeError):
            return int(value)
        return None

    def _parse_mode(self, mode: dict[str, Any]) -> tuple[ServiceMode, int | None]:
        """Classify the service mode and extract the replica count.

        ``Global`` is serialized as an empty object, so key presence is what
        matters. Replicated services without a replica count and job modes
        stay unclassified.
        """
        replicated = mode.get("Replicated")
        if isinstance(replicated, dict):
            replicas = self._parse_int(replicated.get("Replicas"))
            if replicas is not None:
                return ServiceMode.REPLICATED, replicas
            return ServiceMode.UNKNOWN, None
        if "Global" in mode and mode["Global"] is not None:
            return ServiceMode.GLOBAL, None
        return ServiceMode.UNKNOWN, None

    @staticmethod
    def _strip_digest(image: str) -> str:
        """Drop the ``@sha256:...`` pin the manager adds to image references."""
        return image.split("@", 1)[0]

    def _parse_ports(self, endpoint: dict[str, Any]) -> tuple[PortConfigInfo, ...]:
        ports: list[PortConfigInfo] = []
        for port in endpoint.get("Ports") or []:
            if not isinstance(port, dict):
                continue
            ports.append(
                PortConfigInfo(
                    protocol=port.get("Protocol") or "tcp",
                    target_port=self._parse_int(port.get("TargetPort")) or 0,
                    published_port=self._parse_int(port.get("PublishedPort")) or 0,
                    publish_mode=port.get("PublishMode") or "ingress",
                )
            )
        return tuple(ports)

    def parse_service(self, service: dict[str, Any]) -> ServiceInfo:
        """Parse a single service into ServiceInfo.

        Args:
            service: Raw service dictionary from ``docker service inspect``

        Returns:
            ServiceInfo object.
        """
        spec = service.get("Spec") or {}
        task_template = spec.get("TaskTemplate") or {}
        placement = task_template.get("Placement") or {}
        container_spec = task_template.get("ContainerSpec") or {}

        mode, replicas = self._parse_mode(spec.get("Mode") or {})
        max_replicas = self._parse_int(placement.get("MaxReplicas")) or 0

        return ServiceInfo(
            id=service.get("ID", ""),
            name=spec.get("Name", ""),
            mode=mode,
            replicas=replicas,
            max_replicas_per_node=max(0, max_replicas),
            image=self._strip_digest(container_spec.get("Image", "")),
            ports=self._parse_ports(service.get("Endpoint") or {}),
        )

    def parse_services(self, services: list[dict[str, Any]]) -> list[ServiceInfo]:
        """Parse a list of raw services, skipping entries without an ID."""
        return [
            self.parse_service(service)
            for service in services
            if isinstance(service, dict) and service.get("ID")
        ]
