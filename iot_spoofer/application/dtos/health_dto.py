"""DTOs for system health responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from iot_spoofer.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


class DependencyStatusDTO(BaseModel):
    """Serializable representation of a dependency health check."""

    name: str = Field(description="Dependency identifier")
    status: ServiceStatus = Field(description="Aggregated status for the dependency")
    message: Optional[str] = Field(
        default=None, description="Human readable status note"
    )
    checked_at: datetime = Field(description="Timestamp of the last check")
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Additional information"
    )

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            details=status.details,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "mqtt",
                "status": "up",
                "message": "Connected to MQTT broker",
                "checked_at": "2024-09-09T12:00:00Z",
                "details": {"host": "core-mosquitto", "port": 1883},
            }
        }
    }


class SystemHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ServiceStatus = Field(description="Overall system status")
    dependencies: List[DependencyStatusDTO] = Field(
        default_factory=list, description="Detailed dependency information"
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "degraded",
                "dependencies": [
                    {
                        "name": "mqtt",
                        "status": "degraded",
                        "message": "MQTT broker not connected; reconnecting in background",
                        "checked_at": "2024-09-09T12:00:00Z",
                        "details": {"host": "core-mosquitto", "port": 1883},
                    },
                    {
                        "name": "device_store",
                        "status": "up",
                        "message": "Device store readable",
                        "checked_at": "2024-09-09T12:00:00Z",
                        "details": {"path": "/data/devices.json", "device_count": 2},
                    },
                ],
            }
        }
    }
