from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from primitive_obsession.domain.value_objects.pack_id import PackId
from primitive_obsession.domain.value_objects.tenant_id import TenantId


@dataclass
class PackInstallation:
    id: UUID
    tenant_id: TenantId
    pack_id: PackId
    installed_at: datetime

    @classmethod
    def create(cls, tenant_id: TenantId, pack_id: PackId) -> "PackInstallation":
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            pack_id=pack_id,
            installed_at=datetime.now(UTC),
        )

    def describe(self) -> str:
        return f"Installed pack {self.pack_id} for tenant {self.tenant_id}"
