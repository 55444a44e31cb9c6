import logging

from primitive_obsession.domain.entities.pack_installation import PackInstallation
from primitive_obsession.domain.value_objects.pack_id import PackId
from primitive_obsession.domain.value_objects.tenant_id import TenantId

logger = logging.getLogger(__name__)

SWAPPED_CALL = "install_pack(pack_id, tenant_id)"
SWAPPED_CALL_ERRORS = (
    'Argument 1 to "install_pack" has incompatible type "PackId"; expected "TenantId"',
    'Argument 2 to "install_pack" has incompatible type "TenantId"; expected "PackId"',
)


def install_pack(tenant_id: TenantId, pack_id: PackId) -> PackInstallation:
    logger.debug("safe install_pack(tenant_id=%s, pack_id=%s)", tenant_id, pack_id)
    return PackInstallation.create(tenant_id=tenant_id, pack_id=pack_id)
