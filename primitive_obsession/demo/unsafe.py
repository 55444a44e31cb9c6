import logging
from uuid import UUID

logger = logging.getLogger(__name__)


def install_pack(tenant_id: UUID, pack_id: UUID) -> str:
    # Both parameters are plain UUIDs, so nothing stops a caller from swapping them.
    logger.debug("unsafe install_pack(tenant_id=%s, pack_id=%s)", tenant_id, pack_id)
    return f"Installed pack {pack_id} for tenant {tenant_id}"
