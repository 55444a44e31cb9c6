"""Console walkthrough of primitive obsession and its value-object fix."""

import logging
from collections.abc import Callable
from uuid import UUID

import click

from primitive_obsession.config import DemoSettings
from primitive_obsession.demo import safe, unsafe
from primitive_obsession.demo.type_inspection import describe_type
from primitive_obsession.domain.value_objects.pack_id import PackId
from primitive_obsession.domain.value_objects.tenant_id import TenantId

logger = logging.getLogger(__name__)


def _section(echo: Callable[[str], None], title: str) -> None:
    echo("")
    echo(f"== {title} ==")


def show_unsafe(echo: Callable[[str], None], tenant_uuid: UUID, pack_uuid: UUID) -> None:
    _section(echo, "1. Primitive obsession: install_pack(tenant_id: UUID, pack_id: UUID)")
    echo(f"tenant = {tenant_uuid}")
    echo(f"pack   = {pack_uuid}")

    echo(f"correct order -> {unsafe.install_pack(tenant_uuid, pack_uuid)}")
    # Swapped on purpose: both arguments are UUIDs, so this runs without complaint.
    echo(f"swapped order -> {unsafe.install_pack(pack_uuid, tenant_uuid)}")
    echo("Both calls ran. The second one installed the tenant as a pack, silently.")


def show_safe(echo: Callable[[str], None], tenant_id: TenantId, pack_id: PackId) -> None:
    _section(echo, "2. Value objects: install_pack(tenant_id: TenantId, pack_id: PackId)")
    installation = safe.install_pack(tenant_id, pack_id)
    echo(f"correct order -> {installation.describe()}")
    echo(f"swapped order -> {safe.SWAPPED_CALL} is rejected by the type checker:")
    for error in safe.SWAPPED_CALL_ERRORS:
        echo(f"  error: {error}  [arg-type]")
    echo("The mistake is caught before the program runs.")


def show_types(echo: Callable[[str], None]) -> None:
    _section(echo, "3. What the type checker sees")
    for tp in (UUID, str, TenantId, PackId):
        echo(describe_type(tp))


def run(echo: Callable[[str], None] = click.echo, settings: DemoSettings | None = None) -> None:
    settings = settings or DemoSettings()
    logger.debug("starting demo tenant=%s pack=%s", settings.tenant_uuid, settings.pack_uuid)

    show_unsafe(echo, settings.tenant_uuid, settings.pack_uuid)
    show_safe(echo, TenantId(settings.tenant_uuid), PackId(settings.pack_uuid))
    show_types(echo)

    logger.debug("demo finished")
