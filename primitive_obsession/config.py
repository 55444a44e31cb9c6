import logging
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class DemoSettings:
    """데모 실행 설정. 출력이 매번 같도록 샘플 식별자는 고정값을 쓴다."""

    tenant_uuid: UUID = UUID("0b7e7f5a-3c1d-4a9e-8f21-6d2c4b9a1e01")
    pack_uuid: UUID = UUID("9f4c2d18-7a6b-4e3f-b5d0-1c8e2a7f6b02")
    log_level: int = logging.WARNING
