from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class TenantId:
    """테넌트 식별자 — 설치 대상 테넌트를 가리키며 PackId 자리에 쓸 수 없다."""

    value: UUID

    def __post_init__(self) -> None:
        """문자열이나 다른 래퍼가 암묵적으로 TenantId가 되는 것을 막는다."""
        if not isinstance(self.value, UUID):
            raise TypeError(f"TenantId는 UUID여야 합니다. 받은 타입: {type(self.value)}")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "TenantId":
        return cls(uuid4())
