from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class PackId:
    """팩 ID 값 객체 — TenantId와 같은 UUID를 감싸지만 서로 바꿔 쓸 수 없다."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"PackId는 UUID여야 합니다. 받은 타입: {type(self.value)}")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "PackId":
        return cls(uuid4())
