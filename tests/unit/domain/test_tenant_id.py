import uuid
from dataclasses import FrozenInstanceError

import pytest

from primitive_obsession.domain.value_objects.pack_id import PackId
from primitive_obsession.domain.value_objects.tenant_id import TenantId


def test_tenant_id_wraps_uuid_for_display():
    """테스트: TenantId는 UUID를 감싸고 출력 시 UUID 문자열만 보인다"""
    # Given: 데모에 쓰는 테넌트 UUID
    raw = uuid.uuid4()

    # When: TenantId로 감싸면
    tenant_id = TenantId(raw)

    # Then: 값은 그대로이고 출력은 UUID와 같다
    assert tenant_id.value == raw
    assert str(tenant_id) == str(raw)


def test_tenant_id_cannot_be_reassigned():
    """테스트: 설치 도중 테넌트가 바뀌지 않도록 값은 고정된다"""
    tenant_id = TenantId.generate()

    with pytest.raises(FrozenInstanceError):
        tenant_id.value = uuid.uuid4()  # type: ignore


def test_tenant_id_rejects_raw_string():
    """테스트: 문자열 식별자는 암묵적으로 TenantId가 되지 않는다"""
    with pytest.raises(TypeError, match="TenantId는 UUID여야 합니다"):
        TenantId(str(uuid.uuid4()))  # type: ignore[arg-type]


def test_tenant_id_rejects_pack_id():
    """테스트: PackId를 TenantId 자리에 넣으면 실행 시에도 거부된다"""
    with pytest.raises(TypeError, match="TenantId는 UUID여야 합니다"):
        TenantId(PackId.generate())  # type: ignore[arg-type]


def test_tenant_id_equality_is_value_based():
    raw = uuid.uuid4()

    assert TenantId(raw) == TenantId(raw)
    assert hash(TenantId(raw)) == hash(TenantId(raw))
    assert TenantId(raw) != TenantId(uuid.uuid4())


def test_tenant_id_differs_from_pack_id_with_same_uuid():
    """테스트: 같은 UUID라도 역할이 다르면 같은 값이 아니다"""
    raw = uuid.uuid4()
    assert TenantId(raw) != PackId(raw)


def test_tenant_id_generate_creates_unique_ids():
    assert TenantId.generate() != TenantId.generate()
