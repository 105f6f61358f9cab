import pytest

from fvmstate.address import (
    BURNT_FUNDS_ACTOR_ADDR,
    FIRST_NON_SINGLETON_ACTOR_ID,
    SYSTEM_ACTOR_ADDR,
    UNDEF,
    VERIFIED_REGISTRY_ACTOR_ADDR,
    Address,
    Protocol,
    new_actor_address,
    new_id_address,
)


def test_id_address_bytes():
    assert bytes(new_id_address(101)) == b"\x00\x65"
    assert bytes(new_id_address(102)) == b"\x00\x66"


def test_id_address_string():
    assert str(new_id_address(101)) == "f0101"


def test_actor_address_bytes():
    expected = b"\x02\x58\xbe\x4f\xd7\x75\xa0\xc8\xcd\x9a\xed\x86\x4e\x73\xab\xb1\x86\x46\x5f\xef\xe1"
    assert bytes(new_actor_address(b"actor1")) == expected


def test_actor_address_string_prefix():
    text = str(new_actor_address(b"actor1"))
    assert text.startswith("f2")
    assert text == text.lower()


@pytest.mark.parametrize(
    "address",
    [new_id_address(0), new_id_address(2**63 - 1), new_actor_address(b"222")],
)
def test_bytes_round_trip(address):
    assert Address.from_bytes(bytes(address)) == address


def test_id_property():
    assert new_id_address(12345).id == 12345
    with pytest.raises(ValueError):
        new_actor_address(b"x").id


def test_id_out_of_range():
    with pytest.raises(ValueError):
        new_id_address(-1)
    with pytest.raises(ValueError):
        new_id_address(2**63)


def test_invalid_payload_length():
    with pytest.raises(ValueError):
        Address(Protocol.ACTOR, b"\x00" * 3)
    with pytest.raises(ValueError):
        Address.from_bytes(b"\x03" + b"\x00" * 20)


def test_unknown_protocol_bytes():
    with pytest.raises(ValueError, match="protocol"):
        Address.from_bytes(b"\x09\x00")


def test_undefined_address():
    assert bytes(UNDEF) == b""
    assert Address.from_bytes(b"") == UNDEF


def test_singletons():
    assert SYSTEM_ACTOR_ADDR == new_id_address(0)
    assert bytes(SYSTEM_ACTOR_ADDR) == b"\x00\x00"
    assert VERIFIED_REGISTRY_ACTOR_ADDR == new_id_address(6)
    assert bytes(BURNT_FUNDS_ACTOR_ADDR) == b"\x00\x63"
    assert str(BURNT_FUNDS_ACTOR_ADDR) == "f099"
    assert new_id_address(FIRST_NON_SINGLETON_ACTOR_ID).id == 100