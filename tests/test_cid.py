import pytest

from fvmstate.cid import (
    BLAKE2B_256,
    CID_BUILDER,
    DAG_CBOR,
    IDENTITY,
    RAW,
    Cid,
    CidBuilder,
)


def test_default_builder_uses_dag_cbor_and_blake2b():
    cid = CID_BUILDER.sum(b"hello")
    assert cid.codec == DAG_CBOR
    assert cid.hash_code == BLAKE2B_256
    assert len(cid.digest) == 32


def test_wire_prefix():
    cid = CID_BUILDER.sum(b"hello")
    assert bytes(cid).startswith(b"\x01\x71\xa0\xe4\x02\x20")


def test_string_prefix():
    assert str(CID_BUILDER.sum(b"hello")).startswith("bafy2bzace")


def test_string_round_trip():
    cid = CID_BUILDER.sum(b"some block")
    assert Cid.parse(str(cid)) == cid


def test_bytes_round_trip():
    cid = CID_BUILDER.with_codec(RAW).sum(b"raw data")
    assert Cid.from_bytes(bytes(cid)) == cid


def test_with_codec_only_changes_codec():
    a = CID_BUILDER.sum(b"x")
    b = CID_BUILDER.with_codec(RAW).sum(b"x")
    assert b.codec == RAW
    assert a.digest == b.digest
    assert CID_BUILDER.codec == DAG_CBOR


def test_distinct_data_distinct_cids():
    assert CID_BUILDER.sum(b"a") != CID_BUILDER.sum(b"b")
    assert CID_BUILDER.sum(b"a") == CID_BUILDER.sum(b"a")


def test_inline_limit_uses_identity():
    builder = CidBuilder(inline_limit=10)
    small = builder.sum(b"abc")
    assert small.hash_code == IDENTITY
    assert small.digest == b"abc"
    large = builder.sum(b"a" * 11)
    assert large.hash_code == BLAKE2B_256


def test_parse_rejects_other_multibase():
    with pytest.raises(ValueError):
        Cid.parse("zabc")


def test_from_bytes_rejects_trailing_data():
    data = bytes(CID_BUILDER.sum(b"x")) + b"\x00"
    with pytest.raises(ValueError):
        Cid.from_bytes(data)


def test_unsupported_hash_function():
    with pytest.raises(ValueError, match="unsupported hash"):
        CidBuilder(hash_function=0x12).sum(b"x")