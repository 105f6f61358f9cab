# fvmstate

This package provides shared state types for the Filecoin virtual machine's built-in actors. It is pure Python and uses only the standard library.

## Modules

- `fvmstate.bigint` handles arbitrary-precision amounts, which are held as plain Python `int`s.
  - Encoding: `to_bytes` and `from_bytes` use a sign prefix (`0x00` for positive, `0x01` for negative) followed by the big-endian magnitude. Zero encodes as an empty byte string.
  - CBOR and JSON: `marshal_cbor` and `unmarshal_cbor` produce a CBOR byte string of at most 128 bytes. `to_json` and `from_json` produce a decimal JSON string.
  - Arithmetic helpers:
    - `product`, `sum_of` and `subtract`.
    - `div` and `mod`, which use Euclidean division.
    - `exp`, which returns 1 when the exponent is ≤ 0.
    - `lsh`, `rsh` and `bit_len`.
    - `maximum`, `minimum` and `cmp`.
- `fvmstate.cborutil` provides `MajorType`, `encode_header` and `read_header`. The reader rejects non-canonical headers. It also has `encode_uvarint` and `decode_uvarint`.
- `fvmstate.address` covers addresses.
  - `Address` has a protocol and a payload, and `Protocol` lists the protocols. `bytes(address)` gives the byte form, `Address.from_bytes` parses it, and `str(address)` gives the `f…` string form.
  - `new_id_address` and `new_actor_address` build addresses.
  - The module defines the singleton actor addresses, such as `SYSTEM_ACTOR_ADDR` and `STORAGE_MARKET_ACTOR_ADDR`.
- `fvmstate.cid` covers version-1 `Cid`s.
  - A `Cid` has a binary form and a base32 string form; `Cid.parse` reads the string form.
  - `CidBuilder` builds CIDs. The default `CID_BUILDER` uses DAG-CBOR with Blake2b-256.
- `fvmstate.abi` defines the identifier types and the mapping keys:
  - `addr_key`
  - `cid_key`
  - `int_key` and `parse_int_key` (zig-zag varint)
  - `uint_key` and `parse_uint_key` (varint)
  - `new_token_amount`
- `fvmstate.piece` has `UnpaddedPieceSize`, `PaddedPieceSize` and `PieceInfo`.
- `fvmstate.sector` covers sectors and proofs.
  - `SectorSize` and `SectorSize.short_string`.
  - `SectorID`.
  - The enumerations `RegisteredSealProof`, `RegisteredPoStProof`, `RegisteredUpdateProof` and `RegisteredAggregationProof`, with the metadata tables `SEAL_PROOF_INFOS` and `POST_PROOF_INFOS`.
- `fvmstate.proof_policy` holds the window PoSt partition sizes, the maximum sector lifetimes and `consensus_miner_min_power`.
- `fvmstate.network` holds the epoch and token constants, `BigFrac` and `QuantSpec`.
- `fvmstate.methods` gives the method numbers of each built-in actor as `IntEnum`s, for example `MinerMethod` and `MarketMethod`.
- `fvmstate.actors` has `AccountState`, `CronEntry`, `CronState`, `construct_cron_state` and `built_in_cron_entries`.
- `fvmstate.deal` covers deals.
  - `DealLabel` holds either a string or bytes. It has CBOR and JSON forms, and `marshal_label_cbor` encodes it.
  - `DealProposal` computes its duration, fees and balance requirements, and has a JSON form.
  - `DealState`.
  - The market method parameter and return types.
- `fvmstate.market_policy` provides the deal duration, price and collateral bounds, and `deal_weight`.
- `fvmstate.market_state` provides `validate_deal_can_activate` and `validate_deals_for_activation`. The latter returns the deal weight, the verified deal weight and the total deal space.

## Install

```
pip install fvmstate
```

To run the tests, install the `test` extra (`pip install "fvmstate[test]"`) and run `pytest`.

## Examples

```python
from fvmstate import bigint
from fvmstate.piece import UnpaddedPieceSize
from fvmstate.sector import SectorSize, RegisteredSealProof
from fvmstate.deal import DealLabel

n = bigint.from_string("12345678901234567890")
assert bigint.unmarshal_cbor(bigint.marshal_cbor(n)) == n

size = UnpaddedPieceSize(1016)
size.validate()                 # raises ValueError when the size is invalid
assert size.padded() == 1024

assert SectorSize(1 << 30).short_string() == "1GiB"
post_proof = RegisteredSealProof(8).registered_window_post_proof()

label = DealLabel.from_string("my label")
assert DealLabel.unmarshal_cbor(label.marshal_cbor()).to_string() == "my label"
```

## Errors

- Malformed input, out-of-range values and unsupported proof types raise `ValueError`.
- Truncated CBOR input raises `EOFError`.
- A deal that fails validation for activation raises a subclass of `fvmstate.market_state.DealValidationError`. The subclasses are `IllegalArgumentError`, `NotFoundError` and `ForbiddenError`.

## What it does not do

- There is no content-addressed block store, HAMT or AMT. Deal validation therefore takes the proposals as an ordinary mapping from deal ID to `DealProposal`.
- Deal proposals have no CBOR encoding, and so no proposal CID.
- Only `bigint`, `cborutil` and `DealLabel` have CBOR encoders.