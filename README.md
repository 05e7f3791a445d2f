# icukit

Bookkeeping building blocks for managing a tree of canisters: principals,
cycle amounts, canister types, in-memory registries, a canister pool, a
cycle-balance tracker and delegation sessions.

## Installation

```
pip install icukit
```

## Cycles

```python
from icukit.cycles import Cycles, TC

Cycles.parse("10T")      # Cycles(amount=10_000_000_000_000)
Cycles.parse("1.5K")     # Cycles(amount=1500)
Cycles.from_config(42)   # integers are taken as raw cycles
str(Cycles.parse("4T"))  # "4.000 TC"
Cycles(5 * TC) + Cycles(1)
```

Accepted suffixes are `K`, `M`, `B`, `T` and `Q`, or none. Unknown suffixes
and malformed numbers raise `ValueError`; negative amounts and amounts above
128 bits are refused.

## Principals and canister types

```python
from icukit.principal import Principal
from icukit.canister_type import CanisterType

pid = Principal.from_slice(bytes([1]))
assert Principal.from_text(pid.to_text()) == pid
worker = CanisterType("worker")
root = CanisterType.ROOT
```

`Principal` holds at most 29 bytes and is ordered by its bytes.
`Principal.from_text` raises `ValueError` on bad base32, a wrong checksum or
non-canonical text. `Principal.anonymous()` and
`Principal.management_canister()` give the well-known principals.

## Registries

Each store is a plain object that keeps its own state in memory:

- `icukit.memory_registry.MemoryRegistry`: claims memory ids for
  `MemoryRegistryEntry` paths; id 0 is reserved, and re-claiming an id with
  the same path is allowed.
- `icukit.app_state.AppState`: application mode (`AppMode`) switched by
  `AppCommand`; switching to the current mode raises.
- `icukit.children.CanisterChildren`: child principal to canister type.
- `icukit.directory.CanisterDirectory`: canister type to the principals of
  that type, with `try_get_singleton`, `import_view` and `export`.
- `icukit.canister_state.CanisterState`: this canister's type and parent
  chain (`CanisterEntry`); no parents means root.
- `icukit.registry.CanisterRegistry`: canisters moving from
  `CanisterStatus.CREATED` to `CanisterStatus.INSTALLED`.
- `icukit.pool.CanisterPool`: spare canisters; `pop_first` hands out the
  oldest.
- `icukit.cycle_tracker.CycleTracker`: cycle-balance samples at least 30
  seconds apart, older ones purged after about ten days.
- `icukit.delegation_registry.DelegationRegistry`: sessions a wallet grants
  to a temporary principal, for 60 seconds up to 24 hours.
- `icukit.delegation_cache.DelegationCache`: a local cache of
  `DelegationSessionView` values.
- `icukit.wasm_registry.WasmRegistry`: `WasmModule` values by canister type.

```python
from icukit.children import CanisterChildren
from icukit.cycle_tracker import CycleTracker

children = CanisterChildren()
children.insert(pid, worker)
assert children.get_by_type(worker) == [pid]

tracker = CycleTracker()
assert tracker.track(1000, 5_000)
assert not tracker.track(1010, 6_000)  # too soon after the last sample
```

Registry and store failures raise subclasses of `icukit.errors.IcuError`
(`MemoryStoreError` for the stores, `StateError` for the delegation and wasm
registries).

## Utilities

- `icukit.instructions.format_instructions(n)`: `1500` becomes `"1.50K"`.
- `icukit.wasm.get_wasm_hash(data)`: SHA-256 digest of a module;
  `WasmModule.module_hash()` does the same for a module.
- `icukit.serialize.serialize` / `deserialize`: CBOR encoding; failures raise
  `SerializeError`.
- `icukit.timeutil.now_secs()`, `now_millis()`, `now_micros()`,
  `now_nanos()`.
- `icukit.rand.StdRand(seed)`, a deterministic generator, and
  `icukit.rand.next_u8()` to `next_u128()` from a shared, time-seeded one.

## What this package does not do

Everything is held in process memory: nothing is persisted, and every store
starts empty when created. The package makes no calls to other canisters or
services: it does not create, install, upgrade or top up canisters, run
timers for periodic tracking or pool refills, or load configuration. It
records the bookkeeping such work needs and leaves the work itself to the
caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```