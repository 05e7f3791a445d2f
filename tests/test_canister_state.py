import pytest

from icukit.canister_state import CanisterEntry, CanisterState, CanisterStateData
from icukit.canister_type import CanisterType
from icukit.errors import CanisterStateError, MemoryStoreError
from icukit.principal import Principal


def make_core():
    return CanisterState()


def test_default_type_is_none():
    core = make_core()
    assert core.get_type() is None
    with pytest.raises(CanisterStateError):
        core.try_get_type()


def test_try_get_type_message():
    with pytest.raises(MemoryStoreError, match="canister type has not been set"):
        make_core().try_get_type()


def test_set_type_and_get():
    core = make_core()
    core.set_type(CanisterType("worker"))
    assert core.get_type() == CanisterType("worker")
    assert core.try_get_type() == CanisterType("worker")


def test_is_root_and_get_root_pid():
    core = make_core()
    assert core.is_root()
    assert core.get_root_pid() == Principal.anonymous()

    parent = CanisterEntry(CanisterType("foo"), Principal.anonymous())
    core.set_parents([parent])
    assert not core.is_root()
    assert core.get_root_pid() == parent.principal


def test_root_pid_falls_back_to_self_pid():
    own = Principal.from_slice(b"\x07")
    core = CanisterState(self_pid=own)
    assert core.get_root_pid() == own
    first = CanisterEntry(CanisterType("root"), Principal.from_slice(b"\x01"))
    second = CanisterEntry(CanisterType("mid"), Principal.from_slice(b"\x02"))
    core.set_parents([first, second])
    assert core.get_root_pid() == first.principal


def test_set_and_get_parents():
    core = make_core()
    p1 = CanisterEntry(CanisterType("alpha"), Principal.anonymous())
    p2 = CanisterEntry(CanisterType("beta"), Principal.management_canister())
    core.set_parents([p1, p2])
    parents = core.get_parents()
    assert len(parents) == 2
    assert any(p.canister_type == CanisterType("alpha") for p in parents)
    assert any(p.canister_type == CanisterType("beta") for p in parents)


def test_get_parents_returns_copy():
    core = make_core()
    p1 = CanisterEntry(CanisterType("alpha"), Principal.anonymous())
    core.set_parents([p1])
    parents = core.get_parents()
    parents.append(p1)
    assert len(core.get_parents()) == 1


def test_get_parent_by_type_and_has_parent_pid():
    core = make_core()
    p1 = CanisterEntry(CanisterType("alpha"), Principal.anonymous())
    p2 = CanisterEntry(CanisterType("beta"), Principal.management_canister())
    core.set_parents([p1, p2])

    assert core.get_parent_by_type(CanisterType("alpha")) == p1.principal
    assert core.get_parent_by_type(CanisterType("beta")) == p2.principal
    assert core.get_parent_by_type(CanisterType("gamma")) is None
    assert core.has_parent_pid(p1.principal)
    assert core.has_parent_pid(p2.principal)
    assert not core.has_parent_pid(Principal.from_slice(bytes([42] * 29)))


def test_export_and_import():
    core = make_core()
    core.set_type(CanisterType("worker"))
    parent = CanisterEntry(CanisterType("p"), Principal.anonymous())
    core.set_parents([parent])

    exported = core.export()
    new_core = make_core()
    new_core.import_data(exported)

    assert new_core.get_type() == CanisterType("worker")
    assert new_core.get_parents() == [parent]


def test_exported_snapshot_is_unaffected_by_later_changes():
    core = make_core()
    core.set_type(CanisterType("worker"))
    snapshot = core.export()
    core.set_type(CanisterType("other"))
    assert snapshot.canister_type == CanisterType("worker")
    assert snapshot == CanisterStateData(CanisterType("worker"), ())


def test_this_entry():
    own = Principal.from_slice(b"\x09")
    core = CanisterState(self_pid=own)
    with pytest.raises(CanisterStateError):
        core.this_entry()
    core.set_type(CanisterType("worker"))
    assert core.this_entry() == CanisterEntry(CanisterType("worker"), own)