import pytest

from ballot_box.errors import ProposalDoesNotExist
from ballot_box.ledger import U32_MAX, Proposal, ProposalLedger, saturating_add
from ballot_box.registry import VoteRegistry


def test_create_allocates_dense_ids_from_zero():
    ledger = ProposalLedger()
    assert ledger.count() == 0
    assert [ledger.create(d) for d in ("a", "b", "c")] == [0, 1, 2]
    assert ledger.count() == 3
    assert ledger.get(1) == Proposal("b", 0)


def test_get_out_of_range_raises():
    ledger = ProposalLedger()
    ledger.create("only")
    for bad in (1, 99, -1, U32_MAX, "0", None, True):
        with pytest.raises(ProposalDoesNotExist):
            ledger.get(bad)


def test_increment_votes_returns_updated_copy():
    ledger = ProposalLedger()
    pid = ledger.create("x")
    before = ledger.get(pid)
    after = ledger.increment_votes(pid)
    assert after.votes == 1
    assert before.votes == 0
    assert ledger.get(pid).as_tuple() == ("x", 1)


def test_increment_votes_unknown_id_writes_nothing():
    ledger = ProposalLedger()
    with pytest.raises(ProposalDoesNotExist):
        ledger.increment_votes(0)
    assert ledger.count() == 0


def test_saturating_add_clamps():
    assert saturating_add(1) == 2
    assert saturating_add(U32_MAX) == U32_MAX
    assert saturating_add(U32_MAX - 1, 5) == U32_MAX


def test_counters_saturate_at_u32_max():
    ledger = ProposalLedger()
    ledger._count = U32_MAX
    assert ledger.create("last") == U32_MAX
    assert ledger.count() == U32_MAX
    # the counter no longer moves, so further creates reuse the top id and
    # overwrite the record there, which stays unreadable through get()
    assert ledger.create("again") == U32_MAX
    assert ledger.count() == U32_MAX
    assert ledger._proposals[U32_MAX] == Proposal("again", 0)
    with pytest.raises(ProposalDoesNotExist):
        ledger.get(U32_MAX)

    pid = 0
    ledger._proposals[pid] = Proposal("full", U32_MAX)
    assert ledger.increment_votes(pid).votes == U32_MAX


def test_registry_marks_are_per_pair():
    reg = VoteRegistry()
    assert reg.has_voted(0, "alice") is False
    reg.mark_voted(0, "alice")
    assert reg.has_voted(0, "alice") is True
    assert reg.has_voted(1, "alice") is False
    assert reg.has_voted(0, "bob") is False
    # marking twice is harmless
    reg.mark_voted(0, "alice")
    assert len(reg) == 1
