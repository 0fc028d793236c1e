import random

import pytest

from onpe.election import Election, ElectionError, VoteOutcome
from onpe.models import DISTRICTS, MAX_VOTERS, Candidate, Email
from onpe.registry import CandidateRegistry
from onpe.voters import VoterFactory


def make_registry():
    registry = CandidateRegistry()
    registry.register(Candidate(name="Ana", age=40, dni="1", party="P1", motto="M1",
                                email=Email("ana", "example.com")))
    registry.register(Candidate(name="Joven", age=20, dni="2", party="P2", motto="M2",
                                email=Email("joven", "example.com")))
    registry.register(Candidate(name="Luis", age=50, dni="3", party="P3", motto="M3",
                                email=Email("luis", "example.com")))
    return registry


def make_election(roll_size=40, seed=7):
    election = Election(make_registry(), VoterFactory(random.Random(seed)), roll_size)
    election.generate_roll()
    return election


def test_generate_roll_once():
    election = Election(make_registry(), VoterFactory(random.Random(1)), 30)
    assert election.generate_roll() is True
    first = list(election.voters)
    assert election.generate_roll() is False
    assert election.voters == first
    assert len(first) == 30
    assert len({v.dni for v in first}) == 30


def test_roll_capped_at_maximum():
    election = Election(make_registry(), VoterFactory(random.Random(2)), MAX_VOTERS + 10)
    election.generate_roll()
    assert len(election.voters) == MAX_VOTERS


def test_roll_listing_lists_every_voter():
    election = make_election(roll_size=5)
    listing = election.roll_listing()
    for voter in election.voters:
        assert str(voter.dni) in listing
        assert voter.name in listing


def test_district_counts():
    election = make_election()
    counts = election.district_counts()
    assert tuple(counts) == DISTRICTS
    assert sum(counts.values()) == len(election.voters)


def test_assign_tables_respects_capacity():
    election = make_election()
    tables = election.assign_tables(3)
    assert tables[0].number == 100001
    assert [t.number for t in tables] == list(range(100001, 100001 + len(tables)))
    by_number = {t.number: t for t in tables}
    for voter in election.voters:
        table = by_number[voter.table]
        assert table.district == voter.district
        assert voter.dni in table.assigned
    assert all(len(t.assigned) <= 3 for t in tables)
    for district, count in election.district_counts().items():
        assert sum(t.district == district for t in tables) == -(-count // 3)


def test_assign_tables_rejects_zero_capacity():
    election = make_election()
    with pytest.raises(ValueError):
        election.assign_tables(0)


def test_tables_report():
    election = make_election()
    election.assign_tables(10)
    report = election.tables_report()
    assert "MESAS CREADAS" in report
    assert "100001" in report


def test_find_voter():
    election = make_election()
    voter = election.voters[3]
    assert election.find_voter(voter.dni) is voter
    assert election.find_voter(1) is None


def test_ballot_contains_only_eligible():
    election = make_election()
    assert [c.name for c in election.ballot()] == ["Ana", "Luis"]


def test_cast_vote_recorded():
    election = make_election()
    election.assign_tables(5)
    voter = election.voters[0]
    assert election.cast_vote(voter.dni, 2) is VoteOutcome.RECORDED
    assert election.registry.get(3).votes == 1
    assert voter.has_voted and voter.candidate_vote == 2
    table = next(t for t in election.tables if t.number == voter.table)
    assert table.votes_cast == 1
    with pytest.raises(ElectionError):
        election.cast_vote(voter.dni, 1)


def test_cast_vote_invalid_choice_is_null():
    election = make_election()
    voter = election.voters[1]
    assert election.cast_vote(voter.dni, 9) is VoteOutcome.NULL
    assert voter.has_voted
    assert election.total_votes() == 0


def test_cast_vote_unknown_dni():
    election = make_election()
    with pytest.raises(ElectionError):
        election.cast_vote(1, 1)


def test_cast_vote_without_eligible_candidates():
    election = Election(CandidateRegistry(), VoterFactory(random.Random(3)), 5)
    election.generate_roll()
    with pytest.raises(ElectionError):
        election.cast_vote(election.voters[0].dni, 1)


def test_close_blocks_voting():
    election = make_election()
    election.close()
    assert election.closed
    with pytest.raises(ElectionError):
        election.cast_vote(election.voters[0].dni, 1)
    with pytest.raises(ElectionError):
        election.simulate()
    with pytest.raises(ElectionError):
        election.close()


def test_simulate_counts_votes():
    election = make_election(roll_size=40)
    election.cast_vote(election.voters[0].dni, 1)
    cast = election.simulate()
    assert cast == len(election.voters) - 1
    assert all(v.has_voted for v in election.voters)
    assert election.total_votes() == len(election.voters)
    assert election.registry.get(2).votes == 0


def test_simulate_limit():
    election = make_election(roll_size=20)
    assert election.simulate(limit=5) == 5
    assert sum(v.has_voted for v in election.voters) == 5


def test_results_sorted_and_shares_sum():
    election = make_election(roll_size=60)
    election.simulate()
    results = election.results()
    votes = [c.votes for c, _ in results]
    assert votes == sorted(votes, reverse=True)
    assert sum(pct for _, pct in results) == pytest.approx(100.0)
    assert len(results) == len(election.registry)


def test_reports_contain_totals():
    election = make_election(roll_size=10)
    election.simulate()
    progress = election.progress_report()
    assert "TOTAL VOTOS EMITIDOS" in progress
    assert progress.rstrip().endswith(str(election.total_votes()))
    report = election.results_report()
    assert report.startswith("1.-")
    assert " votos" in report