import random

from onpe.models import (
    DISTRICTS,
    DNI_MAX,
    DNI_MIN,
    FIRST_NAMES,
    SURNAMES,
    Candidate,
    Email,
    PollingTable,
    Voter,
)
from onpe.voters import (
    VoterFactory,
    describe_candidate,
    describe_voter,
    find_voter,
)


def _factory(seed=7):
    return VoterFactory(random.Random(seed))


def test_dnis_are_in_range_and_unique():
    factory = _factory()
    dnis = [factory.new_dni() for _ in range(500)]
    assert all(DNI_MIN <= dni <= DNI_MAX for dni in dnis)
    assert len(set(dnis)) == len(dnis)
    assert factory.used_dnis == set(dnis)


def test_reset_forgets_used_dnis():
    factory = _factory()
    factory.new_dni()
    factory.reset()
    assert factory.used_dnis == set()


def test_created_voter_is_well_formed():
    factory = _factory()
    voter = factory.create_voter()
    first, surname1, surname2 = voter.name.split(" ")
    assert first in FIRST_NAMES
    assert surname1 in SURNAMES and surname2 in SURNAMES
    assert voter.district in DISTRICTS
    assert voter.table is None
    assert voter.has_voted is False
    assert voter.dni in factory.used_dnis


def test_same_seed_gives_same_voters():
    a = [_factory(3).create_voter() for _ in range(1)]
    b = [_factory(3).create_voter() for _ in range(1)]
    assert a == b


def test_find_voter():
    voters = [
        Voter(dni=40000001, name="Juan Perez Lopez", district="Tacna"),
        Voter(dni=40000002, name="Ana Diaz Rojas", district="Sama"),
    ]
    assert find_voter(voters, 40000002) is voters[1]
    assert find_voter(voters, 40000003) is None


def test_describe_missing_voter():
    assert "VOTANTE NO ENCONTRADO" in describe_voter(None, [])


def test_describe_voter_without_table():
    voter = Voter(dni=40000001, name="Juan Perez Lopez", district="Tacna")
    text = describe_voter(voter, [])
    assert "VOTANTE ENCONTRADO" in text
    assert "Nombre:     Juan Perez Lopez" in text
    assert "Ha votado:  No" in text
    assert "Aun no tiene mesa asignada" in text


def test_describe_voter_with_table():
    voter = Voter(
        dni=40000001, name="Juan Perez Lopez", district="Sama",
        table=100002, has_voted=True,
    )
    tables = [
        PollingTable(number=100001, district="Tacna"),
        PollingTable(number=100002, district="Sama"),
    ]
    text = describe_voter(voter, tables)
    assert "Ha votado:  Si" in text
    assert "N Mesa:   100002" in text
    assert "Distrito:  Sama" in text
    assert "Aun no tiene mesa asignada" not in text


def test_describe_candidate():
    candidate = Candidate(
        name="Ana Torres", sex="F", age=40, dni="12345678",
        party="Partido Uno", motto="Adelante",
        email=Email("ana", "example.com"),
    )
    lines = describe_candidate(candidate).splitlines()
    assert lines[0] == "Nombres:          Ana Torres"
    assert "Email:            ana@example.com" in lines
    assert lines[-1] == "Lema:             Adelante"
    assert len(lines) == 7