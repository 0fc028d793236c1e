"""Voter roll, polling tables, voting and results of an election."""

from __future__ import annotations

from enum import Enum

from .models import DISTRICTS, MAX_VOTERS, Candidate, PollingTable, Voter
from .registry import CandidateRegistry
from .voters import VoterFactory, find_voter

DEFAULT_ROLL_SIZE = 1000
DEFAULT_SIMULATION_LIMIT = 100_000
FIRST_TABLE_NUMBER = 100001


class ElectionError(Exception):
    """Raised when an election operation is not allowed in the current state."""


class VoteOutcome(Enum):
    """What became of a cast ballot."""

    RECORDED = "recorded"
    NULL = "null"


class Election:
    """The election process: roll, tables, ballots and counts."""

    def __init__(
        self,
        registry: CandidateRegistry,
        factory: VoterFactory | None = None,
        roll_size: int = DEFAULT_ROLL_SIZE,
    ) -> None:
        self.registry = registry
        self.factory = factory if factory is not None else VoterFactory()
        self.roll_size = roll_size
        self.voters: list[Voter] = []
        self.tables: list[PollingTable] = []
        self.roll_generated = False
        self.closed = False

    def generate_roll(self) -> bool:
        """Create the voter roll once; return False if it already exists."""
        if self.roll_generated:
            return False
        self.factory.reset()
        self.voters = [
            self.factory.create_voter() for _ in range(min(self.roll_size, MAX_VOTERS))
        ]
        self.roll_generated = True
        return True

    def roll_listing(self) -> str:
        """Numbered list of every voter on the roll."""
        lines = [
            f"{'#':<8}{'DNI votante':<15}Nombre Completo del votante\tDistrito",
            "-" * 108,
        ]
        lines += [
            f"{number:<8}{v.dni:<15}{v.name:<30}\t{v.district}"
            for number, v in enumerate(self.voters, start=1)
        ]
        return "\n".join(lines) + "\n"

    def district_counts(self) -> dict[str, int]:
        """Number of voters in each district, in the fixed district order."""
        counts = dict.fromkeys(DISTRICTS, 0)
        for voter in self.voters:
            if voter.district in counts:
                counts[voter.district] += 1
        return counts

    def assign_tables(self, capacity: int) -> list[PollingTable]:
        """Open enough tables per district and seat every voter at one."""
        if capacity <= 0:
            raise ValueError("table capacity must be positive")
        self.tables = []
        number = FIRST_TABLE_NUMBER
        for district, count in self.district_counts().items():
            for _ in range(-(-count // capacity)):
                self.tables.append(
                    PollingTable(number=number, district=district, capacity=capacity)
                )
                number += 1
        for voter in self.voters:
            voter.table = None
            table = next(
                (t for t in self.tables if t.district == voter.district and not t.is_full()),
                None,
            )
            if table is not None:
                table.assigned.append(voter.dni)
                voter.table = table.number
        return self.tables

    def tables_report(self) -> str:
        """Table of created polling tables with their assigned voters."""
        lines = [
            "",
            "MESAS CREADAS",
            f"{'Mesa':<8}{'Distrito':<28}{'Cap.':<10}Asignados",
            "-" * 82,
        ]
        lines += [
            f"{t.number:<8}{t.district:<28}{t.capacity:<10}{len(t.assigned)}"
            for t in self.tables
        ]
        return "\n".join(lines) + "\n"

    def find_voter(self, dni: int) -> Voter | None:
        """The voter with the given DNI, or None."""
        return find_voter(self.voters, dni)

    def _ballot_entries(self) -> list[tuple[int, Candidate]]:
        return [
            (index, c)
            for index, c in enumerate(self.registry)
            if c in self.registry.eligible()
        ]

    def ballot(self) -> list[Candidate]:
        """Eligible candidates in ballot order; ballot numbers start at 1."""
        return self.registry.eligible()

    def _table_of(self, voter: Voter) -> PollingTable | None:
        return next((t for t in self.tables if t.number == voter.table), None)

    def _register_vote(self, voter: Voter, index: int | None) -> None:
        if index is not None:
            list(self.registry)[index].votes += 1
            voter.candidate_vote = index
        voter.has_voted = True
        table = self._table_of(voter)
        if table is not None:
            table.votes_cast += 1

    def cast_vote(self, dni: int, choice: int) -> VoteOutcome:
        """Cast a vote for ballot number `choice`; out-of-range choices are null."""
        if self.closed:
            raise ElectionError("El proceso ya fue cerrado. No se pueden emitir mas votos.")
        voter = self.find_voter(dni)
        if voter is None:
            raise ElectionError("DNI no encontrado en el padron.")
        if voter.has_voted:
            raise ElectionError("Usted ya emitio su voto.")
        eligible = self.ballot()
        if not eligible:
            raise ElectionError("No hay candidatos aptos. Votacion cancelada.")
        if 1 <= choice <= len(eligible):
            chosen = eligible[choice - 1]
            index = next(i for i, c in enumerate(self.registry) if c is chosen)
            self._register_vote(voter, index)
            return VoteOutcome.RECORDED
        self._register_vote(voter, None)
        return VoteOutcome.NULL

    def simulate(self, limit: int = DEFAULT_SIMULATION_LIMIT) -> int:
        """Let voters who have not voted pick a random eligible candidate."""
        if self.closed:
            raise ElectionError("El proceso ya fue cerrado. No se pueden emitir mas votos.")
        eligible_ids = {id(c) for c in self.registry.eligible()}
        indices = [i for i, c in enumerate(self.registry) if id(c) in eligible_ids]
        if not indices:
            raise ElectionError("No hay candidatos aptos para recibir votos.")
        cast = 0
        for voter in self.voters:
            if cast >= limit:
                break
            if not voter.has_voted:
                self._register_vote(voter, self.factory.rng.choice(indices))
                cast += 1
        return cast

    def close(self) -> None:
        """End the voting; no more votes are accepted afterwards."""
        if self.closed:
            raise ElectionError("El proceso de votacion ya esta cerrado.")
        self.closed = True

    def total_votes(self) -> int:
        """Votes received by eligible candidates."""
        return sum(c.votes for c in self.registry.eligible())

    def progress_report(self) -> str:
        """Votes and percentage for each eligible candidate."""
        total = self.total_votes()
        lines = [
            f"{'#':<4}{'Candidato':<25}{'Partido':<12}{'Votos':<10}%",
            "-" * 65,
        ]
        for order, c in enumerate(self.registry.eligible(), start=1):
            pct = 0.0 if total == 0 else 100.0 * c.votes / total
            lines.append(f"{order:<4}{c.name[:24]:<25}{c.party:<12}{c.votes:<10}{pct:.1f}%")
        lines += ["-" * 65, f"{'TOTAL VOTOS EMITIDOS':<41}{total}"]
        return "\n".join(lines) + "\n"

    def results(self) -> list[tuple[Candidate, float]]:
        """All candidates by votes, most first, with their share of the total."""
        total = self.total_votes()
        ranked = sorted(self.registry, key=lambda c: c.votes, reverse=True)
        return [(c, 0.0 if total == 0 else c.votes * 100.0 / total) for c in ranked]

    def results_report(self) -> str:
        """Ranked results, one line per candidate."""
        lines = [
            f"{rank}.-{c.name:<30}{c.party:<20}{c.motto:<20}{c.votes:<5}{' votos':<9}"
            f"{format(pct, '.6g'):<5}%"
            for rank, (c, pct) in enumerate(self.results(), start=1)
        ]
        return "\n".join(lines) + ("\n" if lines else "")