"""Generation of random voters and text descriptions of people."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .models import (
    DISTRICTS,
    DNI_MAX,
    DNI_MIN,
    FIRST_NAMES,
    SURNAMES,
    Candidate,
    PollingTable,
    Voter,
)

_CYAN = "\033[36m"
_RED = "\033[31m"
_RESET = "\033[0m"


class VoterFactory:
    """Creates voters with unique random DNIs and random names."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.used_dnis: set[int] = set()

    def reset(self) -> None:
        """Forget every DNI handed out so far."""
        self.used_dnis.clear()

    def new_dni(self) -> int:
        """Return a DNI in the valid range that has not been used yet."""
        while True:
            dni = self.rng.randint(DNI_MIN, DNI_MAX)
            if dni not in self.used_dnis:
                self.used_dnis.add(dni)
                return dni

    def district(self) -> str:
        return self.rng.choice(DISTRICTS)

    def first_name(self) -> str:
        return self.rng.choice(FIRST_NAMES)

    def surname(self) -> str:
        return self.rng.choice(SURNAMES)

    def create_voter(self) -> Voter:
        """Build a new voter with no table assigned who has not voted."""
        dni = self.new_dni()
        district = self.district()
        name = f"{self.first_name()} {self.surname()} {self.surname()}"
        return Voter(dni=dni, name=name, district=district)


def find_voter(voters: Iterable[Voter], dni: int) -> Voter | None:
    """Return the first voter with the given DNI, or None."""
    return next((voter for voter in voters if voter.dni == dni), None)


def describe_voter(voter: Voter | None, tables: Iterable[PollingTable]) -> str:
    """Describe a voter and their polling table, or report that none was found."""
    if voter is None:
        return f"\n\t{_RED}VOTANTE NO ENCONTRADO{_RESET}\n"
    lines = [
        "",
        f"{_CYAN}VOTANTE ENCONTRADO{_RESET}",
        f"DNI:        {voter.dni}",
        f"Nombre:     {voter.name}",
        f"Distrito:   {voter.district}",
        f"Ha votado:  {'Si' if voter.has_voted else 'No'}",
    ]
    if voter.table is None:
        lines += ["", f"{_RED}Aun no tiene mesa asignada{_RESET}"]
    else:
        table = next((t for t in tables if t.number == voter.table), None)
        if table is not None:
            lines += [
                "",
                f"{_CYAN}MESA DE VOTACION{_RESET}",
                f"N Mesa:   {table.number}",
                f"Distrito:  {table.district}",
            ]
    return "\n".join(lines) + "\n"


def describe_candidate(candidate: Candidate) -> str:
    """Describe a candidate's registration data."""
    lines = [
        f"Nombres:          {candidate.name}",
        f"DNI:              {candidate.dni}",
        f"Sexo:             {candidate.sex}",
        f"Edad:             {candidate.age}",
        f"Email:            {candidate.email}",
        f"Partido Politico: {candidate.party}",
        f"Lema:             {candidate.motto}",
    ]
    return "\n".join(lines) + "\n"