"""Core data types for candidates, voters and polling tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_VOTERS = 2000
MINIMUM_AGE = 35
DEFAULT_TABLE_CAPACITY = 500
DNI_MIN = 40_000_000
DNI_MAX = 70_000_000

DISTRICTS: tuple[str, ...] = (
    "Tacna", "Alto de la Alianza", "Calana", "Ciudad Nueva",
    "Gregorio Albarracin", "Inclan", "La Yarada-Los Palos", "Pachia", "Palca",
    "Pocollay", "Sama",
)

FIRST_NAMES: tuple[str, ...] = (
    "Juan", "Maria", "Luis", "Ana", "Pedro", "Carmen", "Jose", "Lucia", "Carlos", "Rosa",
    "Miguel", "Elena", "Jorge", "Sofia", "Ricardo", "Laura", "Daniel", "Patricia", "Alejandro", "Teresa",
    "Diego", "Gabriela", "Manuel", "Valeria", "Kevin", "Tatiana", "Raul", "Camila", "Sebastian", "Monica",
    "Bruno", "Noelia", "Axel", "Milagros", "Cristian", "Paola", "Renzo", "Estefany", "Bianca", "Oscar",
    "Fernando", "Ximena", "Gustavo", "Pilar", "Alan", "Antonia", "Nicolas", "Diana", "Santiago", "Isabela",
)

SURNAMES: tuple[str, ...] = (
    "Perez", "Lopez", "Garcia", "Torres", "Diaz", "Rojas", "Vargas", "Fernandez", "Aguilar", "Salas",
    "Mendoza", "Castillo", "Herrera", "Flores", "Ramos", "Ruiz", "Soto", "Chavez", "Romero", "Navarro",
    "Llanque", "Bravo", "Salazar", "Vega", "Medina", "Palomino", "Paredes", "Silva", "Palacios", "Cabrera",
    "Rivera", "Calderon", "Mora", "Puma", "Delgado", "Acosta", "Lozano", "Valdivia", "Huaman", "Ortiz",
    "Limachi", "Espinoza", "Meza", "Cornejo", "Velasquez", "Vilca", "Aliaga", "Zevallos", "Huanca", "Quispe",
)


class CandidateStatus(Enum):
    """Registration status of a candidate."""

    PENDING = "PENDIENTE"
    ELIGIBLE = "APTO"
    OBSERVED = "OBSERVADO"

    @property
    def color(self) -> str:
        """ANSI colour code used when showing this status."""
        return {
            CandidateStatus.ELIGIBLE: "\033[32m",
            CandidateStatus.OBSERVED: "\033[33m",
            CandidateStatus.PENDING: "\033[31m",
        }[self]


@dataclass
class Email:
    """An e-mail address split into user and domain."""

    user: str = ""
    domain: str = ""

    def __str__(self) -> str:
        return f"{self.user}@{self.domain}"


@dataclass
class Candidate:
    """A person registered to run in the election."""

    name: str = ""
    sex: str = ""
    age: int = 0
    dni: str = ""
    party: str = ""
    motto: str = ""
    email: Email = field(default_factory=Email)
    observations: str = ""
    status: CandidateStatus = CandidateStatus.PENDING
    votes: int = 0

    def evaluate_status(self) -> CandidateStatus:
        """Recompute and store the status from the candidate's data."""
        if not (self.name and self.party and self.dni and self.motto):
            self.status = CandidateStatus.PENDING
        elif self.age < MINIMUM_AGE:
            self.status = CandidateStatus.OBSERVED
        else:
            self.status = CandidateStatus.ELIGIBLE
        return self.status


@dataclass
class PollingTable:
    """A polling table serving one district."""

    number: int
    district: str
    capacity: int = DEFAULT_TABLE_CAPACITY
    assigned: list[int] = field(default_factory=list)
    votes_cast: int = 0

    def is_full(self) -> bool:
        """True when no more voters can be assigned to this table."""
        return len(self.assigned) >= self.capacity


@dataclass
class Voter:
    """A registered voter."""

    dni: int
    name: str
    district: str
    age: int | None = None
    table: int | None = None
    has_voted: bool = False
    candidate_vote: int | None = None