"""Candidate registration, editing and the tables that list candidates."""

from __future__ import annotations

from collections.abc import Iterator

from .models import Candidate, CandidateStatus, Email

DEFAULT_CAPACITY = 200

_RESET = "\033[0m"
_YELLOW = "\033[33m"
_RULE = "-" * 93
_EDITABLE_FIELDS = frozenset({"name", "sex", "age", "dni", "party", "motto", "email"})


class CandidateNotFound(LookupError):
    """Raised when a candidate number does not match any registered candidate."""


class CandidateRegistry:
    """Ordered list of registered candidates, numbered from 1."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._candidates: list[Candidate] = []

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)

    def register(self, candidate: Candidate) -> int:
        """Add a candidate, evaluate its status and return its number."""
        if len(self._candidates) >= self.capacity:
            raise ValueError(f"registry is full ({self.capacity} candidates)")
        candidate.evaluate_status()
        self._candidates.append(candidate)
        return len(self._candidates)

    def _index(self, number: int) -> int:
        if not 1 <= number <= len(self._candidates):
            raise CandidateNotFound(f"Candidato no existente: {number}")
        return number - 1

    def get(self, number: int) -> Candidate:
        """Return the candidate with the given 1-based number."""
        return self._candidates[self._index(number)]

    def update(self, number: int, **kwargs) -> Candidate:
        """Change fields of a candidate and re-evaluate its status."""
        candidate = self.get(number)
        unknown = set(kwargs) - _EDITABLE_FIELDS
        if unknown:
            raise TypeError(f"unknown candidate fields: {', '.join(sorted(unknown))}")
        for key, value in kwargs.items():
            if key == "email" and not isinstance(value, Email):
                raise TypeError("email must be an Email")
            setattr(candidate, key, value)
        candidate.evaluate_status()
        return candidate

    def remove(self, number: int) -> Candidate:
        """Remove and return a candidate; later candidates move up one place."""
        return self._candidates.pop(self._index(number))

    def eligible(self) -> list[Candidate]:
        """Candidates whose status is eligible, in registration order."""
        return [c for c in self._candidates if c.status is CandidateStatus.ELIGIBLE]

    def summary_table(self) -> str:
        """Numbered table of names and parties."""
        lines = [
            "#CAN\tNombre Completo del Candidato\tPartido Politico",
            "-" * 65,
        ]
        lines += [
            f"{number:<8}{c.name:<32}{c.party}"
            for number, c in enumerate(self._candidates, start=1)
        ]
        return "\n".join(lines) + "\n"

    def detailed_listing(self) -> str:
        """Every field of every candidate."""
        blocks = []
        for number, c in enumerate(self._candidates, start=1):
            blocks.append(
                f"             CANDIDATO #{number}:\n"
                f"Nombre:               {c.name}\n"
                f"Sexo:                 {c.sex}\n"
                f"Partido politico:     {c.party}\n"
                f"Edad:                 {c.age}\n"
                f"DNI:                  {c.dni}\n"
                f"Lema:                 {c.motto}\n"
                f"Correo electronico:   {c.email}\n\n"
            )
        return "".join(blocks)

    def review_table(self) -> str:
        """Status review table, with a notice mailed to each observed candidate."""
        parts = [
            _RULE + "\n",
            "| # |      NOMBRE       |   DNI    | EDAD |         CORREO         |   ESTADO   |\n",
            _RULE + "\n",
        ]
        for number, c in enumerate(self._candidates, start=1):
            label = "APTO     " if c.status is CandidateStatus.ELIGIBLE else c.status.value
            parts.append(
                "| %2d | %-17s | %-8s | %4d | %-23s | %s%-10s%s |\n"
                % (number, c.name, c.dni, c.age, str(c.email), c.status.color, label, _RESET)
            )
            if c.status is CandidateStatus.OBSERVED:
                parts.append(
                    f"{_YELLOW}>> Correo enviado a {c.email}: "
                    f"Estimado(a) {c.name}, su inscripcion ha sido OBSERVADA.\n"
                    f"   Por favor revise sus datos para continuar en el proceso.{_RESET}\n"
                )
        parts.append(_RULE + "\n")
        return "".join(parts)

    def official_table(self) -> str:
        """Table of eligible candidates, keeping their registration numbers."""
        lines = [
            "#\tNombre Completo del Candidato\tPartido Politico",
            "-" * 65,
        ]
        lines += [
            f"{'#':<8}{number}{c.name:<32}{c.party}"
            for number, c in enumerate(self._candidates, start=1)
            if c.status is CandidateStatus.ELIGIBLE
        ]
        return "\n".join(lines) + "\n"