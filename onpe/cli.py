"""Interactive console for candidate registration and running the election."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, TextIO

from .election import Election, ElectionError, VoteOutcome
from .models import Candidate, Email
from .registry import CandidateNotFound, CandidateRegistry
from .voters import VoterFactory, describe_candidate, describe_voter

_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_BLUE = "\033[34m"
_RESET = "\033[0m"
_STARS = "*" * 52
_WIDE_STARS = "*" * 59


class ConsoleApp:
    """Menu-driven console reading answers line by line."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.registry = CandidateRegistry()
        self.election = Election(self.registry, VoterFactory(self.rng))

    # ----- input and output -------------------------------------------------

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _line(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _interactive(self) -> bool:
        try:
            return bool(self.stdin.isatty())
        except (AttributeError, ValueError):
            return False

    def _clear(self) -> None:
        if self._interactive():
            self._write("\033[2J\033[H")

    def _pause(self) -> None:
        if self._interactive():
            self._write("Presione ENTER para continuar...")
            self.stdout.flush()
            self.stdin.readline()

    def _read_text(self, prompt: str) -> str:
        self._write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _read_token(self, prompt: str) -> str:
        return self._read_text(prompt).strip()

    def _read_char(self, prompt: str) -> str:
        token = self._read_token(prompt)
        return token[:1]

    def _read_int(self, prompt: str) -> int | None:
        try:
            return int(self._read_token(prompt))
        except ValueError:
            return None

    def _ask_int(self, prompt: str) -> int:
        while True:
            value = self._read_int(prompt)
            if value is not None:
                return value
            self._line(f"{_RED}Ingrese un numero entero.{_RESET}")

    def _confirm(self, prompt: str) -> bool:
        return self._read_char(prompt) in ("S", "s")

    def _banner(self, title: str, stars: str = _STARS) -> None:
        self._line(stars)
        self._line(title)
        self._line(stars)

    # ----- main menu --------------------------------------------------------

    def run(self) -> None:
        """Run the main menu until the user chooses to leave or input ends."""
        actions: dict[int, Callable[[], None]] = {
            1: self._register,
            2: self._modify,
            3: self._list_candidates,
            4: self._review,
            5: self._delete,
            6: self._election_menu,
            7: self._results,
        }
        try:
            while True:
                self._clear()
                self._banner(f"                  {_RED}ONPE{_RESET}                     ")
                self._line("1. Inscripcion de candidatos")
                self._line("2. Modificar candidato")
                self._line("3. Mostrar lista de candidatos")
                self._line("4. Revision de candidatos")
                self._line("5. Eliminar candidato")
                self._line("6. Proceso de elecciones")
                self._line("7. Resultados")
                self._line("0. Salir")
                option = self._read_int("Ingrese su opcion: ")
                if option == 0:
                    break
                action = actions.get(option) if option is not None else None
                if action is None:
                    self._line("Opcion no valida!")
                    self._pause()
                else:
                    action()
                self._pause()
        except EOFError:
            self._line()

    def _register(self) -> None:
        self._clear()
        self._banner("                     INSCRIPCION                           ", _WIDE_STARS)
        self._line("Ingrese los datos para la inscripcion del cantidato:  ")
        self._line()
        name = self._read_text("Nombres completos: ")
        sex = self._read_char("Sexo (M|F): ")
        age = self._ask_int("Edad: ")
        dni = self._read_text("Dni: ")
        party = self._read_text("Partido Politico: ")
        motto = self._read_text("Lema: ")
        self._line("Ingrese el correo electronico (Usuario@dominio): ")
        user = self._read_token("\tUsuario del correo: ")
        domain = self._read_token("\tDominio del correo: ")
        candidate = Candidate(
            name=name, sex=sex, age=age, dni=dni, party=party, motto=motto,
            email=Email(user, domain),
        )
        self._line()
        self._line("Ha ingreso la siguiente informacion:")
        self._write(describe_candidate(candidate))
        self._line()
        if self._confirm("Esta informacion es correcta? (S/N): "):
            try:
                self.registry.register(candidate)
            except ValueError as exc:
                self._line(f"{_RED}{exc}{_RESET}")
            else:
                self._line(f"{_GREEN}La inscripcion ha sido exitosa{_RESET}")
                self._line()
        else:
            self._line(f"{_RED}Inscripcion de candidato descartado. No se guardo{_RESET}")
        self._pause()

    def _modify(self) -> None:
        self._clear()
        self._banner("               TABLA DE CANDIDATOS INSCRITOS               ", _WIDE_STARS)
        self._line()
        self._line()
        self._write(self.registry.summary_table())
        self._line()
        number = self._read_int("Inserte el numero de orden del candidato a modificar:   ")
        try:
            candidate = self.registry.get(number if number is not None else 0)
        except CandidateNotFound:
            self._line("Candidato no existente.")
            return
        while True:
            self._clear()
            self._banner("                 MENU DE MODIFICACIONES             ")
            self._line()
            self._line(f"\tCandidato #{number}")
            self._line(f"Nombre:           {candidate.name}")
            self._line(f"Sexo:             {candidate.sex}")
            self._line(f"Partido politico: {candidate.party}")
            self._line(f"Edad:             {candidate.age}")
            self._line(f"DNI:              {candidate.dni}")
            self._line(f"Lema:             {candidate.motto}")
            self._line(f"Correo electronico:\t{candidate.email}")
            self._line()
            self._line("1. Nombre del candidato")
            self._line("2. Sexo del candidato")
            self._line("3. Partido politico")
            self._line("4. Edad del candidato")
            self._line("5. DNI del candidato")
            self._line("6. Lema del candidato")
            self._line("7. Email del candidato")
            self._line("8. Volver al menu principal")
            self._line()
            option = self._read_int("Ingrese su opcion: ")
            if option == 8:
                break
            changes: dict[str, object]
            if option == 1:
                self._line("Inserte el nombre modificado del candidato:")
                changes = {"name": self._read_text("Nombre: ")}
            elif option == 2:
                self._line("Inserte el sexo modificado del candidato:")
                changes = {"sex": self._read_char("Sexo (M|F): ")}
            elif option == 3:
                self._line("Inserte el Partido politico modificado del candidato:")
                changes = {"party": self._read_text("PartidoPo: ")}
            elif option == 4:
                self._line("Inserte la edad modificada del candidato:")
                changes = {"age": self._ask_int("Edad: ")}
            elif option == 5:
                self._line("Inserte el DNI modificado del candidato:")
                changes = {"dni": self._read_token("DNI: ")}
            elif option == 6:
                self._line("Inserte el lema modificado del candidato:")
                changes = {"motto": self._read_text("Lema: ")}
            elif option == 7:
                self._line("Ingrese el correo electronico modificado (Usuario@dominio): ")
                user = self._read_token("\tUsuario del correo: ")
                domain = self._read_token("\tDominio del correo: ")
                changes = {"email": Email(user, domain)}
            else:
                self._line("ERROR: Opcion fuera de los parametros, INTENTE OTRA VEZ !!!")
                self._pause()
                continue
            self.registry.update(number, **changes)

    def _list_candidates(self) -> None:
        self._clear()
        self._banner("                   LISTA DE CANDIDATOS               ")
        self._line()
        self._write(self.registry.detailed_listing())

    def _review(self) -> None:
        self._clear()
        self._line("==================REVISION GENERAL DE CANDIDATOS===================\n\n")
        self._write(self.registry.review_table())

    def _delete(self) -> None:
        self._clear()
        self._line("CANDIDATOS: ")
        self._line()
        for number, candidate in enumerate(self.registry, start=1):
            self._line(f"Candidato #{number} - {candidate.name}")
        number = self._read_int("Ingrese el numero del candidato a eliminar: ")
        if number is None or not 1 <= number <= len(self.registry):
            self._line("Candidato no existente.")
            return
        answer = self._read_token("?Estas seguro de eliminar este candidato?   ([S]Si|[N]No)  :")
        if answer in ("S", "s"):
            self.registry.remove(number)
            self._line(f"{_RED}Candidato eliminado correctamente{_RESET}")
        else:
            self._line("Operacion cancelada.")

    def _results(self) -> None:
        self._clear()
        stars = "*" * 84
        self._line(stars)
        self._line("                                     RESULTADOS                                     ")
        self._line(stars)
        self._line()
        self._write(self.election.results_report())

    # ----- election menu ----------------------------------------------------

    def _election_menu(self) -> None:
        actions: dict[int, Callable[[], None]] = {
            1: self._official_candidates,
            2: self._generate_roll,
            3: self._assign_tables,
            4: self._search_voter,
            5: self._voting_menu,
        }
        while True:
            self._clear()
            self._banner("               PROCESO DE ELECCIONES                ")
            self._line("1. Mostrar lista de candidatos(aptos)")
            self._line("2. Asignacion de votantes")
            self._line("3. Asignacion de mesas de votacion")
            self._line("4. Buscar votante por DNI")
            self._line("5. Iniciar eleccciones(Emitir votos) ")
            self._line("6. Regresar al menu principal")
            option = self._read_int("Ingrese su opcion: ")
            if option == 6:
                self._line("Regresando al menu principal...")
                return
            action = actions.get(option) if option is not None else None
            if action is None:
                self._line("ERROR: Opcion fuera de rango, INTENTE OTRA VEZ !!!")
                self._pause()
            else:
                action()

    def _official_candidates(self) -> None:
        self._clear()
        self._banner("                   CANDIDATOS OFICIALES                    ", _WIDE_STARS)
        self._line()
        self._line()
        self._write(self.registry.official_table())
        self._pause()

    def _generate_roll(self) -> None:
        self._clear()
        self._banner("                  ASIGNACION DE VOTANTES                   ", _WIDE_STARS)
        if not self.election.roll_generated:
            self._line(f"Total de votantes que se crearan: {self.election.roll_size}")
            self.election.generate_roll()
            self._line(f"\n{_GREEN}Padron generado exitosamente.{_RESET}")
        else:
            self._line(f"{_YELLOW}El padron ya a sido generado.{_RESET}")
        self._line()
        self._pause()
        self._clear()
        self._banner("                     LISTA DE VOTANTES                     ", _WIDE_STARS)
        self._write(self.election.roll_listing())
        self._pause()

    def _assign_tables(self) -> None:
        self._clear()
        self._banner("               ASIGNACION DE MESAS ELECTORALES             ", _WIDE_STARS)
        self._line("Resumen por distrito:")
        self._line("-" * 44)
        self._line(f"{'Distrito':<28}Votantes")
        self._line("-" * 42)
        for district, count in self.election.district_counts().items():
            self._line(f"{district:<28} \t{count} ")
        self._line()
        self._line(f"Total de votantes:                     {self.election.roll_size}")
        while True:
            capacity = self._ask_int("Ingrese la capacidad por cada mesa:    ")
            try:
                self.election.assign_tables(capacity)
            except ValueError:
                self._line(f"{_RED}La capacidad debe ser mayor que cero.{_RESET}")
            else:
                break
        self._write(self.election.tables_report())
        self._pause()

    def _search_voter(self) -> None:
        self._clear()
        self._banner("                    BUSCAR VOTANTE POR DNI                 ", _WIDE_STARS)
        dni = self._read_int("Ingrese el DNI del votante: ")
        voter = self.election.find_voter(dni) if dni is not None else None
        self._write(describe_voter(voter, self.election.tables))
        self._pause()

    # ----- voting menu ------------------------------------------------------

    def _voting_menu(self) -> None:
        actions: dict[int, Callable[[], None]] = {
            1: self._manual_vote,
            2: self._progress,
            3: self._simulate,
            4: self._close,
        }
        while True:
            self._clear()
            self._banner(f"        {_BLUE}PROCESO DE VOTACION{_RESET}          ")
            self._line("1. Emitir voto manual (votante)")
            self._line("2. Ver avance de las votaciones ")
            self._line("3. Votacion automatica (simular 1000 votos)")
            self._line("4. Culminar proceso de votacion")
            self._line("0. Regresar al menu principal")
            self._line("-" * 52)
            option = self._read_int("Ingrese su opcion: ")
            if option == 0:
                self._line(f"\n{_YELLOW}Regresando al menu principal...{_RESET}")
                self._pause()
                return
            action = actions.get(option) if option is not None else None
            if action is None:
                self._line(f"{_RED}Opcion invalida. Intente de nuevo.{_RESET}")
                self._pause()
            else:
                action()

    def _manual_vote(self) -> None:
        self._clear()
        if self.election.closed:
            self._line(">> El proceso ya fue cerrado. No se pueden emitir mas votos.")
            self._pause()
            return
        self._banner(f"            {_BLUE}EMITIR VOTO{_RESET}              ")
        dni = self._read_int("Ingrese su DNI: ")
        voter = self.election.find_voter(dni) if dni is not None else None
        if voter is None:
            self._line("DNI no encontrado en el padron.")
            self._pause()
            return
        if voter.has_voted:
            self._line("Usted ya emitio su voto.")
            self._pause()
            return
        self._banner(f"          {_BLUE}CEDULA DE SUFRAGIO{_RESET}          ")
        self._line("\tDatos Generales")
        self._line("-" * 51)
        self._line(f"Nombre:   {voter.name}")
        self._line(f"Edad:     {voter.age if voter.age is not None else ''}")
        self._line(f"Distrito: {voter.district}\n")
        if not self._confirm("Son correctos los datos? (S/N): "):
            self._line("Identidad no confirmada.")
            self._pause()
            return
        self._line("\n\t  VOTAR")
        self._line("-" * 47)
        ballot = self.election.ballot()
        for number, candidate in enumerate(ballot, start=1):
            self._line(f"{number:>3}. {candidate.name}  ({candidate.party})")
        if not ballot:
            self._line("\nNo hay candidatos aptos. Votacion cancelada.")
            self._pause()
            return
        choice = self._read_int("\nMarque su voto (numero de candidato): ")
        try:
            outcome = self.election.cast_vote(voter.dni, choice if choice is not None else 0)
        except ElectionError as exc:
            self._line(str(exc))
        else:
            if outcome is VoteOutcome.RECORDED:
                self._line(f"\n{_GREEN}Voto registrado correctamente.{_RESET}")
            else:
                self._line("\nVoto invalido. Se contabilizara como nulo.")
        self._pause()

    def _progress(self) -> None:
        self._clear()
        self._banner(f"          {_BLUE}AVANCE DE LA VOTACION{_RESET}      ")
        self._write(self.election.progress_report())
        self._pause()

    def _simulate(self) -> None:
        self._clear()
        if self.election.closed:
            self._line(">> El proceso ya fue cerrado. No se pueden emitir mas votos.")
            self._pause()
            return
        try:
            cast = self.election.simulate()
        except ElectionError as exc:
            self._line(str(exc))
        else:
            self._line(f"\n{_GREEN}>> Se emitieron {cast} votos automaticamente.{_RESET}")
        self._pause()

    def _close(self) -> None:
        self._clear()
        if self.election.closed:
            self._line(f"{_YELLOW}>> El proceso de votacion ya esta cerrado.{_RESET}")
            self._pause()
            return
        self._banner(f"        {_BLUE}CULMINAR PROCESO DE VOTACION{_RESET}       ")
        self._line("Desea finalizar las elecciones?")
        if self._confirm("[S]SI  /   [N]No : "):
            self.election.close()
            self._line(f"\n{_GREEN}>> Proceso de votacion cerrado exitosamente.{_RESET}")
            self._line("   Ya no se podran emitir mas votos.")
        else:
            self._line("\nOperacion cancelada. El proceso sigue abierto.")
        self._pause()


def main(argv: list[str] | None = None) -> int:
    """Start the console application."""
    parser = argparse.ArgumentParser(prog="onpe", description="Gestion de elecciones")
    parser.add_argument("--seed", type=int, default=None, help="semilla aleatoria")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    ConsoleApp(rng=rng).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())