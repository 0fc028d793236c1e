# onpe

An interactive console program for running a small election in the
districts of Tacna: register candidates, review their eligibility, build a
randomly generated voter roll, assign polling tables, cast votes by hand or
by simulation, and print the results. The menus and messages are in Spanish.

## Installation

```
pip install .
```

## Running

```
onpe
onpe --seed 42
```

`--seed` fixes the random number generator, so the generated voter roll and
simulated votes are the same from run to run.

The main menu offers:

1. Register a candidate (name, sex, age, DNI, party, motto, e-mail)
2. Modify a candidate
3. List all candidates
4. Review candidates — each is marked `APTO`, `OBSERVADO` (under 35) or
   `PENDIENTE` (name, party, DNI or motto missing); for each observed
   candidate a notice addressed to their e-mail is printed
5. Remove a candidate
6. Election process: show eligible candidates, generate the voter roll
   (1000 voters with unique random DNIs), assign polling tables by district,
   look up a voter by DNI, and vote (manually, by simulation, view progress,
   or close the process)
7. Results, ordered by number of votes

0 exits; the program also ends when input runs out.

## Using it as a library

```python
import random

from onpe.models import Candidate, Email
from onpe.registry import CandidateRegistry
from onpe.voters import VoterFactory
from onpe.election import Election

registry = CandidateRegistry(200)
registry.register(Candidate(
    name="Ana Torres", sex="F", age=40, dni="12345678",
    party="Partido Ejemplo", motto="Adelante",
    email=Email("ana", "example.com"),
))

election = Election(registry, VoterFactory(random.Random(1)), 1000)
election.generate_roll()
election.assign_tables(50)
election.simulate(100000)
election.close()
print(election.results_report())
```

The modules:

- `onpe.models` — `Candidate`, `CandidateStatus`, `Email`, `Voter`,
  `PollingTable` and the district and name lists.
- `onpe.voters` — `VoterFactory` for random voters, plus `find_voter`,
  `describe_voter` and `describe_candidate`.
- `onpe.registry` — `CandidateRegistry` (register, get, update, remove,
  eligible, and text tables); `CandidateNotFound` for unknown numbers.
- `onpe.election` — `Election` (roll, tables, `cast_vote`, `simulate`,
  `close`, progress and results); `ElectionError` when an operation is not
  allowed, `VoteOutcome` for recorded or null votes.
- `onpe.cli` — `ConsoleApp` and `main`.

## What it does not do

- Nothing is saved: candidates, voters, tables and votes live in memory and
  are lost when the program ends.
- No e-mail is sent; the notice to observed candidates is only printed.

## Tests

```
pip install .[test]
pytest
```