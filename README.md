# portagens

A small console application for keeping toll-road records in memory. It holds:

- **donos**: vehicle owners, keyed by taxpayer number;
- **veículos**: vehicles, keyed by number plate and linked to their owner;
- **sensores**: road sensors with a designation and coordinates;
- **distâncias**: distances between pairs of sensors;
- **passagens**: passages of vehicles by sensors, with a date and an entry/exit type.

The interface text is in Portuguese.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
portagens [DATA_DIR]
```

`DATA_DIR` is the directory holding the data files; it defaults to `../data`.
On start the program loads every file it finds there, reports files it
cannot open and carries on, then prints an estimate of the memory the loaded
data takes. The main menu offers:

1. Donos: register an owner, list owners alphabetically or by taxpayer number
2. Veículos: register a vehicle, list by plate, by make (then model) or by model (then make)
3. Passagens: register a passage, stamped with the current date and time, for a known vehicle code
4. Consultas
5. Estatísticas: memory estimate of the loaded data
6. Exportar
0. Sair: save and quit

Listings are shown 30 entries per page; enter a page number to move to it, or
`-1` to go back. End of input leaves the current menu.

## Data files

All files are tab separated text:

| File             | Columns                                                        |
|------------------|----------------------------------------------------------------|
| `donos.txt`      | taxpayer number, name, postal code                             |
| `carros.txt`     | plate, make, model, year, owner taxpayer number, vehicle code  |
| `sensores.txt`   | sensor code, designation, latitude, longitude                  |
| `distancias.txt` | sensor code, sensor code, distance                             |
| `passagem.txt`   | sensor id, vehicle code, `DD-MM-YYYY hh:mm:ss.ms`, type (0 = entry, 1 = exit) |

Lines that do not match their format are skipped. A vehicle whose owner is
not known is reported on standard error and left out. While loading
passages, progress is printed every 100 000 records.

On exit, `donos.txt`, `carros.txt` and `passagem.txt` are written back to the
data directory. Passages are written with dates as `YYYY-MM-DD hh:mm:ss`,
without milliseconds, which is not the layout they are read in; keep a copy
of the original `passagem.txt` if it is to be loaded again.

## Using it as a library

```python
from datetime import datetime

from portagens.bdados import BDados

bd = BDados("Dados Portagens")
bd.load("data")

dono = bd.donos.find(123456789)
veiculo = bd.veiculos.find_by_matricula("XX-00-XX")
print(bd.distancias.find(1, 2))          # None when the pair is unknown

for v in bd.veiculos.sorted_by("marca"):
    print(v.matricula, v.marca, v.modelo)

inicio, fim = datetime(2024, 1, 1), datetime(2024, 1, 31, 23, 59, 59)
for v in bd.passagens.vehicles_in_period(bd.veiculos, inicio, fim):
    print(v.matricula)
```

Modules:

- `portagens.dono`: `Dono`, `DonoTable` (`insert`, `find`, `load`, `save`, `collect`, `memory_usage`)
- `portagens.veiculo`: `Veiculo`, `VeiculoTable` (`insert`, `find_by_matricula`, `find_by_codigo`, `load`, `save`, `sorted_by`, `memory_usage`)
- `portagens.sensor`: `Sensor`, `SensorList` (`insert`, `find`, `load`, `memory_usage`)
- `portagens.distancia`: `Distancia`, `DistanciaList` (`insert`, `find`, `load`, `memory_usage`)
- `portagens.passagem`: `Passagem`, `parse_passagem`, `PassagemList` (`insert`, `load`, `save`, `in_period`, `list_period`, `vehicles_in_period`, `list_vehicles_period`)
- `portagens.bdados`: `BDados`, holding all of the above (`load`, `calculate_memory`)
- `portagens.menu` and `portagens.main`: the interactive menus and the `portagens` command

The interactive methods (`register`, `list_alphabetical`, `list_sorted`,
the menu functions, `run`) take an `ask` callable used in place of `input`.

Memory figures are fixed per-record estimates plus the length of the stored
text, not measurements of Python objects.

## What it does not do

- The **Consultas** and **Exportar** menu entries only print a notice that
  the feature is not available yet.
- Sensors and distances are loaded and can be queried from code, but the
  menus offer no way to view or edit them, and they are never saved.
- Vehicle codes given at registration start from 1 in each session and do
  not take the codes of loaded vehicles into account.
- All data lives in memory; there is no database storage.