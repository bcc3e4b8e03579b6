"""The labyrinth exploration game: scenario loading, explorer state and the game loop."""

from __future__ import annotations

import argparse
import enum
import re
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterator, TextIO

from graphquest.csvio import read_csv_line, read_csv_rows, split_string

MAX_ROOMS = 128
START_ROOM = 1
START_TIME = 10
DIRECTIONS = ("Arriba", "Abajo", "Izquierda", "Derecha")
_FINAL_MARKS = ("Si", "SI", "si")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way, giving 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _parse_choice(line: str) -> int | None:
    match = _INT_PREFIX.match(line)
    return int(match.group(1)) if match else None


@dataclass
class Item:
    """An object that can lie in a room or be carried."""

    label: str
    points: int
    weight: int

    def describe(self) -> str:
        return f"{self.label} ({self.points} pts, {self.weight} kg)"


@dataclass(eq=False)
class Room:
    """A node of the labyrinth with up to four exits."""

    ident: int
    title: str
    detail: str
    items: list[Item] = field(default_factory=list)
    link_ids: tuple[int, int, int, int] = (-1, -1, -1, -1)
    is_final: bool = False
    links: list[Room | None] = field(
        default_factory=lambda: [None] * len(DIRECTIONS), repr=False
    )


class Labyrinth:
    """Rooms indexed by their identifier, from 0 to 127."""

    def __init__(self) -> None:
        self._rooms: dict[int, Room] = {}
        self._loaded = 0

    def add(self, room: Room) -> None:
        """Place ``room`` at its identifier, replacing any room already there."""
        if not 0 <= room.ident < MAX_ROOMS:
            raise ValueError(f"room identifier {room.ident} outside 0..{MAX_ROOMS - 1}")
        self._rooms[room.ident] = room
        self._loaded += 1

    def link(self) -> None:
        """Resolve every room's exit identifiers into room references."""
        for room in self._rooms.values():
            for direction, target in enumerate(room.link_ids):
                if target in self._rooms:
                    room.links[direction] = self._rooms[target]

    def start(self) -> Room | None:
        """Return the room where a game begins, or ``None`` if it is missing."""
        return self._rooms.get(START_ROOM)

    def __getitem__(self, ident: int) -> Room:
        return self._rooms[ident]

    def __contains__(self, ident: object) -> bool:
        return ident in self._rooms

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms.values())

    def __len__(self) -> int:
        return self._loaded


def _room_from_fields(fields: list[str]) -> Room:
    if len(fields) < 9:
        raise ValueError(f"scenario row has {len(fields)} fields, 9 are needed")
    items = []
    for spec in split_string(fields[3], ";"):
        parts = split_string(spec, ",")
        if len(parts) < 3:
            raise ValueError(f"item {spec!r} needs a name, a value and a weight")
        items.append(Item(parts[0], _atoi(parts[1]), _atoi(parts[2])))
    up, down, left, right = (_atoi(text) for text in fields[4:8])
    return Room(
        ident=_atoi(fields[0]),
        title=fields[1],
        detail=fields[2],
        items=items,
        link_ids=(up, down, left, right),
        is_final=fields[8] in _FINAL_MARKS,
    )


def parse_scenario(stream: TextIO, labyrinth: Labyrinth) -> None:
    """Add the rooms described by a scenario CSV; the first line is a header."""
    read_csv_line(stream, ",")
    for fields in read_csv_rows(stream, ","):
        labyrinth.add(_room_from_fields(fields))


def load_scenario(path: str, labyrinth: Labyrinth) -> None:
    """Read the scenario file at ``path`` into ``labyrinth``."""
    with open(path, encoding="utf-8") as stream:
        parse_scenario(stream, labyrinth)


def travel_cost(load: int) -> int:
    """Time spent moving one room while carrying ``load`` kilograms."""
    return -(-(load + 1) // 10)


@dataclass
class Explorer:
    """The player's inventory, carried weight, score and remaining time."""

    inventory: list[Item] = field(default_factory=list)
    load: int = 0
    points: int = 0
    time: int = START_TIME

    def take_from(self, room: Room) -> Item | None:
        """Pick up the first item of ``room``; ``None`` if the room is empty."""
        if not room.items:
            return None
        item = room.items.pop(0)
        self.inventory.insert(0, item)
        self.load += item.weight
        self.points += item.points
        return item

    def drop(self, position: int) -> Item:
        """Discard the item at 1-based ``position``; costs one unit of time."""
        if position < 1:
            raise ValueError("position must be 1 or more")
        if position > len(self.inventory):
            raise IndexError(f"no item at position {position}")
        item = self.inventory.pop(position - 1)
        self.load -= item.weight
        self.points -= item.points
        self.time -= 1
        return item

    def reset(self) -> None:
        """Empty the inventory and restore the starting time."""
        self.inventory.clear()
        self.load = 0
        self.points = 0
        self.time = START_TIME


class Outcome(enum.Enum):
    FINISHED = "finished"
    TIMEOUT = "timeout"
    INTERRUPTED = "interrupted"
    QUIT = "quit"


class GameSession:
    """One play-through of a labyrinth, driven by lines of input."""

    def __init__(
        self,
        labyrinth: Labyrinth,
        input_func: Callable[[], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.labyrinth = labyrinth
        self._input = input_func
        self._output = output if output is not None else sys.stdout
        self.explorer = Explorer()
        self.position = labyrinth.start()

    def _say(self, text: str) -> None:
        self._output.write(text)

    def _read_choice(self) -> int | None:
        """Return the number typed, ``None`` if none; raise EOFError at end."""
        self._output.flush()
        return _parse_choice(self._input())

    def _show_inventory(self) -> None:
        if not self.explorer.inventory:
            self._say("  (vacio)\n")
        for item in self.explorer.inventory:
            self._say(f"  - {item.describe()}\n")

    def _show_state(self, room: Room) -> None:
        explorer = self.explorer
        self._say(f"\n=== NODO {room.ident}: {room.title} ===\n")
        self._say(f"{room.detail}\n\n")
        self._say("Objetos en el lugar:\n")
        if not room.items:
            self._say("  (sin objetos)\n")
        for item in room.items:
            self._say(f"  - {item.describe()}\n")
        self._say("\n-- Estado del Explorador --\n")
        self._say(f"Tiempo: {explorer.time}\n")
        self._say(f"Carga total: {explorer.load} kg\n")
        self._say(f"Puntos: {explorer.points} pts\n")
        self._say("Inventario:\n")
        self._show_inventory()
        self._say("\n-- Opciones --\n")
        for number, (name, target) in enumerate(zip(DIRECTIONS, room.links), 1):
            if target is not None:
                self._say(f"  {number}) Ir {name} -> nodo {target.ident}\n")
        self._say("  5) Tomar objeto\n  6) Dejar objeto\n  7) Reiniciar\n  8) Salir\n")
        self._say("Elegir: ")

    def _move(self, room: Room, direction: int) -> None:
        target = room.links[direction]
        if target is None:
            self._say("Direccion invalida.\n")
            return
        self.explorer.time -= travel_cost(self.explorer.load)
        self.position = target

    def _take(self, room: Room) -> None:
        item = self.explorer.take_from(room)
        if item is None:
            self._say("No hay objetos.\n")
        else:
            self._say(f"Objeto obtenido: {item.describe()}\n")

    def _drop(self) -> None:
        inventory = self.explorer.inventory
        if not inventory:
            self._say("Inventario vacio.\n")
            return
        self._say("Cual objeto deseas descartar?\n")
        for number, item in enumerate(inventory, 1):
            self._say(f"  {number}) {item.describe()}\n")
        self._say("  0) Cancelar\nElegir: ")
        try:
            choice = self._read_choice()
        except EOFError:
            choice = None
        if choice is None or choice <= 0:
            self._say("Accion cancelada.\n")
            return
        try:
            item = self.explorer.drop(choice)
        except IndexError:
            self._say("Seleccion invalida.\n")
            return
        self._say(f"Descartado: {item.label}\n")

    def _reset(self) -> None:
        self.explorer.reset()
        self.position = self.labyrinth.start()
        self._say("Reiniciado.\n")

    def run(self) -> Outcome:
        """Play until the explorer quits, runs out of time or reaches the end."""
        explorer = self.explorer
        while explorer.time > 0 and self.position is not None and not self.position.is_final:
            room = self.position
            self._show_state(room)
            try:
                choice = self._read_choice()
            except EOFError:
                choice = 8
            if choice in (1, 2, 3, 4):
                self._move(room, choice - 1)
            elif choice == 5:
                self._take(room)
            elif choice == 6:
                self._drop()
            elif choice == 7:
                self._reset()
            elif choice == 8:
                self._say("Fin del juego.\n")
                return Outcome.QUIT
            else:
                self._say("Invalido.\n")

        if self.position is not None and self.position.is_final:
            self._say("\nLlegaste al final.\nInventario:\n")
            self._show_inventory()
            self._say(f"Puntaje: {explorer.points} pts\n")
            return Outcome.FINISHED
        if explorer.time <= 0:
            self._say("\nTiempo agotado. Derrota.\n")
            return Outcome.TIMEOUT
        self._say("\nJuego interrumpido.\n")
        return Outcome.INTERRUPTED


def _load_into(path: str, labyrinth: Labyrinth) -> None:
    try:
        load_scenario(path, labyrinth)
    except OSError as exc:
        print(f"Error abriendo archivo: {exc.strerror or exc}", file=sys.stderr)
        return
    labyrinth.link()


def _read_token() -> str | None:
    while True:
        try:
            line = input()
        except EOFError:
            return None
        tokens = line.split()
        if tokens:
            return tokens[0]


def main(argv: list[str] | None = None) -> int:
    """Run the menu: load a scenario, then play it."""
    parser = argparse.ArgumentParser(prog="graphquest", description="Explore a labyrinth.")
    parser.add_argument("scenario", nargs="?", help="scenario CSV to load at start")
    args = parser.parse_args(argv)

    labyrinth = Labyrinth()
    if args.scenario:
        _load_into(args.scenario, labyrinth)

    while True:
        print("1) Cargar Escenario")
        print("2) Comenzar Juego")
        try:
            choice = _parse_choice(input())
        except EOFError:
            break
        if choice == 1:
            print("Archivo del escenario:")
            path = _read_token()
            if path is None:
                break
            _load_into(path, labyrinth)
        elif choice == 2:
            if len(labyrinth) > 0:
                GameSession(labyrinth).run()
            else:
                print("Primero carga un escenario.")
            break
        else:
            print("Opcion invalida.")

    print("Fin del programa.")
    return 0