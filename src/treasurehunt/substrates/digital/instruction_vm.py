"""Byte-code VM that walks a player across the treasure grid.

Every instruction is one byte: the top two bits select the opcode and the
low six bits carry the operand (a memory cell, a jump target or a direction).
Instructions live in the same 64-cell memory that INCREMENT/DECREMENT write
to, so programs can rewrite themselves while running.
"""
from __future__ import annotations
from enum import IntEnum
from typing import List, NamedTuple, Sequence, Tuple
import numpy as np

from treasurehunt.world.grid import Grid, Tile

MEMORY_SIZE = 64
MAX_ITERATIONS = 500
OPCODE_MASK = 0xC0
OPERAND_MASK = 0x3F


class Opcode(IntEnum):
    INCREMENT = 0b00
    DECREMENT = 0b01
    JUMP = 0b10
    MOVE = 0b11


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]


_SYMBOLS = {Direction.UP: "H", Direction.RIGHT: "P", Direction.DOWN: "D", Direction.LEFT: "L"}
_DELTAS = {Direction.UP: (0, -1), Direction.RIGHT: (1, 0), Direction.DOWN: (0, 1), Direction.LEFT: (-1, 0)}


class VMResult(NamedTuple):
    iterations: int
    treasures_found: int
    step_trace: List[Direction]


def cyclic_increment(n: int) -> int:
    return 0 if n == 0xFF else n + 1


def cyclic_decrement(n: int) -> int:
    return 0xFF if n == 0 else n - 1


def decode(instruction: int) -> Tuple[Opcode, int]:
    return Opcode((instruction & OPCODE_MASK) >> 6), instruction & OPERAND_MASK


class InstructionVM:
    def __init__(self, grid: Grid, start_x: int, start_y: int, treasure_goal: int):
        self.grid = grid
        self.start_x = start_x
        self.start_y = start_y
        self.treasure_goal = treasure_goal
        self.rows, self.columns = grid.shape
        self.reset(np.zeros(MEMORY_SIZE, dtype=np.uint8))

    def reset(self, instructions: Sequence[int]):
        # Private copies: programs rewrite their memory and pick up treasures.
        self.memory: List[int] = [int(b) for b in instructions]
        self.area = np.array(self.grid, dtype=np.uint8, copy=True)
        self.x = self.start_x
        self.y = self.start_y
        self.ip = 0
        self.iterations = 0
        self.treasures_found = 0
        self.trace: List[Direction] = []

    @property
    def running(self) -> bool:
        return (
            self.iterations < MAX_ITERATIONS
            and self.ip < MEMORY_SIZE
            and self.treasures_found < self.treasure_goal
        )

    def step(self) -> bool:
        """Execute one instruction. Returns False when the player left the grid."""
        opcode, operand = decode(self.memory[self.ip])
        inside = True
        if opcode == Opcode.INCREMENT:
            self.memory[operand] = cyclic_increment(self.memory[operand])
        elif opcode == Opcode.DECREMENT:
            self.memory[operand] = cyclic_decrement(self.memory[operand])
        elif opcode == Opcode.MOVE:
            inside = self._move(Direction(operand & 3))
        self.iterations += 1
        if opcode == Opcode.JUMP:
            self.ip = operand
        else:
            self.ip += 1
        return inside

    def _move(self, direction: Direction) -> bool:
        self.trace.append(direction)
        dx, dy = direction.delta
        self.x += dx
        self.y += dy
        if not (0 <= self.x < self.columns and 0 <= self.y < self.rows):
            return False
        if self.area[self.y, self.x] == Tile.TREASURE:
            self.area[self.y, self.x] = Tile.EMPTY
            self.treasures_found += 1
        return True

    def run(self, instructions: Sequence[int]) -> VMResult:
        self.reset(instructions)
        while self.running:
            if not self.step():
                break
        return VMResult(self.iterations, self.treasures_found, list(self.trace))


def run_virtual_machine(
    instructions: Sequence[int], grid: Grid, start_x: int, start_y: int, treasure_goal: int
) -> VMResult:
    return InstructionVM(grid, start_x, start_y, treasure_goal).run(instructions)
