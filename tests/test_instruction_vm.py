import numpy as np

from treasurehunt.substrates.digital.instruction_vm import (
    MAX_ITERATIONS,
    Direction,
    InstructionVM,
    Opcode,
    cyclic_decrement,
    cyclic_increment,
    decode,
    run_virtual_machine,
)


def _program(*prefix):
    out = np.zeros(64, dtype=np.uint8)
    out[: len(prefix)] = prefix
    return out


def test_cyclic_wraparound():
    assert cyclic_increment(255) == 0
    assert cyclic_decrement(0) == 255
    n, seen = 17, set()
    for _ in range(256):
        seen.add(n)
        n = cyclic_increment(n)
    assert n == 17
    assert len(seen) == 256


def test_decode_is_total():
    assert decode(0x00) == (Opcode.INCREMENT, 0)
    assert decode(0x7F) == (Opcode.DECREMENT, 63)
    assert decode(0x85) == (Opcode.JUMP, 5)
    assert decode(0xC2) == (Opcode.MOVE, 2)
    for b in range(256):
        opcode, operand = decode(b)
        assert 0 <= operand < 64


def test_all_zero_program_walks_off_the_end(grid):
    result = run_virtual_machine(_program(), grid, 3, 6, 5)
    assert result.iterations == 64
    assert result.treasures_found == 0
    assert result.step_trace == []


def test_move_out_of_bounds_counts_the_step(grid):
    result = run_virtual_machine(_program(0xC0), grid, 3, 0, 5)
    assert result.iterations == 1
    assert result.treasures_found == 0
    assert result.step_trace == [Direction.UP]


def test_jump_loop_hits_iteration_cap(grid):
    result = run_virtual_machine(_program(0x80), grid, 3, 6, 5)
    assert result.iterations == MAX_ITERATIONS


def test_collects_treasure_once(grid):
    # From (3, 6): up to (3, 5), right onto treasure (4, 5), left, right again.
    program = _program(0xC0, 0xC1, 0xC3, 0xC1)
    result = run_virtual_machine(program, grid, 3, 6, 5)
    assert result.treasures_found == 1
    assert [d.symbol for d in result.step_trace] == ["H", "P", "L", "P"]
    assert grid[5, 4] == 2


def test_halts_when_goal_reached(grid):
    program = _program(0xC0, 0xC1, 0xC0, 0xC0)
    result = run_virtual_machine(program, grid, 3, 6, 1)
    assert result.treasures_found == 1
    assert result.iterations == 2


def test_self_modifying_program(grid):
    # Increment cell 1 (0x3F -> 0x40) turns it into DECREMENT cell 0 before it runs.
    program = _program(0x01, 0x3F)
    vm = InstructionVM(grid, 3, 6, 5)
    vm.reset(program)
    vm.step()
    assert vm.memory[1] == 0x40
    vm.step()
    assert vm.memory[0] == 0x00
    assert program[1] == 0x3F


def test_random_programs_stay_within_limits(grid, rng):
    for _ in range(200):
        program = rng.integers(0, 256, size=64, dtype=np.uint8)
        vm = InstructionVM(grid, 3, 6, 5)
        result = vm.run(program)
        assert result.iterations <= MAX_ITERATIONS
        assert 0 <= result.treasures_found <= 5
        assert vm.ip <= 64
