"""Digital instruction substrate."""
from .instruction_vm import InstructionVM, Direction, Opcode, VMResult, run_virtual_machine
from .genome import Genome, random_instructions
from .fitness import calculate_fitness, evaluate_genome

__all__ = [
    "InstructionVM",
    "Direction",
    "Opcode",
    "VMResult",
    "run_virtual_machine",
    "Genome",
    "random_instructions",
    "calculate_fitness",
    "evaluate_genome",
]
