"""Configuration utilities for the treasure hunt search."""
from .schema import ConfigSchema, EvolutionConfig, OutputConfig, load_config
from .arguments import ArgumentError, ArgumentErrorKind, ParseResult, RunArguments, parse_run_arguments

__all__ = [
    "ConfigSchema",
    "EvolutionConfig",
    "OutputConfig",
    "load_config",
    "ArgumentError",
    "ArgumentErrorKind",
    "ParseResult",
    "RunArguments",
    "parse_run_arguments",
]
