"""Treasure grid environment."""
from .grid import Grid, GridSurvey, Tile, build_environment, survey_grid
from .render import render_grid, format_trace

__all__ = ["Grid", "GridSurvey", "Tile", "build_environment", "survey_grid", "render_grid", "format_trace"]
