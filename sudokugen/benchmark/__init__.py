"""Benchmark module for timing puzzle generation."""

from .benchmark import GenerationBenchmark, GenerationResult
from .visualizer import Visualizer

__all__ = ["GenerationBenchmark", "GenerationResult", "Visualizer"]
