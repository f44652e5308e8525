"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import GenerationResult


class Visualizer:
    """
    Chart generator for generation benchmark results.

    Plots how long ``generate`` takes for each hole count.
    """

    def __init__(self, results: List[GenerationResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of generation results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        # Set style
        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_hole_count(),
            self.plot_time_distribution(),
        ]

    def plot_time_by_hole_count(self) -> str:
        """Create bar chart of average generation time per hole count."""
        fig, ax = plt.subplots(figsize=(10, 6))

        hole_counts = sorted(set(r.hole_count for r in self.results))
        avg_times = []
        max_times = []
        for holes in hole_counts:
            times = [r.time_seconds for r in self.results if r.hole_count == holes]
            avg_times.append(np.mean(times))
            max_times.append(np.max(times))

        labels = [str(h) for h in hole_counts]
        bars = ax.bar(labels, avg_times, edgecolor='black', linewidth=0.5, label='average')
        ax.scatter(labels, max_times, color='black', marker='_', s=400, zorder=3, label='max')

        for bar, value in zip(bars, avg_times):
            ax.annotate(f'{value:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Holes', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Generation Time by Hole Count', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)
        ax.legend()

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_by_hole_count.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_time_distribution(self) -> str:
        """Create box plot of generation times per hole count."""
        fig, ax = plt.subplots(figsize=(10, 6))

        sns.boxplot(
            x=[r.hole_count for r in self.results],
            y=[r.time_seconds for r in self.results],
            ax=ax,
        )

        ax.set_xlabel('Holes', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Generation Time Distribution', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path
