# visualization stuff

from typing import List, Optional

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import numpy as np

from schedsim.queues import Tier
from schedsim.schedulers import SchedulerResult


class SchedulerVisualizer:
    COLORS = [
        '#FF6B6B', '#4ECDC4', '#45B7D1', '#96CEB4', '#FFEAA7',
        '#DDA0DD', '#98D8C8', '#F7DC6F', '#BB8FCE', '#85C1E9',
        '#F8B500', '#00CED1', '#FF69B4', '#32CD32', '#FFD700'
    ]

    def __init__(self, results: List[SchedulerResult]):
        self.results = results
        self.process_colors = {}
        all_pids = set()
        for result in results:
            for entry in result.gantt_chart:
                all_pids.add(entry.pid)
        for i, pid in enumerate(sorted(all_pids)):
            self.process_colors[pid] = self.COLORS[i % len(self.COLORS)]

    def draw_gantt_chart(self, ax, result: SchedulerResult, title: Optional[str] = None):
        ax.clear()
        ax.set_title(title or result.name, fontsize=12, fontweight='bold', pad=10)

        y_pos = 0.5
        height = 0.6

        for entry in result.gantt_chart:
            color = self.process_colors.get(entry.pid, '#808080')
            rect = mpatches.FancyBboxPatch(
                (entry.start, y_pos - height/2),
                entry.end - entry.start,
                height,
                boxstyle="round,pad=0.02",
                facecolor=color,
                edgecolor='black',
                linewidth=1.5,
                # low-queue slices are hatched
                hatch='//' if entry.tier is Tier.LOW else None,
            )
            ax.add_patch(rect)

            mid_x = (entry.start + entry.end) / 2
            if entry.end - entry.start >= 2:
                ax.text(mid_x, y_pos, f'P{entry.pid}',
                        ha='center', va='center',
                        fontsize=9, fontweight='bold', color='white')

        ax.set_xlim(-1, result.total_time + 1)
        ax.set_ylim(0, 1)
        ax.set_xlabel('Time', fontsize=10)
        ax.set_yticks([])

        max_time = result.total_time
        step = max(1, max_time // 10)
        ax.set_xticks(range(0, max_time + 1, step))
        ax.grid(axis='x', linestyle='--', alpha=0.5)

        metrics_text = (f"Avg Wait: {result.avg_waiting_time:.1f}  |  "
                        f"Avg TAT: {result.avg_turnaround_time:.1f}  |  "
                        f"CPU: {result.cpu_utilization:.1f}%")
        ax.text(0.5, -0.15, metrics_text, transform=ax.transAxes,
                ha='center', fontsize=9, style='italic')

    def plot_all_gantt_charts(self):
        n = len(self.results)
        fig, axes = plt.subplots(n, 1, figsize=(14, 3 * n))
        fig.suptitle('CPU Scheduling Algorithms - Gantt Charts', fontsize=14, fontweight='bold')

        if n == 1:
            axes = [axes]

        for ax, result in zip(axes, self.results):
            self.draw_gantt_chart(ax, result)

        legend_patches = [mpatches.Patch(color=color, label=f'P{pid}')
                          for pid, color in sorted(self.process_colors.items())]
        if legend_patches:
            fig.legend(handles=legend_patches, loc='upper right', ncol=min(8, len(legend_patches)))

        plt.tight_layout(rect=[0, 0, 1, 0.96])
        return fig, axes

    def _bar_panel(self, ax, names, values, colors, ylabel, title, fmt='{:.1f}'):
        bars = ax.bar(names, values, color=colors, edgecolor='black')
        ax.set_ylabel(ylabel)
        ax.set_title(title, fontweight='bold')
        ax.tick_params(axis='x', rotation=45)
        for bar, val in zip(bars, values):
            ax.text(bar.get_x() + bar.get_width()/2, bar.get_height() + 0.5,
                    fmt.format(val), ha='center', va='bottom', fontsize=9)

    def plot_performance_comparison(self):
        fig, axes = plt.subplots(2, 2, figsize=(14, 10))
        fig.suptitle('Scheduling Algorithm Performance Comparison', fontsize=14, fontweight='bold')

        names = [r.name.split('(')[0].strip() for r in self.results]
        colors = plt.cm.viridis(np.linspace(0.2, 0.8, len(self.results)))

        self._bar_panel(axes[0, 0], names, [r.avg_waiting_time for r in self.results], colors,
                        'Average Waiting Time', 'Average Waiting Time Comparison')
        self._bar_panel(axes[0, 1], names, [r.avg_turnaround_time for r in self.results], colors,
                        'Average Turnaround Time', 'Average Turnaround Time Comparison')
        self._bar_panel(axes[1, 0], names, [r.cpu_utilization for r in self.results], colors,
                        'CPU Utilization (%)', 'CPU Utilization Comparison', fmt='{:.1f}%')
        axes[1, 0].set_ylim(0, 110)
        self._bar_panel(axes[1, 1], names, [r.avg_response_time for r in self.results], colors,
                        'Average Response Time', 'Average Response Time Comparison')

        plt.tight_layout()
        return fig, axes
