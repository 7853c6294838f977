from __future__ import annotations
import logging
import os
from datetime import datetime
from typing import Optional, Sequence

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from studyboard.subjects import SubjectTotal

# stone / amber palette
COLORS = ["#78716c", "#d97706", "#a8a29e", "#b45309", "#fb923c", "#57534e"]


def render_subject_chart(ranked: Sequence[SubjectTotal], out_dir: str,
                         day: datetime | None = None) -> Optional[str]:
    """Bar and pie chart of minutes per subject; returns the PNG path."""
    if not ranked:
        logging.info("Nessun dato di studio per il grafico delle materie.")
        return None

    os.makedirs(out_dir, exist_ok=True)
    names = [s.name for s in ranked]
    minutes = [s.total_minutes for s in ranked]
    colors = [COLORS[i % len(COLORS)] for i in range(len(ranked))]

    fig, (bar_ax, pie_ax) = plt.subplots(1, 2, figsize=(12, 5))
    bar_ax.bar(range(len(names)), minutes, color=colors)
    bar_ax.set_xticks(range(len(names)))
    bar_ax.set_xticklabels(names, rotation=30, ha="right")
    bar_ax.set_ylabel("Minuti di studio")
    bar_ax.set_title("Tempo per materia")
    bar_ax.grid(axis="y", alpha=0.3)

    pie_ax.pie(minutes, labels=names, colors=colors, autopct="%1.0f%%")
    pie_ax.set_title("Distribuzione")
    fig.tight_layout()

    date_str = (day or datetime.now()).strftime("%Y-%m-%d")
    out_file = os.path.join(out_dir, f"grafico_materie_{date_str}.png")
    fig.savefig(out_file)
    plt.close(fig)
    logging.info(f"Grafico materie salvato in {out_file}")
    return out_file
