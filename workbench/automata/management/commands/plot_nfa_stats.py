from django.core.management.base import BaseCommand, CommandError
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from automata.conf import engine_setting


class Command(BaseCommand):
    help = "Plot NFA size statistics exported by export_nfa_stats."

    def add_arguments(self, parser):
        parser.add_argument("--csv", default=None,
                            help="stats CSV (defaults to REGEX_ENGINE['STATS_OUTPUT'])")
        parser.add_argument("--out-dir", default=None,
                            help="image directory (defaults to REGEX_ENGINE['PLOT_DIR'])")

    def handle(self, *args, **opts):
        csv_path = Path(opts["csv"] or engine_setting("STATS_OUTPUT"))
        out_dir = Path(opts["out_dir"] or engine_setting("PLOT_DIR"))

        if not csv_path.exists():
            raise CommandError(f"Stats CSV not found: {csv_path}")

        self.stdout.write("Loading NFA stats...")
        df = pd.read_csv(csv_path, keep_default_na=False)

        missing = [c for c in ("status", "pattern_length", "states") if c not in df.columns]
        if missing:
            raise CommandError(f"CSV file is missing column(s): {', '.join(missing)}")

        df = df[df["status"] == "ok"]
        df = df.assign(states=pd.to_numeric(df["states"]),
                       pattern_length=pd.to_numeric(df["pattern_length"]))
        self.stdout.write(f"Loaded {len(df)} compiled patterns.")

        out_dir.mkdir(parents=True, exist_ok=True)

        # ===============================
        # states per NFA
        # ===============================
        plt.figure(figsize=(8, 5))
        plt.hist(df["states"], bins=30, edgecolor='black')
        plt.title("Distribution of NFA sizes")
        plt.xlabel("Number of states")
        plt.ylabel("Frequency")
        plt.grid(alpha=0.3)

        out1 = out_dir / "states_hist.png"
        plt.savefig(out1, dpi=150)
        plt.close()
        self.stdout.write(f"Histogram saved to: {out1}")

        # ===============================
        # pattern length vs states
        # ===============================
        plt.figure(figsize=(8, 5))
        plt.scatter(df["pattern_length"], df["states"], alpha=0.6)
        plt.title("Pattern length vs NFA states")
        plt.xlabel("Pattern length (characters)")
        plt.ylabel("Number of states")
        plt.grid(alpha=0.3)

        out2 = out_dir / "length_vs_states.png"
        plt.savefig(out2, dpi=150)
        plt.close()
        self.stdout.write(f"Scatter plot saved to: {out2}")

        self.stdout.write(self.style.SUCCESS("Done."))
