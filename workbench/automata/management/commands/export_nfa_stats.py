from django.core.management.base import BaseCommand, CommandError
from pathlib import Path
import csv

from automata.conf import engine_setting
from automata.backend.regex_engine.engine import RegexEngine
from automata.backend.regex_engine.errors import RegexEngineError


COLUMNS = [
    "pattern",
    "status",
    "pattern_length",
    "states",
    "transitions",
    "epsilon_transitions",
    "symbol_transitions",
    "reachable",
    "unconsumed",
    "error",
]


def read_patterns(path: Path):
    """One pattern per line; blank lines and '#' comments are skipped."""
    out = []
    with path.open(encoding="utf8") as f:
        for line in f:
            p = line.rstrip("\r\n")
            if not p.strip() or p.lstrip().startswith("#"):
                continue
            out.append(p)
    return out


class Command(BaseCommand):
    help = "Compile a batch of patterns and export per-pattern NFA statistics to CSV."

    def add_arguments(self, parser):
        parser.add_argument("--patterns", required=True,
                            help="text file with one pattern per line")
        parser.add_argument("--out", default=None,
                            help="CSV output path (defaults to REGEX_ENGINE['STATS_OUTPUT'])")
        parser.add_argument("--strict", action="store_true",
                            help="reject patterns that are not consumed in full")
        parser.add_argument("--dot-dir", default=None,
                            help="also write pattern_<n>.dot for each compiled pattern")

    def handle(self, *args, **opts):
        src = Path(opts["patterns"])
        if not src.exists():
            raise CommandError(f"Pattern file not found: {src}")

        out = Path(opts["out"] or engine_setting("STATS_OUTPUT"))
        out.parent.mkdir(parents=True, exist_ok=True)
        dot_dir = Path(opts["dot_dir"]) if opts["dot_dir"] else None

        patterns = read_patterns(src)
        self.stdout.write(f"Compiling {len(patterns)} patterns from {src}...")

        ok, failed = 0, 0
        with out.open("w", newline="", encoding="utf8") as f:
            w = csv.writer(f)
            w.writerow(COLUMNS)

            for i, pattern in enumerate(patterns, 1):
                try:
                    engine = RegexEngine(pattern, strict=opts["strict"] or None)
                except RegexEngineError as exc:
                    failed += 1
                    w.writerow([pattern, "error", len(pattern), "", "", "", "", "", "", str(exc)])
                    self.stderr.write(self.style.ERROR(f"[{i}] {pattern!r}: {exc}"))
                    continue

                stats = engine.summary()
                w.writerow([
                    pattern,
                    "ok",
                    len(pattern),
                    stats["states"],
                    stats["transitions"],
                    stats["epsilon_transitions"],
                    stats["symbol_transitions"],
                    stats["reachable"],
                    engine.unconsumed,
                    "",
                ])
                ok += 1

                if dot_dir is not None:
                    engine.write_dot(dot_dir / f"pattern_{i}.dot")

        self.stdout.write(self.style.SUCCESS(
            f"Stats written -> {out} ({ok} compiled, {failed} failed)"
        ))
