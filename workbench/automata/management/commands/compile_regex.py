from django.core.management.base import BaseCommand, CommandError

from automata.conf import engine_setting
from automata.backend.regex_engine.engine import RegexEngine
from automata.backend.regex_engine.errors import RegexEngineError


class Command(BaseCommand):
    help = "Compile a regular expression into a Thompson NFA and write it as Graphviz DOT."

    def add_arguments(self, parser):
        parser.add_argument("pattern", nargs="?", default=None,
                            help="pattern to compile (defaults to REGEX_ENGINE['DEFAULT_PATTERN'])")
        parser.add_argument("--out", default=None,
                            help="DOT output path (defaults to REGEX_ENGINE['DOT_OUTPUT'])")
        parser.add_argument("--strict", action="store_true",
                            help="reject patterns that are not consumed in full")

    def handle(self, *args, **opts):
        pattern = opts["pattern"]
        if pattern is None:
            pattern = engine_setting("DEFAULT_PATTERN")

        self.stdout.write(f"INPUT: {pattern}\n")

        try:
            engine = RegexEngine(pattern, strict=opts["strict"] or None)
        except RegexEngineError as exc:
            raise CommandError(str(exc))

        self.stdout.write("PARSE TREE:")
        for symbol in engine.parse_tree():
            self.stdout.write(symbol)
        self.stdout.write("")

        if engine.unconsumed:
            self.stdout.write(self.style.WARNING(
                f"Input not consumed from index {engine.cursor}: {engine.unconsumed!r}"
            ))

        try:
            path = engine.write_dot(opts["out"])
        except OSError as exc:
            raise CommandError(f"Cannot write DOT output: {exc}")
        self.stdout.write(self.style.SUCCESS(
            f"NFA built: {engine.nfa.state_count} states, "
            f"{engine.nfa.transition_count} transitions -> {path}"
        ))
