from django.conf import settings

DEFAULTS = {
    "STRICT": False,
    "MAX_DEPTH": 256,
    "DOT_OUTPUT": "NFA.dot",
    "DEFAULT_PATTERN": "(((((a|b)*)|(c*))|(v|((m*)*)))*)p",
    "STATS_OUTPUT": "reports/nfa_stats.csv",
    "PLOT_DIR": "reports/graph",
}


def engine_setting(name: str):
    """Value of `name` from settings.REGEX_ENGINE, falling back to DEFAULTS."""
    overrides = getattr(settings, "REGEX_ENGINE", None) or {}
    return overrides.get(name, DEFAULTS[name])
