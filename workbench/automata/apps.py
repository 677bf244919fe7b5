from django.apps import AppConfig


class AutomataConfig(AppConfig):
    name = "automata"
    verbose_name = "Regex to NFA"
