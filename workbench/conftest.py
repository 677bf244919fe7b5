import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "regexlab.settings")
django.setup()
