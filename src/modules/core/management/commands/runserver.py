"""``runserver`` listening on ``settings.SERVER_PORT`` unless told otherwise."""

from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    help = "Starts the catalog development server (default port: SERVER_PORT)."

    default_port = str(settings.SERVER_PORT)
