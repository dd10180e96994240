from django.apps import AppConfig
from django.conf import settings


class TicketingConfig(AppConfig):
    name = "ticketing"
    verbose_name = "Seat ticket registry"

    def ready(self) -> None:
        from ticketing.logger_config import configure_logging

        configure_logging(settings.TICKETING["LOG_LEVEL"])
