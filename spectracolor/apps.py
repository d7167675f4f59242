from django.apps import AppConfig


class SpectraColorConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "spectracolor"
    verbose_name = "SpectraColor"

    def ready(self):
        from spectracolor.config.logging import init_logging
        from spectracolor.services import get_config

        config = get_config()
        if config.configure_logging:
            init_logging(config)
