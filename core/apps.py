from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
    verbose_name = 'EMISNET PDF generation'

    def ready(self):
        """Register the report context builders once the app registry is ready."""
        import reports  # noqa: F401
