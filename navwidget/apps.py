from django.apps import AppConfig


class NavwidgetConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "navwidget"
    verbose_name = "Dropdown navigation widget"
