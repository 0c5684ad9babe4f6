from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'users'

    # login/logout receivers keep request.auth_context in step
    def ready(self):
        import users.signals
