from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.dispatch import receiver


@receiver(user_logged_in)
def mirror_login(sender, request, user, **kwargs):
    auth_context = getattr(request, "auth_context", None)
    if auth_context is not None:
        auth_context.set_session(user)


@receiver(user_logged_out)
def mirror_logout(sender, request, user, **kwargs):
    auth_context = getattr(request, "auth_context", None)
    if auth_context is not None:
        auth_context.clear_session()
