from functools import wraps

from django.shortcuts import redirect


def session_required(view_func):
    """
    Route guard: without a session the protected view is never called and
    the visitor is sent to the sign-in page instead.
    """
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        auth_context = getattr(request, "auth_context", None)
        if auth_context is None or auth_context.session is None:
            return redirect('users:signin')
        return view_func(request, *args, **kwargs)
    return _wrapped
