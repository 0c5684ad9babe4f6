def session(request):
    auth_context = getattr(request, "auth_context", None)
    return {"session": auth_context.session if auth_context is not None else None}
