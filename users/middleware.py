from .auth_context import AuthContext


class AuthContextMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # one context per request; the session inside resolves lazily from request.user
        request.auth_context = AuthContext(request)
        return self.get_response(request)
