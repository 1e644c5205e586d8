# apps/core/middleware.py
import logging
import time

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """
    Journalise les appels API : méthode, chemin, statut, utilisateur et durée
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith('/api/'):
            return self.get_response(request)

        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000

        # L'authentification JWT est faite par DRF, qui renseigne request.user
        user = getattr(request, 'user', None)
        user_id = user.pk if user is not None and user.is_authenticated else None

        level = logging.WARNING if response.status_code >= 400 else logging.DEBUG
        logger.log(
            level,
            "%s %s -> %s (user=%s, %.1f ms)",
            request.method, request.path, response.status_code, user_id, elapsed_ms
        )
        return response
