from functools import wraps

from django.core.exceptions import PermissionDenied

from .access import access_for
from .policies import allows


def gate_required(*abilities):
    """
    Réserve une action de viewset aux utilisateurs disposant d'au moins
    une des capacités (gate ou permission nommée)
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(view, request, *args, **kwargs):
            access = access_for(request)
            if any(allows(access, ability) for ability in abilities):
                return view_func(view, request, *args, **kwargs)
            raise PermissionDenied("Cette fonctionnalité n'est pas accessible avec vos habilitations")
        return wrapper
    return decorator


def self_or_gate_required(*abilities, lookup='pk'):
    """Comme gate_required, mais l'utilisateur visé par l'URL passe toujours"""
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(view, request, *args, **kwargs):
            if str(request.user.pk) == str(kwargs.get(lookup)):
                return view_func(view, request, *args, **kwargs)
            access = access_for(request)
            if any(allows(access, ability) for ability in abilities):
                return view_func(view, request, *args, **kwargs)
            raise PermissionDenied("Vous ne pouvez agir que sur votre propre compte")
        return wrapper
    return decorator
