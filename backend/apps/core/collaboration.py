"""
Appartenance aux équipes : collaborateurs d'un portefeuille ou d'un client
"""


def _has_member(instance, relation, user):
    # Utilise le prefetch_related s'il a été fait, sinon une requête d'existence
    prefetched = getattr(instance, '_prefetched_objects_cache', {})
    if relation in prefetched:
        return any(member.pk == user.pk for member in prefetched[relation])
    return getattr(instance, relation).filter(pk=user.pk).exists()


def _resolve_user(user):
    user = getattr(user, 'user', user)  # accepte un AccessContext
    if user is None or not user.is_authenticated:
        return None
    return user


def is_collaborator_for_portfolio(user, portfolio):
    """Vrai si l'utilisateur fait partie des collaborateurs du portefeuille"""
    user = _resolve_user(user)
    if user is None or portfolio is None:
        return False
    return _has_member(portfolio, 'collaborators', user)


def is_collaborator_for_client(user, client):
    """
    Vrai si l'utilisateur est collaborateur direct du client,
    ou collaborateur du portefeuille auquel le client appartient
    """
    user = _resolve_user(user)
    if user is None or client is None:
        return False
    if _has_member(client, 'collaborators', user):
        return True
    return is_collaborator_for_portfolio(user, client.portfolio)
