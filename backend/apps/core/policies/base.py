class Policy:
    """
    Politique d'accès d'un type de ressource

    Chaque méthode reçoit le contexte d'accès de l'acteur (et l'instance visée
    pour les décisions portant sur un objet) et renvoie un booléen. Tout ce qui
    n'est pas explicitement accordé est refusé.
    """

    #: Capacités évaluées sans instance (au niveau du modèle)
    model_abilities = ('view_any', 'create')

    def view_any(self, access):
        return False

    def view(self, access, obj):
        return False

    def create(self, access):
        return False

    def update(self, access, obj):
        return False

    def delete(self, access, obj):
        return False
