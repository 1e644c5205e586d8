# apps/cabinet/serializers/portfolio.py
from rest_framework import serializers
from apps.cabinet.models import Client, Portfolio
from apps.users.serializers import UserMinimalSerializer


class PortfolioSerializer(serializers.ModelSerializer):
    """Portefeuille, avec le nombre de clients rattachés"""

    clients_count = serializers.SerializerMethodField()

    class Meta:
        model = Portfolio
        fields = ['id', 'name', 'description', 'clients_count', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']

    def get_clients_count(self, obj):
        annotated = getattr(obj, 'nb_clients', None)
        if annotated is not None:
            return annotated
        return obj.clients.count()


class PortfolioClientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = ['id', 'raison_sociale']


class PortfolioDetailSerializer(PortfolioSerializer):
    """Détail : clients et collaborateurs du portefeuille"""

    clients = PortfolioClientSerializer(many=True, read_only=True)
    collaborators = UserMinimalSerializer(many=True, read_only=True)

    class Meta(PortfolioSerializer.Meta):
        fields = PortfolioSerializer.Meta.fields + ['clients', 'collaborators']
