# apps/cabinet/serializers/client.py
"""
Serializers pour les clients du cabinet
- montant_contrat masqué (None) hors ADMIN / CHEF_EQUIPE
- compteurs de collaborateurs et de documents
- `if` accepté et renvoyé comme alias de identifiant_fiscal
"""

from rest_framework import serializers
from apps.cabinet.models import Client, Portfolio
from apps.core.access import access_from_context
from apps.core.redaction import redact_client


class ClientSerializer(serializers.ModelSerializer):

    portfolio_id = serializers.PrimaryKeyRelatedField(
        source='portfolio',
        queryset=Portfolio.objects.all()
    )
    portfolio_name = serializers.CharField(source='portfolio.name', read_only=True)
    collaborators_count = serializers.SerializerMethodField()
    documents_count = serializers.SerializerMethodField()

    class Meta:
        model = Client
        fields = [
            'id',
            'portfolio_id',
            'portfolio_name',

            # Identification
            'raison_sociale',
            'rc',
            'identifiant_fiscal',
            'ice',
            'adresse',

            # Informations juridiques
            'forme_juridique',
            'statut_juridique',
            'date_creation',
            'capital_social',
            'associes',
            'regime_fiscal',

            # Mission
            'date_debut_collaboration',
            'responsable_client',
            'telephone',
            'email',
            'type_mission',
            'montant_contrat',

            # Champs calculés
            'collaborators_count',
            'documents_count',

            # Métadonnées
            'created_at',
            'updated_at'
        ]
        read_only_fields = ['created_at', 'updated_at']

    def get_fields(self):
        fields = super().get_fields()
        # `if` est un mot réservé : le champ ne peut pas être déclaré comme attribut
        fields['if'] = serializers.CharField(
            source='identifiant_fiscal', max_length=255, required=False, allow_blank=True
        )
        return fields

    def get_collaborators_count(self, obj):
        return obj.collaborators.count()

    def get_documents_count(self, obj):
        return obj.documents.count()

    def validate_associes(self, value):
        if value is None:
            return []
        if not isinstance(value, list):
            raise serializers.ValidationError("La liste des associés doit être un tableau")
        return value

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return redact_client(data, access_from_context(self.context))
