# apps/cabinet/serializers/document.py
import logging

from rest_framework import serializers
from apps.cabinet.models import ClientDocument
from apps.users.serializers import UserMinimalSerializer

logger = logging.getLogger(__name__)


class ClientDocumentSerializer(serializers.ModelSerializer):

    uploaded_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = ClientDocument
        fields = [
            'id',
            'client',
            'category',
            'title',
            'mime',
            'size',
            'is_confidential',
            'uploaded_by',
            'created_at',
            'updated_at'
        ]
        read_only_fields = fields


class ClientDocumentUploadSerializer(serializers.ModelSerializer):
    """
    Dépôt d'un document dans le dossier client
    Le titre reprend le nom du fichier s'il n'est pas fourni.
    """

    file = serializers.FileField(write_only=True)
    title = serializers.CharField(max_length=255, required=False, allow_blank=True)
    is_confidential = serializers.BooleanField(required=False, default=False)

    class Meta:
        model = ClientDocument
        fields = ['file', 'category', 'title', 'is_confidential']

    def create(self, validated_data):
        uploaded = validated_data['file']
        validated_data['title'] = validated_data.get('title') or uploaded.name
        validated_data['mime'] = getattr(uploaded, 'content_type', '') or ''
        validated_data['size'] = uploaded.size
        document = ClientDocument.objects.create(**validated_data)
        logger.info(
            "Document %s déposé pour le client %s (confidentiel=%s)",
            document.pk, document.client_id, document.is_confidential
        )
        return document
