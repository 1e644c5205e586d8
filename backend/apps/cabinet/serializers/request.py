# apps/cabinet/serializers/request.py
"""
Serializers pour les demandes clients
- Demande, pièces jointes (25 Mo max, types autorisés) et messages
- Relances
"""

import logging

from django.conf import settings
from rest_framework import serializers
from apps.cabinet.models import Client, ClientRequest, RequestFile, RequestMessage, Task
from apps.users.serializers import UserMinimalSerializer

logger = logging.getLogger(__name__)


class RequestFileSerializer(serializers.ModelSerializer):

    url = serializers.SerializerMethodField()

    class Meta:
        model = RequestFile
        fields = ['id', 'request', 'url', 'original_name', 'size_bytes', 'mime_type', 'created_at']
        read_only_fields = fields

    def get_url(self, obj):
        if not obj.file:
            return None
        request = self.context.get('request')
        url = obj.file.url
        return request.build_absolute_uri(url) if request else url


class RequestFileUploadSerializer(serializers.Serializer):
    file = serializers.FileField()

    def validate_file(self, value):
        max_bytes = settings.REQUEST_FILE_MAX_BYTES
        if value.size > max_bytes:
            raise serializers.ValidationError(
                f"Le fichier dépasse la taille maximale de {max_bytes // (1024 * 1024)} Mo"
            )
        content_type = getattr(value, 'content_type', None)
        if content_type not in settings.REQUEST_FILE_ALLOWED_TYPES:
            raise serializers.ValidationError(f"Type de fichier non autorisé : {content_type}")
        return value

    def create(self, validated_data):
        uploaded = validated_data['file']
        request_file = RequestFile.objects.create(
            request=validated_data['request'],
            file=uploaded,
            original_name=uploaded.name,
            size_bytes=uploaded.size,
            mime_type=uploaded.content_type
        )
        logger.info(
            "Pièce jointe %s ajoutée à la demande %s (%s octets)",
            request_file.pk, request_file.request_id, request_file.size_bytes
        )
        return request_file


class RequestMessageSerializer(serializers.ModelSerializer):

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = RequestMessage
        fields = ['id', 'request', 'user', 'message_html', 'created_at']
        read_only_fields = ['id', 'request', 'user', 'created_at']


class RemindSerializer(serializers.Serializer):
    note = serializers.CharField(max_length=500, required=False, allow_null=True, allow_blank=True)


class ClientRequestSerializer(serializers.ModelSerializer):

    client_id = serializers.PrimaryKeyRelatedField(
        source='client',
        queryset=Client.objects.all()
    )
    client_name = serializers.CharField(source='client.raison_sociale', read_only=True)
    task_id = serializers.PrimaryKeyRelatedField(
        source='task',
        queryset=Task.objects.all(),
        required=False,
        allow_null=True
    )
    created_by = UserMinimalSerializer(read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = ClientRequest
        fields = [
            'id',
            'client_id',
            'client_name',
            'task_id',
            'created_by',
            'title',
            'status',
            'status_display',
            'due_date',
            'period_from',
            'period_to',
            'reminders_count',
            'first_sent_at',
            'responded_at',
            'reminders',
            'created_at',
            'updated_at'
        ]
        read_only_fields = [
            'reminders_count',
            'first_sent_at',
            'reminders',
            'created_at',
            'updated_at'
        ]

    def validate(self, attrs):
        period_from = attrs.get('period_from', getattr(self.instance, 'period_from', None))
        period_to = attrs.get('period_to', getattr(self.instance, 'period_to', None))
        if period_from and period_to and period_to < period_from:
            raise serializers.ValidationError({
                'period_to': "La fin de période doit être postérieure au début"
            })

        # Le client d'une demande n'est pas modifiable
        if self.instance is not None and 'client' in attrs and attrs['client'] != self.instance.client:
            raise serializers.ValidationError({
                'client_id': "Le client d'une demande ne peut pas être changé"
            })
        return attrs


class ClientRequestDetailSerializer(ClientRequestSerializer):
    """Détail : pièces jointes et fil de discussion"""

    files = RequestFileSerializer(many=True, read_only=True)
    messages = RequestMessageSerializer(many=True, read_only=True)

    class Meta(ClientRequestSerializer.Meta):
        fields = ClientRequestSerializer.Meta.fields + ['files', 'messages']

