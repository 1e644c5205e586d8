# apps/cabinet/serializers/task.py
"""
Serializers pour les tâches
- statut, catégorie et nature limités aux valeurs du modèle
- priorité 0-255, avancement 0-100
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers
from apps.cabinet.models import Client, Task
from apps.users.serializers import UserMinimalSerializer

User = get_user_model()


class TaskClientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = ['id', 'raison_sociale']


class TaskSerializer(serializers.ModelSerializer):

    client_id = serializers.PrimaryKeyRelatedField(
        source='client',
        queryset=Client.objects.all()
    )
    owner_id = serializers.PrimaryKeyRelatedField(
        source='owner',
        queryset=User.objects.all(),
        required=False,
        allow_null=True
    )
    client = TaskClientSerializer(read_only=True)
    owner = UserMinimalSerializer(read_only=True)
    assignees = UserMinimalSerializer(many=True, read_only=True)

    category_display = serializers.CharField(source='get_category_display', read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    is_overdue = serializers.BooleanField(read_only=True)

    class Meta:
        model = Task
        fields = [
            'id',
            'client_id',
            'client',
            'owner_id',
            'owner',
            'assignees',
            'category',
            'category_display',
            'nature',
            'status',
            'status_display',
            'priority',
            'progress',
            'starts_at',
            'due_at',
            'is_overdue',
            'notes',
            'created_at',
            'updated_at'
        ]
        read_only_fields = ['created_at', 'updated_at']

    def validate(self, attrs):
        starts_at = attrs.get('starts_at', getattr(self.instance, 'starts_at', None))
        due_at = attrs.get('due_at', getattr(self.instance, 'due_at', None))
        if starts_at and due_at and due_at < starts_at:
            raise serializers.ValidationError({
                'due_at': "L'échéance ne peut pas précéder le début de la tâche"
            })
        return attrs


class TaskAssignSerializer(serializers.Serializer):
    user_id = serializers.PrimaryKeyRelatedField(queryset=User.objects.all())
