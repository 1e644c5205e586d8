from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class CollaboratorAttachSerializer(serializers.Serializer):
    """Ajout d'un collaborateur (sans retirer les autres)"""

    user_id = serializers.PrimaryKeyRelatedField(queryset=User.objects.all())
