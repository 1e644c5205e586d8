# apps/users/serializers/role.py
from rest_framework import serializers
from apps.users.models import Permission, Role


class PermissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Permission
        fields = ['id', 'name', 'description']


class RoleSerializer(serializers.ModelSerializer):
    permissions = serializers.SerializerMethodField()

    class Meta:
        model = Role
        fields = ['id', 'name', 'description', 'permissions']

    def get_permissions(self, obj):
        return sorted(obj.permission_names())


class RolePermissionsSerializer(serializers.Serializer):
    """Remplacement complet des permissions d'un rôle"""

    permissions = serializers.ListField(
        child=serializers.CharField(max_length=100),
        allow_empty=True
    )

    def validate_permissions(self, value):
        names = set(value)
        known = set(Permission.objects.filter(name__in=names).values_list('name', flat=True))
        unknown = sorted(names - known)
        if unknown:
            raise serializers.ValidationError(
                f"Permission(s) inconnue(s) : {', '.join(unknown)}"
            )
        return sorted(names)
