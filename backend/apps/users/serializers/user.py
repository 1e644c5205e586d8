# apps/users/serializers/user.py
"""
Serializers pour les utilisateurs du cabinet
- Le taux horaire n'est exposé qu'aux détenteurs de users.rate.set
  ou de l'accès aux rapports
- Création avec rôles et taux initial
- Profil de l'utilisateur connecté
"""

import logging

from django.contrib.auth.password_validation import validate_password
from django.db import transaction
from django.utils import timezone
from rest_framework import serializers

from apps.core.access import access_from_context
from apps.core.redaction import can_view_rates
from apps.users.models import Role, User, UserRate

logger = logging.getLogger(__name__)


def _role_names(user):
    # roles.all() profite d'un éventuel prefetch_related('roles')
    return sorted(role.name for role in user.roles.all())


def _validate_role_names(value):
    names = set(value)
    known = set(Role.objects.filter(name__in=names).values_list('name', flat=True))
    unknown = sorted(names - known)
    if unknown:
        raise serializers.ValidationError(f"Rôle(s) inconnu(s) : {', '.join(unknown)}")
    return sorted(names)


class UserMinimalSerializer(serializers.ModelSerializer):
    """Version allégée pour les listes imbriquées (collaborateurs, responsables)"""

    class Meta:
        model = User
        fields = ['id', 'name', 'email']
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer):
    """
    Fiche utilisateur

    hourly_rate_mad / hourly_rate_effective_from sont toujours présents
    mais valent None si le demandeur ne peut pas voir les taux.
    """

    roles = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'name',
            'first_name',
            'last_name',
            'email',
            'phone',
            'internal_id',
            'job_title',
            'monthly_hours_target',
            'yearly_hours_target',
            'roles',
            'is_active',
        ]
        read_only_fields = fields

    def get_roles(self, obj):
        return _role_names(obj)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        rate = None
        if can_view_rates(access_from_context(self.context)):
            rate = UserRate.current_for(instance)
        data['hourly_rate_mad'] = str(rate.hourly_rate_mad) if rate else None
        data['hourly_rate_effective_from'] = rate.effective_from.isoformat() if rate else None
        return data


class UserCreationSerializer(serializers.ModelSerializer):
    """
    Création d'un utilisateur par un gestionnaire
    - nom affiché dérivé du prénom/nom ou de l'email si absent
    - rôles optionnels (par nom)
    - taux horaire initial optionnel
    """

    password = serializers.CharField(write_only=True, style={'input_type': 'password'})
    roles = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    hourly_rate_mad = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    hourly_rate_effective_from = serializers.DateField(required=False, allow_null=True)

    class Meta:
        model = User
        fields = [
            'first_name',
            'last_name',
            'name',
            'email',
            'phone',
            'internal_id',
            'job_title',
            'monthly_hours_target',
            'yearly_hours_target',
            'password',
            'roles',
            'hourly_rate_mad',
            'hourly_rate_effective_from',
        ]

    def validate_internal_id(self, value):
        return value or None

    def validate_password(self, value):
        validate_password(value)
        return value

    def validate_roles(self, value):
        return _validate_role_names(value)

    @transaction.atomic
    def create(self, validated_data):
        roles = validated_data.pop('roles', [])
        rate = validated_data.pop('hourly_rate_mad', None)
        effective_from = validated_data.pop('hourly_rate_effective_from', None)
        password = validated_data.pop('password')
        email = validated_data.pop('email')

        user = User.objects.create_user(email=email, password=password, **validated_data)
        if roles:
            user.sync_roles(roles)

        if rate is not None:
            UserRate.objects.update_or_create(
                user=user,
                effective_from=effective_from or timezone.localdate(),
                defaults={'hourly_rate_mad': rate}
            )

        logger.info("Utilisateur créé : %s (rôles=%s)", user.email, roles)
        return user


class UserUpdateSerializer(serializers.ModelSerializer):

    class Meta:
        model = User
        fields = [
            'first_name',
            'last_name',
            'phone',
            'internal_id',
            'job_title',
            'monthly_hours_target',
            'yearly_hours_target',
        ]

    def validate_internal_id(self, value):
        return value or None


class UserRolesSerializer(serializers.Serializer):
    """Remplacement complet des rôles d'un utilisateur"""

    roles = serializers.ListField(child=serializers.CharField(), allow_empty=True)

    def validate_roles(self, value):
        return _validate_role_names(value)


class UserRateSerializer(serializers.ModelSerializer):
    """
    Taux horaire à une date d'effet
    Une seconde saisie à la même date remplace la première.
    """

    hourly_rate_mad = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)

    class Meta:
        model = UserRate
        fields = ['id', 'user', 'hourly_rate_mad', 'effective_from', 'created_at', 'updated_at']
        read_only_fields = ['user', 'created_at', 'updated_at']
        validators = []

    def create(self, validated_data):
        user = self.context['user']
        rate, _ = UserRate.objects.update_or_create(
            user=user,
            effective_from=validated_data['effective_from'],
            defaults={'hourly_rate_mad': validated_data['hourly_rate_mad']}
        )
        logger.info(
            "Taux horaire de %s : %s MAD au %s",
            user.email, rate.hourly_rate_mad, rate.effective_from
        )
        return rate


class ProfileSerializer(serializers.ModelSerializer):
    """Utilisateur connecté, avec ses rôles et ses permissions effectives"""

    roles = serializers.SerializerMethodField()
    permissions = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'name',
            'email',
            'first_name',
            'last_name',
            'phone',
            'job_title',
            'roles',
            'permissions',
        ]
        read_only_fields = fields

    def get_roles(self, obj):
        return _role_names(obj)

    def get_permissions(self, obj):
        return sorted(obj.permission_names())


class ProfileUpdateSerializer(serializers.ModelSerializer):

    class Meta:
        model = User
        fields = ['name', 'email', 'first_name', 'last_name', 'phone']
        extra_kwargs = {
            'name': {'required': False},
            'email': {'required': False},
        }


class PasswordChangeSerializer(serializers.Serializer):
    current_password = serializers.CharField(min_length=6, write_only=True)
    password = serializers.CharField(min_length=6, write_only=True)
    password_confirmation = serializers.CharField(write_only=True)

    def validate_current_password(self, value):
        user = self.context['request'].user
        if not user.check_password(value):
            raise serializers.ValidationError("Le mot de passe actuel est incorrect")
        return value

    def validate(self, attrs):
        if attrs['password'] != attrs['password_confirmation']:
            raise serializers.ValidationError({
                'password_confirmation': "La confirmation ne correspond pas au mot de passe"
            })
        return attrs

    def save(self, **kwargs):
        user = self.context['request'].user
        user.set_password(self.validated_data['password'])
        user.save(update_fields=['password'])
        return user
