from django.contrib import admin
from apps.users.models import Permission, Role, UserRate


@admin.register(Permission)
class PermissionAdmin(admin.ModelAdmin):
    list_display = ['name', 'description']
    search_fields = ['name', 'description']
    ordering = ['name']


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    """Matrice rôles / permissions"""

    list_display = ['name', 'description', 'nb_permissions', 'nb_utilisateurs']
    search_fields = ['name']
    filter_horizontal = ['permissions']

    def nb_permissions(self, obj):
        return obj.permissions.count()

    nb_permissions.short_description = "Permissions"

    def nb_utilisateurs(self, obj):
        return obj.users.count()

    nb_utilisateurs.short_description = "Utilisateurs"


@admin.register(UserRate)
class UserRateAdmin(admin.ModelAdmin):
    list_display = ['user', 'hourly_rate_mad', 'effective_from', 'created_at']
    list_filter = [('effective_from', admin.DateFieldListFilter)]
    search_fields = ['user__email', 'user__name']
    ordering = ['user', '-effective_from']
    autocomplete_fields = ['user']
