from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from apps.users.models import User, UserRate


class UserRateInline(admin.TabularInline):
    model = UserRate
    extra = 0
    ordering = ['-effective_from']


@admin.register(User)
class CustomUserAdmin(UserAdmin):
    list_display = ['email', 'name', 'job_title', 'roles_display', 'is_staff', 'is_active']
    list_filter = UserAdmin.list_filter + ('roles',)
    search_fields = ['email', 'name', 'first_name', 'last_name', 'internal_id']
    ordering = ['email']
    filter_horizontal = UserAdmin.filter_horizontal + ('roles', 'direct_permissions')
    fieldsets = UserAdmin.fieldsets + (
        ('Profil cabinet', {
            'fields': ('name', 'phone', 'internal_id', 'job_title',
                       'monthly_hours_target', 'yearly_hours_target')
        }),
        ('Habilitations Espace Compta', {
            'fields': ('roles', 'direct_permissions')
        }),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'username', 'password1', 'password2'),
        }),
    )
    inlines = [UserRateInline]

    def roles_display(self, obj):
        return ", ".join(sorted(obj.role_names())) or "-"

    roles_display.short_description = "Rôles"
