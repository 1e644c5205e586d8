from django.contrib import admin
from django.utils.html import format_html
from apps.cabinet.models import Task, TimeEntry


class TimeEntryInline(admin.TabularInline):
    model = TimeEntry
    extra = 0
    fields = ['user', 'start_at', 'end_at', 'duration_min', 'comment']
    autocomplete_fields = ['user']


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'client', 'owner', 'status_badge', 'priority', 'progress', 'due_at']
    list_filter = ['status', 'category', 'nature']
    search_fields = ['client__raison_sociale', 'notes', 'owner__email']
    filter_horizontal = ['assignees']
    autocomplete_fields = ['client', 'owner']
    date_hierarchy = 'due_at'
    inlines = [TimeEntryInline]

    def status_badge(self, obj):
        colors = {
            'EN_ATTENTE': '#6c757d',
            'EN_COURS': '#0d6efd',
            'EN_VALIDATION': '#fd7e14',
            'TERMINEE': '#198754',
        }
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            colors.get(obj.status, '#000'),
            obj.get_status_display()
        )

    status_badge.short_description = "Statut"


@admin.register(TimeEntry)
class TimeEntryAdmin(admin.ModelAdmin):
    list_display = ['user', 'task', 'start_at', 'end_at', 'duration_min', 'minutes_display']
    list_filter = [('start_at', admin.DateFieldListFilter)]
    search_fields = ['user__email', 'comment']
    autocomplete_fields = ['user', 'task']
    date_hierarchy = 'start_at'

    def minutes_display(self, obj):
        return obj.minutes if obj.minutes is not None else "en cours"

    minutes_display.short_description = "Minutes"
