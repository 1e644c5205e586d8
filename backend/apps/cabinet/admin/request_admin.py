from django.contrib import admin
from apps.cabinet.models import ClientRequest, RequestFile, RequestMessage


class RequestFileInline(admin.TabularInline):
    model = RequestFile
    extra = 0
    fields = ['file', 'original_name', 'size_bytes', 'mime_type']
    readonly_fields = ['size_bytes', 'mime_type']


class RequestMessageInline(admin.StackedInline):
    model = RequestMessage
    extra = 0
    fields = ['user', 'message_html']


@admin.register(ClientRequest)
class ClientRequestAdmin(admin.ModelAdmin):
    list_display = ['title', 'client', 'status', 'due_date', 'reminders_count', 'created_by', 'created_at']
    list_filter = ['status']
    search_fields = ['title', 'client__raison_sociale']
    autocomplete_fields = ['client', 'task', 'created_by']
    readonly_fields = ['reminders_count', 'first_sent_at', 'reminders']
    inlines = [RequestFileInline, RequestMessageInline]
