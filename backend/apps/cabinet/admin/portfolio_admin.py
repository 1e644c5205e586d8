from django.contrib import admin
from apps.cabinet.models import Client, ClientDocument, Portfolio


class ClientInline(admin.TabularInline):
    model = Client
    extra = 0
    fields = ['raison_sociale', 'ice', 'responsable_client', 'type_mission']
    show_change_link = True


@admin.register(Portfolio)
class PortfolioAdmin(admin.ModelAdmin):
    list_display = ['name', 'nb_clients', 'nb_collaborateurs', 'created_at']
    search_fields = ['name', 'description']
    filter_horizontal = ['collaborators']
    inlines = [ClientInline]

    def nb_clients(self, obj):
        return obj.clients.count()

    nb_clients.short_description = "Clients"

    def nb_collaborateurs(self, obj):
        return obj.collaborators.count()

    nb_collaborateurs.short_description = "Collaborateurs"


class ClientDocumentInline(admin.TabularInline):
    model = ClientDocument
    extra = 0
    fields = ['title', 'category', 'file', 'is_confidential', 'uploaded_by']
    readonly_fields = ['uploaded_by']


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    """Fiche client"""

    list_display = ['raison_sociale', 'portfolio', 'ice', 'responsable_client', 'type_mission', 'created_at']
    list_filter = ['portfolio', 'forme_juridique', 'regime_fiscal']
    search_fields = ['raison_sociale', 'rc', 'identifiant_fiscal', 'ice', 'email']
    filter_horizontal = ['collaborators']
    autocomplete_fields = ['portfolio']
    inlines = [ClientDocumentInline]

    fieldsets = (
        ('Identification', {
            'fields': ('portfolio', 'raison_sociale', 'rc', 'identifiant_fiscal', 'ice', 'adresse')
        }),
        ('Informations juridiques', {
            'fields': ('forme_juridique', 'statut_juridique', 'date_creation',
                       'capital_social', 'associes', 'regime_fiscal')
        }),
        ('Mission', {
            'fields': ('date_debut_collaboration', 'responsable_client', 'telephone',
                       'email', 'type_mission', 'montant_contrat')
        }),
        ('Équipe', {
            'fields': ('collaborators',)
        }),
    )


@admin.register(ClientDocument)
class ClientDocumentAdmin(admin.ModelAdmin):
    list_display = ['title', 'client', 'category', 'is_confidential', 'size', 'uploaded_by', 'created_at']
    list_filter = ['is_confidential', 'category']
    search_fields = ['title', 'client__raison_sociale']
    autocomplete_fields = ['client', 'uploaded_by']
