# apps/cabinet/serializers/__init__.py
"""
Serializers pour l'application cabinet
"""

from .portfolio import (
    PortfolioSerializer,
    PortfolioDetailSerializer
)

from .collaborator import CollaboratorAttachSerializer

from .client import ClientSerializer

from .document import (
    ClientDocumentSerializer,
    ClientDocumentUploadSerializer
)

from .task import (
    TaskSerializer,
    TaskAssignSerializer
)

from .time_entry import (
    TimeEntrySerializer,
    TimerStartSerializer,
    TimerStopSerializer
)

from .request import (
    ClientRequestSerializer,
    ClientRequestDetailSerializer,
    RequestFileSerializer,
    RequestFileUploadSerializer,
    RequestMessageSerializer,
    RemindSerializer
)

from .report import (
    DateRangeSerializer,
    TimesheetQuerySerializer
)

__all__ = [
    # Portefeuilles et clients
    'PortfolioSerializer',
    'PortfolioDetailSerializer',
    'CollaboratorAttachSerializer',
    'ClientSerializer',
    'ClientDocumentSerializer',
    'ClientDocumentUploadSerializer',

    # Tâches et temps
    'TaskSerializer',
    'TaskAssignSerializer',
    'TimeEntrySerializer',
    'TimerStartSerializer',
    'TimerStopSerializer',

    # Demandes clients
    'ClientRequestSerializer',
    'ClientRequestDetailSerializer',
    'RequestFileSerializer',
    'RequestFileUploadSerializer',
    'RequestMessageSerializer',
    'RemindSerializer',

    # Rapports
    'DateRangeSerializer',
    'TimesheetQuerySerializer'
]
