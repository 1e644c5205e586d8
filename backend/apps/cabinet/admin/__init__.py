from .portfolio_admin import PortfolioAdmin, ClientAdmin, ClientDocumentAdmin
from .task_admin import TaskAdmin, TimeEntryAdmin
from .request_admin import ClientRequestAdmin

__all__ = [
    'PortfolioAdmin',
    'ClientAdmin',
    'ClientDocumentAdmin',
    'TaskAdmin',
    'TimeEntryAdmin',
    'ClientRequestAdmin'
]
