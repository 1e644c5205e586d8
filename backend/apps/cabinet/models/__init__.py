from .portfolio import Portfolio
from .client import Client
from .document import ClientDocument
from .task import Task
from .time_entry import TimeEntry
from .request import ClientRequest, RequestFile, RequestMessage


__all__ = [
    'Portfolio',
    'Client',
    'ClientDocument',
    'Task',
    'TimeEntry',
    'ClientRequest',
    'RequestFile',
    'RequestMessage'
]
