from .settings import TroveSettings
from .api import TroveClientApi
from .client import TroveV1Client
from .pagination import Pager
from . import instances

from .errors import (
    ApiError,
    BadRequestError,
    UnauthorizedError,
    NotFoundError,
    ConflictError,
    UnexpectedResponseCodeError,
    InvalidInputError,
    MissingInputError,
)

from .models import (
    CreateOptsBuilder,
    DatabasesBuilder,
    UsersBuilder,
    DatastoreOpts,
    NetworkOpts,
    AccessOpts,
    RestoreOpts,
    CreateOpts,
    Instance,
    RootUser,
)

from .results import Result

__all__ = [
    "TroveSettings",
    "TroveClientApi",
    "TroveV1Client",
    "Pager",
    "instances",
    "ApiError",
    "BadRequestError",
    "UnauthorizedError",
    "NotFoundError",
    "ConflictError",
    "UnexpectedResponseCodeError",
    "InvalidInputError",
    "MissingInputError",
    "CreateOptsBuilder",
    "DatabasesBuilder",
    "UsersBuilder",
    "DatastoreOpts",
    "NetworkOpts",
    "AccessOpts",
    "RestoreOpts",
    "CreateOpts",
    "Instance",
    "RootUser",
    "Result",
]
