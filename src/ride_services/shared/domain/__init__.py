from .entity import Entity as Entity
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    MalformedRecordException as MalformedRecordException,
)
from .result import Result as Result
