"""
Service queue implementations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .locked_queue import LockedServiceQueue
from .service_queue import ServiceQueue

__all__ = ["ServiceQueue", "LockedServiceQueue"]
