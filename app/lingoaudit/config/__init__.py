"""Runtime configuration for lingoaudit."""

from .constants import *  # noqa: F401,F403
from .constants import __all__ as _constants_all
from .environment import AuditEnvironmentConfig, get_audit_environment

__all__ = [*_constants_all, "AuditEnvironmentConfig", "get_audit_environment"]
