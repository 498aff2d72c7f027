"""Kernel security: Principal and the ambient SecurityContext."""
from mp_orders.kernel.security.principal import Principal
from mp_orders.kernel.security.security_context import SYSTEM_ACTOR, SecurityContext, current_actor

__all__ = ["Principal", "SYSTEM_ACTOR", "SecurityContext", "current_actor"]
