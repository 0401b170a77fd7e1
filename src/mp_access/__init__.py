"""
mp_access – Authorization-policy core for multi-tenant resources.

Import path convention::

    from mp_access.kernel.authz import Authorization, Permissions
    from mp_access.kernel.errors import MalformedResourceError
    from mp_access.application import AuthorizationResolver
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
