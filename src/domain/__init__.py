"""Domain layer - Pure business logic.

This layer contains the permission and role catalogs, the user entity and
the protocols (ports) the outer layers implement. The domain layer has NO
dependencies on any framework or infrastructure - it is pure Python.

Structure:
- enums/: Permission and role catalogs
- entities/: Domain entities (User principal)
- errors/: Error value constants
- protocols/: Ports (logger, token service, authority enforcer)
"""
