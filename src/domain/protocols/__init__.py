"""Domain protocols (ports).

Interfaces the domain and application layers depend on; infrastructure
provides the adapters.
"""

from src.domain.protocols.authority_enforcer_protocol import AuthorityEnforcerProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.token_generation_protocol import (
    TokenGenerationProtocol,
    TokenPayload,
)

__all__ = [
    "AuthorityEnforcerProtocol",
    "LoggerProtocol",
    "TokenGenerationProtocol",
    "TokenPayload",
]
