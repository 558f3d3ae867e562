from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import NetworkUnavailable, NotOnCompanyNetwork
from ..integrations.network_info import NetworkInfo
from ..policy.model import CompanyPolicy

logger = logging.getLogger(__name__)


def is_allowed(current_address: Optional[str], policy: Optional[CompanyPolicy]) -> bool:
    """Allow-list check; an unknown address or a missing policy is denied."""
    if policy is None or not current_address:
        return False
    address = current_address.strip()
    return bool(address) and address in policy.allowed_network_addresses


@dataclass(frozen=True)
class GateDecision:
    address: str
    allowed: bool


class AccessGate:
    """Resolve the caller's address and check it against the policy."""

    def __init__(self, network: NetworkInfo):
        self._network = network

    def resolve(self, policy: Optional[CompanyPolicy]) -> GateDecision:
        try:
            address = self._network.current_address()
        except NetworkUnavailable:
            logger.info("network address unavailable; access denied")
            return GateDecision(address="", allowed=False)
        return GateDecision(address=address, allowed=is_allowed(address, policy))

    def require_allowed(self, policy: Optional[CompanyPolicy]) -> str:
        decision = self.resolve(policy)
        if not decision.allowed:
            logger.info("check-in/out denied for address %r", decision.address)
            raise NotOnCompanyNetwork("Không phải mạng công ty")
        return decision.address
