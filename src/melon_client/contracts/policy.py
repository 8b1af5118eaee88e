"""Compliance policy contracts."""

from enum import Enum, IntEnum

from src.melon_client.api.contract import Contract
from src.melon_client.config.abis import BOOLEAN_POLICY_ABI


class PolicyPosition(IntEnum):
    """When a policy is evaluated relative to the guarded call."""

    PRE = 0
    POST = 1


class BooleanPolicyMethod(str, Enum):
    POSITION = "position"


class BooleanPolicy(Contract):
    """Policy that allows or denies a call outright."""

    abi = BOOLEAN_POLICY_ABI
    methods = BooleanPolicyMethod

    async def get_position(self, block: int | None = None) -> PolicyPosition:
        result = await self.make_call(BooleanPolicyMethod.POSITION, None, block)
        return PolicyPosition(result)
