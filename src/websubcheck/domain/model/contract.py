"""Subscriber service callback contract.

Fixed closed-world table: callback name -> allowed parameter types,
allowed return types and whether a nil return is permitted.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from websubcheck.domain.model.type_shape import (
    ErrorType,
    NilType,
    SimpleType,
    UnionType,
)

if TYPE_CHECKING:
    from websubcheck.domain.model.type_shape import TypeShape

# Marker annotation every subscriber service must carry
SERVICE_ANNOTATION_NAME = "SubscriberServiceConfig"

# Callback names
ON_SUBSCRIPTION_VERIFICATION = "onSubscriptionVerification"
ON_SUBSCRIPTION_VALIDATION_DENIED = "onSubscriptionValidationDenied"
ON_EVENT_NOTIFICATION = "onEventNotification"

# Module-qualified type names
SUBSCRIPTION_VERIFICATION = "websub:SubscriptionVerification"
SUBSCRIPTION_VERIFICATION_SUCCESS = "websub:SubscriptionVerificationSuccess"
SUBSCRIPTION_VERIFICATION_ERROR = "websub:SubscriptionVerificationError"
SUBSCRIPTION_DENIED_ERROR = "websub:SubscriptionDeniedError"
CONTENT_DISTRIBUTION_MESSAGE = "websub:ContentDistributionMessage"
ACKNOWLEDGEMENT = "websub:Acknowledgement"
SUBSCRIPTION_DELETED_ERROR = "websub:SubscriptionDeletedError"


@dataclass(frozen=True, slots=True)
class CallbackContract:
    """Contract of a single callback method.

    Attributes:
        name: Callback method name
        parameter_types: Allowed qualified parameter type names
        return_types: Allowed qualified return type names (ordered)
        nil_allowed: Whether nil (or an omitted return type) is permitted
    """

    name: str
    parameter_types: tuple[str, ...]
    return_types: tuple[str, ...]
    nil_allowed: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.return_types and not self.nil_allowed:
            raise ValueError(f"{self.name}: no return type would be accepted")

    def rejects_parameter(self, type_name: str) -> bool:
        """Check if a qualified parameter type name is outside the allowed set."""
        return type_name not in self.parameter_types

    def rejects_return(self, shape: TypeShape) -> bool:
        """Check if a return type shape is not acceptable.

        A union is rejected if any member is rejected. Named and error
        types are matched by qualified name; nil depends on nil_allowed;
        any other shape is rejected.
        """
        match shape:
            case UnionType(members=members):
                rejected = False
                for member in members:
                    rejected = rejected or self.rejects_return(member)
                return rejected
            case SimpleType() | ErrorType():
                return shape.qualified_name not in self.return_types
            case NilType():
                return not self.nil_allowed
            case _:
                return True


@dataclass(frozen=True, slots=True)
class ContractTable:
    """Immutable callback name -> contract mapping.

    Safe to share between concurrent analysis passes.
    """

    _contracts: Mapping[str, CallbackContract] = field(repr=False)

    def __post_init__(self) -> None:
        """Validate invariants and freeze the mapping. FAIL-FIRST."""
        for name, contract in self._contracts.items():
            if name != contract.name:
                raise ValueError(f"contract key {name!r} does not match name {contract.name!r}")
        object.__setattr__(self, "_contracts", MappingProxyType(dict(self._contracts)))

    @classmethod
    def of(cls, *contracts: CallbackContract) -> ContractTable:
        """Build table from contracts, keyed by contract name."""
        return cls({contract.name: contract for contract in contracts})

    def __contains__(self, name: object) -> bool:
        return name in self._contracts

    def __iter__(self) -> Iterator[CallbackContract]:
        return iter(self._contracts.values())

    def __len__(self) -> int:
        return len(self._contracts)

    def get(self, name: str) -> CallbackContract | None:
        """Look up contract by exact (case-sensitive) callback name."""
        return self._contracts.get(name)


WEBSUB_CONTRACTS = ContractTable.of(
    CallbackContract(
        name=ON_SUBSCRIPTION_VERIFICATION,
        parameter_types=(SUBSCRIPTION_VERIFICATION,),
        return_types=(SUBSCRIPTION_VERIFICATION_SUCCESS, SUBSCRIPTION_VERIFICATION_ERROR),
        nil_allowed=False,
    ),
    CallbackContract(
        name=ON_SUBSCRIPTION_VALIDATION_DENIED,
        parameter_types=(SUBSCRIPTION_DENIED_ERROR,),
        return_types=(ACKNOWLEDGEMENT,),
        nil_allowed=True,
    ),
    CallbackContract(
        name=ON_EVENT_NOTIFICATION,
        parameter_types=(CONTENT_DISTRIBUTION_MESSAGE,),
        return_types=(ACKNOWLEDGEMENT, SUBSCRIPTION_DELETED_ERROR),
        nil_allowed=True,
    ),
)
