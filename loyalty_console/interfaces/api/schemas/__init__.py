from .compose import (
    ComposeFilters,
    ComposeMessageUpdate,
    ComposeModeUpdate,
    ComposeSessionRead,
    CustomerRowRead,
    DispatchSummaryRead,
)
from .notification import SentNotificationRead
from .permission import (
    CapabilityKeysRequest,
    CapabilityMapRead,
    CapabilityMapRequest,
    CapabilityRead,
)
from .principal import PrincipalPermissionsRead, PrincipalRead

__all__ = [
    "CapabilityKeysRequest",
    "CapabilityMapRead",
    "CapabilityMapRequest",
    "CapabilityRead",
    "ComposeFilters",
    "ComposeMessageUpdate",
    "ComposeModeUpdate",
    "ComposeSessionRead",
    "CustomerRowRead",
    "DispatchSummaryRead",
    "PrincipalPermissionsRead",
    "PrincipalRead",
    "SentNotificationRead",
]
