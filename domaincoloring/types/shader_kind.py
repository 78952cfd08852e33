from enum import Enum


class ShaderKind(str, Enum):
    """Plot kinds a pixel shader can render."""
    DOMAINCOLOR = "domaincolor"
    CHECKER = "checker"
    PDPHASE = "pdphase"
    TPHASE = "tphase"


class MagnitudeMode(str, Enum):
    """How the domain coloring shows the magnitude of a sample."""
    NONE = "none"
    ABS = "abs"
    LOGABS = "logabs"
