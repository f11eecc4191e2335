"""PAPI client configuration."""

from dataclasses import dataclass

from ..client import ClientConfig


@dataclass(frozen=True)
class PAPIConfig(ClientConfig):
    """
    Attributes:
        use_prefixes: Ask PAPI to return IDs with their type prefixes (``ctr_``, ``grp_``, ``ehn_``).
    """

    use_prefixes: bool = False

    @property
    def prefix_headers(self) -> dict[str, str]:
        return {"PAPI-Use-Prefixes": "true" if self.use_prefixes else "false"}
