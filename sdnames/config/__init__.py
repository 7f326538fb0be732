"""Configuration objects for sdnames."""

from sdnames.config.dns_name_config import DnsNameSplitConfig

__all__ = ["DnsNameSplitConfig"]
