"""Candidate values the event generator draws from."""

from dataclasses import dataclass, field
from typing import List

DEFAULT_USERS = ["alice", "bob", "charlie", "eve"]
DEFAULT_SOURCE_IPS = ["192.168.1.10", "192.168.1.20", "10.0.0.5", "172.16.0.2"]
DEFAULT_HOSTS = ["web-01", "db-01", "vpn-01", "mail-01"]
DEFAULT_PROCESSES = ["sshd", "nginx", "powershell", "chrome", "python3"]
DEFAULT_MALWARE = ["trojan.exe", "worm.js", "cryptominer.sh"]


@dataclass(frozen=True)
class Vocabulary:
    """
    Value sets used when filling event fields.

    Empty lists are accepted here; the generator refuses to draw from them.

    Attributes:
        users: User names
        source_ips: Source IP addresses
        hosts: Host names
        processes: Process names for process start events
        malware: Malware names for detection events
    """

    users: List[str] = field(default_factory=lambda: list(DEFAULT_USERS))
    source_ips: List[str] = field(default_factory=lambda: list(DEFAULT_SOURCE_IPS))
    hosts: List[str] = field(default_factory=lambda: list(DEFAULT_HOSTS))
    processes: List[str] = field(default_factory=lambda: list(DEFAULT_PROCESSES))
    malware: List[str] = field(default_factory=lambda: list(DEFAULT_MALWARE))
