"""Index mapping for generated security events."""

INDEX_MAPPINGS = {
    "properties": {
        "@timestamp": {"type": "date"},
        "host.name": {"type": "keyword"},
        "user.name": {"type": "keyword"},
        "source.ip": {"type": "ip"},
        "destination.ip": {"type": "ip"},
        "event.type": {"type": "keyword"},
        "event.action": {"type": "keyword"},
        "event.outcome": {"type": "keyword"},
        "event.severity": {"type": "integer"},
        "process.name": {"type": "keyword"},
        "malware.name": {"type": "keyword"},
        "network.protocol": {"type": "keyword"},
        "file.hash": {"type": "keyword"},
    }
}
