"""EventBoard: users, groups and events over a small JSON REST API."""
