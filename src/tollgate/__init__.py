"""Tollgate - credential-issuance microservice.

Registers users, authenticates them against stored bcrypt hashes, and
issues and verifies signed session tokens over a NATS message bus.

The authentication building blocks live in ``tollgate_auth``, settings in
``tollgate_config``. This package wires them into a running service.
"""

__version__ = "0.1.0"
